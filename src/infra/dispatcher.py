import asyncio
import logging
from typing import Any, Set
from typing_extensions import Callable
from infra.core_types import Dispatcher

logger = logging.getLogger(__name__)

class TaskDispatcher(Dispatcher):
    """
    Runs each job as its own asyncio task so the caller can answer right away.

    Jobs are not ordered or serialized in any way; two jobs touching the same
    record run concurrently. References are held until a task finishes so it
    is not garbage collected mid-flight.
    """
    def __init__(self):
        self._tasks: Set[asyncio.Task] = set()

    def dispatch(self, job: Callable, *args: Any) -> None:
        task = asyncio.create_task(job(*args))
        self._tasks.add(task)
        task.add_done_callback(self._on_done)

    def _on_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error(f"Dispatched job failed: {exc!r}", exc_info=exc)

    @property
    def pending(self) -> int:
        return len(self._tasks)

    async def drain(self) -> None:
        """Wait for every in-flight job to finish"""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
