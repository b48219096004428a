from typing import Protocol, Any, Dict
from typing_extensions import Callable
from domain.event import Event

class EventStore(Protocol):
    async def get(self, event_id: str) -> Event: ...
    async def set(self, event: Event) -> None: ...

class Notifier(Protocol):
    async def post(self, url: str, payload: Dict[str, Any]) -> int: ...

class Dispatcher(Protocol):
    def dispatch(self, job: Callable, *args: Any) -> None: ...
