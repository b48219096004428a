import logging
from domain.event import Event
from domain.types import Deps

logger = logging.getLogger(__name__)

async def create_event(deps: Deps, timeout_epoch: int) -> Event:
    """Create an event with a fresh id and persist it. Entropy and store errors propagate."""
    event = Event.create(timeout_epoch, deps.random_bytes)
    await deps.event_store.set(event)
    logger.info(f"Event created: {event.id} timeout_epoch={event.timeout_epoch}")
    return event

async def get_event(deps: Deps, event_id: str) -> Event:
    return await deps.event_store.get(event_id)
