import time
import pytest
from domain.dependencies import Dependencies
from domain.errors import EntropyError, EventNotFound, StoreError
from domain.event import Status
from domain.handler.events import create_event, get_event

async def test_create_event_persists(deps, event_store):
    timeout_epoch = int(time.time()) + 3600
    event = await create_event(deps, timeout_epoch)

    assert event.id == "abcdefghijklmnop"
    assert event.status == Status.IN_PROGRESS
    assert event_store.stored(event.id) == {
        "id": event.id,
        "timeout_epoch": timeout_epoch,
        "approvers": [],
        "rejecters": [],
        "status": "in-progress"
    }

async def test_create_event_entropy_failure(event_store, notifier):
    def broken(n):
        raise OSError("urandom unavailable")

    deps = Dependencies(event_store=event_store, notifier=notifier, random_bytes=broken)
    with pytest.raises(EntropyError):
        await create_event(deps, int(time.time()))
    assert event_store.data == {}

async def test_create_event_store_failure(deps, event_store):
    event_store.fail_set = True
    with pytest.raises(StoreError):
        await create_event(deps, int(time.time()))

async def test_get_event_refreshes_status(deps, event_store):
    event = await create_event(deps, int(time.time()) + 1)
    event_store.data[event.id] = event_store.data[event.id].replace(
        str(event.timeout_epoch), str(int(time.time()) - 100)
    )

    fetched = await get_event(deps, event.id)
    assert fetched.status == Status.TIMEOUT

async def test_get_event_not_found(deps):
    with pytest.raises(EventNotFound):
        await get_event(deps, "missing")
