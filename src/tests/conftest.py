import json
import asyncio
from typing import Any, Dict, List, Tuple
import pytest
from domain.dependencies import Dependencies
from domain.errors import EventNotFound, NetworkError, StoreError
from domain.event import Event

def fixed_bytes(n: int) -> bytes:
    return bytes(range(n))

class InMemoryEventStore:
    """Keeps events serialized like Redis does, so reads never share objects"""
    def __init__(self):
        self.data: Dict[str, str] = {}
        self.fail_get = False
        self.fail_set = False

    async def get(self, event_id: str) -> Event:
        if self.fail_get:
            raise StoreError("connection refused")
        if event_id not in self.data:
            raise EventNotFound(event_id)
        return Event.from_dict(json.loads(self.data[event_id]))

    async def set(self, event: Event) -> None:
        if self.fail_set:
            raise StoreError("connection refused")
        self.data[event.id] = json.dumps(event.to_dict())

    def put(self, event: Event) -> None:
        self.data[event.id] = json.dumps(event.to_dict())

    def stored(self, event_id: str) -> Dict[str, Any]:
        return json.loads(self.data[event_id])

class LockstepEventStore(InMemoryEventStore):
    """Holds every reader until `readers` gets have happened, forcing them to see the same state"""
    def __init__(self, readers: int):
        super().__init__()
        self.readers = readers
        self.reads = 0
        self.all_read = asyncio.Event()

    async def get(self, event_id: str) -> Event:
        event = await super().get(event_id)
        self.reads += 1
        if self.reads >= self.readers:
            self.all_read.set()
        await self.all_read.wait()
        return event

class RecordingNotifier:
    def __init__(self, fail: bool = False):
        self.posts: List[Tuple[str, Dict[str, Any]]] = []
        self.fail = fail

    async def post(self, url: str, payload: Dict[str, Any]) -> int:
        if self.fail:
            raise NetworkError("Response status is not good: 500")
        self.posts.append((url, payload))
        return 200

class RecordingDispatcher:
    def __init__(self):
        self.jobs = []

    def dispatch(self, job, *args) -> None:
        self.jobs.append((job, args))

@pytest.fixture
def event_store():
    return InMemoryEventStore()

@pytest.fixture
def notifier():
    return RecordingNotifier()

@pytest.fixture
def deps(event_store, notifier):
    return Dependencies(
        event_store=event_store,
        notifier=notifier,
        random_bytes=fixed_bytes
    )

def callback_payload(event_id: str = "E1", value: str = "1", user_id: str = "U1") -> Dict[str, Any]:
    return {
        "type": "block_actions",
        "user": {"id": user_id, "username": "reviewer", "name": "reviewer", "team_id": "T1"},
        "message": {"blocks": [{"type": "section"}, {"type": "actions", "block_id": event_id}]},
        "response_url": "https://hooks.slack.test/actions/T1/1/abc",
        "actions": [{"block_id": event_id, "value": value}]
    }

@pytest.fixture
def make_payload():
    return callback_payload

@pytest.fixture
def lockstep_store():
    return LockstepEventStore(readers=2)

@pytest.fixture
def dispatcher():
    return RecordingDispatcher()
