from typing import Any, Dict, Protocol
from typing_extensions import Callable
from domain.callback import CallbackMessage
from domain.event import Event
from domain.identifier import RandomSource
from infra.core_types import EventStore, Notifier

ResultFormatter = Callable[[CallbackMessage, Event], Dict[str, Any]]

class Deps(Protocol):
    event_store: EventStore
    notifier: Notifier
    random_bytes: RandomSource
    format_message: ResultFormatter
