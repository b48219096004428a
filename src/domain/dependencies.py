import secrets
from domain.identifier import RandomSource
from domain.message import format_result_message
from domain.types import ResultFormatter
from infra.core_types import EventStore, Notifier

class Dependencies:
    def __init__(
        self,
        event_store: EventStore,
        notifier: Notifier,
        random_bytes: RandomSource = secrets.token_bytes,
        format_message: ResultFormatter = format_result_message
    ):
        self.event_store = event_store
        self.notifier = notifier
        self.random_bytes = random_bytes
        self.format_message = format_message
