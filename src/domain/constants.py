from dataclasses import dataclass

@dataclass(frozen=True)
class ServiceConfig:
    NAME: str = "approval-events"
    EVENT_ID_LENGTH: int = 16
    ID_ALPHABET: str = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
