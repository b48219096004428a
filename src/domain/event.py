import time
import secrets
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional
from domain.constants import ServiceConfig
from domain.errors import EventDecodeError
from domain.identifier import RandomSource, generate_id

class Status(str, Enum):
    IN_PROGRESS = "in-progress"
    APPROVED = "approved"
    REJECTED = "rejected"
    TIMEOUT = "timeout"

@dataclass
class Event:
    """
    Approval request that collects approvals and rejections until a deadline.

    `status` is derived from the other fields and is never authoritative:
    rejected > approved > timeout > in-progress.
    """
    id: str
    timeout_epoch: int
    approvers: List[str] = field(default_factory=list)
    rejecters: List[str] = field(default_factory=list)
    status: Status = Status.IN_PROGRESS

    @classmethod
    def create(
        cls,
        timeout_epoch: int,
        random_bytes: RandomSource = secrets.token_bytes
    ) -> 'Event':
        event_id = generate_id(ServiceConfig.EVENT_ID_LENGTH, random_bytes)
        event = cls(id=event_id, timeout_epoch=timeout_epoch)
        event.refresh_status()
        return event

    def refresh_status(self, now: Optional[float] = None) -> Status:
        # Depends on wall-clock time, so call it after every load as well
        if now is None:
            now = time.time()

        if self.rejecters:
            self.status = Status.REJECTED
        elif self.approvers:
            self.status = Status.APPROVED
        elif now > self.timeout_epoch:
            self.status = Status.TIMEOUT
        else:
            self.status = Status.IN_PROGRESS
        return self.status

    def approve(self, user_id: str) -> None:
        self.approvers.append(user_id)
        self.refresh_status()

    def reject(self, user_id: str) -> None:
        self.rejecters.append(user_id)
        self.refresh_status()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'timeout_epoch': self.timeout_epoch,
            'approvers': list(self.approvers),
            'rejecters': list(self.rejecters),
            'status': self.status.value
        }

    @classmethod
    def from_dict(cls, data: Any) -> 'Event':
        """Rebuild an event from its stored form and refresh its status"""
        if not isinstance(data, dict):
            raise EventDecodeError("Stored event is not an object")

        event_id = data.get('id')
        timeout_epoch = data.get('timeout_epoch')
        if not isinstance(event_id, str):
            raise EventDecodeError("Stored event has no string id")
        # bool is an int subclass
        if not isinstance(timeout_epoch, int) or isinstance(timeout_epoch, bool):
            raise EventDecodeError(f"Stored event {event_id} has no integer timeout_epoch")

        lists = {}
        for key in ('approvers', 'rejecters'):
            value = data.get(key)
            if value is None:
                value = []
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise EventDecodeError(f"Stored event {event_id} has an invalid {key} list")
            lists[key] = value

        event = cls(
            id=event_id,
            timeout_epoch=timeout_epoch,
            approvers=lists['approvers'],
            rejecters=lists['rejecters']
        )
        event.refresh_status()
        return event
