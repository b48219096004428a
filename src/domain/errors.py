from enum import Enum

class ApprovalServiceError(Exception):
    """Base class for errors raised by the approval service"""

class ValidationReason(str, Enum):
    MALFORMED_PAYLOAD = "payload is not a valid JSON object"
    EMPTY_ACTIONS = "actions is empty"
    UNKNOWN_ACTION_VALUE = "unknown action value"
    MISSING_BLOCKS = "message.blocks is not found"
    BLOCKS_NOT_ARRAY = "message.blocks is not an array"
    BLOCKS_ELEMENT_NOT_MAP = "a blocks element is not a map"
    NO_ACTIONS_BLOCK = "no actions block found"
    MULTIPLE_ACTIONS_BLOCKS = "2 or more actions blocks found"

class CallbackValidationError(ApprovalServiceError):
    def __init__(self, reason: ValidationReason, detail: str = ""):
        self.reason = reason
        self.detail = detail
        message = reason.value if not detail else f"{reason.value}: {detail}"
        super().__init__(message)

class EntropyError(ApprovalServiceError):
    pass

class StoreError(ApprovalServiceError):
    pass

class EventNotFound(StoreError):
    def __init__(self, event_id: str):
        self.event_id = event_id
        super().__init__(f"Event not found: {event_id}")

class EventDecodeError(StoreError):
    pass

class NetworkError(ApprovalServiceError):
    pass
