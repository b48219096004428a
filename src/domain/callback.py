from typing import Any, Dict, List
from pydantic import BaseModel, Field, ValidationError, model_validator
from domain.errors import CallbackValidationError, ValidationReason

APPROVE_VALUE = "1"
REJECT_VALUE = "0"

class SlackModel(BaseModel):
    """Slack sends `null` for absent fields; those fall back to the field default"""
    @model_validator(mode='before')
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

class CallbackUser(SlackModel):
    id: str = ""
    username: str = ""
    name: str = ""
    team_id: str = ""

class CallbackAction(SlackModel):
    block_id: str = ""
    value: str = ""

class CallbackMessage(SlackModel):
    """The parts of a Slack block-actions payload this service cares about"""
    user: CallbackUser = Field(default_factory=CallbackUser)
    message: Dict[str, Any] = Field(default_factory=dict)
    response_url: str = ""
    actions: List[CallbackAction] = Field(default_factory=list)

    @property
    def is_approved(self) -> bool:
        return self.actions[0].value == APPROVE_VALUE

    @property
    def event_id(self) -> str:
        return self.actions[0].block_id

class ActionsBlockPresence(BaseModel):
    count: int

def parse_callback_payload(raw: str) -> CallbackMessage:
    """
    Decode the JSON carried in the `payload` form field.

    Absent fields fall back to empty values. Validation of the decoded
    message is done separately by `validate_callback`.
    """
    try:
        return CallbackMessage.model_validate_json(raw)
    except ValidationError as e:
        raise CallbackValidationError(ValidationReason.MALFORMED_PAYLOAD, str(e)) from e

def scan_actions_blocks(blocks: Any) -> ActionsBlockPresence:
    if not isinstance(blocks, list):
        raise CallbackValidationError(ValidationReason.BLOCKS_NOT_ARRAY)

    count = 0
    for block in blocks:
        if not isinstance(block, dict):
            raise CallbackValidationError(ValidationReason.BLOCKS_ELEMENT_NOT_MAP)
        if block.get('type') == 'actions':
            count += 1
    return ActionsBlockPresence(count=count)

def validate_callback(msg: CallbackMessage) -> None:
    """Structural checks only; the target event is not looked up here"""
    if not msg.actions:
        raise CallbackValidationError(ValidationReason.EMPTY_ACTIONS)

    value = msg.actions[0].value
    if value not in (APPROVE_VALUE, REJECT_VALUE):
        raise CallbackValidationError(ValidationReason.UNKNOWN_ACTION_VALUE, value)

    if 'blocks' not in msg.message:
        raise CallbackValidationError(ValidationReason.MISSING_BLOCKS)

    presence = scan_actions_blocks(msg.message['blocks'])
    if presence.count == 0:
        raise CallbackValidationError(ValidationReason.NO_ACTIONS_BLOCK)
    if presence.count > 1:
        raise CallbackValidationError(ValidationReason.MULTIPLE_ACTIONS_BLOCKS)
