from typing import Any, Dict
from domain.callback import CallbackMessage
from domain.event import Event, Status

STATUS_TEXT = {
    Status.IN_PROGRESS: "is still waiting for a decision",
    Status.APPROVED: "has been approved",
    Status.REJECTED: "has been rejected",
    Status.TIMEOUT: "has timed out",
}

def format_result_message(msg: CallbackMessage, event: Event) -> Dict[str, Any]:
    """Slack response_url body reporting who answered and where the event ended up"""
    action = "approved" if msg.is_approved else "rejected"
    return {
        'replace_original': False,
        'response_type': 'in_channel',
        'text': f"<@{msg.user.id}> {action}. Event {event.id} {STATUS_TEXT[event.status]}."
    }
