import logging
from domain.callback import CallbackMessage
from domain.errors import EventNotFound, NetworkError, StoreError
from domain.types import Deps

logger = logging.getLogger(__name__)

async def process_callback(deps: Deps, msg: CallbackMessage) -> None:
    """
    Apply one validated callback to its event and report back to Slack.

    Runs after the webhook has already been acknowledged, so every failure
    ends here with a log line. Nothing is retried. The read and the write are
    not guarded: two callbacks for the same event racing through this function
    can both read the same state, and whichever stores last wins.
    """
    event_id = msg.event_id
    try:
        event = await deps.event_store.get(event_id)
    except EventNotFound:
        logger.warning(f"Failed to get event: {event_id} does not exist")
        return
    except StoreError as e:
        logger.error(f"Failed to get event {event_id}: {e}")
        return

    user_id = msg.user.id
    if msg.is_approved:
        event.approve(user_id)
    else:
        event.reject(user_id)

    try:
        await deps.event_store.set(event)
    except StoreError as e:
        logger.error(f"Failed to store event {event_id}: {e}")
        return

    payload = deps.format_message(msg, event)
    try:
        await deps.notifier.post(msg.response_url, payload)
    except NetworkError as e:
        logger.error(f"Failed to post message for event {event_id}: {e}")
        return

    logger.info(f"Callback processed: event={event_id} user={user_id} status={event.status.value}")
