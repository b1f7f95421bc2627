# src/gitlab_notifier/notify/handlers.py
import logging
from gitlab_notifier.models.webhook import MergeRequestEvent, PipelineEvent
from gitlab_notifier.senders.base import DeliveryError, Sender
from .formatters import format_merge_request, format_pipeline


logger = logging.getLogger(__name__)

MERGE_REQUEST_HOOK = "Merge Request Hook"
PIPELINE_HOOK = "Pipeline Hook"


async def _deliver(key: str, content: str, sender: Sender) -> None:
    try:
        await sender.send(key, content)
    except DeliveryError as e:
        logger.error(f"Notification delivery failed: {e}")
        raise


async def handle_merge_request(key: str, event: MergeRequestEvent, sender: Sender) -> bool:
    """Notify about an opened or merged MR. Returns True if a message was sent."""
    mr = event.object_attributes
    content = format_merge_request(event)
    if content is None:
        logger.info(f"Ignoring MR !{mr.iid} action '{mr.action}'")
        return False

    await _deliver(key, content, sender)
    logger.info(f"Sent notification for MR !{mr.iid} ({mr.action})")
    return True


async def handle_pipeline(key: str, event: PipelineEvent, sender: Sender) -> bool:
    """Notify about a pipeline that succeeded or failed. Returns True if a message was sent."""
    pipeline = event.object_attributes
    content = format_pipeline(event)
    if content is None:
        logger.info(f"Ignoring pipeline {pipeline.id} status '{pipeline.status}'")
        return False

    await _deliver(key, content, sender)
    logger.info(f"Sent notification for pipeline {pipeline.id} ({pipeline.status})")
    return True


async def dispatch(event_type: str | None, key: str, body: bytes, sender: Sender) -> bool:
    """Route a raw webhook body to its handler based on the X-Gitlab-Event value.

    Raises pydantic.ValidationError for a malformed body and DeliveryError when
    sending fails. An empty body parses as an empty payload, unknown event
    types are a no-op.
    """
    if event_type == MERGE_REQUEST_HOOK:
        return await handle_merge_request(key, MergeRequestEvent.model_validate_json(body or b"{}"), sender)
    if event_type == PIPELINE_HOOK:
        return await handle_pipeline(key, PipelineEvent.model_validate_json(body or b"{}"), sender)

    logger.info(f"Ignoring GitLab event '{event_type}'")
    return False
