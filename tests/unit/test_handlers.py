# tests/unit/test_handlers.py
import json
import pytest
from unittest.mock import AsyncMock
from pydantic import ValidationError
from gitlab_notifier.models.webhook import MergeRequestEvent, PipelineEvent
from gitlab_notifier.notify.handlers import (
    MERGE_REQUEST_HOOK,
    PIPELINE_HOOK,
    dispatch,
    handle_merge_request,
    handle_pipeline,
)
from gitlab_notifier.senders.base import DeliveryError, Sender


MERGED_MR = {
    "object_attributes": {"action": "merge", "iid": 42, "url": "http://x/42"},
    "user": {"name": "A", "username": "a"},
    "project": {"path_with_namespace": "g/p", "web_url": "http://x"},
}


@pytest.fixture
def sender():
    return AsyncMock(spec=Sender)


@pytest.mark.asyncio
async def test_merge_request_sends_to_key(sender):
    sent = await handle_merge_request("robot-key", MergeRequestEvent.model_validate(MERGED_MR), sender)

    assert sent is True
    sender.send.assert_awaited_once()
    key, content = sender.send.await_args.args
    assert key == "robot-key"
    assert "!42" in content
    assert "已合并" in content
    assert "A(a)" in content


@pytest.mark.asyncio
async def test_merge_request_other_action_sends_nothing(sender):
    event = MergeRequestEvent.model_validate({"object_attributes": {"action": "update", "iid": 1}})

    assert await handle_merge_request("robot-key", event, sender) is False
    sender.send.assert_not_awaited()


@pytest.mark.asyncio
async def test_merge_request_delivery_failure_propagates(sender):
    sender.send.side_effect = DeliveryError("robot-key", "WeCom returned HTTP 500")

    with pytest.raises(DeliveryError):
        await handle_merge_request("robot-key", MergeRequestEvent.model_validate(MERGED_MR), sender)


@pytest.mark.asyncio
async def test_pipeline_success_sends(sender):
    event = PipelineEvent.model_validate({"object_attributes": {"id": 5, "status": "success", "ref": "main"}})

    assert await handle_pipeline("robot-key", event, sender) is True
    content = sender.send.await_args.args[1]
    assert "成功🎉" in content
    assert 'color="info"' in content


@pytest.mark.asyncio
async def test_pipeline_running_sends_nothing(sender):
    event = PipelineEvent.model_validate({"object_attributes": {"id": 5, "status": "running"}})

    assert await handle_pipeline("robot-key", event, sender) is False
    sender.send.assert_not_awaited()


@pytest.mark.asyncio
async def test_pipeline_delivery_failure_propagates(sender):
    sender.send.side_effect = DeliveryError("robot-key", "boom")
    event = PipelineEvent.model_validate({"object_attributes": {"status": "failed"}})

    with pytest.raises(DeliveryError):
        await handle_pipeline("robot-key", event, sender)


@pytest.mark.asyncio
async def test_dispatch_routes_merge_request(sender):
    sent = await dispatch(MERGE_REQUEST_HOOK, "k", json.dumps(MERGED_MR).encode(), sender)

    assert sent is True
    sender.send.assert_awaited_once()


@pytest.mark.asyncio
async def test_dispatch_routes_pipeline(sender):
    body = json.dumps({"object_attributes": {"status": "failed", "id": 9}}).encode()

    assert await dispatch(PIPELINE_HOOK, "k", body, sender) is True
    assert "失败🤔" in sender.send.await_args.args[1]


@pytest.mark.asyncio
@pytest.mark.parametrize("event_type", [None, "", "Push Hook", "Note Hook", "merge request hook"])
async def test_dispatch_ignores_other_events(sender, event_type):
    assert await dispatch(event_type, "k", b"not even json", sender) is False
    sender.send.assert_not_awaited()


@pytest.mark.asyncio
async def test_dispatch_rejects_malformed_body_without_sending(sender):
    with pytest.raises(ValidationError):
        await dispatch(MERGE_REQUEST_HOOK, "k", b"{broken", sender)

    sender.send.assert_not_awaited()


@pytest.mark.asyncio
async def test_dispatch_treats_empty_body_as_empty_payload(sender):
    assert await dispatch(PIPELINE_HOOK, "k", b"", sender) is False
    sender.send.assert_not_awaited()


@pytest.mark.asyncio
async def test_dispatch_sends_pipeline_with_null_commit(sender):
    body = b'{"object_attributes": {"status": "success", "id": 9, "ref": "main"}, "commit": null}'

    assert await dispatch(PIPELINE_HOOK, "k", body, sender) is True
    assert "成功🎉" in sender.send.await_args.args[1]


@pytest.mark.asyncio
async def test_dispatch_sends_opened_mr_with_null_fields(sender):
    body = b'{"object_attributes": {"action": "open", "iid": 3, "title": null}, "user": null}'

    assert await dispatch(MERGE_REQUEST_HOOK, "k", body, sender) is True
    content = sender.send.await_args.args[1]
    assert "> 标题: \n" in content
    assert "> 提交: ()\n" in content
