import pytest
from gitlab_notifier.senders.base import DeliveryError, Sender


def test_sender_is_abstract():
    with pytest.raises(TypeError):
        Sender()


def test_delivery_error_keeps_key():
    error = DeliveryError("robot-key", "boom")
    assert error.key == "robot-key"
    assert str(error) == "boom"
