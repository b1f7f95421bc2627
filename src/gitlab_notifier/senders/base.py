# src/gitlab_notifier/senders/base.py
from abc import ABC, abstractmethod


class DeliveryError(Exception):
    """Raised when a notification could not be delivered to its target."""

    def __init__(self, key: str, message: str):
        super().__init__(message)
        self.key = key


class Sender(ABC):
    @abstractmethod
    async def send(self, key: str, content: str) -> None:
        """Deliver Markdown content to the channel identified by key."""
        pass
