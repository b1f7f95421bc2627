from .base import DeliveryError, Sender
from .wecom import WeComSender

__all__ = ["DeliveryError", "Sender", "WeComSender"]
