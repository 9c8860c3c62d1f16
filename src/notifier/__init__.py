"""Notification dispatch with one minimal sender contract per channel."""

from notifier.capabilities import (
    DeliveryResult,
    EmailCapability,
    Payload,
    PushCapability,
    Sender,
    SMSCapability,
)
from notifier.enums import Channel
from notifier.errors import ContractViolation, NotifierError, TransportError
from notifier.notifier import Notifier, notify

__all__ = [
    "Channel",
    "ContractViolation",
    "DeliveryResult",
    "EmailCapability",
    "Notifier",
    "NotifierError",
    "Payload",
    "PushCapability",
    "SMSCapability",
    "Sender",
    "TransportError",
    "notify",
]
