"""Sender contracts: one capability per channel.

Each channel gets its own minimal contract instead of a single interface
with ``send_email``/``send_sms``/``send_push`` that every sender would
have to stub out.  ``Sender`` is the structural shape the notifier
accepts; the channel capabilities are the nominal types concrete
senders subclass.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Protocol

from notifier.enums import Channel

Payload = Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class DeliveryResult:
    """Outcome of a delivery attempt."""

    success: bool
    channel: str
    details: str


class Sender(Protocol):
    """Anything that can send a payload."""

    def send(self, payload: Payload) -> DeliveryResult: ...


class EmailCapability(ABC):
    """Contract for senders that deliver email."""

    channel: ClassVar[Channel] = Channel.EMAIL

    @abstractmethod
    def send(self, payload: Payload) -> DeliveryResult:
        """Deliver an email built from *payload*.

        Raises TransportError when the payload is rejected or the
        transport is unreachable.
        """


class SMSCapability(ABC):
    """Contract for senders that deliver SMS messages."""

    channel: ClassVar[Channel] = Channel.SMS

    @abstractmethod
    def send(self, payload: Payload) -> DeliveryResult:
        """Deliver a text message built from *payload*.

        Raises TransportError when the payload is rejected or the
        transport is unreachable.
        """


class PushCapability(ABC):
    """Contract for senders that deliver push notifications."""

    channel: ClassVar[Channel] = Channel.PUSH

    @abstractmethod
    def send(self, payload: Payload) -> DeliveryResult:
        """Deliver a push notification built from *payload*.

        Raises TransportError when the payload is rejected or the
        transport is unreachable.
        """
