"""Sender registry used by the composition root to pick a channel."""

from notifier.capabilities import Sender
from notifier.config import EmailConfig, PushConfig, SMSConfig
from notifier.enums import Channel
from notifier.senders import EmailSender, PushSender, SMSSender


class SenderRegistry:
    """Maps channel names to sender instances."""

    def __init__(self) -> None:
        self._senders: dict[str, Sender] = {}

    def register(self, channel: str, sender: Sender) -> None:
        self._senders[channel] = sender

    def get(self, channel: str) -> Sender:
        """Return the sender for a channel.

        Raises KeyError if no sender is registered for the channel.
        """
        return self._senders[channel]

    def channels(self) -> list[str]:
        return sorted(self._senders)


def create_default_registry(
    email_config: EmailConfig | None = None,
    sms_config: SMSConfig | None = None,
    push_config: PushConfig | None = None,
) -> SenderRegistry:
    """Create a registry with all built-in senders."""
    registry = SenderRegistry()
    registry.register(Channel.EMAIL, EmailSender(email_config))
    registry.register(Channel.SMS, SMSSender(sms_config))
    registry.register(Channel.PUSH, PushSender(push_config))
    return registry
