"""Built-in channel senders."""

from notifier.senders.email import EmailSender
from notifier.senders.push import PushSender
from notifier.senders.sms import SMSSender

__all__ = ["EmailSender", "PushSender", "SMSSender"]
