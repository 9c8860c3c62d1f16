"""Exception hierarchy for notification dispatch."""


class NotifierError(Exception):
    """Base class for all notifier errors."""


class TransportError(NotifierError):
    """A sender could not deliver the payload over its channel.

    Raised by senders only. The notifier lets it propagate untouched.
    """

    def __init__(self, channel: str, reason: str) -> None:
        super().__init__(f"{channel} transport failed: {reason}")
        self.channel = channel
        self.reason = reason


class ContractViolation(NotifierError, TypeError):
    """The object passed as a sender does not implement ``send``."""
