"""Channel-agnostic notification dispatch."""

import logging

from notifier.capabilities import DeliveryResult, Payload, Sender
from notifier.errors import ContractViolation

logger = logging.getLogger(__name__)


class Notifier:
    """Forwards a payload to whichever sender the caller hands in.

    Holds no sender between calls and adds no error handling: whatever
    ``sender.send`` returns or raises reaches the caller unchanged.
    """

    def notify(self, payload: Payload, sender: Sender) -> DeliveryResult:
        if not callable(getattr(sender, "send", None)):
            raise ContractViolation(
                f"{type(sender).__name__} does not provide send(payload)"
            )

        logger.debug(
            "Dispatching notification",
            extra={"sender": type(sender).__name__},
        )
        return sender.send(payload)


_default_notifier = Notifier()


def notify(payload: Payload, sender: Sender) -> DeliveryResult:
    """Dispatch *payload* through *sender* using the shared notifier."""
    return _default_notifier.notify(payload, sender)
