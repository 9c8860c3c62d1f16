"""SMS sender (dev stub)."""

import logging
import re

from notifier.capabilities import DeliveryResult, Payload, SMSCapability
from notifier.config import SMSConfig
from notifier.errors import TransportError

logger = logging.getLogger(__name__)

_E164 = re.compile(r"^\+[1-9][0-9]{1,14}$")


class SMSSender(SMSCapability):
    """Stub SMS sender that validates and logs instead of sending.

    Ready for integration with Twilio/AWS SNS.
    """

    def __init__(self, config: SMSConfig | None = None) -> None:
        self._config = config or SMSConfig()

    def send(self, payload: Payload) -> DeliveryResult:
        to = str(payload.get("to") or "").strip()
        if not _E164.match(to):
            raise TransportError(self.channel, f"recipient is not an E.164 number: {to!r}")

        body = str(payload.get("body") or "")
        if not body:
            raise TransportError(self.channel, "message body is empty")
        if len(body) > self._config.max_body_length:
            raise TransportError(
                self.channel,
                f"message body exceeds {self._config.max_body_length} characters",
            )

        preview = body[:50]
        logger.info(
            "SMS sent (stub)",
            extra={
                "channel": str(self.channel),
                "to": to,
                "from_phone": self._config.from_phone,
                "body_preview": preview,
            },
        )
        return DeliveryResult(
            success=True,
            channel=self.channel,
            details=f"SMS delivered: {preview}",
        )
