"""Email sender (dev stub)."""

import logging

from notifier.capabilities import DeliveryResult, EmailCapability, Payload
from notifier.config import EmailConfig
from notifier.errors import TransportError

logger = logging.getLogger(__name__)


class EmailSender(EmailCapability):
    """Stub email sender that validates and logs instead of sending.

    Ready for integration with SMTP/SendGrid/SES: hold the client on the
    instance and call it from send().
    """

    def __init__(self, config: EmailConfig | None = None) -> None:
        self._config = config or EmailConfig()

    def send(self, payload: Payload) -> DeliveryResult:
        to = _valid_address(payload.get("to"))
        subject = str(payload.get("subject") or "(no subject)")
        if len(subject) > self._config.max_subject_length:
            raise TransportError(
                self.channel,
                f"subject exceeds {self._config.max_subject_length} characters",
            )

        body = str(payload.get("body") or "")
        logger.info(
            "Email sent (stub)",
            extra={
                "channel": str(self.channel),
                "to": to,
                "subject": subject,
                "from_address": self._config.from_address,
                "body_preview": body[:50] if body else "(empty)",
            },
        )
        return DeliveryResult(
            success=True,
            channel=self.channel,
            details=f"Email delivered: {subject}",
        )


def _valid_address(value: object) -> str:
    address = str(value).strip() if value is not None else ""
    local, sep, domain = address.partition("@")
    if not sep or not local or not domain or "@" in domain:
        raise TransportError("email", f"invalid recipient address: {address!r}")
    return address
