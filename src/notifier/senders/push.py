"""Push notification sender (dev stub)."""

import logging

from notifier.capabilities import DeliveryResult, Payload, PushCapability
from notifier.config import PushConfig
from notifier.errors import TransportError

logger = logging.getLogger(__name__)


class PushSender(PushCapability):
    """Stub push sender that logs instead of sending.

    Ready for integration with FCM/APNs.
    """

    def __init__(self, config: PushConfig | None = None) -> None:
        self._config = config or PushConfig()

    def send(self, payload: Payload) -> DeliveryResult:
        token = payload.get("device_token")
        if not isinstance(token, str) or not token.strip():
            raise TransportError(self.channel, "device_token is missing")

        body = str(payload.get("body") or "")
        preview = body[:50] if body else "(empty)"
        logger.info(
            "Push sent (stub)",
            extra={
                "channel": str(self.channel),
                "app_id": self._config.app_id,
                "title": payload.get("title", ""),
                "body_preview": preview,
            },
        )
        return DeliveryResult(
            success=True,
            channel=self.channel,
            details=f"Push delivered: {preview}",
        )
