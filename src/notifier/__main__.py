"""Entry point: send one notification over a chosen channel.

Usage:
    python -m notifier --channel email --to alice@example.com --subject Hi --body Hello
    python -m notifier --channel sms --to +15555550123 --body "Your code is 1234"
    python -m notifier --channel push --to <device-token> --title Hi --body Hello
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import Any

from notifier.config import EmailConfig, NotifierConfig, PushConfig, SMSConfig
from notifier.enums import Channel
from notifier.errors import TransportError
from notifier.log import setup_logging
from notifier.notifier import Notifier
from notifier.registry import create_default_registry

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    config = NotifierConfig()
    args = parse_args(argv, default_channel=config.default_channel)
    setup_logging(config.log_level)

    registry = create_default_registry(EmailConfig(), SMSConfig(), PushConfig())
    sender = registry.get(args.channel)
    payload = build_payload(
        args.channel,
        to=args.to,
        body=args.body,
        subject=args.subject,
        title=args.title,
    )

    try:
        result = Notifier().notify(payload, sender)
    except TransportError as exc:
        logger.error(
            "Notification failed",
            extra={"channel": exc.channel, "reason": exc.reason},
        )
        return 1

    log_ctx = {"channel": result.channel, "details": result.details}
    if not result.success:
        logger.error("Notification failed", extra=log_ctx)
        return 1

    logger.info("Notification sent", extra=log_ctx)
    return 0


def parse_args(
    argv: Sequence[str] | None = None,
    default_channel: str = Channel.EMAIL,
) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="notifier",
        description="Send one notification through a channel sender.",
    )
    parser.add_argument(
        "--channel",
        choices=[channel.value for channel in Channel],
        default=str(default_channel),
        help="Delivery channel (default: NOTIFIER_DEFAULT_CHANNEL or email).",
    )
    parser.add_argument(
        "--to",
        required=True,
        help="Recipient: email address, E.164 phone, or push device token.",
    )
    parser.add_argument("--body", required=True, help="Message body.")
    parser.add_argument("--subject", default=None, help="Email subject.")
    parser.add_argument("--title", default=None, help="Push notification title.")
    return parser.parse_args(argv)


def build_payload(
    channel: str,
    *,
    to: str,
    body: str,
    subject: str | None = None,
    title: str | None = None,
) -> dict[str, Any]:
    """Map CLI values onto the payload keys the channel's sender reads."""
    if channel == Channel.PUSH:
        payload: dict[str, Any] = {"device_token": to, "body": body}
        if title is not None:
            payload["title"] = title
        return payload

    payload = {"to": to, "body": body}
    if channel == Channel.EMAIL and subject is not None:
        payload["subject"] = subject
    return payload


if __name__ == "__main__":
    sys.exit(main())
