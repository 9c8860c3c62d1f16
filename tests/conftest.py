"""Shared fixtures: stub senders and root logger restore."""

import logging
from collections.abc import Generator
from unittest.mock import MagicMock

import pytest

from notifier.capabilities import DeliveryResult, EmailCapability, SMSCapability
from notifier.enums import Channel
from notifier.errors import TransportError


@pytest.fixture()
def email_sender() -> MagicMock:
    """Email sender stub that records payloads and always succeeds."""
    sender = MagicMock(spec=EmailCapability)
    sender.send.return_value = DeliveryResult(
        success=True, channel=Channel.EMAIL, details="recorded"
    )
    return sender


@pytest.fixture()
def failing_sms_sender() -> MagicMock:
    """SMS sender stub whose transport is always down."""
    sender = MagicMock(spec=SMSCapability)
    sender.send.side_effect = TransportError(Channel.SMS, "gateway unreachable")
    return sender


@pytest.fixture()
def restore_root_logger() -> Generator[logging.Logger, None, None]:
    """Undo any handler/level changes made by setup_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
