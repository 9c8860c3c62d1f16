import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from notifier.config import EmailConfig, NotifierConfig, PushConfig, SMSConfig
from notifier.enums import Channel


class TestNotifierConfig:
    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = NotifierConfig()
        assert config.log_level == "INFO"
        assert config.default_channel == Channel.EMAIL

    def test_from_env(self):
        env = {"NOTIFIER_LOG_LEVEL": "DEBUG", "NOTIFIER_DEFAULT_CHANNEL": "sms"}
        with patch.dict(os.environ, env, clear=False):
            config = NotifierConfig()
        assert config.log_level == "DEBUG"
        assert config.default_channel is Channel.SMS

    def test_unknown_channel_rejected(self):
        with patch.dict(os.environ, {"NOTIFIER_DEFAULT_CHANNEL": "fax"}, clear=False):
            with pytest.raises(ValidationError):
                NotifierConfig()


class TestEmailConfig:
    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = EmailConfig()
        assert config.from_address == "no-reply@example.com"
        assert config.max_subject_length == 998

    def test_from_env(self):
        env = {
            "EMAIL_FROM_ADDRESS": "alerts@example.com",
            "EMAIL_MAX_SUBJECT_LENGTH": "120",
        }
        with patch.dict(os.environ, env, clear=False):
            config = EmailConfig()
        assert config.from_address == "alerts@example.com"
        assert config.max_subject_length == 120

    def test_non_positive_length_rejected(self):
        with pytest.raises(ValidationError):
            EmailConfig(max_subject_length=0)


class TestSMSConfig:
    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = SMSConfig()
        assert config.from_phone == "+15555550100"
        assert config.max_body_length == 1600

    def test_length_validation(self):
        with patch.dict(os.environ, {"SMS_MAX_BODY_LENGTH": "not_a_number"}, clear=False):
            with pytest.raises(ValidationError):
                SMSConfig()


class TestPushConfig:
    def test_from_env(self):
        with patch.dict(os.environ, {"PUSH_APP_ID": "mobile-app"}, clear=False):
            config = PushConfig()
        assert config.app_id == "mobile-app"
