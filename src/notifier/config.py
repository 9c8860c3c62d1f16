from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from notifier.enums import Channel


class NotifierConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="NOTIFIER_")

    log_level: str = "INFO"
    default_channel: Channel = Channel.EMAIL


class EmailConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="EMAIL_")

    from_address: str = "no-reply@example.com"
    # RFC 5322 line length limit
    max_subject_length: int = Field(default=998, gt=0)


class SMSConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SMS_")

    from_phone: str = "+15555550100"
    max_body_length: int = Field(default=1600, gt=0)


class PushConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PUSH_")

    app_id: str = "notifier"
