"""
Library configuration with environment-driven settings.

Settings are read from OS env + .env with the TWILIO_ prefix.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TwilioSettings(BaseSettings):
    """Twilio settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TWILIO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Credentials
    account_sid: str = Field(default="")
    auth_token: str = Field(default="")

    # REST API host, without scheme. Override to point at a test server.
    api_host: str = Field(default="api.twilio.com")
    api_version: str = Field(default="2010-04-01")
    timeout_seconds: float = Field(default=30.0, gt=0, le=300)

    # Passed by TwilioClient when it builds requests from Call/Sms/Mms views.
    # Advisory field checks (Body length, SendDigits length, PageSize) only
    # log a warning unless this is enabled.
    strict_field_checks: bool = Field(
        default=False,
        description="Raise FieldValidationError instead of logging a warning.",
    )

    log_level: str = "INFO"

    @property
    def api_url(self) -> str:
        """Accounts root without scheme, as used by twilio_form.telephony.urls."""
        return f"{self.api_host.strip('/')}/{self.api_version}/Accounts"


@lru_cache(maxsize=1)
def get_settings() -> TwilioSettings:
    """Return cached TwilioSettings loaded from OS env + .env."""
    return TwilioSettings()
