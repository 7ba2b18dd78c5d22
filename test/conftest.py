"""
Pytest configuration and shared fixtures.
"""

from collections.abc import Generator
from typing import Any

import pytest

from twilio_form.config import TwilioSettings, get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    # Settings are cached; keep the user's environment out of the tests.
    monkeypatch.delenv("TWILIO_STRICT_FIELD_CHECKS", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def twilio_settings() -> TwilioSettings:
    return TwilioSettings(
        account_sid="AC_TEST_ACCOUNT_SID",
        auth_token="test_auth_token_12345",
        api_host="api.twilio.com",
        api_version="2010-04-01",
        timeout_seconds=10.0,
        strict_field_checks=False,
    )


@pytest.fixture
def sms_payload() -> dict[str, Any]:
    return {
        "account_sid": "AC_TEST_ACCOUNT_SID",
        "api_version": "2010-04-01",
        "body": "My cute text",
        "date_created": "Thu, 30 Jul 2015 20:12:31 +0000",
        "date_sent": None,
        "date_updated": "Thu, 30 Jul 2015 20:12:33 +0000",
        "direction": "outbound-api",
        "error_code": None,
        "from": "+14155550000",
        "media_url": None,
        "num_media": "0",
        "price": None,
        "price_unit": "USD",
        "sid": "SM_TEST_MESSAGE_SID",
        "status": "queued",
        "to": "+14155551234",
    }


@pytest.fixture
def call_payload() -> dict[str, Any]:
    return {
        "account_sid": "AC_TEST_ACCOUNT_SID",
        "caller_name": None,
        "date_created": "Tue, 31 Aug 2010 20:36:28 +0000",
        "direction": "outbound-api",
        "duration": None,
        "end_time": None,
        "from": "+14155550000",
        "price": None,
        "price_unit": "USD",
        "queue_time": "0",
        "sid": "CA_TEST_CALL_SID",
        "start_time": None,
        "status": "queued",
        "to": "+14155551234",
    }
