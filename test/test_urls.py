"""Tests for Twilio resource URL builders."""

from twilio_form.telephony import urls

SID = "AC_TEST_ACCOUNT_SID"
BASE = "https://api.twilio.com/2010-04-01/Accounts/AC_TEST_ACCOUNT_SID"


class TestResourceUrls:
    def test_sms_urls(self) -> None:
        assert urls.sms_resource_url(SID) == f"{BASE}/Messages.json"
        assert urls.get_sms_base(SID) == f"{BASE}/Messages"
        assert urls.sms_url(SID, "SM123") == f"{BASE}/Messages/SM123.json"

    def test_call_urls(self) -> None:
        assert urls.call_resource_url(SID) == f"{BASE}/Calls.json"
        assert urls.get_call_base(SID) == f"{BASE}/Calls"
        assert urls.call_url(SID, "CA123") == f"{BASE}/Calls/CA123.json"

    def test_custom_api_url(self) -> None:
        api_url = "localhost:8080/2010-04-01/Accounts"
        assert urls.sms_resource_url(SID, api_url) == (
            "https://localhost:8080/2010-04-01/Accounts/AC_TEST_ACCOUNT_SID/Messages.json"
        )
