"""Tests for the Call, Sms and Mms request views."""

import dataclasses
from urllib.parse import urlencode

import pytest

from twilio_form.errors import FieldValidationError
from twilio_form.form.request import MAX_BODY_LENGTH, TwilioRequest
from twilio_form.form.views import Call, Mms, Sms, Twiml, Url

SMS_EXPECTED = "From=LOLKA&To=Me&Body=My+cute+text"


@pytest.fixture
def sms() -> Sms:
    return Sms(from_="LOLKA", to="Me", body="My cute text")


class TestSms:
    def test_all_paths_agree(self, sms: Sms) -> None:
        raw = sms.request()

        assert str(sms) == SMS_EXPECTED
        assert urlencode(sms.as_dict()) == SMS_EXPECTED
        assert raw.as_form() == SMS_EXPECTED
        assert len(raw) == 3

    def test_request_is_standalone(self, sms: Sms) -> None:
        first = sms.request()
        first.media_url("extra.png")
        assert sms.request().as_form() == SMS_EXPECTED

    def test_is_frozen(self, sms: Sms) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            sms.body = "changed"  # type: ignore[misc]


class TestMms:
    def test_all_paths_agree(self, sms: Sms) -> None:
        expected = "From=LOLKA&To=Me&Body=My+cute+text&MediaUrl=test.png"
        mms = Mms(sms=sms, media_url="test.png")
        raw = mms.request()

        assert str(mms) == expected
        assert urlencode(mms.as_dict()) == expected
        assert raw.as_form() == expected
        assert len(raw) == 4

    def test_media_url_comes_last(self, sms: Sms) -> None:
        mms = Mms(sms=sms, media_url="https://x.io/a b.gif")
        assert list(mms.as_dict()) == ["From", "To", "Body", "MediaUrl"]
        assert str(mms).endswith("&MediaUrl=https%3A%2F%2Fx.io%2Fa+b.gif")


class TestCall:
    def test_with_url(self) -> None:
        expected = "From=LOLKA&To=Me&Url=https%3A%2F%2Fdomain.com%2Ftest.xml"
        call = Call(from_="LOLKA", to="Me", instruction=Url("https://domain.com/test.xml"))
        raw = call.request()

        assert str(call) == expected
        assert urlencode(call.as_dict()) == expected
        assert raw.as_form() == expected

    def test_with_twiml(self) -> None:
        expected = (
            "From=LOLKA&To=Me&Twiml="
            "%3CResponse%3E%3CSay%3EAhoy%3C%2FSay%3E%3C%2FResponse%3E"
        )
        call = Call(
            from_="LOLKA",
            to="Me",
            instruction=Twiml("<Response><Say>Ahoy</Say></Response>"),
        )
        raw = call.request()

        assert str(call) == expected
        assert urlencode(call.as_dict()) == expected
        assert raw.as_form() == expected


class TestDisplayMatchesBuild:
    @pytest.mark.parametrize(
        "view",
        [
            Sms(from_="+14155550000", to="+14155551234", body="caffè & crème = 100%"),
            Sms(from_="", to="", body=""),
            Mms(sms=Sms(from_="a", to="b", body="c\nd"), media_url="ü.png"),
            Call(from_="+1", to="+2", instruction=Url("https://x.io/?a=1&b=2")),
            Call(from_="+1", to="+2", instruction=Twiml('<Say voice="alice">Hi</Say>')),
        ],
    )
    def test_str_equals_request_form(self, view: Sms | Mms | Call) -> None:
        raw = view.request()

        assert isinstance(raw, TwilioRequest)
        assert str(view) == raw.as_form()
        assert TwilioRequest.from_pairs(view.as_dict()) == raw


class TestStrictChecks:
    @pytest.fixture
    def long_sms(self) -> Sms:
        return Sms(from_="LOLKA", to="Me", body="x" * (MAX_BODY_LENGTH + 1))

    def test_strict_sms_fails_on_both_paths(self, long_sms: Sms) -> None:
        with pytest.raises(FieldValidationError) as exc_info:
            long_sms.request(strict=True)
        assert exc_info.value.field == "Body"

        with pytest.raises(FieldValidationError):
            long_sms.to_string(strict=True)

    def test_strict_mms_fails_on_both_paths(self, long_sms: Sms) -> None:
        mms = Mms(sms=long_sms, media_url="test.png")

        with pytest.raises(FieldValidationError):
            mms.request(strict=True)
        with pytest.raises(FieldValidationError):
            mms.to_string(strict=True)

    def test_lax_paths_agree(self, long_sms: Sms) -> None:
        mms = Mms(sms=long_sms, media_url="test.png")

        assert str(long_sms) == long_sms.request().as_form()
        assert str(mms) == mms.request().as_form()

    def test_strict_within_limit_is_unchanged(self, sms: Sms) -> None:
        assert sms.to_string(strict=True) == sms.request(strict=True).as_form() == SMS_EXPECTED
