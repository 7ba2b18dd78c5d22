"""
Generic Twilio request builder.

Data is encoded as application/x-www-form-urlencoded as it is added:

- for GET, append as_form() to the URL as query string;
- for POST, send as_form() as the body with Content-Type CONTENT_TYPE.

The request also works as a structured value: iterating yields the decoded
pairs, len() is the number of pairs, and from_pairs()/parse() rebuild a
request from a mapping, a pair sequence or an encoded string.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from twilio_form.errors import FieldValidationError, FormatError
from twilio_form.form import adapters, encoder
from twilio_form.shared.logging import get_logger

logger = get_logger(__name__)

MAX_BODY_LENGTH = 1600
MAX_SEND_DIGITS_LENGTH = 32

U16_MAX = 0xFFFF
U32_MAX = 0xFFFF_FFFF


class TwilioMethod(str, Enum):
    """HTTP methods Twilio can use to invoke a callback."""

    GET = "GET"
    POST = "POST"

    @classmethod
    def default(cls) -> TwilioMethod:
        return cls.POST


def _format_uint(value: int, limit: int, field: str) -> str:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{field} must be int, got {type(value).__name__}")
    if not 0 <= value <= limit:
        raise ValueError(f"{field} must be within 0..{limit}, got {value}")
    return str(value)


def advise(ok: bool, field: str, message: str, strict: bool) -> None:
    """Advisory field check: warn, or raise FieldValidationError when strict."""
    if ok:
        return
    if strict:
        raise FieldValidationError(message, field=field)
    logger.warning(message, extra={"field": field})


def check_body(body: str, strict: bool = False) -> None:
    advise(
        len(body) <= MAX_BODY_LENGTH,
        "Body",
        f"Text body cannot exceed {MAX_BODY_LENGTH} characters",
        strict,
    )


class TwilioRequest:
    """Append-only accumulator of form-urlencoded pairs.

    Every setter appends exactly one pair (the *_with_method ones two) and
    returns the request, so calls chain in field order.
    Advisory checks (Body and SendDigits length, PageSize > 0) log a
    warning unless the request is created with strict=True:

        >>> req = TwilioRequest().from_("+15005550006").to("+15005550001")
        >>> req.body("Hello").as_form()
        'From=%2B15005550006&To=%2B15005550001&Body=Hello'
    """

    CONTENT_TYPE = "application/x-www-form-urlencoded"

    __slots__ = ("_buffer", "_len", "_strict")

    def __init__(self, strict: bool = False) -> None:
        self._buffer = bytearray()
        self._len = 0
        self._strict = strict

    # -- export ------------------------------------------------------------

    def as_bytes(self) -> bytes:
        """Return raw application/x-www-form-urlencoded data."""
        return bytes(self._buffer)

    def as_form(self) -> str:
        """Return application/x-www-form-urlencoded data as text."""
        return self._buffer.decode("ascii")

    def __bytes__(self) -> bytes:
        return self.as_bytes()

    def __str__(self) -> str:
        return self.as_form()

    def __repr__(self) -> str:
        return f"TwilioRequest({self.as_form()!r})"

    def __len__(self) -> int:
        return self._len

    def __bool__(self) -> bool:
        return self._len > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TwilioRequest):
            return NotImplemented
        return self._buffer == other._buffer

    __hash__ = None  # type: ignore[assignment]

    # -- structured encode -------------------------------------------------

    def __iter__(self) -> Iterator[tuple[str, str]]:
        """Yield percent-decoded (key, value) pairs in insertion order."""
        return adapters.iter_encoded(self.as_form())

    def to_pairs(self) -> list[tuple[str, str]]:
        """Decoded pairs, repeated keys included. Used for structured serialization."""
        return list(self)

    def to_dict(self) -> dict[str, str]:
        """Decoded pairs as an ordered mapping. Repeated keys keep the last value."""
        return dict(self)

    # -- structured decode -------------------------------------------------

    @classmethod
    def from_pairs(cls, data: Any, strict: bool = False) -> TwilioRequest:
        """Build a request from a mapping or a sequence of (key, value) pairs.

        Keys and values are decoded text; they are re-encoded in arrival
        order. Raises FormatError for any other shape.
        """
        if isinstance(data, TwilioRequest):
            data = data.to_pairs()
        elif isinstance(data, (str, bytes, bytearray)):
            raise FormatError(
                f"invalid type: {type(data).__name__}, expected {adapters.EXPECTING}"
            )
        result = cls(strict=strict)
        adapters.decode_into(result, data)
        return result

    @classmethod
    def parse(cls, data: str | bytes, strict: bool = False) -> TwilioRequest:
        """Build a request from an existing form-urlencoded string."""
        if not isinstance(data, (str, bytes, bytearray)):
            raise FormatError(
                f"invalid type: {type(data).__name__}, expected encoded form text"
            )
        result = cls(strict=strict)
        adapters.decode_into(result, data)
        return result

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.to_pairs,
                return_schema=core_schema.list_schema(
                    core_schema.tuple_schema(
                        [core_schema.str_schema(), core_schema.str_schema()]
                    )
                ),
            ),
        )

    @classmethod
    def _validate(cls, value: Any) -> TwilioRequest:
        if isinstance(value, TwilioRequest):
            return value
        if isinstance(value, (str, bytes, bytearray)):
            return cls.parse(value)
        return cls.from_pairs(value)

    # -- building ----------------------------------------------------------

    def add_pair(self, key: str, value: str) -> TwilioRequest:
        """Append an arbitrary field."""
        encoder.push_pair(key, value, self._buffer)
        self._len += 1
        return self

    def _advise(self, ok: bool, field: str, message: str) -> None:
        advise(ok, field, message, self._strict)

    def account_sid(self, sid: str) -> TwilioRequest:
        """Add AccountSid, the owner of the resource."""
        return self.add_pair("AccountSid", sid)

    def from_(self, from_: str) -> TwilioRequest:
        """Add From, the identifier of the caller.

        Type should be the same as for To.
        """
        return self.add_pair("From", from_)

    def to(self, to: str) -> TwilioRequest:
        """Add To, the identifier of the callee."""
        return self.add_pair("To", to)

    def body(self, body: str) -> TwilioRequest:
        check_body(body, self._strict)
        return self.add_pair("Body", body)

    def media_url(self, media_url: str) -> TwilioRequest:
        return self.add_pair("MediaUrl", media_url)

    def post_status_callback(self, url: str) -> TwilioRequest:
        """Add StatusCallback, the URL Twilio POSTs status updates to."""
        return self.add_pair("StatusCallback", url)

    def provide_feedback(self, value: bool) -> TwilioRequest:
        """Set ProvideFeedback, whether message delivery should be tracked."""
        return self.add_pair("ProvideFeedback", "true" if value else "false")

    def attempt(self, attempt: int) -> TwilioRequest:
        """Set Attempt, the total number of attempts to post the message."""
        return self.add_pair("Attempt", _format_uint(attempt, U32_MAX, "Attempt"))

    def validity_period(self, seconds: int) -> TwilioRequest:
        """Set ValidityPeriod, the number of seconds allowed in the queue.

        If the message is enqueued for longer, Twilio discards it.
        """
        return self.add_pair(
            "ValidityPeriod", _format_uint(seconds, U16_MAX, "ValidityPeriod")
        )

    def send_at(self, date: str) -> TwilioRequest:
        return self.add_pair("SendAt", date)

    def twiml(self, twiml: str) -> TwilioRequest:
        """Set Twiml, the call's content as an XML string."""
        return self.add_pair("Twiml", twiml)

    def url(self, url: str) -> TwilioRequest:
        """Set Url, where Twilio fetches the call's TwiML from."""
        return self.add_pair("Url", url)

    def url_with_method(self, method: TwilioMethod, url: str) -> TwilioRequest:
        return self.add_pair("Method", TwilioMethod(method).value).add_pair("Url", url)

    def status_url(self, url: str) -> TwilioRequest:
        return self.add_pair("StatusCallback", url)

    def status_url_with_method(self, method: TwilioMethod, url: str) -> TwilioRequest:
        return self.add_pair("StatusCallbackMethod", TwilioMethod(method).value).add_pair(
            "StatusCallback", url
        )

    def caller_id(self, caller_id: str) -> TwilioRequest:
        return self.add_pair("CallerId", caller_id)

    def send_digits(self, digits: str) -> TwilioRequest:
        """Set SendDigits, keys to dial once the call is established."""
        self._advise(
            len(digits) <= MAX_SEND_DIGITS_LENGTH,
            "SendDigits",
            f"SendDigits cannot exceed {MAX_SEND_DIGITS_LENGTH} characters",
        )
        return self.add_pair("SendDigits", digits)

    def page_size(self, size: int) -> TwilioRequest:
        """Set PageSize, the max number of resources per page when listing."""
        text = _format_uint(size, U32_MAX, "PageSize")
        self._advise(size != 0, "PageSize", "PageSize should be greater than 0")
        return self.add_pair("PageSize", text)

    def start_date(self, date: str) -> TwilioRequest:
        return self.add_pair("StartDate", date)

    def end_date(self, date: str) -> TwilioRequest:
        return self.add_pair("EndDate", date)

    def date_sent(self, date: str) -> TwilioRequest:
        """Set DateSent, to filter messages when listing."""
        return self.add_pair("DateSent", date)
