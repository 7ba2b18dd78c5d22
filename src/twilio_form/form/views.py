"""
Fixed-shape Twilio requests: Call, Sms and Mms.

Each view has two ways out, producing the same bytes:

- request() builds a standalone TwilioRequest through its setters;
- to_string() (and str()) streams the same pairs straight into a text buffer.

Both take the same strict flag and run the same advisory checks, so one
fails exactly when the other does.

as_dict() gives the ordered field mapping, for structured serialization.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Union

from twilio_form.form import encoder
from twilio_form.form.request import TwilioRequest, check_body


@dataclass(frozen=True)
class Twiml:
    """Call instructions given inline as TwiML markup."""

    xml: str

    key = "Twiml"

    @property
    def value(self) -> str:
        return self.xml


@dataclass(frozen=True)
class Url:
    """URL pointing to an XML document with TwiML instructions."""

    url: str

    key = "Url"

    @property
    def value(self) -> str:
        return self.url


CallInstruction = Union[Twiml, Url]


def _write_fields(stream: io.StringIO, fields: list[tuple[str, str]]) -> None:
    for index, (key, value) in enumerate(fields):
        if index:
            stream.write(encoder.SEP)
        encoder.format_pair(key, value, stream)


@dataclass(frozen=True)
class Call:
    """Minimal outbound call request."""

    from_: str
    to: str
    instruction: CallInstruction

    def fields(self) -> list[tuple[str, str]]:
        return [
            ("From", self.from_),
            ("To", self.to),
            (self.instruction.key, self.instruction.value),
        ]

    def request(self, strict: bool = False) -> TwilioRequest:
        """Convert to a generic TwilioRequest."""
        res = TwilioRequest(strict=strict).from_(self.from_).to(self.to)
        if isinstance(self.instruction, Twiml):
            res.twiml(self.instruction.xml)
        else:
            res.url(self.instruction.url)
        return res

    def as_dict(self) -> dict[str, str]:
        return dict(self.fields())

    def to_string(self, strict: bool = False) -> str:
        stream = io.StringIO()
        _write_fields(stream, self.fields())
        return stream.getvalue()

    def __str__(self) -> str:
        return self.to_string()


@dataclass(frozen=True)
class Sms:
    """Text message request."""

    from_: str
    to: str
    body: str

    def fields(self) -> list[tuple[str, str]]:
        return [("From", self.from_), ("To", self.to), ("Body", self.body)]

    def request(self, strict: bool = False) -> TwilioRequest:
        """Convert to a generic TwilioRequest."""
        return TwilioRequest(strict=strict).from_(self.from_).to(self.to).body(self.body)

    def as_dict(self) -> dict[str, str]:
        return dict(self.fields())

    def to_string(self, strict: bool = False) -> str:
        check_body(self.body, strict)
        stream = io.StringIO()
        _write_fields(stream, self.fields())
        return stream.getvalue()

    def __str__(self) -> str:
        return self.to_string()


@dataclass(frozen=True)
class Mms:
    """Multimedia message: an Sms plus a media URL.

    Twilio reformats .gif, .png and .jpeg images for the device; other
    formats are sent as is, limited to 5MB.
    """

    sms: Sms
    media_url: str

    def fields(self) -> list[tuple[str, str]]:
        return [*self.sms.fields(), ("MediaUrl", self.media_url)]

    def request(self, strict: bool = False) -> TwilioRequest:
        """Convert to a generic TwilioRequest."""
        return self.sms.request(strict=strict).media_url(self.media_url)

    def as_dict(self) -> dict[str, str]:
        return dict(self.fields())

    def to_string(self, strict: bool = False) -> str:
        stream = io.StringIO()
        stream.write(self.sms.to_string(strict=strict))
        stream.write(encoder.SEP)
        encoder.format_pair("MediaUrl", self.media_url, stream)
        return stream.getvalue()

    def __str__(self) -> str:
        return self.to_string()
