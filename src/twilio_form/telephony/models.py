"""
Response models for the Twilio REST API.

Field names follow Twilio's snake_case JSON. Unknown keys are ignored.
"""

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_SERVICE = "Twilio API"

_INTEGER = re.compile(r"[+-]?[0-9]+")


class SmsStatus(str, Enum):
    """Status of a message."""

    QUEUED = "queued"
    SENDING = "sending"
    SENT = "sent"
    FAILED = "failed"
    DELIVERED = "delivered"
    UNDELIVERED = "undelivered"
    RECEIVING = "receiving"
    RECEIVED = "received"


class CallStatus(str, Enum):
    """Status of a call."""

    QUEUED = "queued"
    RINGING = "ringing"
    IN_PROGRESS = "in-progress"
    CANCELED = "canceled"
    COMPLETED = "completed"
    BUSY = "busy"
    NO_ANSWER = "no-answer"
    FAILED = "failed"


class CallDirection(str, Enum):
    """Direction of a call."""

    INBOUND = "inbound"
    OUTBOUND_API = "outbound-api"
    OUTBOUND_DIAL = "outbound-dial"
    TRUNKING_TERMINATING = "trunking-terminating"
    TRUNKING_ORIGINATING = "trunking-originating"


class SmsResult(BaseModel):
    """Result of a successful message request."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    from_: str = Field(..., alias="from", description="Originator of the message")
    to: str
    body: str
    sid: str = Field(
        ...,
        description="Message SID, fetchable at /Accounts/{account_sid}/Messages/{sid}.json",
    )
    status: SmsStatus
    media_url: str | None = None
    price: str | None = None
    price_unit: str = Field(..., description="Currency unit of price")
    date_created: str
    date_sent: str | None = None
    date_updated: str


class CallResult(BaseModel):
    """Result of a successful call request."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    from_: str = Field(..., alias="from", description="Originator of the call")
    to: str
    sid: str = Field(
        ...,
        description="Call SID, fetchable at /Accounts/{account_sid}/Calls/{sid}.json",
    )
    status: CallStatus
    caller_name: str | None = None
    duration: int | None = None
    price: str | None = None
    price_unit: str
    date_created: str
    start_time: str | None = None
    end_time: str | None = None
    direction: CallDirection
    queue_time: int = Field(
        ...,
        strict=True,
        description="Wait time in milliseconds before the call started",
    )

    @field_validator("queue_time", mode="before")
    @classmethod
    def parse_queue_time(cls, v: object) -> object:
        """Twilio sends queue_time as a JSON string of decimal digits; accept ints too."""
        if isinstance(v, str):
            if not _INTEGER.fullmatch(v):
                raise ValueError(f"queue_time is not an integer: {v!r}")
            return int(v)
        return v


class TwilioErrorResponse(BaseModel):
    """Error body returned by the Twilio REST API."""

    code: int
    message: str
    status: int
    more_info: str | None = None

    def describe(self, service: str = DEFAULT_SERVICE) -> str:
        return (
            f"{service} responded with status={self.status}, "
            f"code={self.code}, message: {self.message}"
        )

    def __str__(self) -> str:
        return self.describe()
