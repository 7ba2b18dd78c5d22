"""
Twilio API data structs.

Form-urlencoded request builders and JSON response models for the Twilio
REST API, to be used as building blocks.
"""

from twilio_form.errors import (
    FieldValidationError,
    FormatError,
    TelephonyProviderError,
    TwilioApiError,
    TwilioTransportError,
)
from twilio_form.form.request import TwilioMethod, TwilioRequest
from twilio_form.form.views import Call, CallInstruction, Mms, Sms, Twiml, Url
from twilio_form.telephony.models import (
    CallDirection,
    CallResult,
    CallStatus,
    SmsResult,
    SmsStatus,
    TwilioErrorResponse,
)

__all__ = [
    "Call",
    "CallDirection",
    "CallInstruction",
    "CallResult",
    "CallStatus",
    "FieldValidationError",
    "FormatError",
    "Mms",
    "Sms",
    "SmsResult",
    "SmsStatus",
    "TelephonyProviderError",
    "Twiml",
    "TwilioApiError",
    "TwilioErrorResponse",
    "TwilioMethod",
    "TwilioRequest",
    "TwilioTransportError",
    "Url",
]
