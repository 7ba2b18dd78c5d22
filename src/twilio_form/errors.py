"""
Exception hierarchy.

FormatError is the only error raised by the form encoder itself; the rest
belong to advisory field checks and to the transport client.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from twilio_form.telephony.models import TwilioErrorResponse


class FormatError(ValueError):
    """Structured input cannot be read as text key/value pairs."""


class FieldValidationError(ValueError):
    """An advisory field check failed on a strict request."""

    def __init__(self, message: str, field: str) -> None:
        super().__init__(message)
        self.field = field


class TelephonyProviderError(Exception):
    """Base exception for telephony provider errors."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        provider_response: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.provider_response = provider_response or {}


class TwilioApiError(TelephonyProviderError):
    """Twilio REST API answered with an error response."""

    def __init__(
        self,
        error: TwilioErrorResponse,
        provider_response: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            error.describe(),
            error_code=str(error.code),
            provider_response=provider_response,
        )
        self.error = error

    @property
    def status(self) -> int:
        return self.error.status


class TwilioTransportError(TelephonyProviderError):
    """Request never produced a Twilio response."""
