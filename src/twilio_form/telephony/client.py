"""
Thin Twilio REST transport.

Posts form-urlencoded requests built with TwilioRequest (or one of the
views) and parses the JSON responses into the models of
twilio_form.telephony.models. Uses httpx; the async entrypoints delegate to
the sync implementation in a worker thread.
"""

from __future__ import annotations

from typing import Any, TypeVar, Union

import anyio
import httpx
from pydantic import BaseModel

from twilio_form.config import TwilioSettings, get_settings
from twilio_form.errors import TwilioApiError, TwilioTransportError
from twilio_form.form.request import TwilioRequest
from twilio_form.form.views import Call, Mms, Sms
from twilio_form.shared.logging import get_logger
from twilio_form.telephony import urls
from twilio_form.telephony.models import CallResult, SmsResult, TwilioErrorResponse

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

MessageRequest = Union[Sms, Mms, TwilioRequest]
CallRequest = Union[Call, TwilioRequest]


def _as_request(request: MessageRequest | CallRequest, strict: bool) -> TwilioRequest:
    # A prebuilt TwilioRequest already went through its own checks.
    if isinstance(request, TwilioRequest):
        return request
    return request.request(strict=strict)


def _mask(s: str, keep: int = 6) -> str:
    if not s:
        return ""
    if len(s) <= keep:
        return "*" * len(s)
    return f"{s[:keep]}***"


class TwilioClient:
    """Twilio REST API client.

    The http_client can be injected (tests pass a MagicMock); otherwise one
    is created lazily and owned by this instance.
    """

    def __init__(
        self,
        settings: TwilioSettings | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._http_client = http_client
        self._owns_client = http_client is None

    def _get_client(self) -> httpx.Client:
        if self._http_client is None:
            self._http_client = httpx.Client(
                timeout=httpx.Timeout(self._settings.timeout_seconds)
            )
        return self._http_client

    def close(self) -> None:
        if self._owns_client and self._http_client is not None:
            self._http_client.close()
            self._http_client = None

    def __enter__(self) -> TwilioClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _get_auth(self) -> tuple[str, str]:
        return (self._settings.account_sid, self._settings.auth_token)

    @property
    def account_sid(self) -> str:
        return self._settings.account_sid

    # -- transport ---------------------------------------------------------

    def _send(
        self,
        method: str,
        url: str,
        form: TwilioRequest | None = None,
    ) -> httpx.Response:
        client = self._get_client()
        headers = {"Accept": "application/json"}
        content: bytes | None = None

        if form is not None and method == "POST":
            headers["Content-Type"] = TwilioRequest.CONTENT_TYPE
            content = form.as_bytes()
        elif form:
            url = f"{url}?{form.as_form()}"

        logger.debug(
            "Twilio request",
            extra={
                "method": method,
                "url": url,
                "pairs": len(form) if form is not None else 0,
                "account_sid": _mask(self.account_sid),
            },
        )

        try:
            response = client.request(
                method,
                url,
                content=content,
                headers=headers,
                auth=self._get_auth(),
            )
        except httpx.HTTPError as e:
            logger.exception(
                "HTTP error during Twilio request",
                extra={"method": method, "url": url},
            )
            raise TwilioTransportError(
                message=f"HTTP error: {e!s}",
                error_code="HTTP_ERROR",
            ) from e

        if response.status_code >= 400:
            self._raise_api_error(response)

        return response

    def _raise_api_error(self, response: httpx.Response) -> None:
        try:
            error_data = response.json() if response.content else {}
        except ValueError:
            error_data = {}
        if not isinstance(error_data, dict):
            error_data = {}

        error_data.setdefault("status", response.status_code)
        error_data.setdefault("code", response.status_code)
        error_data.setdefault("message", response.reason_phrase or "Twilio request failed")
        error = TwilioErrorResponse.model_validate(error_data)

        logger.error(
            "Twilio request failed",
            extra={
                "status_code": response.status_code,
                "error_code": error.code,
                "error": error.message,
            },
        )
        raise TwilioApiError(error, provider_response=error_data)

    def _parse(self, response: httpx.Response, model: type[ModelT]) -> ModelT:
        # Validation errors are surfaced unchanged to the caller.
        return model.model_validate_json(response.content)

    def _parse_list(
        self, response: httpx.Response, key: str, model: type[ModelT]
    ) -> list[ModelT]:
        data = response.json()
        return [model.model_validate(item) for item in data.get(key, [])]

    # -- messages ----------------------------------------------------------

    def send_message(self, request: MessageRequest) -> SmsResult:
        """Post a message (Sms, Mms or a raw TwilioRequest)."""
        form = _as_request(request, self._settings.strict_field_checks)
        response = self._send(
            "POST",
            urls.sms_resource_url(self.account_sid, self._settings.api_url),
            form,
        )
        result = self._parse(response, SmsResult)
        logger.info(
            "Twilio message created",
            extra={"sid": result.sid, "status": result.status.value},
        )
        return result

    async def send_message_async(self, request: MessageRequest) -> SmsResult:
        return await anyio.to_thread.run_sync(self.send_message, request)

    def fetch_message(self, sid: str) -> SmsResult:
        response = self._send(
            "GET", urls.sms_url(self.account_sid, sid, self._settings.api_url)
        )
        return self._parse(response, SmsResult)

    def list_messages(self, query: TwilioRequest | None = None) -> list[SmsResult]:
        """List messages, filtered by e.g. DateSent and PageSize."""
        response = self._send(
            "GET",
            urls.sms_resource_url(self.account_sid, self._settings.api_url),
            query,
        )
        return self._parse_list(response, "messages", SmsResult)

    # -- calls -------------------------------------------------------------

    def create_call(self, request: CallRequest) -> CallResult:
        """Initiate an outbound call (Call or a raw TwilioRequest)."""
        form = _as_request(request, self._settings.strict_field_checks)
        response = self._send(
            "POST",
            urls.call_resource_url(self.account_sid, self._settings.api_url),
            form,
        )
        result = self._parse(response, CallResult)
        logger.info(
            "Twilio call created",
            extra={"sid": result.sid, "status": result.status.value},
        )
        return result

    async def create_call_async(self, request: CallRequest) -> CallResult:
        return await anyio.to_thread.run_sync(self.create_call, request)

    def fetch_call(self, sid: str) -> CallResult:
        response = self._send(
            "GET", urls.call_url(self.account_sid, sid, self._settings.api_url)
        )
        return self._parse(response, CallResult)

    def list_calls(self, query: TwilioRequest | None = None) -> list[CallResult]:
        """List calls, filtered by e.g. StartDate, EndDate and PageSize."""
        response = self._send(
            "GET",
            urls.call_resource_url(self.account_sid, self._settings.api_url),
            query,
        )
        return self._parse_list(response, "calls", CallResult)
