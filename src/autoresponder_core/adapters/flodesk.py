from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any
from urllib.parse import quote

from pydantic import ValidationError as ModelValidationError

from autoresponder_core.accounts import AccountStore
from autoresponder_core.config import FlodeskConfig
from autoresponder_core.contracts.models import (
    Segment,
    ServiceResult,
    SubscribeRequest,
    SubscribeSettings,
)
from autoresponder_core.redact import redact_email, redact_secret
from autoresponder_core.transport import HttpResponse, Transport, UrllibTransport

from .base import AutoresponderError, TransportError, UpstreamError, ValidationError

logger = logging.getLogger(__name__)

SERVICE_ID = "flodesk"

MSG_MISSING_KEY = "Error: You must provide an API key."
MSG_CHECK_KEY = "Error: Please check your API key."
MSG_NOT_SUBSCRIBED = "Error: You were not subscribed."
MSG_MISSING_EMAIL = "Error: An email address is required."


class FlodeskAdapter:
    """Autoresponder adapter for the Flodesk REST API.

    Holds no state between calls: the API key travels with every call, either
    as connect fields, as a connected account record, or resolved through the
    host's account store on subscribe.
    """

    name = "Flodesk"

    def __init__(
        self,
        accounts: AccountStore,
        *,
        config: FlodeskConfig | None = None,
        transport: Transport | None = None,
    ) -> None:
        self.accounts = accounts
        self.config = config or FlodeskConfig()
        self.transport = transport or UrllibTransport(
            timeout=self.config.timeout_seconds
        )

    def service_id(self) -> str:
        return SERVICE_ID

    def connect(self, fields: Mapping[str, Any] | None) -> ServiceResult:
        return _guarded("connect", lambda: self._connect(fields))

    def list_segments(self, account_data: Mapping[str, Any] | None) -> ServiceResult:
        return _guarded("list_segments", lambda: self._list_segments(account_data))

    list_fields = list_segments

    def subscribe(
        self,
        settings: SubscribeSettings | Mapping[str, Any] | object,
        email: str,
        display_name: str | None = None,
    ) -> ServiceResult:
        return _guarded(
            "subscribe", lambda: self._subscribe(settings, email, display_name)
        )

    def _connect(self, fields: Mapping[str, Any] | None) -> ServiceResult:
        api_key = _require_api_key(fields, MSG_MISSING_KEY)
        try:
            response = self._request("GET", api_key, "/segments")
        except TransportError as e:
            raise TransportError(MSG_CHECK_KEY, detail=e.message) from e

        if response.status != 200:
            raise UpstreamError(MSG_CHECK_KEY, detail={"status": response.status})
        return ServiceResult.success({"api_key": api_key})

    def _list_segments(self, account_data: Mapping[str, Any] | None) -> ServiceResult:
        api_key = _require_api_key(account_data, MSG_CHECK_KEY)
        try:
            response = self._request("GET", api_key, "/segments")
        except TransportError as e:
            raise TransportError(MSG_CHECK_KEY, detail=e.message) from e

        # The body decides, not the status: no segments reads as a bad key.
        payload = response.json()
        raw_segments = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(raw_segments, list) or not raw_segments:
            raise UpstreamError(MSG_CHECK_KEY, detail={"status": response.status})

        try:
            segments = [Segment.model_validate(item) for item in raw_segments]
        except ModelValidationError as e:
            raise UpstreamError(MSG_CHECK_KEY, detail={"error": str(e)}) from e
        return ServiceResult.success(segments)

    def _subscribe(
        self,
        settings: SubscribeSettings | Mapping[str, Any] | object,
        email: str,
        display_name: str | None,
    ) -> ServiceResult:
        settings = _coerce_settings(settings)
        account_data = None
        if settings.service_account:
            account_data = self.accounts.get_account_data(settings.service_account)
        api_key = _require_api_key(account_data, MSG_NOT_SUBSCRIBED)

        email = email.strip() if isinstance(email, str) else ""
        if not email:
            raise ValidationError(MSG_MISSING_EMAIL)

        request = SubscribeRequest(
            email=email,
            display_name=display_name or None,
            segment_id=settings.segment_id,
        )

        try:
            response = self._request(
                "POST", api_key, "/subscribers", request.subscriber_body()
            )
        except TransportError as e:
            raise TransportError(f"Error: {e.message}", detail=e.detail) from e

        if response.status != 200:
            raise UpstreamError(
                f"Error: {_response_message(response)}",
                detail={"status": response.status},
            )

        self._assign_segment(api_key, request)
        return ServiceResult.success()

    def _assign_segment(self, api_key: str, request: SubscribeRequest) -> None:
        # Outcome is logged only; the subscriber already exists at this point.
        path = f"/subscribers/{quote(request.email, safe='@')}/segments"
        who = redact_email(request.email)
        try:
            response = self._request("POST", api_key, path, request.segments_body())
        except TransportError as e:
            logger.warning(f"Segment assignment for {who} failed: {e.message}")
            return
        if response.status != 200:
            logger.warning(
                f"Segment assignment for {who} failed: HTTP {response.status}"
            )

    def _request(
        self,
        method: str,
        api_key: str,
        path: str,
        body: dict[str, Any] | None = None,
    ) -> HttpResponse:
        url = f"{self.config.api_base}{path}"
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Basic {api_key}",
            "User-Agent": self.config.user_agent,
        }
        logger.debug(f"{method} {url} key={redact_secret(api_key)}")
        response = self.transport.request(method, url, headers=headers, body=body)
        logger.debug(f"{method} {url} -> {response.status}")
        return response


def _guarded(op: str, call: Callable[[], ServiceResult]) -> ServiceResult:
    try:
        return call()
    except AutoresponderError as exc:
        logger.warning(f"flodesk.{op} failed ({exc.code}): {exc.message}")
        return ServiceResult.failure(exc)
    except Exception as exc:
        logger.exception(f"flodesk.{op} unexpected failure")
        return ServiceResult.failure(
            UpstreamError(f"Error: {exc}", detail={"error": str(exc)})
        )


def _require_api_key(data: Mapping[str, Any] | None, message: str) -> str:
    if not isinstance(data, Mapping):
        raise ValidationError(message)
    api_key = data.get("api_key")
    if not isinstance(api_key, str) or not api_key.strip():
        raise ValidationError(message)
    return api_key


def _coerce_settings(
    settings: SubscribeSettings | Mapping[str, Any] | object,
) -> SubscribeSettings:
    if isinstance(settings, SubscribeSettings):
        return settings
    try:
        if settings is None or isinstance(settings, Mapping):
            return SubscribeSettings.model_validate(dict(settings or {}))
        # Hosts may hand over a settings object with attributes.
        return SubscribeSettings.model_validate(settings, from_attributes=True)
    except (ModelValidationError, TypeError, ValueError) as e:
        raise ValidationError(MSG_NOT_SUBSCRIBED, detail={"error": str(e)}) from e


def _response_message(response: HttpResponse) -> str:
    payload = response.json()
    if isinstance(payload, dict):
        message = payload.get("message")
        if isinstance(message, str) and message.strip():
            return message
    return f"HTTP {response.status}"
