"""Ohmyfin API client for SWIFT transaction tracking and validation"""

import asyncio
import json
import logging
import time
from datetime import date as Date
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import urljoin
from uuid import UUID

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ohmyfin.config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    USER_AGENT,
    ClientConfig,
    Settings,
)
from ohmyfin.exceptions import ApiError, ConfigurationError, ValidationError
from ohmyfin.models import Amount, ChangeStatus, RequestModel, Role
from ohmyfin.observability.metrics import record_outcome, request_latency_histogram

logger = logging.getLogger(__name__)

TRACK_PATH = "/api/track"
CHANGE_PATH = "/api/change"
VALIDATE_PATH = "/api/validate"
SSI_PATH = "/api/getssi"

RequestInput = Union[RequestModel, Mapping[str, Any], None]


def _is_missing(value: Any) -> bool:
    return value is None or value == ""


def _build_request(request: RequestInput, params: Dict[str, Any]) -> Dict[str, Any]:
    """Merge a model/mapping with keyword overrides; values are kept as given"""
    data: Dict[str, Any] = {}
    if isinstance(request, BaseModel):
        data.update(request.model_dump(exclude_none=True))
    elif request is not None:
        data.update(request)
    data.update(params)
    return {key: value for key, value in data.items() if value is not None}


def _json_default(value: Any) -> Any:
    # datetime is a date subclass
    if isinstance(value, Date):
        return value.isoformat()
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, Decimal):
        return float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class Ohmyfin:
    """
    Async client for the Ohmyfin API.

    The instance owns one httpx.AsyncClient (and its connection pool) that is
    safe to share between concurrent tasks. Close it with `await
    client.aclose()` or use the client as an async context manager.

    Example:
        async with Ohmyfin(api_key="...") as client:
            result = await client.track(
                uetr="97ed4827-7b6f-4491-a06f-b548d5a7512d",
                amount=10000,
                date="2024-01-15",
                currency="USD",
            )
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Args:
            api_key: Ohmyfin API key (get one at https://ohmyfin.ai)
            base_url: API base URL, http or https (default https://ohmyfin.ai)
            timeout: Per-request deadline in seconds (default 30)
            transport: Optional httpx transport used for every request;
                closed by aclose()
        """
        if not api_key:
            raise ConfigurationError("API key is required. Get your API key at https://ohmyfin.ai")

        try:
            self.config = ClientConfig(
                api_key=api_key,
                base_url=base_url or DEFAULT_BASE_URL,
                timeout=DEFAULT_TIMEOUT_SECONDS if timeout is None else timeout,
            )
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid client configuration: {e}") from e

        # No I/O until the first request
        self._client = httpx.AsyncClient(
            headers={
                "KEY": self.config.api_key,
                "Content-Type": "application/json",
                "Accept": "application/json",
                "User-Agent": USER_AGENT,
            },
            timeout=self.config.timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **kwargs: Any) -> "Ohmyfin":
        """Build a client from OHMYFIN_* environment variables (or .env)"""
        settings = settings or Settings()
        return cls(
            api_key=settings.api_key,
            base_url=settings.base_url,
            timeout=settings.timeout_seconds,
            **kwargs,
        )

    @property
    def base_url(self) -> str:
        return self.config.base_url

    @property
    def timeout(self) -> float:
        return self.config.timeout

    def __repr__(self) -> str:
        return f"Ohmyfin(base_url={self.base_url!r}, timeout={self.timeout})"

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "Ohmyfin":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def _url_for(self, path: str) -> str:
        """Resolve an API path against base_url; an absolute path replaces any base path"""
        return urljoin(self.config.base_url, path)

    async def _send(self, method: str, path: str, data: Optional[Mapping[str, Any]]) -> httpx.Response:
        content = None if data is None else json.dumps(data, default=_json_default)
        return await self._client.request(method, self._url_for(path), content=content)

    async def _request(
        self,
        method: str,
        path: str,
        data: Optional[Mapping[str, Any]] = None,
        operation: str = "request",
    ) -> Any:
        """
        Send one request and return the parsed JSON body.

        Raises:
            ApiError: On HTTP status >= 400, a non-JSON body, or timeout (408)
            httpx.RequestError: On connection-level failures, unchanged
        """
        logger.debug("Ohmyfin request", extra={"operation": operation, "method": method, "path": path})
        start = time.perf_counter()
        try:
            response = await asyncio.wait_for(self._send(method, path, data), timeout=self.config.timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            record_outcome(operation, "timeout")
            logger.warning(f"Ohmyfin {operation} timed out after {self.config.timeout}s")
            raise ApiError("Request timeout", 408) from e
        except httpx.RequestError as e:
            record_outcome(operation, "transport_error")
            logger.warning(f"Ohmyfin {operation} transport error: {e!r}")
            raise
        finally:
            request_latency_histogram.labels(operation=operation).observe(time.perf_counter() - start)

        return self._handle_response(response, operation)

    def _handle_response(self, response: httpx.Response, operation: str) -> Any:
        try:
            payload = response.json()
        except ValueError as e:
            record_outcome(operation, "invalid_json")
            logger.warning(f"Ohmyfin {operation} returned invalid JSON (HTTP {response.status_code})")
            raise ApiError("Invalid JSON response", response.status_code) from e

        if response.status_code >= 400:
            body = payload if isinstance(payload, dict) else {}
            error = ApiError(
                body.get("message") or "API request failed",
                response.status_code,
                body.get("errors"),
            )
            record_outcome(operation, "api_error")
            logger.warning(
                f"Ohmyfin {operation} failed: {error.message}",
                extra={"operation": operation, "status_code": response.status_code},
            )
            raise error

        record_outcome(operation, "success")
        return payload

    async def track(
        self,
        request: RequestInput = None,
        /,
        *,
        uetr: str | None = None,
        ref: str | None = None,
        amount: Amount | None = None,
        date: Union[Date, str, None] = None,
        currency: str | None = None,
        **extra: Any,
    ) -> Any:
        """
        Track a SWIFT transaction.

        Args:
            request: TrackRequest or mapping; keyword arguments override it
            uetr: Universal End-to-End Transaction Reference
            ref: Transaction reference (required if uetr not provided)
            amount: Transaction amount
            date: Transaction date (YYYY-MM-DD)
            currency: Currency code, e.g. "USD"

        Returns:
            Parsed JSON body, shaped like TrackResult

        Raises:
            ValidationError: If uetr/ref, amount, date or currency is missing
        """
        body = _build_request(
            request,
            dict(extra, uetr=uetr, ref=ref, amount=amount, date=date, currency=currency),
        )
        if _is_missing(body.get("uetr")) and _is_missing(body.get("ref")):
            raise ValidationError("Either uetr or ref is required")
        if any(_is_missing(value) for value in (body.get("amount"), body.get("date"), body.get("currency"))):
            raise ValidationError("amount, date, and currency are required")
        return await self._request("POST", TRACK_PATH, body, operation="track")

    async def change(
        self,
        request: RequestInput = None,
        /,
        *,
        uetr: str | None = None,
        ref: str | None = None,
        amount: Amount | None = None,
        date: Union[Date, str, None] = None,
        currency: str | None = None,
        status: ChangeStatus | None = None,
        role: Role | None = None,
        swift: str | None = None,
        nextName: str | None = None,
        nextSwift: str | None = None,
        message: str | None = None,
        details: str | None = None,
        **extra: Any,
    ) -> Any:
        """
        Report a transaction status update (for financial institutions).

        Only uetr/ref, status and role are checked locally; amount, date and
        currency are forwarded as given.

        Returns:
            Parsed JSON body, shaped like ChangeResult
        """
        body = _build_request(
            request,
            dict(
                extra,
                uetr=uetr,
                ref=ref,
                amount=amount,
                date=date,
                currency=currency,
                status=status,
                role=role,
                swift=swift,
                nextName=nextName,
                nextSwift=nextSwift,
                message=message,
                details=details,
            ),
        )
        if _is_missing(body.get("uetr")) and _is_missing(body.get("ref")):
            raise ValidationError("Either uetr or ref is required")
        if _is_missing(body.get("status")) or _is_missing(body.get("role")):
            raise ValidationError("status and role are required")
        return await self._request("POST", CHANGE_PATH, body, operation="change")

    async def validate(
        self,
        request: RequestInput = None,
        /,
        *,
        beneficiary_bic: str | None = None,
        currency: str | None = None,
        correspondent_bic: str | None = None,
        correspondent_account: str | None = None,
        beneficiary_iban: str | None = None,
        beneficiary_owner: str | None = None,
        beneficiary_country: str | None = None,
        beneficiary_region: str | None = None,
        sender_bic: str | None = None,
        sender_correspondent_bic: str | None = None,
        **extra: Any,
    ) -> Any:
        """
        Validate payment routing details before sending a transfer.

        Returns:
            Parsed JSON body, shaped like ValidateResult
        """
        body = _build_request(
            request,
            dict(
                extra,
                beneficiary_bic=beneficiary_bic,
                currency=currency,
                correspondent_bic=correspondent_bic,
                correspondent_account=correspondent_account,
                beneficiary_iban=beneficiary_iban,
                beneficiary_owner=beneficiary_owner,
                beneficiary_country=beneficiary_country,
                beneficiary_region=beneficiary_region,
                sender_bic=sender_bic,
                sender_correspondent_bic=sender_correspondent_bic,
            ),
        )
        if _is_missing(body.get("beneficiary_bic")) or _is_missing(body.get("currency")):
            raise ValidationError("beneficiary_bic and currency are required")
        return await self._request("POST", VALIDATE_PATH, body, operation="validate")

    async def get_ssi(
        self,
        request: RequestInput = None,
        /,
        *,
        swift: str | None = None,
        currency: str | None = None,
        **extra: Any,
    ) -> Any:
        """
        Get Standard Settlement Instructions (correspondent banks) for a bank.

        Returns:
            Parsed JSON body, shaped like SSIResult
        """
        body = _build_request(request, dict(extra, swift=swift, currency=currency))
        if _is_missing(body.get("swift")) or _is_missing(body.get("currency")):
            raise ValidationError("swift and currency are required")
        return await self._request("POST", SSI_PATH, body, operation="getssi")
