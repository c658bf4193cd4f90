# src/twelve_data/infrastructure/external_apis/twelve_data/client.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Twelve Data Client: typed dispatch over a pluggable transport.

One call is one request/response cycle:

1. Encode the request into a query string (``QueryConstructionError``).
2. Build ``<base>/<endpoint>?<query>``.
3. Invoke the transport (``TransportError`` propagates unchanged); a status
   outside 2xx becomes ``DataError`` carrying the status.
4. Parse the body as JSON (``ResponseParsingError``).
5. Inspect the envelope: a ``status`` of ``"error"`` becomes ``DataError``
   with the API's ``message``; a non-string ``status`` is rejected as
   ``DataError`` too.
6. Validate into the response model (``ResponseParsingError``, with field
   codec failures nested).

Nothing is retried and nothing is cached; every failure ends the call.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from types import TracebackType
from typing import Any, Final, Self, TypeVar

from pydantic import ValidationError

from twelve_data.application.interfaces.http_transport import HttpTransport
from twelve_data.application.schemas.requests import (
    EncodableRequest,
    LogoRequest,
    PriceRequest,
    QuoteRequest,
    TimeSeriesRequest,
)
from twelve_data.application.schemas.responses import (
    LogoResponse,
    PriceResponse,
    QuoteResponse,
    TimeSeriesResponse,
    WireModel,
)
from twelve_data.domain.exceptions import (
    UNKNOWN_REASON,
    DataError,
    FieldDecodeError,
    QueryConstructionError,
    ResponseParsingError,
)
from twelve_data.infrastructure.external_apis.twelve_data.settings import (
    DEFAULT_BASE_URL,
    TwelveDataSettings,
)
from twelve_data.infrastructure.http.httpx_transport import HttpxTransport
from twelve_data.infrastructure.logging.logger import get_json_logger
from twelve_data.infrastructure.observability.metrics import observe_upstream_request

ResponseT = TypeVar("ResponseT", bound=WireModel)

_ERROR_STATUS: Final[str] = "error"

logger = get_json_logger(__name__)


def _is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def _check_envelope(payload: Any) -> None:
    """Raise ``DataError`` when the body signals an application-level failure.

    Only JSON objects carry an envelope. ``status`` is optional; when present
    it must be a string, and ``"error"`` marks the whole payload as a failure
    regardless of the HTTP status.
    """
    if not isinstance(payload, Mapping) or "status" not in payload:
        return
    status = payload["status"]
    if not isinstance(status, str):
        raise DataError("status value in the response is not a string")
    if status == _ERROR_STATUS:
        message = payload.get("message")
        raise DataError(message if isinstance(message, str) else UNKNOWN_REASON)


def _collect_decode_errors(exc: ValidationError) -> list[FieldDecodeError]:
    """Pull the field codec exceptions pydantic wrapped into ``exc``."""
    found: list[FieldDecodeError] = []
    for err in exc.errors():
        ctx = err.get("ctx") or {}
        inner = ctx.get("error")
        if isinstance(inner, FieldDecodeError):
            found.append(inner)
    return found


def _describe_errors(exc: ValidationError) -> list[dict[str, str]]:
    return [
        {"loc": ".".join(str(p) for p in err["loc"]), "msg": err["msg"], "type": err["type"]}
        for err in exc.errors()
    ]


class TwelveDataClient:
    """Typed client for the Twelve Data REST API."""

    def __init__(
        self,
        settings: TwelveDataSettings | None = None,
        *,
        api_key: str | None = None,
        transport: HttpTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Provider settings. When omitted, ``api_key`` must be
                given and defaults are used for everything else.
            api_key: Explicit key; overrides ``settings.api_key``.
            transport: Optional transport. If omitted, an
                :class:`HttpxTransport` is created from the settings and
                owned (closed by :meth:`aclose`) by this instance.

        Raises:
            ValueError: If no API key is available.
        """
        if settings is None and api_key is None:
            raise ValueError("either settings or api_key is required")

        if settings is not None:
            self._base_url = settings.normalized_base_url
            self._api_key = api_key or settings.api_key.get_secret_value()
        else:
            self._base_url = DEFAULT_BASE_URL
            self._api_key = api_key or ""
        if not self._api_key:
            raise ValueError("api_key must be non-empty")

        self._owns_transport = transport is None
        if transport is None:
            transport = HttpxTransport(
                timeout_s=settings.timeout_s if settings is not None else 10.0,
                credential_location=(
                    settings.credential_location if settings is not None else "query"
                ),
            )
        self._transport: HttpTransport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    async def aclose(self) -> None:
        """Close the transport if this instance owns it."""
        if self._owns_transport:
            await self._transport.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    # ---------------------------- Public API ----------------------------- #

    async def time_series(self, request: TimeSeriesRequest) -> TimeSeriesResponse:
        """Call ``GET /time_series``."""
        return await self.call("time_series", request, TimeSeriesResponse)

    async def quote(self, request: QuoteRequest) -> QuoteResponse:
        """Call ``GET /quote``."""
        return await self.call("quote", request, QuoteResponse)

    async def price(self, request: PriceRequest) -> PriceResponse:
        """Call ``GET /price``."""
        return await self.call("price", request, PriceResponse)

    async def logo(self, request: LogoRequest) -> LogoResponse:
        """Call ``GET /logo``."""
        return await self.call("logo", request, LogoResponse)

    def build_url(self, endpoint: str, request: EncodableRequest) -> str:
        """Return ``<base>/<endpoint>?<query>`` for ``request``.

        Raises:
            QueryConstructionError: If the request cannot be encoded.
        """
        try:
            query = request.encode()
        except QueryConstructionError:
            raise
        except (TypeError, ValueError) as exc:
            raise QueryConstructionError(
                f"failed to encode request for {endpoint!r}", details={"error": str(exc)}
            ) from exc
        path = endpoint.strip("/")
        return f"{self._base_url}/{path}?{query}" if query else f"{self._base_url}/{path}"

    async def call(
        self,
        endpoint: str,
        request: EncodableRequest,
        response_model: type[ResponseT],
    ) -> ResponseT:
        """Dispatch one request and decode the response.

        Args:
            endpoint: Endpoint path segment, e.g. ``"quote"``.
            request: Request value to encode into the query string.
            response_model: Model the successful body is decoded into.

        Returns:
            The decoded response.

        Raises:
            QueryConstructionError: The request could not be encoded.
            TransportError: The HTTP round-trip failed.
            DataError: Non-2xx status or an error envelope.
            ResponseParsingError: Malformed JSON or unexpected shape.
        """
        with observe_upstream_request(endpoint=endpoint) as obs:
            url = self.build_url(endpoint, request)
            logger.debug(
                "twelve_data.dispatch",
                extra={"extra": {"endpoint": endpoint, "url": url}},
            )

            response = await self._transport.get(url, self._api_key)
            obs.record_status(response.status_code)

            if not _is_success(response.status_code):
                logger.warning(
                    "twelve_data.http_status",
                    extra={"extra": {"endpoint": endpoint, "status_code": response.status_code}},
                )
                raise DataError(
                    f"status {response.status_code}", status_code=response.status_code
                )

            try:
                payload: Any = json.loads(response.body)
            except json.JSONDecodeError as exc:
                raise ResponseParsingError(
                    "response body is not valid JSON",
                    details={"endpoint": endpoint, "error": str(exc)},
                ) from exc

            try:
                _check_envelope(payload)
            except DataError as exc:
                logger.warning(
                    "twelve_data.error_envelope",
                    extra={"extra": {"endpoint": endpoint, "reason": exc.reason}},
                )
                raise

            try:
                return response_model.model_validate(payload)
            except ValidationError as exc:
                decode_errors = _collect_decode_errors(exc)
                raise ResponseParsingError(
                    f"response does not match {response_model.__name__}",
                    details={"endpoint": endpoint, "errors": _describe_errors(exc)},
                    decode_errors=decode_errors,
                ) from exc


__all__ = ["TwelveDataClient"]
