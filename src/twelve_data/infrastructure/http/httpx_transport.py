# src/twelve_data/infrastructure/http/httpx_transport.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""httpx-backed transport.

Implements :class:`~twelve_data.application.interfaces.http_transport.HttpTransport`
on top of ``httpx.AsyncClient``:

* Credential as ``apikey`` query parameter (default) or as an
  ``Authorization: apikey <key>`` header.
* Per-request timeout; a timeout surfaces as ``TransportError``.
* Owns the ``AsyncClient`` unless one is injected; only owned clients are
  closed by :meth:`HttpxTransport.aclose`.
"""

from __future__ import annotations

from typing import Final, Literal

import httpx

from twelve_data.application.interfaces.http_transport import TransportResponse
from twelve_data.domain.exceptions import TransportError
from twelve_data.infrastructure.logging.logger import get_json_logger

CredentialLocation = Literal["query", "header"]

_BACKEND: Final[str] = "httpx"
_DEFAULT_TIMEOUT: Final[float] = 10.0
_DEFAULT_HEADERS: Final[dict[str, str]] = {
    "Accept": "application/json",
    "User-Agent": "twelve-data-client/0.1",
}

logger = get_json_logger(__name__)


class HttpxTransport:
    """Single-round-trip GET transport on ``httpx.AsyncClient``."""

    def __init__(
        self,
        *,
        http: httpx.AsyncClient | None = None,
        timeout_s: float = _DEFAULT_TIMEOUT,
        credential_location: CredentialLocation = "query",
    ) -> None:
        """Initialize the transport.

        Args:
            http: Optional shared client. When omitted, a client is created
                and owned by this instance.
            timeout_s: Per-request timeout in seconds.
            credential_location: ``"query"`` sends ``apikey=<key>``;
                ``"header"`` sends ``Authorization: apikey <key>``.
        """
        if credential_location not in ("query", "header"):
            raise ValueError(f"unsupported credential location: {credential_location!r}")
        self._timeout = float(timeout_s)
        self._credential_location = credential_location
        self._owns_client = http is None
        self._client = http or httpx.AsyncClient(timeout=self._timeout)

    @property
    def credential_location(self) -> CredentialLocation:
        return self._credential_location

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance owns it."""
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()

    async def get(self, url: str, api_key: str) -> TransportResponse:
        """Perform one GET; see :class:`HttpTransport`."""
        headers = dict(_DEFAULT_HEADERS)
        if self._credential_location == "header":
            headers["Authorization"] = f"apikey {api_key}"

        try:
            target = httpx.URL(url)
            if self._credential_location == "query":
                # appended to the URL; passing params= would replace its query
                target = target.copy_add_param("apikey", api_key)
            response = await self._client.get(
                target,
                headers=headers,
                timeout=self._timeout,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning(
                "twelve_data.transport_error",
                extra={"extra": {"backend": _BACKEND, "exc_type": type(exc).__name__}},
            )
            raise TransportError(_BACKEND, f"{type(exc).__name__}: {exc}") from exc

        return TransportResponse(status_code=response.status_code, body=response.text)


__all__ = ["CredentialLocation", "HttpxTransport"]
