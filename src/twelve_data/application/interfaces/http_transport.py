# src/twelve_data/application/interfaces/http_transport.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""HTTP transport interface.

Synopsis:
    Capability the dispatcher needs from the network: one GET against a full
    URL with an API-key credential, returning the status code and raw body
    text. How the credential travels (query parameter or header), timeouts and
    connection handling are implementation details of the transport.

    Implementations must:
        * perform exactly one round-trip per call (no retries);
        * return non-2xx responses normally (classification is the
          dispatcher's job);
        * raise :class:`~twelve_data.domain.exceptions.TransportError` for
          connection, TLS, timeout and I/O failures.

Layer:
    application/interfaces
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class TransportResponse:
    """Raw outcome of one HTTP round-trip.

    Attributes:
        status_code: HTTP status code.
        body: Response body decoded as text.
    """

    status_code: int
    body: str


class HttpTransport(Protocol):
    """One-shot HTTP GET capability."""

    async def get(self, url: str, api_key: str) -> TransportResponse:
        """Perform a GET request.

        Args:
            url: Fully built URL including the query string.
            api_key: Credential to attach to the request.

        Returns:
            The status code and body text.

        Raises:
            TransportError: If the request could not be completed.
        """
        ...

    async def aclose(self) -> None:
        """Release resources held by the transport."""
        ...


__all__ = ["HttpTransport", "TransportResponse"]
