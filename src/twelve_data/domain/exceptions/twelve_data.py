# Copyright (c) Twelve Data Client.
# SPDX-License-Identifier: MIT
"""Twelve Data Call Exceptions.

Synopsis:
    The four mutually exclusive failure classes of a single API call. Every
    failure path of the dispatcher ends in exactly one of these.

    * :class:`TransportError` - network/TLS/I/O failure below the application.
    * :class:`QueryConstructionError` - the request could not be serialized.
    * :class:`ResponseParsingError` - the body is not JSON or not the
      expected shape (field codec failures are nested here).
    * :class:`DataError` - a well-formed response that signals failure
      (non-2xx status or an ``status: "error"`` envelope).

Layer:
    domain/exceptions
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from twelve_data.domain.exceptions.base import TwelveDataError
from twelve_data.domain.exceptions.decoding import FieldDecodeError

UNKNOWN_REASON = "<unknown reason>"


class TransportError(TwelveDataError):
    """The HTTP round-trip itself failed (connection, TLS, timeout, I/O).

    The backend-specific failure is carried as an opaque ``detail`` string so
    the dispatcher never depends on a particular HTTP library.

    Attributes:
        backend: Name of the transport implementation (e.g. ``"httpx"``).
        detail: Backend-specific description of the failure.
    """

    code = "TRANSPORT_ERROR"

    def __init__(self, backend: str, detail: str) -> None:
        super().__init__(
            f"HTTP transport error ({backend}): {detail}",
            details={"backend": backend, "detail": detail},
        )
        self.backend = backend
        self.detail = detail


class QueryConstructionError(TwelveDataError):
    """A request value could not be encoded into a query string."""

    code = "QUERY_CONSTRUCTION_ERROR"


class ResponseParsingError(TwelveDataError):
    """The response body is malformed or does not match the expected shape.

    Attributes:
        decode_errors: Field codec failures found while decoding, if any.
    """

    code = "RESPONSE_PARSING_ERROR"

    def __init__(
        self,
        message: str = "failed to parse the output",
        *,
        details: dict[str, Any] | None = None,
        decode_errors: Sequence[FieldDecodeError] = (),
    ) -> None:
        super().__init__(message, details=details)
        self.decode_errors: tuple[FieldDecodeError, ...] = tuple(decode_errors)


class DataError(TwelveDataError):
    """The API answered, but the answer is a failure.

    Attributes:
        reason: Human-readable reason (``UNKNOWN_REASON`` when none was given).
        status_code: HTTP status when the failure came from a non-2xx response.
    """

    code = "DATA_ERROR"

    def __init__(self, reason: str, *, status_code: int | None = None) -> None:
        details: dict[str, Any] = {"reason": reason}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(f"failed to obtain data: {reason}", details=details)
        self.reason = reason
        self.status_code = status_code


__all__ = [
    "UNKNOWN_REASON",
    "DataError",
    "QueryConstructionError",
    "ResponseParsingError",
    "TransportError",
]
