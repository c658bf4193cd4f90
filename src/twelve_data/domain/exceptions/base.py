# Copyright (c) Twelve Data Client.
# SPDX-License-Identifier: MIT
"""
Base Client Exceptions.

Summary:
    Canonical base class for every error raised by the client so callers can
    catch one type and still branch on a stable ``code``.

Layer:
    domain/exceptions
"""
from __future__ import annotations

from typing import Any


class TwelveDataError(Exception):
    """Base class for all client exceptions."""

    code: str = "TWELVE_DATA_ERROR"

    def __init__(self, message: str = "", *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details: dict[str, Any] = details or {}
