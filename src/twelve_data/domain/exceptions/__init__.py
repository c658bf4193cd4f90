# Copyright (c) Twelve Data Client.
# SPDX-License-Identifier: MIT
"""Client exception hierarchy."""

from __future__ import annotations

from .base import TwelveDataError
from .decoding import (
    DatetimeDecodeError,
    FieldDecodeError,
    NumericStringDecodeError,
    RangeDecodeError,
)
from .twelve_data import (
    UNKNOWN_REASON,
    DataError,
    QueryConstructionError,
    ResponseParsingError,
    TransportError,
)

__all__ = [
    "UNKNOWN_REASON",
    "DataError",
    "DatetimeDecodeError",
    "FieldDecodeError",
    "NumericStringDecodeError",
    "QueryConstructionError",
    "RangeDecodeError",
    "ResponseParsingError",
    "TransportError",
    "TwelveDataError",
]
