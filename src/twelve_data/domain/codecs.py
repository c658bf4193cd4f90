# src/twelve_data/domain/codecs.py
# Copyright (c) Twelve Data Client.
# SPDX-License-Identifier: MIT
"""Field codecs for irregular Twelve Data wire formats.

Synopsis:
    The API encodes every numeric quantity as a JSON string (to keep trailing
    zeros), the 52-week range as one human-readable string, and datetimes in
    one of two textual formats. These stateless functions convert such wire
    values to native Python values and back, so response shapes elsewhere read
    like plain JSON schemas.

    Decoders:
        * :func:`decode_datetime` - ``YYYY-MM-DD HH:MM:SS`` or ``YYYY-MM-DD``.
        * :func:`decode_range` - ``"<low> - <high>"``.
        * :func:`decode_numeric_string` - ``"153.39999"``.

    Encoders (query-string side):
        * :func:`encode_datetime`
        * :func:`encode_bool`

Layer:
    domain
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Final, NamedTuple

from twelve_data.domain.exceptions.decoding import (
    DatetimeDecodeError,
    NumericStringDecodeError,
    RangeDecodeError,
)

DATETIME_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT: Final[str] = "%Y-%m-%d"
RANGE_SEPARATOR: Final[str] = " - "

# Plain decimal/scientific notation plus inf/nan; no whitespace, no underscores.
_FLOAT_RE: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


class PriceRange(NamedTuple):
    """Closed ``(low, high)`` price range, e.g. a 52-week range."""

    low: float
    high: float


def _parse_float(text: str) -> float:
    """Parse ``text`` as a float using the API's strict decimal grammar.

    Raises:
        ValueError: If ``text`` is not a bare decimal literal.
    """
    if not _FLOAT_RE.fullmatch(text):
        raise ValueError(f"invalid float literal: {text!r}")
    return float(text)


def decode_datetime(text: object) -> datetime:
    """Decode a Twelve Data datetime string.

    The full timestamp format is tried first; a bare date decodes to midnight
    of that day.

    Args:
        text: Wire value, e.g. ``"2022-09-20 15:30:00"`` or ``"2022-09-20"``.

    Returns:
        A naive (exchange-local) datetime.

    Raises:
        DatetimeDecodeError: If neither format matches.
    """
    if not isinstance(text, str):
        raise DatetimeDecodeError(
            f"expected a datetime string, got {type(text).__name__}", text=text
        )
    try:
        return datetime.strptime(text, DATETIME_FORMAT)
    except ValueError as full_exc:
        try:
            return datetime.strptime(text, DATE_FORMAT)
        except ValueError as date_exc:
            raise DatetimeDecodeError(
                f"unexpected date time format of {text!r}: "
                f"not {DATETIME_FORMAT} ({full_exc}); not {DATE_FORMAT} ({date_exc})",
                text=text,
            ) from date_exc


def decode_range(text: object) -> PriceRange:
    """Decode a ``"<low> - <high>"`` range string.

    The first occurrence of ``" - "`` splits the operands, so a negative high
    bound (``"-5 - -1"``) still decodes.

    Raises:
        RangeDecodeError: If the separator is missing or an operand is not a
            number; ``side`` names the failing operand.
    """
    if not isinstance(text, str):
        raise RangeDecodeError(f"expected a range string, got {type(text).__name__}", text=text)
    idx = text.find(RANGE_SEPARATOR)
    if idx < 0:
        raise RangeDecodeError("separator not found", text=text)

    first, second = text[:idx], text[idx + len(RANGE_SEPARATOR) :]
    try:
        low = _parse_float(first)
    except ValueError as exc:
        raise RangeDecodeError(
            f"failed to parse the first range value: {exc}", text=text, side="first"
        ) from exc
    try:
        high = _parse_float(second)
    except ValueError as exc:
        raise RangeDecodeError(
            f"failed to parse the second range value: {exc}", text=text, side="second"
        ) from exc
    return PriceRange(low=low, high=high)


def decode_numeric_string(text: object) -> float:
    """Decode a number transported as a JSON string (e.g. ``"153.39999"``).

    Raises:
        NumericStringDecodeError: If ``text`` is not a string or not a number.
    """
    if not isinstance(text, str):
        raise NumericStringDecodeError(
            f"expected a numeric string, got {type(text).__name__}", text=text
        )
    try:
        return _parse_float(text)
    except ValueError as exc:
        raise NumericStringDecodeError(str(exc), text=text) from exc


def encode_datetime(value: datetime) -> str:
    """Render a datetime in the format the API accepts for date filters."""
    return value.strftime(DATETIME_FORMAT)


def encode_bool(value: bool) -> str:
    """Render a boolean as ``"true"``/``"false"``."""
    return "true" if value else "false"


__all__ = [
    "DATETIME_FORMAT",
    "DATE_FORMAT",
    "RANGE_SEPARATOR",
    "PriceRange",
    "decode_datetime",
    "decode_numeric_string",
    "decode_range",
    "encode_bool",
    "encode_datetime",
]
