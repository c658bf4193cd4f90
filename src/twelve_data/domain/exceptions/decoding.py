# Copyright (c) Twelve Data Client.
# SPDX-License-Identifier: MIT
"""Field Decode Exceptions.

Purpose:
    Failures of the individual field codecs. They subclass :class:`ValueError`
    so pydantic turns them into validation errors while keeping the original
    exception reachable for the dispatcher.

Layer: domain/exceptions
"""
from __future__ import annotations

from typing import Literal


class FieldDecodeError(ValueError):
    """A wire value could not be converted to its native type.

    Attributes:
        text: The original wire value.
    """

    kind: str = "field"

    def __init__(self, message: str, *, text: object) -> None:
        super().__init__(message)
        self.text = text


class DatetimeDecodeError(FieldDecodeError):
    """Neither the timestamp nor the date-only format matched."""

    kind = "datetime"


class RangeDecodeError(FieldDecodeError):
    """A ``"<low> - <high>"`` range could not be split or parsed.

    Attributes:
        side: ``"first"`` or ``"second"`` when one operand failed to parse,
            ``None`` when the separator itself is missing.
    """

    kind = "range"

    def __init__(
        self,
        message: str,
        *,
        text: object,
        side: Literal["first", "second"] | None = None,
    ) -> None:
        super().__init__(message, text=text)
        self.side = side


class NumericStringDecodeError(FieldDecodeError):
    """A quoted decimal was not a valid number."""

    kind = "numeric_string"
