# src/twelve_data/domain/enums.py
# Copyright (c) Twelve Data Client.
# SPDX-License-Identifier: MIT
"""Twelve Data enumerations.

Purpose:
    Closed value sets shared by requests and responses. Member values are the
    literal wire strings accepted and returned by the API.

Layer:
    domain
"""

from __future__ import annotations

from enum import Enum


class Interval(str, Enum):
    """Bar interval between two consecutive data points."""

    MINUTE = "1min"
    FIVE_MINUTES = "5min"
    FIFTEEN_MINUTES = "15min"
    THIRTY_MINUTES = "30min"
    FORTY_FIVE_MINUTES = "45min"
    HOUR = "1h"
    TWO_HOURS = "2h"
    FOUR_HOURS = "4h"
    DAY = "1day"
    WEEK = "1week"
    MONTH = "1month"

    def __str__(self) -> str:
        return self.value


class Order(str, Enum):
    """Sort order of returned rows."""

    ASC = "asc"
    DESC = "desc"


class InstrumentType(str, Enum):
    """Instrument type filter (wire key ``type``)."""

    STOCK = "Stock"
    INDEX = "Index"
    ETF = "ETF"
    REIT = "REIT"


class OutputFormat(str, Enum):
    """Response body format (wire key ``format``)."""

    JSON = "JSON"
    CSV = "CSV"


__all__ = ["InstrumentType", "Interval", "Order", "OutputFormat"]
