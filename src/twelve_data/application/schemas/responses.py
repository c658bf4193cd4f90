# src/twelve_data/application/schemas/responses.py
# Copyright (c) Twelve Data Client.
# SPDX-License-Identifier: MIT
"""Response models for Twelve Data endpoints.

Synopsis:
    Immutable (Pydantic v2) models decoded from the JSON body of a successful
    call. Irregular wire fields go through the codec-bound types from
    :mod:`twelve_data.application.schemas.wire_types`; everything else is a
    literal JSON type. Optional numeric fields that the API omits decode to
    ``None``, never to zero. Unknown keys are ignored so additive API changes
    do not break decoding.

Layer:
    application/schemas
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from twelve_data.application.schemas.wire_types import (
    NumericString,
    PriceRangeField,
    TwelveDataDatetime,
)
from twelve_data.domain.enums import Interval


class WireModel(BaseModel):
    """Base class for decoded API payloads.

    Notes:
        - Frozen: decoded values are never mutated.
        - ``extra='ignore'``: the API adds fields over time.
    """

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )


class TimeSeriesMeta(WireModel):
    """Metadata block of a time series.

    Equities carry ``currency``/``exchange``/``mic_code``; currency pairs carry
    ``currency_base``/``currency_quote`` instead.
    """

    symbol: str
    interval: Interval
    currency: str | None = None
    currency_base: str | None = None
    currency_quote: str | None = None
    exchange_timezone: str | None = None
    exchange: str | None = None
    mic_code: str | None = None
    instrument_type: str | None = Field(default=None, alias="type")


class TimeSeriesValue(WireModel):
    """One OHLCV row."""

    datetime: TwelveDataDatetime
    open: NumericString
    high: NumericString
    low: NumericString
    close: NumericString
    volume: NumericString | None = None
    previous_close: NumericString | None = None


class TimeSeriesResponse(WireModel):
    """Body of ``GET /time_series``; ``values`` keeps the API's row order."""

    meta: TimeSeriesMeta
    status: str
    values: list[TimeSeriesValue]


class FiftyTwoWeekStats(WireModel):
    """52-week statistics attached to a quote."""

    low: NumericString
    high: NumericString
    low_change: NumericString
    high_change: NumericString
    low_change_percent: NumericString
    high_change_percent: NumericString
    range: PriceRangeField


class QuoteResponse(WireModel):
    """Body of ``GET /quote``.

    Attributes:
        timestamp: Unix timestamp of the last bar.
        datetime: Bar datetime in exchange-local time.
        rolling_1d_change: Present only when the API computes it.
        rolling_7d_change: Present only when the API computes it.
        rolling_period_change: Present only when ``rolling_period`` was sent.
        fifty_two_week: ``None`` when the API omits the block.
    """

    symbol: str
    name: str
    exchange: str
    mic_code: str | None = None
    currency: str
    timestamp: int
    datetime: TwelveDataDatetime
    open: NumericString
    high: NumericString
    low: NumericString
    close: NumericString
    volume: NumericString | None = None
    previous_close: NumericString
    change: NumericString
    percent_change: NumericString
    average_volume: NumericString | None = None
    rolling_1d_change: NumericString | None = None
    rolling_7d_change: NumericString | None = None
    rolling_period_change: NumericString | None = None
    is_market_open: bool = False
    fifty_two_week: FiftyTwoWeekStats | None = None


class PriceResponse(WireModel):
    """Body of ``GET /price``."""

    price: NumericString


class LogoResponse(WireModel):
    """Body of ``GET /logo``."""

    url: str


__all__ = [
    "FiftyTwoWeekStats",
    "LogoResponse",
    "PriceResponse",
    "QuoteResponse",
    "TimeSeriesMeta",
    "TimeSeriesResponse",
    "TimeSeriesValue",
    "WireModel",
]
