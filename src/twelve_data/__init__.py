# Copyright (c) Twelve Data Client.
# SPDX-License-Identifier: MIT
"""Typed async client for the Twelve Data market-data REST API.

Typical usage:
    async with TwelveDataClient(api_key="...") as td:
        series = await td.time_series(
            TimeSeriesRequest(symbol="AAPL", interval=Interval.DAY, output_size=10)
        )
"""

from __future__ import annotations

from twelve_data.application.interfaces.http_transport import HttpTransport, TransportResponse
from twelve_data.application.schemas.requests import (
    CommonQueryParameters,
    LogoRequest,
    PriceRequest,
    QuoteRequest,
    TimeSeriesRequest,
)
from twelve_data.application.schemas.responses import (
    FiftyTwoWeekStats,
    LogoResponse,
    PriceResponse,
    QuoteResponse,
    TimeSeriesMeta,
    TimeSeriesResponse,
    TimeSeriesValue,
)
from twelve_data.domain.codecs import (
    PriceRange,
    decode_datetime,
    decode_numeric_string,
    decode_range,
)
from twelve_data.domain.enums import InstrumentType, Interval, Order, OutputFormat
from twelve_data.domain.exceptions import (
    DataError,
    DatetimeDecodeError,
    FieldDecodeError,
    NumericStringDecodeError,
    QueryConstructionError,
    RangeDecodeError,
    ResponseParsingError,
    TransportError,
    TwelveDataError,
)
from twelve_data.infrastructure.external_apis.twelve_data.client import TwelveDataClient
from twelve_data.infrastructure.external_apis.twelve_data.settings import TwelveDataSettings
from twelve_data.infrastructure.http.httpx_transport import HttpxTransport

__all__ = [
    "CommonQueryParameters",
    "DataError",
    "DatetimeDecodeError",
    "FieldDecodeError",
    "FiftyTwoWeekStats",
    "HttpTransport",
    "HttpxTransport",
    "InstrumentType",
    "Interval",
    "LogoRequest",
    "LogoResponse",
    "NumericStringDecodeError",
    "Order",
    "OutputFormat",
    "PriceRange",
    "PriceRequest",
    "PriceResponse",
    "QueryConstructionError",
    "QuoteRequest",
    "QuoteResponse",
    "RangeDecodeError",
    "ResponseParsingError",
    "TimeSeriesMeta",
    "TimeSeriesRequest",
    "TimeSeriesResponse",
    "TimeSeriesValue",
    "TransportError",
    "TransportResponse",
    "TwelveDataClient",
    "TwelveDataError",
    "TwelveDataSettings",
    "decode_datetime",
    "decode_numeric_string",
    "decode_range",
]
