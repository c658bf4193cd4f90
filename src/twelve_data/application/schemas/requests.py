# src/twelve_data/application/schemas/requests.py
# Copyright (c) Twelve Data Client.
# SPDX-License-Identifier: MIT
"""Request values for Twelve Data endpoints.

Synopsis:
    One immutable value per endpoint. Required fields are fixed at
    construction, optional fields default to ``None`` and can be filled in on
    a copy with :meth:`with_options`. :meth:`encode` renders the query string:
    fields are visited in declared order, absent fields are omitted entirely,
    and :class:`CommonQueryParameters` is flattened to the same level as the
    owning request's own fields.

Layer:
    application/schemas
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any, Protocol, Self

import httpx

from twelve_data.domain.codecs import encode_bool, encode_datetime
from twelve_data.domain.enums import InstrumentType, Interval, Order, OutputFormat
from twelve_data.domain.exceptions import QueryConstructionError

QueryItem = tuple[str, Any]

_MAX_OUTPUT_SIZE = 5000
_MAX_DECIMAL_PLACES = 11


class EncodableRequest(Protocol):
    """Anything the dispatcher can turn into a query string."""

    def encode(self) -> str:
        """Return the URL-encoded query string (without leading ``?``)."""
        ...


def _wire_value(name: str, value: Any) -> str:
    """Render one field value in its wire representation.

    Raises:
        QueryConstructionError: For unsupported types or non-UTF-8 text.
    """
    if isinstance(value, Enum):
        text = str(value.value)
    elif isinstance(value, bool):
        text = encode_bool(value)
    elif isinstance(value, datetime):
        text = encode_datetime(value)
    elif isinstance(value, int):
        text = str(value)
    elif isinstance(value, str):
        text = value
    else:
        raise QueryConstructionError(
            f"unsupported value for query parameter {name!r}",
            details={"parameter": name, "type": type(value).__name__},
        )
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise QueryConstructionError(
            f"query parameter {name!r} is not valid UTF-8",
            details={"parameter": name, "error": str(exc)},
        ) from exc
    return text


def encode_query(items: Iterable[QueryItem]) -> str:
    """URL-encode ``(wire_name, value)`` pairs, skipping ``None`` values.

    Args:
        items: Pairs in the order they should appear on the wire.

    Returns:
        ``name=value`` pairs joined by ``&``.

    Raises:
        QueryConstructionError: If any present value cannot be serialized.
    """
    pairs = [(name, _wire_value(name, value)) for name, value in items if value is not None]
    try:
        return str(httpx.QueryParams(pairs))
    except (TypeError, ValueError) as exc:
        raise QueryConstructionError(
            "failed to encode query string", details={"error": str(exc)}
        ) from exc


def _check_symbol(symbol: str) -> None:
    if not isinstance(symbol, str) or not symbol.strip():
        raise ValueError("symbol must be a non-empty string")


def _check_output_size(output_size: int | None) -> None:
    if output_size is not None and not 1 <= output_size <= _MAX_OUTPUT_SIZE:
        raise ValueError(f"output_size must be within 1..{_MAX_OUTPUT_SIZE}")


@dataclass(frozen=True, slots=True)
class CommonQueryParameters:
    """Optional filters and formatting shared by several endpoints.

    Attributes:
        exchange: Exchange name, e.g. ``"NASDAQ"``.
        mic_code: Market identifier code, e.g. ``"XNGS"``.
        country: Country name or alpha code.
        instrument_type: Instrument type filter (wire ``type``).
        format: Output format (wire ``format``).
        delimiter: CSV delimiter.
        decimal_places: Number of decimals in numeric values (wire ``dp``).
        timezone: Output timezone, e.g. ``"UTC"`` or ``"Exchange"``.
    """

    exchange: str | None = None
    mic_code: str | None = None
    country: str | None = None
    instrument_type: InstrumentType | None = None
    format: OutputFormat | None = None
    delimiter: str | None = None
    decimal_places: int | None = None
    timezone: str | None = None

    def __post_init__(self) -> None:
        if self.decimal_places is not None and not (
            0 <= self.decimal_places <= _MAX_DECIMAL_PLACES
        ):
            raise ValueError(f"decimal_places must be within 0..{_MAX_DECIMAL_PLACES}")

    def query_items(self) -> Iterator[QueryItem]:
        """Yield ``(wire_name, value)`` pairs in declared order."""
        yield "exchange", self.exchange
        yield "mic_code", self.mic_code
        yield "country", self.country
        yield "type", self.instrument_type
        yield "format", self.format
        yield "delimiter", self.delimiter
        yield "dp", self.decimal_places
        yield "timezone", self.timezone

    def encode(self) -> str:
        """Render only the common parameters as a query string."""
        return encode_query(self.query_items())


class _RequestMixin(ABC):
    """Shared ``encode``/``with_options`` behavior for request dataclasses."""

    __slots__ = ()

    @abstractmethod
    def query_items(self) -> Iterator[QueryItem]:
        """Yield ``(wire_name, value)`` pairs in wire order."""

    def encode(self) -> str:
        """Render the request as a URL-encoded query string.

        Raises:
            QueryConstructionError: If a present field cannot be serialized.
        """
        return encode_query(self.query_items())

    def with_options(self, **changes: Any) -> Self:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)  # type: ignore[type-var]


@dataclass(frozen=True, slots=True)
class TimeSeriesRequest(_RequestMixin):
    """Parameters for ``GET /time_series``.

    Attributes:
        symbol: Instrument symbol, e.g. ``"AAPL"`` or ``"EUR/USD"``.
        interval: Bar interval.
        output_size: Number of data points (wire ``outputsize``).
        order: Row order.
        start_date: Inclusive start of the window.
        end_date: Inclusive end of the window.
        previous_close: Include the previous close in each row.
        common: Shared filters, flattened into the query.
    """

    symbol: str
    interval: Interval
    output_size: int | None = None
    order: Order | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    previous_close: bool | None = None
    common: CommonQueryParameters = field(default_factory=CommonQueryParameters)

    def __post_init__(self) -> None:
        _check_symbol(self.symbol)
        _check_output_size(self.output_size)

    def query_items(self) -> Iterator[QueryItem]:
        yield "symbol", self.symbol
        yield "interval", self.interval
        yield "outputsize", self.output_size
        yield "order", self.order
        yield "start_date", self.start_date
        yield "end_date", self.end_date
        yield "previous_close", self.previous_close
        yield from self.common.query_items()


@dataclass(frozen=True, slots=True)
class QuoteRequest(_RequestMixin):
    """Parameters for ``GET /quote``.

    Attributes:
        symbol: Instrument symbol.
        interval: Interval the quote is aggregated over.
        volume_time_period: Number of periods for the average volume.
        end_of_day: Return the last closed day's data (wire ``eod``).
        rolling_period: Hours for the rolling change.
        common: Shared filters, flattened into the query.
    """

    symbol: str
    interval: Interval
    volume_time_period: int | None = None
    end_of_day: bool | None = None
    rolling_period: int | None = None
    common: CommonQueryParameters = field(default_factory=CommonQueryParameters)

    def __post_init__(self) -> None:
        _check_symbol(self.symbol)
        if self.volume_time_period is not None and self.volume_time_period < 1:
            raise ValueError("volume_time_period must be >= 1")
        if self.rolling_period is not None and self.rolling_period < 1:
            raise ValueError("rolling_period must be >= 1")

    def query_items(self) -> Iterator[QueryItem]:
        yield "symbol", self.symbol
        yield "interval", self.interval
        yield "volume_time_period", self.volume_time_period
        yield "eod", self.end_of_day
        yield "rolling_period", self.rolling_period
        yield from self.common.query_items()


@dataclass(frozen=True, slots=True)
class PriceRequest(_RequestMixin):
    """Parameters for ``GET /price`` (latest price only)."""

    symbol: str
    output_size: int | None = None
    order: Order | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    previous_close: bool | None = None
    common: CommonQueryParameters = field(default_factory=CommonQueryParameters)

    def __post_init__(self) -> None:
        _check_symbol(self.symbol)
        _check_output_size(self.output_size)

    def query_items(self) -> Iterator[QueryItem]:
        yield "symbol", self.symbol
        yield "outputsize", self.output_size
        yield "order", self.order
        yield "start_date", self.start_date
        yield "end_date", self.end_date
        yield "previous_close", self.previous_close
        yield from self.common.query_items()


@dataclass(frozen=True, slots=True)
class LogoRequest(_RequestMixin):
    """Parameters for ``GET /logo``."""

    symbol: str
    exchange: str | None = None
    mic_code: str | None = None
    country: str | None = None

    def __post_init__(self) -> None:
        _check_symbol(self.symbol)

    def query_items(self) -> Iterator[QueryItem]:
        yield "symbol", self.symbol
        yield "exchange", self.exchange
        yield "mic_code", self.mic_code
        yield "country", self.country


__all__ = [
    "CommonQueryParameters",
    "EncodableRequest",
    "LogoRequest",
    "PriceRequest",
    "QuoteRequest",
    "TimeSeriesRequest",
    "encode_query",
]
