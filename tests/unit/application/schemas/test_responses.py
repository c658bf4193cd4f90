from __future__ import annotations

import json
from datetime import datetime

import pytest
from pydantic import ValidationError

from twelve_data.application.schemas.responses import (
    LogoResponse,
    PriceResponse,
    QuoteResponse,
    TimeSeriesResponse,
)
from twelve_data.domain.enums import Interval
from twelve_data.domain.exceptions import RangeDecodeError


def test_time_series_decodes_ten_rows_in_order(time_series_body: str) -> None:
    raw = json.loads(time_series_body)
    res = TimeSeriesResponse.model_validate(raw)

    assert len(res.values) == 10
    assert [v.datetime for v in res.values] == [
        datetime.strptime(row["datetime"], "%Y-%m-%d") for row in raw["values"]
    ]
    first = res.values[0]
    assert first.datetime == datetime(2022, 9, 20)
    assert first.open == 306.91501
    assert first.close == 308.73001
    assert first.volume == 231261.0
    assert first.previous_close is None


def test_time_series_meta(time_series_body: str) -> None:
    meta = TimeSeriesResponse.model_validate_json(time_series_body).meta
    assert meta.symbol == "TSLA"
    assert meta.interval is Interval.DAY
    assert meta.instrument_type == "Common Stock"
    assert meta.mic_code == "XNGS"
    assert meta.currency_base is None


def test_time_series_forex_row_without_volume() -> None:
    res = TimeSeriesResponse.model_validate(
        {
            "meta": {
                "symbol": "EUR/USD",
                "interval": "1h",
                "currency_base": "Euro",
                "currency_quote": "US Dollar",
                "type": "Physical Currency",
            },
            "status": "ok",
            "values": [
                {
                    "datetime": "2022-09-20 10:00:00",
                    "open": "1.00",
                    "high": "1.01",
                    "low": "0.99",
                    "close": "1.00",
                }
            ],
        }
    )
    assert res.values[0].volume is None
    assert res.values[0].datetime == datetime(2022, 9, 20, 10)
    assert res.meta.currency_quote == "US Dollar"


def test_quote_decodes_range_and_optional_fields(quote_body: str) -> None:
    res = QuoteResponse.model_validate_json(quote_body)
    assert res.datetime == datetime(2022, 9, 20)
    assert res.previous_close == 154.48
    assert res.change == 2.42
    assert res.is_market_open is False
    assert res.rolling_1d_change is None
    assert res.rolling_7d_change is None
    assert res.rolling_period_change is None

    stats = res.fifty_two_week
    assert stats is not None
    assert stats.range == (129.039993, 182.940002)
    assert stats.range.low == 129.039993
    assert stats.high_change == -26.04001


def test_quote_without_fifty_two_week_block(quote_body: str) -> None:
    raw = json.loads(quote_body)
    del raw["fifty_two_week"]
    raw["rolling_1d_change"] = "0.5"
    res = QuoteResponse.model_validate(raw)
    assert res.fifty_two_week is None
    assert res.rolling_1d_change == 0.5


def test_quote_bad_range_surfaces_range_decode_error(quote_body: str) -> None:
    raw = json.loads(quote_body)
    raw["fifty_two_week"]["range"] = "129.0 - n/a"
    with pytest.raises(ValidationError) as excinfo:
        QuoteResponse.model_validate(raw)
    (err,) = excinfo.value.errors()
    assert err["loc"] == ("fifty_two_week", "range")
    inner = err["ctx"]["error"]
    assert isinstance(inner, RangeDecodeError)
    assert inner.side == "second"


def test_numeric_fields_must_be_strings(quote_body: str) -> None:
    raw = json.loads(quote_body)
    raw["open"] = 153.4
    with pytest.raises(ValidationError):
        QuoteResponse.model_validate(raw)


def test_price_and_logo() -> None:
    assert PriceResponse.model_validate({"price": "153.40000"}).price == 153.4
    logo = LogoResponse.model_validate(
        {"meta": {"symbol": "AAPL"}, "url": "https://logo.example/apple.png"}
    )
    assert logo.url == "https://logo.example/apple.png"


def test_responses_are_frozen() -> None:
    price = PriceResponse.model_validate({"price": "1"})
    with pytest.raises(ValidationError):
        price.price = 2.0  # type: ignore[misc]
