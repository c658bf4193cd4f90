# tests/conftest.py
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

import pytest

from twelve_data.application.interfaces.http_transport import TransportResponse

TIME_SERIES_BODY = (
    '{"meta":{"currency":"USD","exchange":"NASDAQ","exchange_timezone":"America/New_York",'
    '"interval":"1day","mic_code":"XNGS","symbol":"TSLA","type":"Common Stock"},"status":"ok",'
    '"values":['
    '{"close":"308.73001","datetime":"2022-09-20","high":"313.32999","low":"305.57999","open":"306.91501","volume":"231261"},'
    '{"close":"309.07001","datetime":"2022-09-19","high":"309.84000","low":"297.79999","open":"300.09000","volume":"60060200"},'
    '{"close":"303.35001","datetime":"2022-09-16","high":"303.70999","low":"295.60001","open":"299.60999","volume":"86949500"},'
    '{"close":"303.75000","datetime":"2022-09-15","high":"309.12000","low":"300.72000","open":"301.82999","volume":"64795500"},'
    '{"close":"302.60999","datetime":"2022-09-14","high":"306.00000","low":"291.64001","open":"292.23999","volume":"72628700"},'
    '{"close":"292.13000","datetime":"2022-09-13","high":"297.39999","low":"290.39999","open":"292.89999","volume":"68229600"},'
    '{"close":"304.42001","datetime":"2022-09-12","high":"305.48999","low":"300.39999","open":"300.72000","volume":"48674600"},'
    '{"close":"299.67999","datetime":"2022-09-09","high":"299.85001","low":"291.25000","open":"291.67001","volume":"54338100"},'
    '{"close":"289.26001","datetime":"2022-09-08","high":"289.50000","low":"279.76001","open":"281.29999","volume":"53713100"},'
    '{"close":"283.70001","datetime":"2022-09-07","high":"283.84000","low":"272.26999","open":"273.10001","volume":"50028900"}'
    "]}"
)

QUOTE_BODY = (
    '{"symbol":"AAPL","name":"Apple Inc","exchange":"NASDAQ","mic_code":"XNGS","currency":"USD",'
    '"datetime":"2022-09-20","timestamp":1663703999,"open":"153.39999","high":"158.08000",'
    '"low":"153.08000","close":"156.89999","volume":"107547900","previous_close":"154.48000",'
    '"change":"2.42000","percent_change":"1.56654","average_volume":"99764040",'
    '"is_market_open":false,"fifty_two_week":{"low":"129.03999","high":"182.94000",'
    '"low_change":"27.86000","high_change":"-26.04001","low_change_percent":"21.59021",'
    '"high_change_percent":"-14.23418","range":"129.039993 - 182.940002"}}'
)


@dataclass
class FakeTransport:
    """In-memory transport returning a canned response and recording calls."""

    status_code: int = 200
    body: str = "{}"
    error: Exception | None = None
    calls: list[tuple[str, str]] = field(default_factory=list)
    closed: bool = False

    async def get(self, url: str, api_key: str) -> TransportResponse:
        self.calls.append((url, api_key))
        if self.error is not None:
            raise self.error
        return TransportResponse(status_code=self.status_code, body=self.body)

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def time_series_body() -> str:
    return TIME_SERIES_BODY


@pytest.fixture
def quote_body() -> str:
    return QUOTE_BODY


@pytest.fixture
def make_transport() -> Callable[..., FakeTransport]:
    """Factory for :class:`FakeTransport` instances."""

    def _make(**kwargs: object) -> FakeTransport:
        return FakeTransport(**kwargs)  # type: ignore[arg-type]

    return _make
