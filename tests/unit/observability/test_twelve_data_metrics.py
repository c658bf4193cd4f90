from __future__ import annotations

from typing import Any

import pytest

from twelve_data.application.schemas.requests import PriceRequest
from twelve_data.application.schemas.responses import PriceResponse
from twelve_data.domain.exceptions import DataError
from twelve_data.infrastructure.external_apis.twelve_data.client import TwelveDataClient
from twelve_data.infrastructure.observability.metrics import (
    errors_total,
    http_status_total,
    observe_upstream_request,
    request_latency_seconds,
)


def _has_sample(collector: Any, **labels: str) -> bool:
    for metric in collector.collect():
        for sample in metric.samples:
            if all(sample.labels.get(k) == v for k, v in labels.items()):
                return True
    return False


def test_success_records_latency() -> None:
    with observe_upstream_request(endpoint="unit_success"):
        pass
    assert _has_sample(request_latency_seconds, endpoint="unit_success", outcome="success")
    assert not _has_sample(errors_total, endpoint="unit_success")


def test_exception_records_error_with_code() -> None:
    with pytest.raises(DataError), observe_upstream_request(endpoint="unit_error"):
        raise DataError("nope")
    assert _has_sample(request_latency_seconds, endpoint="unit_error", outcome="error")
    assert _has_sample(errors_total, endpoint="unit_error", reason="DATA_ERROR")


def test_plain_exception_reason() -> None:
    with pytest.raises(RuntimeError), observe_upstream_request(endpoint="unit_plain"):
        raise RuntimeError("x")
    assert _has_sample(errors_total, endpoint="unit_plain", reason="exception")


@pytest.mark.asyncio
async def test_client_call_records_http_status(make_transport: Any) -> None:
    client = TwelveDataClient(api_key="k", transport=make_transport(status_code=429, body=""))
    with pytest.raises(DataError):
        await client.call("metrics_probe", PriceRequest(symbol="AAPL"), PriceResponse)

    assert _has_sample(http_status_total, endpoint="metrics_probe", status_code="429")
    assert _has_sample(errors_total, endpoint="metrics_probe", reason="DATA_ERROR")
