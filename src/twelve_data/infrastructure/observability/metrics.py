# src/twelve_data/infrastructure/observability/metrics.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Twelve Data call metrics (Prometheus).

Exports
-------
Collectors (names are part of the public contract and must remain stable):

* ``twelve_data_request_latency_seconds`` (Histogram; ``endpoint``, ``outcome``)
* ``twelve_data_errors_total`` (Counter; ``endpoint``, ``reason``)
* ``twelve_data_http_status_total`` (Counter; ``endpoint``, ``status_code``)

Helper:

* :func:`observe_upstream_request` - context manager around one API call.

Design
------
Collectors are created against the *current* default registry
(:data:`prometheus_client.REGISTRY`). If a collector with the same name already
exists there, it is reused instead of registering a duplicate, which keeps
module re-imports and registry swaps in tests safe.
"""

from __future__ import annotations

from collections.abc import Generator, Sequence
from contextlib import contextmanager, suppress
from dataclasses import dataclass, field
from time import perf_counter
from typing import Final

import prometheus_client as prom
from prometheus_client import Counter, Histogram
from prometheus_client.registry import CollectorRegistry

_BUCKETS: Final[tuple[float, ...]] = (
    0.025,
    0.050,
    0.100,
    0.250,
    0.500,
    1.000,
    2.500,
    5.000,
    10.000,
)


def _lookup(registry: CollectorRegistry, name: str) -> object | None:
    # internal but stable in prometheus_client
    mapping = getattr(registry, "_names_to_collectors", {})
    return mapping.get(name)


def _get_or_create_histogram(name: str, doc: str, labelnames: Sequence[str]) -> Histogram:
    """Return a histogram bound to the current default registry (idempotent)."""
    registry: CollectorRegistry = prom.REGISTRY
    existing = _lookup(registry, name)
    if isinstance(existing, Histogram):
        return existing
    try:
        return Histogram(name, doc, tuple(labelnames), registry=registry, buckets=_BUCKETS)
    except ValueError as exc:
        if "Duplicated timeseries" in str(exc):
            again = _lookup(registry, name)
            if isinstance(again, Histogram):
                return again
        raise


def _get_or_create_counter(name: str, doc: str, labelnames: Sequence[str]) -> Counter:
    """Return a counter bound to the current default registry (idempotent).

    Counters register ``<name>`` without the ``_total`` suffix, so the lookup
    covers both spellings.
    """
    registry: CollectorRegistry = prom.REGISTRY
    base = name.removesuffix("_total")
    existing = _lookup(registry, name) or _lookup(registry, base)
    if isinstance(existing, Counter):
        return existing
    try:
        return Counter(name, doc, tuple(labelnames), registry=registry)
    except ValueError as exc:
        if "Duplicated timeseries" in str(exc):
            again = _lookup(registry, name) or _lookup(registry, base)
            if isinstance(again, Counter):
                return again
        raise


request_latency_seconds: Histogram = _get_or_create_histogram(
    "twelve_data_request_latency_seconds",
    "Latency of Twelve Data API calls (seconds).",
    labelnames=("endpoint", "outcome"),
)

errors_total: Counter = _get_or_create_counter(
    "twelve_data_errors_total",
    "Failed Twelve Data API calls by error class.",
    labelnames=("endpoint", "reason"),
)

http_status_total: Counter = _get_or_create_counter(
    "twelve_data_http_status_total",
    "HTTP status codes returned by the Twelve Data API.",
    labelnames=("endpoint", "status_code"),
)


@dataclass
class UpstreamObservation:
    """State captured while observing one API call.

    Attributes:
        endpoint: Endpoint path segment (for labelling).
        start: Monotonic start time in seconds.
        outcome: ``"success"`` or ``"error"``.
        error_reason: Short, machine-readable error reason if any.
    """

    endpoint: str
    start: float = field(default_factory=perf_counter)
    outcome: str = "success"
    error_reason: str | None = None

    def mark_error(self, reason: str) -> None:
        """Mark the call as failed with a given reason (e.g. ``"DATA_ERROR"``)."""
        self.outcome = "error"
        self.error_reason = reason

    def record_status(self, status_code: int) -> None:
        """Count the HTTP status returned for this call."""
        with suppress(Exception):
            http_status_total.labels(endpoint=self.endpoint, status_code=str(status_code)).inc()


@contextmanager
def observe_upstream_request(*, endpoint: str) -> Generator[UpstreamObservation, None, None]:
    """Observe one Twelve Data API call.

    Records a latency sample in ``twelve_data_request_latency_seconds`` and,
    when the call fails, an increment of ``twelve_data_errors_total``.
    An exception escaping the block marks the call as failed with the
    exception's ``code`` attribute (or ``"exception"``) unless a reason was
    already set.

    Args:
        endpoint: Endpoint path segment (e.g. ``"quote"``).

    Yields:
        A mutable :class:`UpstreamObservation`.
    """
    obs = UpstreamObservation(endpoint=endpoint)
    try:
        yield obs
    except Exception as exc:
        if obs.error_reason is None:
            obs.mark_error(str(getattr(exc, "code", "exception")))
        raise
    finally:
        elapsed = perf_counter() - obs.start
        with suppress(Exception):
            request_latency_seconds.labels(endpoint=obs.endpoint, outcome=obs.outcome).observe(
                elapsed
            )
            if obs.error_reason is not None:
                errors_total.labels(endpoint=obs.endpoint, reason=obs.error_reason).inc()


__all__ = [
    "UpstreamObservation",
    "errors_total",
    "http_status_total",
    "observe_upstream_request",
    "request_latency_seconds",
]
