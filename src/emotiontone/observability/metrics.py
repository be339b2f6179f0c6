"""
Defines Prometheus metrics for requests made by the client.
"""

from __future__ import annotations

from typing import Any, Dict

from prometheus_client import REGISTRY as _PROM_REGISTRY
from prometheus_client import Counter as _OrigCounter
from prometheus_client import Histogram as _OrigHistogram

# ---------------------------------------------------------------------------
# Duplicate-safe Prometheus metric wrappers
# ---------------------------------------------------------------------------
# Reloading this module (tests do) must not register the same collector twice.


def _duplicate_safe_factory(metric_cls):
    """Return a factory that reuses an existing collector if already present."""

    def _factory(name: str, documentation: str, *args, **kwargs):  # type: ignore[override]
        existing = _PROM_REGISTRY._names_to_collectors.get(name)
        if existing is not None:
            return existing  # type: ignore[return-value]

        try:
            return metric_cls(name, documentation, *args, **kwargs)  # type: ignore[call-arg]
        except ValueError:
            # Registration lost the race, use the now-existing collector.
            return _PROM_REGISTRY._names_to_collectors[name]  # type: ignore[return-value]

    return _factory


Counter = _duplicate_safe_factory(_OrigCounter)  # type: ignore[assignment]
Histogram = _duplicate_safe_factory(_OrigHistogram)  # type: ignore[assignment]

METRICS: Dict[str, Any] = {
    "requests_total": Counter(
        "emotiontone_requests_total",
        "Total number of emotion API requests by endpoint and outcome",
        ["endpoint", "outcome"],
    ),
    "request_latency_seconds": Histogram(
        "emotiontone_request_latency_seconds",
        "Time taken by an emotion API request, including reading the body",
        ["endpoint"],
        buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0],
    ),
}


def record_request(endpoint: str, outcome: str, duration: float) -> None:
    """Count one finished request and observe its latency."""
    METRICS["requests_total"].labels(endpoint=endpoint, outcome=outcome).inc()
    METRICS["request_latency_seconds"].labels(endpoint=endpoint).observe(duration)
