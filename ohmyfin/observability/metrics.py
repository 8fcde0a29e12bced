"""Prometheus metrics for Ohmyfin API calls"""

from prometheus_client import Counter, Histogram

request_counter = Counter(
    "ohmyfin_requests_total",
    "Ohmyfin API requests by outcome",
    ["operation", "outcome"],  # success | api_error | invalid_json | timeout | transport_error
)

request_latency_histogram = Histogram(
    "ohmyfin_request_duration_seconds",
    "Ohmyfin API round-trip time",
    ["operation"],
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
)


def record_outcome(operation: str, outcome: str) -> None:
    """Count one finished request"""
    request_counter.labels(operation=operation, outcome=outcome).inc()
