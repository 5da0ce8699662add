"""Prometheus metrics for the relay."""
from prometheus_client import Counter

RELAY_REQUESTS = Counter(
    "relay_requests_total",
    "Inbound relay requests by outcome.",
    ["outcome"],
)
RELAY_STREAM_FAILURES = Counter(
    "relay_stream_failures_total",
    "Upstream streams that failed after relaying started.",
)
RELAY_RELAYED_BYTES = Counter(
    "relay_relayed_bytes_total",
    "Upstream bytes relayed to callers.",
)
