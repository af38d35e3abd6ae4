"""Prometheus metrics for the content store."""

from prometheus_client import Counter

__all__ = ["STORE_FAILURES"]


STORE_FAILURES = Counter(
    "newsfeed_store_failures_total",
    "Content store calls that ended in a StorageError",
    ["operation", "kind"],
)
