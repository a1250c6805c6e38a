"""Prometheus metrics for index operations."""

from __future__ import annotations

from contextlib import contextmanager
import time
from typing import TYPE_CHECKING

from prometheus_client import Counter, Gauge, Histogram, generate_latest


if TYPE_CHECKING:
    from collections.abc import Generator


INSERTIONS = Counter(
    "fingerprint_index_insertions_total",
    "Insertions into an inverted index, by whether a new postings entry was created",
    ["outcome"],
)

LOOKUPS = Counter(
    "fingerprint_index_lookups_total",
    "Postings lookups, by whether the fingerprint was present",
    ["outcome"],
)

INGESTED_DOCUMENTS = Counter(
    "fingerprint_index_ingest_documents_total",
    "Documents folded into an inverted index by the ingestion driver",
)

INGEST_LATENCY = Histogram(
    "fingerprint_index_ingest_latency_seconds",
    "Wall time of a full ingestion batch",
    buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0),
)

LAST_INGEST_TERM_COUNT = Gauge(
    "fingerprint_index_last_ingest_terms",
    "Distinct fingerprints in the most recently built index",
)


@contextmanager
def track_latency(histogram: Histogram) -> Generator[None, None, None]:
    """Context manager to track operation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        histogram.observe(time.perf_counter() - start)


def get_metrics() -> bytes:
    """Generate Prometheus metrics output."""
    return generate_latest()
