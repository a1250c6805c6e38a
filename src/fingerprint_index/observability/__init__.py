"""Observability module for logging, tracing and metrics."""

from fingerprint_index.observability.context import (
    batch_context,
    get_trace_context,
    set_trace_context,
    trace_context,
)
from fingerprint_index.observability.logging import (
    JsonFormatter,
    configure_logging,
    configure_logging_from_settings,
)
from fingerprint_index.observability.metrics import (
    INGEST_LATENCY,
    INGESTED_DOCUMENTS,
    INSERTIONS,
    LAST_INGEST_TERM_COUNT,
    LOOKUPS,
    get_metrics,
    track_latency,
)
from fingerprint_index.observability.tracing import create_span, get_tracer, init_tracing


__all__ = [
    "INGESTED_DOCUMENTS",
    "INGEST_LATENCY",
    "INSERTIONS",
    "LAST_INGEST_TERM_COUNT",
    "LOOKUPS",
    "JsonFormatter",
    "batch_context",
    "configure_logging",
    "configure_logging_from_settings",
    "create_span",
    "get_metrics",
    "get_trace_context",
    "get_tracer",
    "init_tracing",
    "set_trace_context",
    "trace_context",
    "track_latency",
]
