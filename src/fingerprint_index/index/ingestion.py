"""Build an inverted index from a batch of fingerprinted documents."""

from __future__ import annotations

from collections.abc import Iterable
from contextlib import nullcontext
import logging

from fingerprint_index.config import Settings, get_settings
from fingerprint_index.index.inverted_index import InvertedIndex, create_inverted_index
from fingerprint_index.observability.context import batch_context
from fingerprint_index.observability.metrics import (
    INGEST_LATENCY,
    INGESTED_DOCUMENTS,
    LAST_INGEST_TERM_COUNT,
    track_latency,
)
from fingerprint_index.observability.tracing import create_span


logger = logging.getLogger(__name__)


def deduplicate_fingerprints(fingerprints: Iterable[int]) -> list[int]:
    """Return the distinct fingerprints of one document in first-seen order."""
    return list(dict.fromkeys(fingerprints))


def _ingest_span(settings: Settings, batch_id: str):
    if not settings.tracing_enabled:
        return nullcontext()
    return create_span("fingerprint_index.ingest", attributes={"ingest.batch_id": batch_id})


def _ingest_timer(settings: Settings):
    if not settings.metrics_enabled:
        return nullcontext()
    return track_latency(INGEST_LATENCY)


def generate_inverted_index(
    documents: Iterable[Iterable[int]],
    *,
    settings: Settings | None = None,
    batch_id: str | None = None,
) -> InvertedIndex:
    """Fold ``documents`` into a new inverted index.

    Document identifiers are positions in ``documents`` (0..N-1). Each document
    contributes every distinct fingerprint exactly once, so postings built
    here list a document at most once and every frequency is 1.
    """
    settings = settings or get_settings()

    with batch_context(batch_id) as active_batch_id, _ingest_span(settings, active_batch_id), _ingest_timer(settings):
        fingerprint_sets = [deduplicate_fingerprints(document) for document in documents]
        index = create_inverted_index(settings=settings)

        progress_every = settings.log_progress_every
        for document_id, fingerprint_set in enumerate(fingerprint_sets):
            for fingerprint in fingerprint_set:
                index.add_item(fingerprint, document_id)
            if progress_every and (document_id + 1) % progress_every == 0:
                logger.debug(
                    "Ingested %d/%d documents",
                    document_id + 1,
                    len(fingerprint_sets),
                    extra={"terms": len(index)},
                )

        if settings.metrics_enabled:
            INGESTED_DOCUMENTS.inc(len(fingerprint_sets))
            LAST_INGEST_TERM_COUNT.set(len(index))

        logger.info(
            "Built inverted index: %d documents, %d distinct fingerprints",
            len(fingerprint_sets),
            len(index),
        )
    return index


def build_from_documents(
    documents: Iterable[Iterable[int]],
    *,
    settings: Settings | None = None,
) -> InvertedIndex:
    """Build an inverted index from per-document fingerprint collections."""
    return generate_inverted_index(documents, settings=settings)
