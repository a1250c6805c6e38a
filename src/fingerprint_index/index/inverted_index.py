"""In-memory inverted index keyed by 64-bit term fingerprints.

Every postings entry is reachable two ways: through ``by_term`` for constant
time membership checks, and through ``entries`` for enumeration in the order
fingerprints were first seen. Both views hold the same ``PostingsEntry``
objects, so an update made through one is visible through the other.

The index is a plain single-threaded structure. Nothing is ever removed.
"""

from __future__ import annotations

from collections.abc import Iterator
import logging

from fingerprint_index.config import Settings, get_settings
from fingerprint_index.errors import TermNotFoundError
from fingerprint_index.index.fingerprints import validate_document_id, validate_fingerprint
from fingerprint_index.index.models import IndexStats, PostingsEntry, PostingsLookup
from fingerprint_index.observability.metrics import INSERTIONS, LOOKUPS


logger = logging.getLogger(__name__)


class InvertedIndex:
    """Fingerprint -> postings mapping with a stable insertion-ordered view."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.by_term: dict[int, PostingsEntry] = {}
        self.entries: list[PostingsEntry] = []
        self._settings = settings or get_settings()

    def add_item(self, term: int, document: int) -> None:
        """Record that ``document`` contains ``term`` once more.

        Repeating the same (term, document) pair k times leaves the document's
        frequency at k and the document listed k times in the entry.
        """
        if self._settings.validate_inputs:
            validate_fingerprint(term)
            validate_document_id(document)

        entry = self.by_term.get(term)
        if entry is not None:
            entry.record(document)
            outcome = "updated"
            logger.debug("Updated postings entry %#018x with document %d", term, document)
        else:
            entry = PostingsEntry(term=term, document_listing=[document], frequencies={document: 1})
            self.by_term[term] = entry
            self.entries.append(entry)
            outcome = "created"
            logger.debug("Created postings entry %#018x for document %d", term, document)

        if self._settings.metrics_enabled:
            INSERTIONS.labels(outcome=outcome).inc()

    def find_item(self, term: int) -> int:
        """Return the position of ``term``'s entry in ``entries``.

        The term must already be indexed; a missing term raises TermNotFoundError.
        """
        for position, entry in enumerate(self.entries):
            if entry.term == term:
                return position
        raise TermNotFoundError(term)

    def find(self, term: int) -> PostingsLookup:
        """Return the documents containing ``term`` with their aligned frequencies.

        Missing terms return two empty lists. The returned lists are copies,
        so callers may mutate them freely.
        """
        if self._settings.validate_inputs:
            validate_fingerprint(term)

        entry = self.by_term.get(term)
        if entry is None:
            if self._settings.metrics_enabled:
                LOOKUPS.labels(outcome="miss").inc()
            return PostingsLookup([], [])

        if self._settings.metrics_enabled:
            LOOKUPS.labels(outcome="hit").inc()
        documents = list(entry.document_listing)
        frequencies = [entry.frequencies[document] for document in documents]
        return PostingsLookup(documents, frequencies)

    def get_entry(self, term: int) -> PostingsEntry | None:
        """Return the live postings entry for ``term``, or None."""
        return self.by_term.get(term)

    def terms(self) -> Iterator[int]:
        """Iterate over fingerprints in the order they were first indexed."""
        return (entry.term for entry in self.entries)

    def stats(self) -> IndexStats:
        documents: set[int] = set()
        posting_count = 0
        for entry in self.entries:
            documents.update(entry.frequencies)
            posting_count += len(entry.document_listing)
        return IndexStats(
            term_count=len(self.entries),
            posting_count=posting_count,
            document_count=len(documents),
        )

    def to_dict(self) -> dict[int, dict]:
        """Snapshot the index as plain dicts, in insertion order."""
        return {entry.term: entry.to_dict() for entry in self.entries}

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, term: object) -> bool:
        return term in self.by_term

    def __iter__(self) -> Iterator[PostingsEntry]:
        return iter(self.entries)

    def __repr__(self) -> str:
        return f"InvertedIndex(terms={len(self.entries)})"


def create_inverted_index(settings: Settings | None = None) -> InvertedIndex:
    """Create an empty inverted index."""
    index = InvertedIndex(settings=settings)
    logger.debug("Created empty inverted index")
    return index


def insert(index: InvertedIndex, term: int, document: int) -> None:
    """Record one occurrence of ``term`` in ``document``."""
    index.add_item(term, document)


def find(index: InvertedIndex, term: int) -> PostingsLookup:
    """Look up the postings for ``term``."""
    return index.find(term)
