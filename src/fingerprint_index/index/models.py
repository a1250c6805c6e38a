"""Postings data models."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict


@dataclass(eq=False)
class PostingsEntry:
    """Per-fingerprint record shared by the term map and the insertion-ordered list.

    ``document_listing`` is a multi-set view: a document appears once per
    insertion of the (term, document) pair, so its length always equals the
    sum of ``frequencies``. Entries compare by identity.
    """

    term: int
    document_listing: list[int] = field(default_factory=list)
    frequencies: dict[int, int] = field(default_factory=dict)

    def record(self, document: int) -> None:
        """Count one more occurrence of this term in ``document``."""
        self.frequencies[document] = self.frequencies.get(document, 0) + 1
        self.document_listing.append(document)

    @property
    def document_frequency(self) -> int:
        """Number of distinct documents containing the term."""
        return len(self.frequencies)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging and debugging."""
        return {
            "term": self.term,
            "documents": list(self.document_listing),
            "frequencies": dict(self.frequencies),
        }


class PostingsLookup(NamedTuple):
    """Parallel ``documents`` / ``frequencies`` sequences returned by a lookup.

    ``frequencies[i]`` is the count recorded for ``documents[i]``; a document
    listed k times has its count repeated k times.
    """

    documents: list[int]
    frequencies: list[int]

    def collapse(self) -> dict[int, int]:
        """Count each document's occurrences as a deduplicated ``{document: count}`` mapping."""
        return dict(Counter(self.documents))

    def __bool__(self) -> bool:
        return bool(self.documents)


class IndexStats(BaseModel):
    """Size summary of an inverted index."""

    model_config = ConfigDict(frozen=True)

    term_count: int
    posting_count: int
    document_count: int
