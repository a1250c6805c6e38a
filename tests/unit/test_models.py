"""Unit tests for postings models."""

from __future__ import annotations

from pydantic import ValidationError
import pytest

from fingerprint_index.index.models import IndexStats, PostingsEntry, PostingsLookup


def test_postings_entry_record_appends_and_counts() -> None:
    entry = PostingsEntry(term=3)

    entry.record(1)
    entry.record(1)
    entry.record(0)

    assert entry.document_listing == [1, 1, 0]
    assert entry.frequencies == {1: 2, 0: 1}
    assert entry.document_frequency == 2


def test_postings_entries_compare_by_identity() -> None:
    first = PostingsEntry(term=3, document_listing=[0], frequencies={0: 1})
    second = PostingsEntry(term=3, document_listing=[0], frequencies={0: 1})

    assert first != second
    assert first == first


def test_postings_entry_to_dict_copies_state() -> None:
    entry = PostingsEntry(term=3, document_listing=[0], frequencies={0: 1})

    data = entry.to_dict()
    data["documents"].append(5)

    assert data == {"term": 3, "documents": [0, 5], "frequencies": {0: 1}}
    assert entry.document_listing == [0]


def test_postings_lookup_unpacks_as_pair() -> None:
    documents, frequencies = PostingsLookup([0, 0, 2], [2, 2, 1])

    assert documents == [0, 0, 2]
    assert frequencies == [2, 2, 1]


def test_postings_lookup_collapse() -> None:
    lookup = PostingsLookup([0, 0, 2], [2, 2, 1])

    assert lookup.collapse() == {0: 2, 2: 1}
    assert PostingsLookup([], []).collapse() == {}


def test_index_stats_is_frozen() -> None:
    stats = IndexStats(term_count=1, posting_count=2, document_count=1)

    with pytest.raises(ValidationError):
        stats.term_count = 5
