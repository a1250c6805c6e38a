"""fingerprint-index: an in-memory inverted index keyed by 64-bit term fingerprints."""

from fingerprint_index.errors import (
    FingerprintIndexError,
    InvalidDocumentIdError,
    InvalidFingerprintError,
    TermNotFoundError,
)
from fingerprint_index.index.ingestion import build_from_documents, deduplicate_fingerprints, generate_inverted_index
from fingerprint_index.index.inverted_index import InvertedIndex, create_inverted_index, find, insert
from fingerprint_index.index.models import IndexStats, PostingsEntry, PostingsLookup


__all__ = [
    "FingerprintIndexError",
    "IndexStats",
    "InvalidDocumentIdError",
    "InvalidFingerprintError",
    "InvertedIndex",
    "PostingsEntry",
    "PostingsLookup",
    "TermNotFoundError",
    "build_from_documents",
    "create_inverted_index",
    "deduplicate_fingerprints",
    "find",
    "generate_inverted_index",
    "insert",
]
