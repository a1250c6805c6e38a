"""
In-memory inverted index over 64-bit term fingerprints.

This package provides:
- models: PostingsEntry, PostingsLookup and IndexStats
- inverted_index: the InvertedIndex structure, insertion and lookup
- ingestion: per-document deduplication and batch index construction
- fingerprints: input domain checks
"""
