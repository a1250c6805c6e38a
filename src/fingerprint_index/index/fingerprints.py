"""Domain checks for term fingerprints and document identifiers."""

from __future__ import annotations

from fingerprint_index.errors import InvalidDocumentIdError, InvalidFingerprintError


FINGERPRINT_BITS = 64
MAX_FINGERPRINT = (1 << FINGERPRINT_BITS) - 1


def is_fingerprint(value: object) -> bool:
    """Return True when value is an unsigned 64-bit integer."""
    # bool is an int subclass but never a meaningful fingerprint
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= MAX_FINGERPRINT


def validate_fingerprint(value: object) -> int:
    """Return value unchanged, or raise InvalidFingerprintError."""
    if not is_fingerprint(value):
        raise InvalidFingerprintError(f"Fingerprint must be an integer in [0, 2**{FINGERPRINT_BITS}), got {value!r}")
    return value  # type: ignore[return-value]


def validate_document_id(value: object) -> int:
    """Return value unchanged, or raise InvalidDocumentIdError."""
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise InvalidDocumentIdError(f"Document identifier must be a non-negative integer, got {value!r}")
    return value
