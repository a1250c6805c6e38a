"""Exceptions raised by the fingerprint index."""


class FingerprintIndexError(Exception):
    """Base exception for fingerprint index errors."""


class InvalidFingerprintError(FingerprintIndexError, ValueError):
    """Raised when a term fingerprint is not an unsigned 64-bit integer."""


class InvalidDocumentIdError(FingerprintIndexError, ValueError):
    """Raised when a document identifier is not a non-negative integer."""


class TermNotFoundError(FingerprintIndexError, KeyError):
    """Raised when a positional lookup is made for a term that was never indexed."""

    def __init__(self, term: int) -> None:
        super().__init__(term)
        self.term = term

    def __str__(self) -> str:
        return f"Term fingerprint {self.term:#018x} is not present in the index"
