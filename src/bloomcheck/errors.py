"""Exception hierarchy for bloomcheck.

Every failure raised by the filter engine or the binary codec derives from
``BloomError`` so embedding callers can catch a single type. I/O failures
are not wrapped and surface as the built-in ``OSError`` family.
"""


class BloomError(Exception):
    """Base exception for all bloomcheck errors."""
    pass


class ConstructionError(BloomError, ValueError):
    """Raised when sizing inputs cannot produce a usable filter."""
    pass


class CodecError(BloomError):
    """Raised when a filter cannot be encoded or decoded."""
    pass


class FilterFormatError(CodecError):
    """Raised when a byte stream is not a persisted bloom filter."""
    pass


class VersionMismatchError(CodecError):
    """Raised when the stored format version differs from the expected one."""

    def __init__(self, expected: int, found: int) -> None:
        super().__init__(
            f"Unsupported version: expected {expected}, found {found}"
        )
        self.expected = expected
        self.found = found


class TruncatedInputError(CodecError):
    """Raised when the stream ends before the declared payload."""

    def __init__(self, what: str, expected: int, available: int) -> None:
        super().__init__(
            f"Truncated {what}: expected {expected} bytes, got {available}"
        )
        self.expected = expected
        self.available = available


class SettingsError(BloomError, ValueError):
    """Raised when a ``BLOOMCHECK_*`` override cannot be used."""
    pass


class WordListError(BloomError, ValueError):
    """Raised when a word list cannot be decoded."""
    pass
