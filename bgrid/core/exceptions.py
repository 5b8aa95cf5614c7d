"""Unified BGrid exception taxonomy.

Every error raised by the package inherits from ``BgridError`` and
carries structured context fields so callers can make consistent retry
decisions and log failures uniformly.

Taxonomy categories
-------------------
- ``ValidationError``: bad arguments or malformed data, never retryable.
- ``TransientError``: temporary failures (network, timeout), retryable.
- ``PermanentError``: unrecoverable failures, not retryable.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload.
"""

from __future__ import annotations


class BgridError(Exception):
    """Base exception for all BGrid errors.

    Attributes:
        message: Human-readable error description.
        stage: Component where the error occurred
            (e.g. ``"codec"``, ``"wordlist"``).
        code: Machine-readable error code (e.g. ``"INVALID_INPUT"``).
        retryable: Whether the caller may retry the operation.
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        retryable: bool = False,
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.retryable = retryable
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ValidationError):
            return "validation"
        if isinstance(self, TransientError):
            return "transient"
        if isinstance(self, PermanentError):
            return "permanent"
        return "transient" if self.retryable else "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "retryable": self.retryable,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(BgridError):
    """Argument or data validation failure. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class TransientError(BgridError):
    """Temporary failure that may succeed on retry."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", True)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class PermanentError(BgridError):
    """Unrecoverable failure. Not retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Concrete errors
# ---------------------------------------------------------------------------


class InvalidInputError(ValidationError, ValueError):
    """Raised when a codec operation receives an invalid argument.

    Covers non-finite coordinates, non-positive or non-integer level
    counts, and grid paths that are not sequences of cell indices.
    """

    default_stage = "codec"
    default_code = "INVALID_INPUT"


class UnsupportedLanguageError(ValidationError):
    """Raised when a word list is requested for an unknown language code.

    Attributes:
        language: The rejected language code.
    """

    default_stage = "wordlist"
    default_code = "UNSUPPORTED_LANGUAGE"

    def __init__(self, language: str, message: str = "") -> None:
        self.language = language
        super().__init__(message or f"Unsupported language: {language!r}")


class MalformedWordListError(ValidationError):
    """Raised when a word list is absent or not 2048 unique tokens."""

    default_stage = "wordlist"
    default_code = "MALFORMED_WORD_LIST"


class WordListFetchError(BgridError):
    """Raised when a word list cannot be retrieved from its source.

    Loaders raise one of the two concrete subclasses, which fix the
    category and the retry decision.

    Attributes:
        language: Language code whose word list failed to load.
        source: URL or file path that was read.
    """

    default_stage = "wordlist"
    default_code = "WORD_LIST_FETCH_FAILED"

    def __init__(self, language: str, source: str, message: str, **kwargs: object) -> None:
        self.language = language
        self.source = source
        super().__init__(message, **kwargs)  # type: ignore[arg-type]

    def __str__(self) -> str:
        return f"[{self.language}] {self.message}"


class WordListUnavailableError(WordListFetchError, TransientError):
    """Source temporarily unreachable (timeout, transport error, 5xx, 408, 429)."""


class WordListMissingError(WordListFetchError, PermanentError):
    """Source permanently refused the request (other 4xx, unreadable file)."""
