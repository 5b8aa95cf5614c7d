"""Mapping between cell indices and word-list tokens.

A word list is an ordered sequence of exactly 2048 tokens, unique
ignoring case and addressed 1..2048, so one token names one cell
index at any level.  The lookups are total: anything that cannot be
resolved returns ``None`` instead of raising.
"""

from __future__ import annotations

from collections.abc import Sequence
from numbers import Integral

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from bgrid.core.constants import CELLS_PER_LEVEL, MAX_CELL_INDEX, MIN_CELL_INDEX
from bgrid.core.exceptions import MalformedWordListError

_WORD_LIST_ADAPTER: TypeAdapter[list[str]] = TypeAdapter(list[str])


def validate_word_list(words: object) -> tuple[str, ...]:
    """Return *words* as a tuple after checking it is a valid word list.

    Raises:
        MalformedWordListError: If *words* is not a list or tuple of
            exactly 2048 strings that are unique ignoring case.
    """
    if not isinstance(words, (list, tuple)):
        msg = f"Word list must be a list of strings, got {type(words).__name__}"
        raise MalformedWordListError(msg)

    try:
        tokens = _WORD_LIST_ADAPTER.validate_python(list(words), strict=True)
    except PydanticValidationError as exc:
        msg = f"Word list entries must be strings: {exc.error_count()} invalid entries"
        raise MalformedWordListError(msg) from exc

    if len(tokens) != CELLS_PER_LEVEL:
        msg = f"Word list must contain exactly {CELLS_PER_LEVEL} words, got {len(tokens)}"
        raise MalformedWordListError(msg)

    if len({token.casefold() for token in tokens}) != CELLS_PER_LEVEL:
        msg = "Word list contains duplicate words (compared case-insensitively)"
        raise MalformedWordListError(msg)

    return tuple(tokens)


def is_valid_word_list(words: object) -> bool:
    """Whether *words* is a sequence of 2048 strings, unique ignoring case."""
    try:
        validate_word_list(words)
    except MalformedWordListError:
        return False
    return True


def number_to_word(number: object, words: Sequence[str] | None) -> str | None:
    """Return the token at 1-based *number*, or ``None``.

    ``None`` is returned when *words* is absent or malformed, or when
    *number* is not an integer in ``[1, 2048]``.
    """
    if not is_valid_word_list(words):
        return None
    return token_at(number, words)  # type: ignore[arg-type]


def token_at(number: object, tokens: Sequence[str]) -> str | None:
    """Return the token at 1-based *number* in an already validated list.

    ``None`` is returned when *number* is not an integer in ``[1, 2048]``.
    """
    if isinstance(number, bool) or not isinstance(number, Integral):
        return None
    index = int(number)
    if not MIN_CELL_INDEX <= index <= MAX_CELL_INDEX:
        return None
    return tokens[index - 1]


def word_to_number(word: object, words: Sequence[str] | None) -> int | None:
    """Return the 1-based position of *word* in *words*, or ``None``.

    Matching is case-insensitive and exact; surrounding whitespace on
    *word* is ignored.
    """
    if not is_valid_word_list(words) or not word:
        return None
    needle = str(word).strip().casefold()
    for position, token in enumerate(words, start=1):  # type: ignore[arg-type]
        if token.casefold() == needle:
            return position
    return None
