"""Text rendering of grid paths."""

from __future__ import annotations

from collections.abc import Sequence

from bgrid.core.exceptions import InvalidInputError
from bgrid.grid._validation import is_index_sequence
from bgrid.wordlist.lookup import token_at, validate_word_list

MODE_NUMBERS = "numbers"
MODE_WORDS = "words"

_SEPARATOR = ","


def grid_to_display(
    path: object,
    mode: str = MODE_NUMBERS,
    words: Sequence[str] | None = None,
) -> str:
    """Render a grid path as comma-joined numbers or words.

    A *path* that is not a sequence renders as an empty string.

    Args:
        path: Grid path to render.
        mode: ``"numbers"`` or ``"words"``.
        words: Word list, required in ``"words"`` mode.

    Raises:
        MalformedWordListError: If ``"words"`` mode is requested without
            a valid word list.
        InvalidInputError: If *mode* is unknown, or an entry of *path*
            has no word.
    """
    if not is_index_sequence(path):
        return ""

    if mode == MODE_NUMBERS:
        return _SEPARATOR.join(str(entry) for entry in path)  # type: ignore[union-attr]

    if mode == MODE_WORDS:
        tokens = validate_word_list(words)
        rendered = []
        for position, entry in enumerate(path):  # type: ignore[arg-type]
            token = token_at(entry, tokens)
            if token is None:
                msg = f"path[{position}]={entry!r} has no word in the word list"
                raise InvalidInputError(msg, stage="wordlist")
            rendered.append(token)
        return _SEPARATOR.join(rendered)

    msg = f"Unknown display mode {mode!r}; expected {MODE_NUMBERS!r} or {MODE_WORDS!r}"
    raise InvalidInputError(msg, stage="wordlist")
