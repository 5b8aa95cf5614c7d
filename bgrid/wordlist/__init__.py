"""Word-list helpers.

- lookup: Cell index ↔ word mapping
- display: Comma-joined rendering of grid paths
- loader: Fetching ``bip39-<lang>.json`` word lists
"""

from bgrid.wordlist.display import MODE_NUMBERS, MODE_WORDS, grid_to_display
from bgrid.wordlist.loader import (
    async_load_language,
    is_supported_language,
    load_language,
    load_languages,
)
from bgrid.wordlist.lookup import (
    is_valid_word_list,
    number_to_word,
    validate_word_list,
    word_to_number,
)

__all__ = [
    "MODE_NUMBERS",
    "MODE_WORDS",
    "async_load_language",
    "grid_to_display",
    "is_supported_language",
    "is_valid_word_list",
    "load_language",
    "load_languages",
    "number_to_word",
    "validate_word_list",
    "word_to_number",
]
