"""BGrid configuration loaded from environment variables.

Only the word-list loader is configurable; the codec itself takes no
settings. ``from_env()`` raises ``ConfigValidationError`` when a value
is out of range, so bad configuration fails at startup rather than on
the first fetch.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from bgrid.core.constants import DEFAULT_WORDLIST_TIMEOUT_S, SUPPORTED_LANGUAGES
from bgrid.core.exceptions import BgridError


class ConfigValidationError(BgridError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class BgridConfig:
    """Immutable word-list loader configuration.

    Attributes:
        wordlist_base_url: Base location of the ``bip39-<lang>.json``
            files. Either an ``http(s)`` URL or a local directory.
            Empty means the caller must pass ``base`` explicitly.
        wordlist_timeout_s: HTTP timeout in seconds per word-list fetch.
        languages: Language codes loaded by ``load_languages`` when the
            caller does not name any.
    """

    wordlist_base_url: str = ""
    wordlist_timeout_s: float = DEFAULT_WORDLIST_TIMEOUT_S
    languages: tuple[str, ...] = SUPPORTED_LANGUAGES

    @classmethod
    def from_env(cls) -> BgridConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range or names
                an unsupported language.
            ValueError: If ``BGRID_WORDLIST_TIMEOUT_S`` is not a number.
        """
        raw_languages = os.getenv("BGRID_LANGUAGES", "")
        languages = tuple(
            code.strip() for code in raw_languages.split(",") if code.strip()
        )
        config = cls(
            wordlist_base_url=os.getenv("BGRID_WORDLIST_BASE_URL", ""),
            wordlist_timeout_s=float(
                os.getenv("BGRID_WORDLIST_TIMEOUT_S", str(DEFAULT_WORDLIST_TIMEOUT_S))
            ),
            languages=languages or SUPPORTED_LANGUAGES,
        )
        _validate(config)
        return config


def _validate(config: BgridConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if config.wordlist_timeout_s <= 0:
        raise ConfigValidationError(
            "BGRID_WORDLIST_TIMEOUT_S",
            config.wordlist_timeout_s,
            "must be > 0 (seconds)",
        )

    unknown = [code for code in config.languages if code not in SUPPORTED_LANGUAGES]
    if unknown:
        raise ConfigValidationError(
            "BGRID_LANGUAGES",
            ",".join(config.languages),
            f"unsupported language(s): {', '.join(unknown)}",
        )
