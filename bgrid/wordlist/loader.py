"""Word-list loading from a URL or a local directory.

Each supported language has a ``bip39-<lang>.json`` file holding a JSON
array of 2048 unique words.  The base location comes from the ``base``
argument or ``BgridConfig.wordlist_base_url`` and is either an
``http(s)`` URL (fetched with ``httpx``) or a directory on disk.

``load_languages`` fetches several languages concurrently.  Each
language is an independent task: a failure is logged and that language
is left out of the result, the others still load.

The loader does not retry.  Fetch failures raise
``WordListUnavailableError`` when a retry may help (timeouts, 5xx, 429)
and ``WordListMissingError`` when it will not.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

import httpx

from bgrid.core.config import BgridConfig, ConfigValidationError
from bgrid.core.constants import SUPPORTED_LANGUAGES, WORD_LIST_FILENAME_TEMPLATE
from bgrid.core.exceptions import (
    BgridError,
    MalformedWordListError,
    UnsupportedLanguageError,
    WordListFetchError,
    WordListMissingError,
    WordListUnavailableError,
)
from bgrid.wordlist.lookup import validate_word_list

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

_URL_SCHEMES = ("http://", "https://")

# HTTP statuses worth retrying besides 5xx.
_RETRYABLE_STATUS_CODES = frozenset({408, 429})


def is_supported_language(language: object) -> bool:
    """Whether *language* names a language with a published word list."""
    return isinstance(language, str) and language in SUPPORTED_LANGUAGES


def word_list_source(language: str, base: str) -> str:
    """Return the URL or file path of *language*'s word list under *base*."""
    filename = WORD_LIST_FILENAME_TEMPLATE.format(language=language)
    if base.startswith(_URL_SCHEMES):
        return f"{base.rstrip('/')}/{filename}"
    return str(Path(base) / filename)


# ---------------------------------------------------------------------------
# Synchronous loading
# ---------------------------------------------------------------------------


def load_language(
    language: str,
    *,
    base: str | None = None,
    config: BgridConfig | None = None,
    client: httpx.Client | None = None,
) -> tuple[str, ...]:
    """Load and validate the word list for *language*.

    Args:
        language: Language code (see ``SUPPORTED_LANGUAGES``).
        base: URL or directory holding the word lists.  Defaults to
            ``config.wordlist_base_url``.
        config: Loader configuration.  Defaults to ``BgridConfig.from_env()``.
        client: Optional ``httpx.Client`` to reuse for URL sources.

    Returns:
        The 2048 words, in index order.

    Raises:
        UnsupportedLanguageError: If *language* is not supported.
        ConfigValidationError: If no base location is configured.
        WordListUnavailableError: If the source is temporarily unreachable.
        WordListMissingError: If the source refuses the request or the
            file cannot be read.
        MalformedWordListError: If the content is not a valid word list.
    """
    cfg = config or BgridConfig.from_env()
    source = _resolve_source(language, base, cfg)

    if not source.startswith(_URL_SCHEMES):
        return _parse_word_list(language, source, _read_file(language, source))

    try:
        if client is not None:
            response = client.get(source)
            response.raise_for_status()
        else:
            with httpx.Client(timeout=cfg.wordlist_timeout_s, follow_redirects=True) as owned:
                response = owned.get(source)
                response.raise_for_status()
    except httpx.HTTPError as exc:
        raise _fetch_error(language, source, exc) from exc

    return _parse_word_list(language, source, response.text)


# ---------------------------------------------------------------------------
# Asynchronous loading
# ---------------------------------------------------------------------------


async def async_load_language(
    language: str,
    *,
    base: str | None = None,
    config: BgridConfig | None = None,
    client: httpx.AsyncClient | None = None,
) -> tuple[str, ...]:
    """Async variant of ``load_language`` using ``httpx.AsyncClient``."""
    cfg = config or BgridConfig.from_env()
    source = _resolve_source(language, base, cfg)

    if not source.startswith(_URL_SCHEMES):
        text = await asyncio.to_thread(_read_file, language, source)
        return _parse_word_list(language, source, text)

    try:
        if client is not None:
            response = await client.get(source)
            response.raise_for_status()
        else:
            async with httpx.AsyncClient(
                timeout=cfg.wordlist_timeout_s, follow_redirects=True
            ) as owned:
                response = await owned.get(source)
                response.raise_for_status()
    except httpx.HTTPError as exc:
        raise _fetch_error(language, source, exc) from exc

    return _parse_word_list(language, source, response.text)


async def load_languages(
    languages: Iterable[str] | None = None,
    *,
    base: str | None = None,
    config: BgridConfig | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> dict[str, tuple[str, ...]]:
    """Load several word lists concurrently.

    Languages that fail to load are logged and omitted from the result.
    Errors outside the BGrid taxonomy (programming errors, cancellation)
    still propagate.

    Args:
        languages: Language codes to load.  Defaults to ``config.languages``.
        base: URL or directory holding the word lists.
        config: Loader configuration.  Defaults to ``BgridConfig.from_env()``.
        transport: Optional ``httpx`` transport for the shared client.

    Returns:
        Mapping of language code to its word list, in request order.

    Raises:
        ConfigValidationError: If no base location is configured.  This
            is raised before any fetch starts.
    """
    cfg = config or BgridConfig.from_env()
    resolved_base = _resolve_base(base, cfg)
    codes = tuple(dict.fromkeys(languages if languages is not None else cfg.languages))

    async with httpx.AsyncClient(
        timeout=cfg.wordlist_timeout_s,
        follow_redirects=True,
        transport=transport,
    ) as client:
        results = await asyncio.gather(
            *(
                async_load_language(code, base=resolved_base, config=cfg, client=client)
                for code in codes
            ),
            return_exceptions=True,
        )

    loaded: dict[str, tuple[str, ...]] = {}
    for code, result in zip(codes, results, strict=True):
        if isinstance(result, BgridError):
            logger.warning(
                "Word list omitted | language=%s | code=%s | error=%s",
                code,
                result.code,
                result,
            )
            continue
        if isinstance(result, BaseException):
            raise result
        loaded[code] = result

    logger.info(
        "Word lists loaded | requested=%d | loaded=%d | languages=%s",
        len(codes),
        len(loaded),
        ",".join(loaded),
    )
    return loaded


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _resolve_base(base: str | None, config: BgridConfig) -> str:
    resolved = base if base is not None else config.wordlist_base_url
    if not resolved:
        raise ConfigValidationError(
            "BGRID_WORDLIST_BASE_URL",
            resolved,
            "must be set (or pass base=...) to load word lists",
        )
    return resolved


def _resolve_source(language: str, base: str | None, config: BgridConfig) -> str:
    if not is_supported_language(language):
        raise UnsupportedLanguageError(str(language))
    return word_list_source(language, _resolve_base(base, config))


def _read_file(language: str, source: str) -> str:
    try:
        return Path(source).read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Failed to read {source}: {exc}"
        raise WordListMissingError(language, source, msg) from exc


def _parse_word_list(language: str, source: str, text: str) -> tuple[str, ...]:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"Invalid bip39-{language}.json content (not JSON): {exc}"
        raise MalformedWordListError(msg) from exc

    words = validate_word_list(payload)
    logger.debug("Word list parsed | language=%s | source=%s", language, source)
    return words


def _fetch_error(language: str, source: str, exc: httpx.HTTPError) -> WordListFetchError:
    if isinstance(exc, httpx.HTTPStatusError):
        status = exc.response.status_code
        msg = f"Failed to fetch {source} (HTTP {status})"
        if status >= 500 or status in _RETRYABLE_STATUS_CODES:
            return WordListUnavailableError(language, source, msg)
        return WordListMissingError(language, source, msg)

    msg = f"Failed to fetch {source}: {exc}"
    if isinstance(exc, httpx.TransportError):
        return WordListUnavailableError(language, source, msg)
    return WordListMissingError(language, source, msg)
