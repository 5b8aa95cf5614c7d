"""Tests for grid-path text rendering."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from bgrid.core.exceptions import InvalidInputError, MalformedWordListError
from bgrid.grid.encoder import encode
from bgrid.wordlist.display import MODE_WORDS, grid_to_display
from bgrid.wordlist.lookup import is_valid_word_list, validate_word_list


class TestNumbersMode:
    def test_comma_joined(self) -> None:
        assert grid_to_display([1057, 1, 1]) == "1057,1,1"

    def test_accepts_encoder_output(self) -> None:
        assert grid_to_display(encode(0, 0, 2)) == "1057,1"

    def test_empty_path(self) -> None:
        assert grid_to_display([]) == ""

    @pytest.mark.parametrize("path", [None, "1057", 1057])
    def test_non_sequence_renders_empty(self, path: object) -> None:
        assert grid_to_display(path) == ""


class TestWordsMode:
    def test_comma_joined_words(self, words: list[str]) -> None:
        assert grid_to_display([1057, 1, 2048], mode=MODE_WORDS, words=words) == (
            "w1057,w0001,w2048"
        )

    def test_requires_word_list(self) -> None:
        with pytest.raises(MalformedWordListError):
            grid_to_display([1], mode="words")

    def test_rejects_malformed_word_list(self, words: list[str]) -> None:
        with pytest.raises(MalformedWordListError):
            grid_to_display([1], mode="words", words=words[:10])

    def test_rejects_index_without_word(self, words: list[str]) -> None:
        with pytest.raises(InvalidInputError, match=r"path\[1\]"):
            grid_to_display([1, 0], mode="words", words=words)

    def test_validates_word_list_once(self, words: list[str]) -> None:
        path = encode(51.5, -0.12, 4)
        with patch(
            "bgrid.wordlist.display.validate_word_list", wraps=validate_word_list
        ) as validator, patch(
            "bgrid.wordlist.lookup.is_valid_word_list", wraps=is_valid_word_list
        ) as per_entry_check:
            rendered = grid_to_display(path, mode=MODE_WORDS, words=words)
        assert rendered.count(",") == 3
        validator.assert_called_once()
        per_entry_check.assert_not_called()

    def test_rejects_bool_entry(self, words: list[str]) -> None:
        with pytest.raises(InvalidInputError, match=r"path\[0\]"):
            grid_to_display([True], mode="words", words=words)


class TestUnknownMode:
    def test_raises(self) -> None:
        with pytest.raises(InvalidInputError, match="display mode"):
            grid_to_display([1], mode="emoji")
