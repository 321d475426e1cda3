"""Unit tests for short identifier generation."""

import pytest
from apkctl.utils.ids import URL_SAFE_ALPHABET, short_id


class TestShortId:
    """Tests for short_id."""

    def test_default_length(self) -> None:
        """Identifiers are five characters by default."""
        assert len(short_id()) == 5

    @pytest.mark.parametrize("length", [1, 8, 21])
    def test_requested_length(self, length: int) -> None:
        """Identifiers have the requested length."""
        assert len(short_id(length)) == length

    def test_uses_url_safe_alphabet(self) -> None:
        """Every character comes from the URL-safe alphabet."""
        assert set(short_id(200)) <= set(URL_SAFE_ALPHABET)

    def test_alphabet_is_file_name_safe(self) -> None:
        """The alphabet has 64 distinct characters and no separators."""
        assert len(set(URL_SAFE_ALPHABET)) == 64
        assert "/" not in URL_SAFE_ALPHABET
        assert "." not in URL_SAFE_ALPHABET

    def test_identifiers_differ(self) -> None:
        """Consecutive identifiers are not repeated."""
        assert len({short_id(12) for _ in range(50)}) == 50

    @pytest.mark.parametrize("length", [0, -1])
    def test_non_positive_length_raises(self, length: int) -> None:
        """A non-positive length raises ValueError."""
        with pytest.raises(ValueError, match="must be positive"):
            short_id(length)
