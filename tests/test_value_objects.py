"""Tests for repository reference parsing."""

from __future__ import annotations

import pytest

from reference_resolver.domain.value_objects import RepositoryRef


class TestParse:
    """Test RepositoryRef.parse."""

    @pytest.mark.parametrize(
        "text",
        [
            "https://github.com/acme/platform-game",
            "http://github.com/acme/platform-game",
            "https://www.github.com/acme/platform-game",
            "github.com/acme/platform-game",
            "https://github.com/acme/platform-game/",
            "https://github.com/acme/platform-game.git",
            "https://github.com/acme/platform-game/tree/main/src",
            "acme/platform-game",
            "acme/platform-game.git",
            "  acme/platform-game/  ",
        ],
    )
    def test_equivalent_forms(self, text: str) -> None:
        """All common spellings yield the same reference."""
        assert RepositoryRef.parse(text) == RepositoryRef("acme", "platform-game")

    @pytest.mark.parametrize(
        "text",
        [None, "", "   ", "platform-game", "make me a game", "github.com/acme", "a/b/c"],
    )
    def test_non_references_return_none(self, text: str | None) -> None:
        """Input that is not a repository reference yields None, never raises."""
        assert RepositoryRef.parse(text) is None

    def test_case_is_preserved(self) -> None:
        """Owner and repo keep their original case."""
        ref = RepositoryRef.parse("https://github.com/Hextris/hextris")
        assert ref is not None
        assert ref.owner == "Hextris"
        assert ref.repo == "hextris"
        assert ref != RepositoryRef("hextris", "hextris")


class TestFindInText:
    """Test RepositoryRef.find_in_text."""

    def test_url_inside_prompt(self) -> None:
        """Finds a URL embedded in a sentence."""
        ref = RepositoryRef.find_in_text(
            "make it like https://github.com/acme/platform-game please"
        )
        assert ref == RepositoryRef("acme", "platform-game")

    def test_trailing_punctuation_is_stripped(self) -> None:
        """Sentence punctuation after the URL is not part of the repo name."""
        assert RepositoryRef.find_in_text(
            "Use github.com/acme/platform-game."
        ) == RepositoryRef("acme", "platform-game")
        assert RepositoryRef.find_in_text(
            "(see https://github.com/acme/racer), thanks"
        ) == RepositoryRef("acme", "racer")

    def test_first_url_wins(self) -> None:
        """Only the first URL in the text is returned."""
        ref = RepositoryRef.find_in_text(
            "github.com/one/first and github.com/two/second"
        )
        assert ref == RepositoryRef("one", "first")

    def test_no_url(self) -> None:
        """Plain text without a GitHub URL yields None."""
        assert RepositoryRef.find_in_text("a racing game with cars") is None
        assert RepositoryRef.find_in_text(None) is None

    def test_full_name(self) -> None:
        """full_name and str() render owner/repo."""
        ref = RepositoryRef("acme", "platform-game")
        assert ref.full_name == "acme/platform-game"
        assert str(ref) == "acme/platform-game"
