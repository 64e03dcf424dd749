"""Tests for RepoCodeService: selection, concurrent fetch, sanitizing and caching."""

from __future__ import annotations

import asyncio

import pytest

from reference_resolver.domain.entities import FetchedFile, TreeEntry
from reference_resolver.domain.exceptions import (
    GitHubApiError,
    GitHubRateLimitError,
    RepositoryNotFoundError,
)
from reference_resolver.domain.value_objects import RepositoryRef
from reference_resolver.services.repo_cache import RepoCache
from reference_resolver.services.repo_code import (
    TRUNCATION_MARKER,
    RepoCodeService,
    format_files,
    truncate,
)

REF = RepositoryRef("acme", "platform-game")

GAME_FILES = {
    "index.html": "<canvas id='c'></canvas><script src='js/game.js'></script>",
    "js/game.js": "const player = { x: 0, y: 0 };\nfunction loop() {}",
}


def make_service(fetcher, clock, char_budget: int = 18_000, **kwargs) -> RepoCodeService:
    return RepoCodeService(
        fetcher=fetcher,
        cache=RepoCache(ttl_seconds=60.0, clock=clock),
        char_budget=char_budget,
        max_file_size=100_000,
        **kwargs,
    )


class TestFormatting:
    """Test format_files and truncate."""

    def test_format_files(self) -> None:
        code = format_files(
            [FetchedFile("index.html", "<p>hi</p>"), FetchedFile("a.js", "x();")]
        )
        assert code == (
            "// ===== FILE: index.html =====\n<p>hi</p>\n\n"
            "// ===== FILE: a.js =====\nx();"
        )

    def test_truncate(self) -> None:
        assert truncate("abc", 3) == "abc"
        assert truncate("abcdef", 3) == "abc" + TRUNCATION_MARKER


class TestFetch:
    """Test RepoCodeService.fetch."""

    def test_fetches_and_formats_selected_files(self, make_fetcher, clock) -> None:
        fetcher = make_fetcher(
            GAME_FILES,
            extra_tree=[TreeEntry(path="node_modules/x.js", kind="blob", size=10)],
        )
        service = make_service(fetcher, clock)

        result = asyncio.run(service.fetch(REF))

        assert result is not None
        assert result.from_cache is False
        assert set(result.files) == {"index.html", "js/game.js"}
        assert "// ===== FILE: index.html =====" in result.code
        assert "node_modules/x.js" not in fetcher.file_calls

    def test_second_fetch_within_ttl_makes_no_remote_calls(self, make_fetcher, clock) -> None:
        fetcher = make_fetcher(GAME_FILES)
        service = make_service(fetcher, clock)

        async def scenario():
            first = await service.fetch(REF)
            calls = fetcher.remote_calls
            second = await service.fetch(REF)
            return first, calls, second

        first, calls_after_first, second = asyncio.run(scenario())

        assert fetcher.remote_calls == calls_after_first
        assert second.from_cache is True
        assert second.code == first.code
        assert second.files == first.files

    def test_refetches_after_ttl(self, make_fetcher, clock) -> None:
        fetcher = make_fetcher(GAME_FILES)
        service = make_service(fetcher, clock)

        async def scenario():
            await service.fetch(REF)
            clock.advance(60.0)
            return await service.fetch(REF)

        result = asyncio.run(scenario())

        assert len(fetcher.tree_calls) == 2
        assert result.from_cache is False

    def test_expired_entries_are_purged_on_store(self, make_fetcher, clock) -> None:
        """Caching a fresh result drops every entry past its TTL."""
        fetcher = make_fetcher(GAME_FILES)
        service = make_service(fetcher, clock)

        async def scenario():
            for i in range(50):
                await service.fetch(RepositoryRef("acme", f"game-{i}"))
                clock.advance(60.0)

        asyncio.run(scenario())

        assert len(service._cache) == 1
        assert "acme/game-49" in service._cache

    def test_failed_file_is_dropped(self, make_fetcher, clock) -> None:
        """One unreadable file does not fail the repository."""
        fetcher = make_fetcher(
            GAME_FILES, file_errors={"js/game.js": GitHubApiError("boom")}
        )

        result = asyncio.run(make_service(fetcher, clock).fetch(REF))

        assert result.files == ("index.html",)

    def test_all_files_failing_gives_none_and_caches_nothing(self, make_fetcher, clock) -> None:
        fetcher = make_fetcher(
            GAME_FILES,
            file_errors={
                "index.html": GitHubRateLimitError("slow down"),
                "js/game.js": GitHubApiError("boom"),
            },
        )
        service = make_service(fetcher, clock)

        assert asyncio.run(service.fetch(REF)) is None
        assert len(service._cache) == 0

    def test_empty_tree_gives_none(self, make_fetcher, clock) -> None:
        fetcher = make_fetcher({})

        assert asyncio.run(make_service(fetcher, clock).fetch(REF)) is None

    def test_no_relevant_files_gives_none(self, make_fetcher, clock) -> None:
        fetcher = make_fetcher({"README.md": "# hi", "assets/a.png": "x"})

        assert asyncio.run(make_service(fetcher, clock).fetch(REF)) is None
        assert fetcher.file_calls == []

    def test_tree_errors_propagate(self, make_fetcher, clock) -> None:
        fetcher = make_fetcher({}, tree_error=RepositoryNotFoundError("missing"))

        with pytest.raises(RepositoryNotFoundError):
            asyncio.run(make_service(fetcher, clock).fetch(REF))

    def test_content_is_sanitized(self, make_fetcher, clock) -> None:
        fetcher = make_fetcher({"js/game.js": 'const config = { apiKey: "sk-abcdef123" };'})

        result = asyncio.run(make_service(fetcher, clock).fetch(REF))

        assert "apiKey: 'REDACTED'" in result.code
        assert "sk-abcdef123" not in result.code

    def test_code_is_truncated_to_budget(self, make_fetcher, clock) -> None:
        """Tree sizes can understate content; output is cut at the budget."""
        fetcher = make_fetcher({"js/game.js": "x"})
        fetcher.files["js/game.js"] = "y" * 500
        service = make_service(fetcher, clock, char_budget=100)

        result = asyncio.run(service.fetch(REF))

        assert result.code.endswith(TRUNCATION_MARKER)
        assert len(result.code) == 100 + len(TRUNCATION_MARKER)

    def test_hint_files_come_first(self, make_fetcher, clock) -> None:
        fetcher = make_fetcher({**GAME_FILES, "js/grid.js": "const grid = [];"})

        result = asyncio.run(make_service(fetcher, clock).fetch(REF, ["js/grid.js"]))

        assert result.files[0] == "js/grid.js"

    def test_max_files_respected(self, make_fetcher, clock) -> None:
        files = {f"js/level{i}.js": f"// level {i}" for i in range(6)}
        fetcher = make_fetcher(files)

        result = asyncio.run(make_service(fetcher, clock, max_files=2).fetch(REF))

        assert len(result.files) == 2
        assert len(fetcher.file_calls) == 2
