"""Tests for the GitHub REST adapter, using httpx.MockTransport."""

from __future__ import annotations

import asyncio
import base64
from typing import Any, Callable

import httpx
import pytest

from reference_resolver.domain.exceptions import (
    GitHubApiError,
    GitHubRateLimitError,
    RepositoryNotFoundError,
)
from reference_resolver.domain.value_objects import RepositoryRef
from reference_resolver.infrastructure.github_rest_adapter import GitHubRestAdapter

REF = RepositoryRef("acme", "platform-game")

Handler = Callable[[httpx.Request], httpx.Response]


def _run(handler: Handler, call: Callable[[GitHubRestAdapter], Any], token: str | None = None) -> Any:
    async def scenario() -> Any:
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            adapter = GitHubRestAdapter(client, token=token)
            return await call(adapter)

    return asyncio.run(scenario())


def _b64(text: bytes) -> str:
    return base64.b64encode(text).decode("ascii")


class TestFetchTree:
    """Test GitHubRestAdapter.fetch_tree."""

    def test_returns_entries(self) -> None:
        """Parses blobs and trees from the recursive listing."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200,
                json={
                    "tree": [
                        {"path": "index.html", "type": "blob", "size": 120},
                        {"path": "js", "type": "tree"},
                        {"path": "js/game.js", "type": "blob", "size": 900},
                    ],
                    "truncated": False,
                },
            )

        entries = _run(handler, lambda a: a.fetch_tree(REF))

        assert [(e.path, e.kind, e.size) for e in entries] == [
            ("index.html", "blob", 120),
            ("js", "tree", 0),
            ("js/game.js", "blob", 900),
        ]
        assert seen[0].url.path == "/repos/acme/platform-game/git/trees/HEAD"
        assert seen[0].url.params["recursive"] == "1"

    def test_sends_token_when_configured(self) -> None:
        """A configured token is sent as a Bearer credential."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"tree": []})

        _run(handler, lambda a: a.fetch_tree(REF), token="ghp_test")

        assert seen[0].headers["Authorization"] == "Bearer ghp_test"

    def test_no_auth_header_without_token(self) -> None:
        """Anonymous requests carry no Authorization header."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"tree": []})

        _run(handler, lambda a: a.fetch_tree(REF))

        assert "Authorization" not in seen[0].headers

    def test_404_is_not_found(self) -> None:
        """A missing repository raises RepositoryNotFoundError."""
        handler = lambda request: httpx.Response(404, json={"message": "Not Found"})  # noqa: E731

        with pytest.raises(RepositoryNotFoundError):
            _run(handler, lambda a: a.fetch_tree(REF))

    def test_403_exhausted_quota_is_rate_limited(self) -> None:
        """403 with zero remaining quota raises GitHubRateLimitError."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                403,
                headers={"x-ratelimit-remaining": "0", "x-ratelimit-reset": "0"},
                json={"message": "API rate limit exceeded"},
            )

        with pytest.raises(GitHubRateLimitError, match="1970-01-01"):
            _run(handler, lambda a: a.fetch_tree(REF))

    def test_403_without_quota_headers_is_not_found(self) -> None:
        """A plain 403 means the repository is not accessible."""
        handler = lambda request: httpx.Response(403, json={"message": "Forbidden"})  # noqa: E731

        with pytest.raises(RepositoryNotFoundError):
            _run(handler, lambda a: a.fetch_tree(REF))

    def test_429_is_rate_limited(self) -> None:
        """Secondary rate limits raise GitHubRateLimitError."""
        handler = lambda request: httpx.Response(429)  # noqa: E731

        with pytest.raises(GitHubRateLimitError):
            _run(handler, lambda a: a.fetch_tree(REF))

    def test_server_error_is_api_error(self) -> None:
        """Other non-200 statuses raise GitHubApiError."""
        handler = lambda request: httpx.Response(502)  # noqa: E731

        with pytest.raises(GitHubApiError):
            _run(handler, lambda a: a.fetch_tree(REF))

    def test_transport_error_is_api_error(self) -> None:
        """Network failures and timeouts are wrapped in GitHubApiError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout("timed out", request=request)

        with pytest.raises(GitHubApiError):
            _run(handler, lambda a: a.fetch_tree(REF))


class TestFetchFileContent:
    """Test GitHubRestAdapter.fetch_file_content."""

    def test_decodes_base64(self) -> None:
        """Base64 contents are decoded to UTF-8 text."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200,
                json={"encoding": "base64", "content": _b64("console.log('hé');".encode())},
            )

        text = _run(handler, lambda a: a.fetch_file_content(REF, "js/game.js"))

        assert text == "console.log('hé');"
        assert seen[0].url.path == "/repos/acme/platform-game/contents/js/game.js"

    def test_line_wrapped_base64(self) -> None:
        """GitHub wraps base64 at 60 columns; newlines are ignored."""
        encoded = _b64(b"x" * 100)
        wrapped = "\n".join(encoded[i : i + 60] for i in range(0, len(encoded), 60))
        handler = lambda request: httpx.Response(  # noqa: E731
            200, json={"encoding": "base64", "content": wrapped}
        )

        assert _run(handler, lambda a: a.fetch_file_content(REF, "a.js")) == "x" * 100

    def test_non_200_returns_none(self) -> None:
        """A missing file yields None instead of raising."""
        handler = lambda request: httpx.Response(404)  # noqa: E731

        assert _run(handler, lambda a: a.fetch_file_content(REF, "gone.js")) is None

    def test_directory_listing_returns_none(self) -> None:
        """A JSON array (directory) is not file content."""
        handler = lambda request: httpx.Response(200, json=[{"name": "a.js"}])  # noqa: E731

        assert _run(handler, lambda a: a.fetch_file_content(REF, "js")) is None

    def test_non_base64_encoding_returns_none(self) -> None:
        """Large files come back with encoding "none" and no content."""
        handler = lambda request: httpx.Response(  # noqa: E731
            200, json={"encoding": "none", "content": ""}
        )

        assert _run(handler, lambda a: a.fetch_file_content(REF, "big.js")) is None

    def test_binary_content_returns_none(self) -> None:
        """Bytes that are not valid UTF-8 yield None."""
        handler = lambda request: httpx.Response(  # noqa: E731
            200, json={"encoding": "base64", "content": _b64(b"\xff\xfe\x00\x89PNG")}
        )

        assert _run(handler, lambda a: a.fetch_file_content(REF, "img.js")) is None

    def test_transport_error_raises(self) -> None:
        """Network failures still surface as GitHubApiError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(GitHubApiError):
            _run(handler, lambda a: a.fetch_file_content(REF, "a.js"))
