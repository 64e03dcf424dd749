"""GitHub REST API adapter — implements the RepoFetcher port."""

from __future__ import annotations

import base64
import binascii
import logging
from datetime import datetime, timezone
from urllib.parse import quote

import httpx

from reference_resolver.domain.entities import TreeEntry
from reference_resolver.domain.exceptions import (
    GitHubApiError,
    GitHubRateLimitError,
    RepositoryNotFoundError,
)
from reference_resolver.domain.value_objects import RepositoryRef

logger = logging.getLogger(__name__)

_GITHUB_API = "https://api.github.com"
_USER_AGENT = "reference-resolver/1.0"


class GitHubRestAdapter:
    """Concrete RepoFetcher backed by the GitHub v3 REST API.

    No retries happen here.  Timeouts come from the injected client.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        token: str | None = None,
        api_base: str = _GITHUB_API,
    ) -> None:
        self._client = client
        self._api_base = api_base.rstrip("/")
        self._api_headers: dict[str, str] = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": _USER_AGENT,
        }
        if token:
            self._api_headers["Authorization"] = f"Bearer {token}"

    async def fetch_tree(self, ref: RepositoryRef) -> list[TreeEntry]:
        """GET /repos/{owner}/{repo}/git/trees/HEAD?recursive=1 → [TreeEntry]."""
        resp = await self._api_get(
            f"/repos/{ref.owner}/{ref.repo}/git/trees/HEAD",
            params={"recursive": "1"},
        )
        data = resp.json()
        tree = data.get("tree") or []

        if data.get("truncated"):
            logger.info("Tree listing for %s was truncated by GitHub", ref.full_name)

        return [
            TreeEntry(
                path=item["path"],
                kind=item.get("type", "blob"),
                size=item.get("size") or 0,
            )
            for item in tree
            if "path" in item
        ]

    async def fetch_file_content(self, ref: RepositoryRef, path: str) -> str | None:
        """GET /repos/{owner}/{repo}/contents/{path} → decoded text or ``None``."""
        endpoint = f"/repos/{ref.owner}/{ref.repo}/contents/{quote(path)}"
        url = f"{self._api_base}{endpoint}"
        try:
            resp = await self._client.get(url, headers=self._api_headers)
        except httpx.HTTPError as exc:
            raise GitHubApiError(f"Network error fetching {url}: {exc}") from exc

        if resp.status_code != 200:
            logger.debug(
                "GitHub returned HTTP %d for %s/%s — skipping",
                resp.status_code,
                ref.full_name,
                path,
            )
            return None

        try:
            data = resp.json()
        except ValueError:
            logger.debug("Non-JSON contents response for %s/%s", ref.full_name, path)
            return None

        if not isinstance(data, dict):
            # A directory listing comes back as a JSON array
            return None
        if data.get("encoding") != "base64" or not data.get("content"):
            return None

        try:
            return base64.b64decode(data["content"]).decode("utf-8")
        except (binascii.Error, ValueError):
            logger.debug("Could not decode %s/%s as text", ref.full_name, path)
            return None

    async def _api_get(
        self,
        endpoint: str,
        params: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Perform a GitHub API GET request with error translation."""
        url = f"{self._api_base}{endpoint}"
        try:
            resp = await self._client.get(
                url, headers=self._api_headers, params=params
            )
        except httpx.HTTPError as exc:
            raise GitHubApiError(f"Network error fetching {url}: {exc}") from exc

        if resp.status_code == 200:
            return resp

        if resp.status_code == 404:
            raise RepositoryNotFoundError(
                "Repository not found. Make sure the URL points to a public repository."
            )

        if resp.status_code == 403:
            remaining = resp.headers.get("x-ratelimit-remaining", "")
            if remaining == "0" or "retry-after" in resp.headers:
                raise GitHubRateLimitError(
                    f"GitHub API rate limit exceeded. Resets at {_reset_time(resp)}. "
                    "Set the GITHUB_TOKEN environment variable to increase the limit."
                )
            raise RepositoryNotFoundError(
                "Access denied. The repository may be private."
            )

        if resp.status_code == 429:
            raise GitHubRateLimitError("GitHub API rate limit exceeded (HTTP 429).")

        raise GitHubApiError(
            f"GitHub API returned HTTP {resp.status_code} for {url}"
        )


def _reset_time(resp: httpx.Response) -> str:
    reset_raw = resp.headers.get("x-ratelimit-reset", "")
    try:
        return datetime.fromtimestamp(int(reset_raw), tz=timezone.utc).strftime(
            "%Y-%m-%d %H:%M:%S UTC"
        )
    except (ValueError, OSError):
        return reset_raw or "unknown"
