"""Repository code fetch — tree → selection → concurrent fetch → sanitize → cache.

Turns a :class:`RepositoryRef` into one block of game-relevant source text,
bounded by its share of the reference budget.  Domain errors from the fetcher
(not found, rate limited, remote failure) propagate to the caller; a single
unreadable file only drops that file.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Sequence

from reference_resolver.domain.entities import (
    CachedResult,
    FetchedFile,
    RepoCode,
    ScoredFile,
)
from reference_resolver.domain.exceptions import ReferenceResolverError
from reference_resolver.domain.ports.repo_fetcher import RepoFetcher
from reference_resolver.domain.value_objects import RepositoryRef
from reference_resolver.services.content_sanitizer import sanitize_files
from reference_resolver.services.file_scorer import DEFAULT_MAX_FILES, select_files
from reference_resolver.services.repo_cache import RepoCache

logger = logging.getLogger(__name__)

TRUNCATION_MARKER = "\n// ... (truncated)"


def format_files(files: Sequence[FetchedFile]) -> str:
    return "\n\n".join(f"// ===== FILE: {f.path} =====\n{f.content}" for f in files)


def truncate(code: str, max_chars: int) -> str:
    if len(code) <= max_chars:
        return code
    return code[:max_chars] + TRUNCATION_MARKER


class RepoCodeService:
    """Fetches, filters and caches reference code for a repository.

    Parameters
    ----------
    fetcher:
        Adapter that can list a tree and fetch single files.
    cache:
        Shared result cache, keyed by ``owner/repo``.
    char_budget:
        Maximum characters of code for one repository (selection sub-budget
        and truncation point).
    max_file_size:
        Skip files larger than this many bytes.
    max_files:
        Maximum number of files to fetch per repository.
    concurrency:
        Maximum number of file fetches in flight at once.
    """

    def __init__(
        self,
        fetcher: RepoFetcher,
        cache: RepoCache,
        char_budget: int,
        max_file_size: int,
        max_files: int = DEFAULT_MAX_FILES,
        concurrency: int = 8,
    ) -> None:
        self._fetcher = fetcher
        self._cache = cache
        self._char_budget = char_budget
        self._max_file_size = max_file_size
        self._max_files = max_files
        self._concurrency = concurrency

    async def fetch(
        self, ref: RepositoryRef, hint_files: Sequence[str] = ()
    ) -> RepoCode | None:
        """Return formatted code for *ref*, or ``None`` if nothing usable exists."""
        key = ref.full_name

        cached = self._cache.get(key)
        if cached is not None:
            logger.info("GitHub cache hit: %s", key)
            return RepoCode(code=cached.code, files=cached.files, from_cache=True)

        logger.info("Fetching GitHub repo: %s", key)
        tree = await self._fetcher.fetch_tree(ref)
        if not tree:
            logger.info("Repository %s has an empty tree", key)
            return None

        selected = select_files(
            tree,
            char_budget=self._char_budget,
            max_file_size=self._max_file_size,
            hint_files=hint_files,
            max_files=self._max_files,
        )
        if not selected:
            logger.info("No game-relevant files found in %s", key)
            return None

        logger.info(
            "Selected %d files from %s: %s",
            len(selected),
            key,
            ", ".join(sf.path for sf in selected),
        )

        fetched = await self._fetch_files(ref, selected)
        if not fetched:
            return None

        files, redactions = sanitize_files(fetched)
        if redactions:
            logger.warning("Sanitized %d risky fragment(s) in %s", redactions, key)

        code = truncate(format_files(files), self._char_budget)
        paths = tuple(f.path for f in files)

        purged = self._cache.purge_expired()
        if purged:
            logger.debug("Purged %d expired cache entries", purged)
        self._cache.put(key, CachedResult(code=code, files=paths, timestamp=self._cache.now()))
        logger.info("GitHub cached: %s (%d chars, %d files)", key, len(code), len(paths))

        return RepoCode(code=code, files=paths, from_cache=False)

    # ── Concurrent fetch ────────────────────────────────────────────────

    async def _fetch_files(
        self, ref: RepositoryRef, selected: Sequence[ScoredFile]
    ) -> list[FetchedFile]:
        """Fetch file contents concurrently; failed or non-text files are dropped."""
        sem = asyncio.Semaphore(self._concurrency)

        async def _fetch_one(path: str) -> FetchedFile | None:
            async with sem:
                try:
                    content = await self._fetcher.fetch_file_content(ref, path)
                except ReferenceResolverError as exc:
                    logger.debug("Failed to fetch %s/%s — skipping: %s", ref.full_name, path, exc)
                    return None
            if content is None:
                logger.debug("Skipping non-text file %s/%s", ref.full_name, path)
                return None
            return FetchedFile(path=path, content=content)

        results = await asyncio.gather(*(_fetch_one(sf.path) for sf in selected))
        return [r for r in results if r is not None]
