"""Reference sources — one strategy per kind of reference material.

The composer runs these in a fixed order (explicit repository, known
repository, template, snippets).  The order is a priority policy: earlier
sources get first claim on the shared character budget.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from reference_resolver.domain.entities import ReferenceChunk, ReferenceRequest
from reference_resolver.domain.value_objects import RepositoryRef
from reference_resolver.infrastructure.template_store import TemplateStore
from reference_resolver.services.known_repo_matcher import KnownRepoMatcher
from reference_resolver.services.reference_formatter import (
    github_chunk,
    snippet_chunk,
    template_chunk,
)
from reference_resolver.services.repo_code import RepoCodeService
from reference_resolver.services.snippet_ranker import rank_snippets

logger = logging.getLogger(__name__)


@dataclass
class ResolutionState:
    """Facts earlier sources leave for later ones within a single call."""

    explicit_ref: RepositoryRef | None = None


class ReferenceSource(Protocol):
    """A producer of candidate chunks, in the order they should be tried."""

    name: str

    async def collect(
        self, request: ReferenceRequest, state: ResolutionState
    ) -> list[ReferenceChunk]:
        ...


class GitHubUrlSource:
    """Code from a repository the user named explicitly."""

    name = "github"

    def __init__(self, repo_code: RepoCodeService) -> None:
        self._repo_code = repo_code

    async def collect(
        self, request: ReferenceRequest, state: ResolutionState
    ) -> list[ReferenceChunk]:
        ref = RepositoryRef.parse(request.repo_url) if request.repo_url else None
        if ref is None:
            ref = RepositoryRef.find_in_text(request.prompt)
        if ref is None:
            return []

        state.explicit_ref = ref
        logger.info("GitHub URL detected: %s", ref.full_name)

        result = await self._repo_code.fetch(ref)
        if result is None:
            return []
        return [github_chunk("github", ref, result)]


class KnownRepoSource:
    """Code from a curated repository whose keywords appear in the prompt."""

    name = "known-repo"

    def __init__(self, matcher: KnownRepoMatcher, repo_code: RepoCodeService) -> None:
        self._matcher = matcher
        self._repo_code = repo_code

    async def collect(
        self, request: ReferenceRequest, state: ResolutionState
    ) -> list[ReferenceChunk]:
        # Never double-fetch when the user already pointed at a repository
        if state.explicit_ref is not None:
            return []

        match = await self._matcher.match(request.prompt)
        if match is None:
            return []

        logger.info(
            "Known repo match: %r → %s", match.matched_keyword, match.ref.full_name
        )
        result = await self._repo_code.fetch(match.ref, match.hint_files)
        if result is None:
            return []
        return [github_chunk("known-repo", match.ref, result, match.description)]


class TemplateSource:
    """A full built-in game for brand-new projects of a known genre."""

    name = "template"

    def __init__(self, store: TemplateStore) -> None:
        self._store = store

    async def collect(
        self, request: ReferenceRequest, state: ResolutionState
    ) -> list[ReferenceChunk]:
        genre = request.effective_genre
        if not request.is_new_game or not genre:
            return []

        template = await self._store.load(genre)
        if template is None:
            return []
        return [template_chunk(template, genre)]


class SnippetSource:
    """Ranked snippets; each one is admitted or skipped on its own."""

    name = "snippets"

    async def collect(
        self, request: ReferenceRequest, state: ResolutionState
    ) -> list[ReferenceChunk]:
        ranked = rank_snippets(request.effective_genre, request.prompt)
        return [snippet_chunk(r.snippet) for r in ranked]
