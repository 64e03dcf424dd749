"""Resolve-references use case — the reference composer.

This is the single entry point for the business logic.  It runs an ordered
list of :class:`ReferenceSource` strategies against one shared
:class:`CharBudget` and folds whatever fits into a single reference document.

A failing source contributes nothing; the use case itself never raises, so
the caller's generation flow always receives a valid (possibly empty) result.
"""

from __future__ import annotations

import logging
from typing import Sequence

from reference_resolver.domain.entities import (
    ReferenceChunk,
    ReferenceRequest,
    ReferenceResult,
)
from reference_resolver.domain.exceptions import ReferenceResolverError
from reference_resolver.infrastructure.template_store import TemplateStore
from reference_resolver.services.char_budget import CharBudget
from reference_resolver.services.known_repo_matcher import KnownRepoMatcher
from reference_resolver.services.reference_formatter import assemble
from reference_resolver.services.reference_sources import (
    GitHubUrlSource,
    KnownRepoSource,
    ReferenceSource,
    ResolutionState,
    SnippetSource,
    TemplateSource,
)
from reference_resolver.services.repo_code import RepoCodeService

logger = logging.getLogger(__name__)


def default_sources(
    repo_code: RepoCodeService,
    matcher: KnownRepoMatcher,
    templates: TemplateStore,
) -> list[ReferenceSource]:
    """The standard precedence: explicit repo, known repo, template, snippets."""
    return [
        GitHubUrlSource(repo_code),
        KnownRepoSource(matcher, repo_code),
        TemplateSource(templates),
        SnippetSource(),
    ]


class ResolveReferencesUseCase:
    """Orchestrates the request → reference document pipeline.

    Parameters
    ----------
    sources:
        Reference sources in precedence order.  Each runs only after the
        previous one has finished and charged the budget.
    max_chars:
        Total character budget for all admitted chunks.
    """

    def __init__(self, sources: Sequence[ReferenceSource], max_chars: int) -> None:
        self._sources = list(sources)
        self._max_chars = max_chars

    # ── Public entry point ──────────────────────────────────────────────

    async def execute(self, request: ReferenceRequest) -> ReferenceResult:
        """Run every source in order and return the merged reference document."""
        logger.info(
            "Resolving references: genre=%r, is_new=%s, prompt=%r",
            request.effective_genre,
            request.is_new_game,
            (request.prompt or "")[:60],
        )

        budget = CharBudget(limit=self._max_chars)
        state = ResolutionState()

        for source in self._sources:
            chunks = await self._collect(source, request, state)
            for chunk in chunks:
                if not budget.admit(chunk):
                    logger.debug(
                        "Skipping %s (%d chars, %d remaining)",
                        chunk.source_tag,
                        len(chunk.text),
                        budget.remaining,
                    )

        if not budget.chunks:
            logger.info("No reference material found for this request")
            return ReferenceResult(reference_code="", sources=[], total_chars=0)

        reference_code = assemble(budget.chunks)
        result = ReferenceResult(
            reference_code=reference_code,
            sources=budget.sources,
            total_chars=len(reference_code),
        )
        logger.info(
            "Reference resolved: %d sources, %d chars (%s)",
            len(result.sources),
            result.total_chars,
            ", ".join(result.sources),
        )
        return result

    # ── Failure isolation ───────────────────────────────────────────────

    @staticmethod
    async def _collect(
        source: ReferenceSource, request: ReferenceRequest, state: ResolutionState
    ) -> list[ReferenceChunk]:
        try:
            return await source.collect(request, state)
        except ReferenceResolverError as exc:
            logger.warning("Reference source %s unavailable: %s", source.name, exc)
        except Exception:
            logger.exception("Reference source %s failed unexpectedly", source.name)
        return []
