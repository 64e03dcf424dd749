"""Known-repository matching — keyword lookup against the curated catalog."""

from __future__ import annotations

import logging

from reference_resolver.domain.entities import KnownRepoMatch
from reference_resolver.domain.value_objects import RepositoryRef
from reference_resolver.infrastructure.known_repo_catalog import KnownRepoCatalog

logger = logging.getLogger(__name__)


class KnownRepoMatcher:
    """First-match-wins lookup: catalog order, then keyword order.  No scoring."""

    def __init__(self, catalog: KnownRepoCatalog) -> None:
        self._catalog = catalog

    async def match(self, text: str | None) -> KnownRepoMatch | None:
        lower = (text or "").lower()
        if not lower:
            return None

        for entry in await self._catalog.entries():
            keyword = next((kw for kw in entry.keywords if kw in lower), None)
            if keyword is None:
                continue

            ref = RepositoryRef.parse(entry.repo)
            if ref is None:
                logger.warning("Skipping catalog entry with invalid repo %r", entry.repo)
                continue

            return KnownRepoMatch(
                ref=ref,
                hint_files=entry.main_files,
                description=entry.description,
                matched_keyword=keyword,
            )

        return None
