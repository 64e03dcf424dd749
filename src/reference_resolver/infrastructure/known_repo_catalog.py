"""Known-repository catalog — lazily loaded from a JSON file on disk."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from reference_resolver.domain.entities import KnownRepoEntry
from reference_resolver.domain.exceptions import CatalogError

logger = logging.getLogger(__name__)


class _CatalogEntryModel(BaseModel):
    repo: str
    keywords: list[str] = Field(default_factory=list)
    main_files: list[str] = Field(default_factory=list, alias="mainFiles")
    description: str = ""

    model_config = ConfigDict(populate_by_name=True)


class _CatalogFileModel(BaseModel):
    repos: list[_CatalogEntryModel] = Field(default_factory=list)


def parse_catalog(raw: str) -> list[KnownRepoEntry]:
    """Parse catalog JSON (``{"repos": [...]}``) into entries, in file order."""
    try:
        parsed = _CatalogFileModel.model_validate_json(raw)
    except ValidationError as exc:
        raise CatalogError(f"Invalid known-repo catalog: {exc}") from exc

    return [
        KnownRepoEntry(
            repo=item.repo,
            keywords=tuple(kw.lower() for kw in item.keywords if kw),
            main_files=tuple(item.main_files),
            description=item.description,
        )
        for item in parsed.repos
    ]


class KnownRepoCatalog:
    """Loads the catalog once on first use and memoizes it.

    A missing or malformed file degrades to an empty catalog; the problem is
    logged, never raised.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._entries: list[KnownRepoEntry] | None = None
        self._lock = asyncio.Lock()

    @classmethod
    def from_entries(cls, entries: list[KnownRepoEntry]) -> KnownRepoCatalog:
        """Build a pre-loaded catalog (no file access)."""
        catalog = cls(Path("<memory>"))
        catalog._entries = list(entries)
        return catalog

    async def entries(self) -> list[KnownRepoEntry]:
        if self._entries is not None:
            return self._entries

        async with self._lock:
            if self._entries is None:
                self._entries = await self._load()
        return self._entries

    async def _load(self) -> list[KnownRepoEntry]:
        try:
            raw = await asyncio.to_thread(self._path.read_text, "utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not load known-repo catalog %s: %s", self._path, exc)
            return []

        try:
            entries = parse_catalog(raw)
        except CatalogError as exc:
            logger.warning("%s", exc)
            return []

        logger.info("Loaded %d known repositories from %s", len(entries), self._path)
        return entries
