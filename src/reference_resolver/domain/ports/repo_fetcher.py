"""Port: repository fetcher — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from reference_resolver.domain.entities import TreeEntry
from reference_resolver.domain.value_objects import RepositoryRef


class RepoFetcher(Protocol):
    """Abstract contract for fetching GitHub repository data."""

    async def fetch_tree(self, ref: RepositoryRef) -> list[TreeEntry]:
        """Return the recursive file tree of the default branch."""
        ...

    async def fetch_file_content(self, ref: RepositoryRef, path: str) -> str | None:
        """Return the decoded text of one file, or ``None`` if it is not text."""
        ...
