"""Shared fixtures: an in-memory repository fetcher and a controllable clock."""

from __future__ import annotations

from typing import Callable

import pytest

from reference_resolver.domain.entities import TreeEntry
from reference_resolver.domain.value_objects import RepositoryRef


class FakeFetcher:
    """RepoFetcher double serving a fixed tree and file map, recording calls."""

    def __init__(
        self,
        files: dict[str, str],
        extra_tree: list[TreeEntry] | None = None,
        tree_error: Exception | None = None,
        file_errors: dict[str, Exception] | None = None,
    ) -> None:
        self.files = files
        self.tree = [
            TreeEntry(path=path, kind="blob", size=len(content))
            for path, content in files.items()
        ] + list(extra_tree or [])
        self.tree_error = tree_error
        self.file_errors = file_errors or {}
        self.tree_calls: list[RepositoryRef] = []
        self.file_calls: list[str] = []

    async def fetch_tree(self, ref: RepositoryRef) -> list[TreeEntry]:
        self.tree_calls.append(ref)
        if self.tree_error is not None:
            raise self.tree_error
        return list(self.tree)

    async def fetch_file_content(self, ref: RepositoryRef, path: str) -> str | None:
        self.file_calls.append(path)
        if path in self.file_errors:
            raise self.file_errors[path]
        return self.files.get(path)

    @property
    def remote_calls(self) -> int:
        return len(self.tree_calls) + len(self.file_calls)


class FakeClock:
    def __init__(self, start: float = 1_000.0) -> None:
        self.now = start

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def make_fetcher() -> Callable[..., FakeFetcher]:
    return FakeFetcher


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
