"""FastAPI dependency injection wiring."""

from __future__ import annotations

import httpx

from reference_resolver.infrastructure.config import get_settings
from reference_resolver.infrastructure.github_rest_adapter import GitHubRestAdapter
from reference_resolver.infrastructure.known_repo_catalog import KnownRepoCatalog
from reference_resolver.infrastructure.template_store import TemplateStore
from reference_resolver.services.known_repo_matcher import KnownRepoMatcher
from reference_resolver.services.repo_cache import RepoCache
from reference_resolver.services.repo_code import RepoCodeService
from reference_resolver.services.resolve_references import (
    ResolveReferencesUseCase,
    default_sources,
)

_http_client: httpx.AsyncClient | None = None
_repo_cache: RepoCache | None = None
_catalog: KnownRepoCatalog | None = None


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client, _repo_cache, _catalog  # noqa: PLW0603

    settings = get_settings()
    _http_client = httpx.AsyncClient(
        timeout=httpx.Timeout(settings.github_timeout_seconds)
    )
    _repo_cache = RepoCache(ttl_seconds=settings.github_cache_ttl_seconds)
    _catalog = KnownRepoCatalog(settings.known_repos_path)


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client, _repo_cache, _catalog  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None
    _repo_cache = None
    _catalog = None


def get_repo_cache() -> RepoCache:
    assert _repo_cache is not None, "startup() was not called"
    return _repo_cache


def get_use_case() -> ResolveReferencesUseCase:
    """Build the use case around the shared client, cache and catalog."""
    settings = get_settings()

    assert _http_client is not None, "startup() was not called"
    assert _catalog is not None, "startup() was not called"

    token = settings.github_token.get_secret_value() if settings.github_token else None
    github_adapter = GitHubRestAdapter(
        client=_http_client, token=token, api_base=settings.github_api_url
    )
    repo_code = RepoCodeService(
        fetcher=github_adapter,
        cache=get_repo_cache(),
        char_budget=settings.github_char_budget,
        max_file_size=settings.github_max_file_size,
        max_files=settings.github_max_files,
        concurrency=settings.github_fetch_concurrency,
    )

    return ResolveReferencesUseCase(
        sources=default_sources(
            repo_code,
            KnownRepoMatcher(_catalog),
            TemplateStore(settings.templates_dir),
        ),
        max_chars=settings.reference_max_chars,
    )
