"""Domain exception hierarchy.

Adapters raise these; the reference composer catches them per source and
degrades that source to "contributes nothing".  Parse misses and undecodable
files are not exceptions at all: they are ``None`` results.
"""

from __future__ import annotations


class ReferenceResolverError(Exception):
    """Base exception for the entire application."""


# ── GitHub API errors ───────────────────────────────────────────────────────


class RepositoryNotFoundError(ReferenceResolverError):
    """The repository does not exist or is not accessible (404 / 403)."""


class GitHubRateLimitError(ReferenceResolverError):
    """GitHub API rate limit exceeded (429 / 403 with rate-limit header)."""


class GitHubApiError(ReferenceResolverError):
    """Any other non-success GitHub response, transport error or timeout."""


# ── Configuration errors ────────────────────────────────────────────────────


class CatalogError(ReferenceResolverError):
    """The known-repository catalog is missing or malformed."""
