"""API routes — thin controllers that delegate to the use case."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from reference_resolver.interface.dependencies import get_repo_cache, get_use_case
from reference_resolver.interface.schemas import (
    ErrorResponse,
    ResolveRequest,
    ResolveResponse,
)
from reference_resolver.services.repo_cache import RepoCache
from reference_resolver.services.resolve_references import ResolveReferencesUseCase

router = APIRouter(prefix="/references", tags=["references"])


@router.post(
    "/resolve",
    response_model=ResolveResponse,
    responses={
        422: {"model": ErrorResponse, "description": "Malformed request body"},
        500: {"model": ErrorResponse, "description": "Unexpected server error"},
    },
)
async def resolve(
    body: ResolveRequest,
    use_case: ResolveReferencesUseCase = Depends(get_use_case),
) -> ResolveResponse:
    """Assemble reference material for one generation request."""
    result = await use_case.execute(body.to_domain())
    return ResolveResponse.from_domain(result)


@router.delete(
    "/cache",
    status_code=204,
    summary="Clear the repository cache",
    description="Drops every cached repository result; the next request for "
    "a repository fetches it from GitHub again.",
)
async def clear_cache(cache: RepoCache = Depends(get_repo_cache)) -> Response:
    """Drop every cached repository result."""
    cache.clear()
    return Response(status_code=204)
