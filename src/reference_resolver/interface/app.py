"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from reference_resolver.interface.dependencies import shutdown, startup
from reference_resolver.interface.error_handlers import register_error_handlers
from reference_resolver.interface.routes import router

OPENAPI_TAGS = [
    {
        "name": "references",
        "description": "Resolve reference material for a generation request and "
        "manage the repository cache.",
    },
]


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage startup / shutdown of shared resources."""
    await startup()
    yield
    await shutdown()


def create_app() -> FastAPI:
    """Build and wire the FastAPI application."""
    app = FastAPI(
        title="Game Reference Resolver",
        version="1.0.0",
        description=(
            "Assembles bounded reference material (GitHub code, built-in "
            "templates and curated snippets) to prime a game-generation request."
        ),
        openapi_tags=OPENAPI_TAGS,
        lifespan=_lifespan,
    )

    register_error_handlers(app)
    app.include_router(router)

    # ── Health check (liveness only) ────────────────────────────

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
