"""Pydantic request / response DTOs for the API boundary."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from reference_resolver.domain.entities import (
    GameConfig,
    ReferenceRequest,
    ReferenceResult,
)


class GameConfigSchema(BaseModel):
    """The survey game configuration; only ``gameType`` is read."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    game_type: str | None = Field(default=None, alias="gameType")


class ResolveRequest(BaseModel):
    """Request body for ``POST /references/resolve``."""

    prompt: str = ""
    genre: str | None = None
    game_config: GameConfigSchema | None = None
    is_new_game: bool = False
    repo_url: str | None = None

    def to_domain(self) -> ReferenceRequest:
        config = None
        if self.game_config is not None:
            config = GameConfig(game_type=self.game_config.game_type)
        return ReferenceRequest(
            prompt=self.prompt,
            genre=self.genre or None,
            game_config=config,
            is_new_game=self.is_new_game,
            repo_url=self.repo_url or None,
        )


class ResolveResponse(BaseModel):
    """Successful response from ``POST /references/resolve``."""

    reference_code: str
    sources: list[str]
    total_chars: int

    @classmethod
    def from_domain(cls, result: ReferenceResult) -> ResolveResponse:
        return cls(
            reference_code=result.reference_code,
            sources=list(result.sources),
            total_chars=result.total_chars,
        )


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    message: str
