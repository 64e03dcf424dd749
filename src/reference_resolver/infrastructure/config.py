"""Application configuration — loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent.parent
DEFAULT_KNOWN_REPOS_PATH = PACKAGE_DIR / "data" / "known_repos.json"
DEFAULT_TEMPLATES_DIR = PACKAGE_DIR / "templates"


class Settings(BaseSettings):
    """Central configuration loaded from env vars (or ``.env`` file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Optional: raises the GitHub rate limit from 60 to 5000 requests/hour
    github_token: SecretStr | None = None
    github_api_url: str = "https://api.github.com"
    github_timeout_seconds: float = Field(default=10.0, gt=0)
    github_cache_ttl_seconds: float = Field(default=24 * 60 * 60, gt=0)
    github_max_file_size: int = Field(default=100_000, gt=0)
    github_max_files: int = Field(default=8, gt=0)
    github_budget_share: float = Field(default=0.6, gt=0, le=1)
    github_fetch_concurrency: int = Field(default=8, gt=0)
    reference_max_chars: int = Field(default=30_000, ge=0)
    known_repos_path: Path = DEFAULT_KNOWN_REPOS_PATH
    templates_dir: Path = DEFAULT_TEMPLATES_DIR
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    @property
    def github_char_budget(self) -> int:
        """Share of the reference budget that fetched repository code may use."""
        return int(self.reference_max_chars * self.github_budget_share)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton application settings (cached after first call)."""
    return Settings()
