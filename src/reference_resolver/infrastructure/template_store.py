"""Built-in template store — one full example game per supported genre."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from reference_resolver.domain.entities import TemplateResult

logger = logging.getLogger(__name__)

# Several genres alias to the closest available template.
GENRE_TEMPLATE_MAP: dict[str, str] = {
    "racing": "racing.html",
    "street-racing": "racing.html",
    "driving": "racing.html",
    "shooter": "shooter.html",
    "platformer": "platformer.html",
    "frogger": "frogger.html",
    "puzzle": "puzzle.html",
    "clicker": "clicker.html",
    "rpg": "rpg.html",
    "endless-runner": "platformer.html",
    "fighting": "shooter.html",
    "tower-defense": "shooter.html",
    "card": "puzzle.html",
}


class TemplateStore:
    """Reads template files from a fixed directory by genre."""

    def __init__(self, templates_dir: Path) -> None:
        self._dir = Path(templates_dir)

    async def load(self, genre: str | None) -> TemplateResult | None:
        """Return the template for *genre*, or ``None`` if unmapped or unreadable."""
        if not genre:
            return None
        filename = GENRE_TEMPLATE_MAP.get(genre)
        if not filename:
            return None

        try:
            content = await asyncio.to_thread((self._dir / filename).read_text, "utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Template %s for genre %r unavailable: %s", filename, genre, exc)
            return None

        return TemplateResult(filename=filename, content=content)

    def available_genres(self) -> list[str]:
        """Genres whose template file is present on disk."""
        return [
            genre
            for genre, filename in GENRE_TEMPLATE_MAP.items()
            if (self._dir / filename).is_file()
        ]
