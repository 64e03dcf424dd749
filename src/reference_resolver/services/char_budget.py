"""Shared character budget for one resolution call.

Chunks are admitted whole or not at all; the only place text is ever cut is
the repository code truncation in :mod:`reference_resolver.services.repo_code`.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from reference_resolver.domain.entities import ReferenceChunk


@dataclass
class CharBudget:
    """Monotonically decreasing budget plus the chunks admitted so far."""

    limit: int
    remaining: int = field(init=False)
    chunks: list[ReferenceChunk] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.remaining = max(self.limit, 0)

    def fits(self, chunk: ReferenceChunk) -> bool:
        return len(chunk.text) <= self.remaining

    def admit(self, chunk: ReferenceChunk) -> bool:
        """Append *chunk* and deduct its length if it fits; report whether it did."""
        if not self.fits(chunk):
            return False
        self.chunks.append(chunk)
        self.remaining -= len(chunk.text)
        return True

    @property
    def sources(self) -> list[str]:
        return [c.source_tag for c in self.chunks]
