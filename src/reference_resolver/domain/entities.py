"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field

from reference_resolver.domain.value_objects import RepositoryRef


@dataclass(frozen=True, slots=True)
class TreeEntry:
    """A single node from the GitHub tree API (blob or sub-tree)."""

    path: str
    kind: str  # "blob" or "tree"
    size: int = 0


@dataclass(frozen=True, slots=True)
class ScoredFile:
    """A tree entry annotated with its relevance score (negative = excluded)."""

    path: str
    size: int
    score: float


@dataclass(frozen=True, slots=True)
class FetchedFile:
    """Sanitized text of one selected repository file."""

    path: str
    content: str


@dataclass(frozen=True, slots=True)
class CachedResult:
    """Formatted code for one repository, stamped with its fetch time."""

    code: str
    files: tuple[str, ...]
    timestamp: float


@dataclass(frozen=True, slots=True)
class RepoCode:
    """What a repository fetch hands to the composer."""

    code: str
    files: tuple[str, ...]
    from_cache: bool = False


@dataclass(frozen=True, slots=True)
class KnownRepoEntry:
    """One curated catalog entry mapping keywords to a repository."""

    repo: str
    keywords: tuple[str, ...]
    main_files: tuple[str, ...] = ()
    description: str = ""


@dataclass(frozen=True, slots=True)
class KnownRepoMatch:
    """A catalog hit for a request, with the keyword that triggered it."""

    ref: RepositoryRef
    hint_files: tuple[str, ...]
    description: str
    matched_keyword: str


@dataclass(frozen=True, slots=True)
class SnippetEntry:
    """A hand-written code snippet tagged with genres and prompt keywords."""

    name: str
    content: str
    genres: tuple[str, ...]
    keywords: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class RankedSnippet:
    snippet: SnippetEntry
    score: int


@dataclass(frozen=True, slots=True)
class TemplateResult:
    """A built-in template game loaded from disk."""

    filename: str
    content: str


@dataclass(frozen=True, slots=True)
class GameConfig:
    """The subset of the survey game configuration this engine reads."""

    game_type: str | None = None


@dataclass(frozen=True, slots=True)
class ReferenceRequest:
    """Inputs for one resolution call."""

    prompt: str = ""
    genre: str | None = None
    game_config: GameConfig | None = None
    is_new_game: bool = False
    repo_url: str | None = None

    @property
    def effective_genre(self) -> str | None:
        if self.genre:
            return self.genre
        if self.game_config and self.game_config.game_type:
            return self.game_config.game_type
        return None


@dataclass(frozen=True, slots=True)
class ReferenceChunk:
    """One formatted, source-tagged block of reference text."""

    source_tag: str
    text: str


@dataclass(frozen=True, slots=True)
class ReferenceResult:
    """The final structured output returned to the caller."""

    reference_code: str = ""
    sources: list[str] = field(default_factory=list)
    total_chars: int = 0
