"""Value objects — self-validating domain primitives."""

from __future__ import annotations

import re
from dataclasses import dataclass

_SEGMENT = r"[A-Za-z0-9_.\-]+"

_GITHUB_URL_RE = re.compile(
    r"^(?:https?://)?(?:www\.)?github\.com/(?P<owner>[^/\s]+)/(?P<repo>[^/\s#?]+)",
    re.IGNORECASE,
)
_SHORTHAND_RE = re.compile(rf"^(?P<owner>{_SEGMENT})/(?P<repo>{_SEGMENT})$")
_EMBEDDED_URL_RE = re.compile(
    r"(?:https?://)?(?:www\.)?github\.com/(?P<owner>[^/\s]+)/(?P<repo>[^/\s#?]+)",
    re.IGNORECASE,
)


_TRAILING_PUNCTUATION = ".,;:!?)]}'\"`"


def _clean_repo(name: str) -> str:
    name = name.rstrip("/").rstrip(_TRAILING_PUNCTUATION)
    if name.endswith(".git"):
        name = name[: -len(".git")]
    return name


@dataclass(frozen=True, slots=True)
class RepositoryRef:
    """Identifies a GitHub repository by *owner* and *repo*.

    Equality is by the exact (owner, repo) pair, case included.  Parsing never
    raises: input that does not look like a repository reference yields
    ``None``.
    """

    owner: str
    repo: str

    @classmethod
    def parse(cls, text: str | None) -> RepositoryRef | None:
        """Parse a URL, a bare ``github.com/owner/repo`` form or ``owner/repo``."""
        if not text:
            return None
        cleaned = text.strip().rstrip("/")

        match = _GITHUB_URL_RE.match(cleaned)
        if match:
            return cls._from_match(match)

        match = _SHORTHAND_RE.match(cleaned)
        if match and match["owner"].lower() not in ("github.com", "www.github.com"):
            return cls._from_match(match)

        return None

    @classmethod
    def find_in_text(cls, text: str | None) -> RepositoryRef | None:
        """Return the first GitHub repository URL embedded in free text."""
        if not text:
            return None
        match = _EMBEDDED_URL_RE.search(text)
        if not match:
            return None
        return cls._from_match(match)

    @classmethod
    def _from_match(cls, match: re.Match[str]) -> RepositoryRef | None:
        repo = _clean_repo(match["repo"])
        if not repo:
            return None
        return cls(owner=match["owner"], repo=repo)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    def __str__(self) -> str:
        return self.full_name
