"""File filtering — decide which repository files can never be reference code."""

from __future__ import annotations

import re

from reference_resolver.domain.entities import TreeEntry

# Game-relevant extensions, highest priority first.
GAME_EXTENSIONS: tuple[str, ...] = (".html", ".htm", ".js", ".ts", ".css")

SKIP_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"node_modules", re.IGNORECASE),
    re.compile(r"(?:^|/)\.git/"),
    re.compile(r"package-lock"),
    re.compile(r"\.min\."),
    re.compile(r"\.map$"),
    re.compile(r"\.test\."),
    re.compile(r"\.spec\."),
    re.compile(r"webpack", re.IGNORECASE),
    re.compile(r"rollup", re.IGNORECASE),
    re.compile(r"babel", re.IGNORECASE),
    re.compile(r"eslint", re.IGNORECASE),
    re.compile(r"tsconfig"),
    re.compile(r"\.d\.ts$"),
    re.compile(r"\.(?:png|jpe?g|gif|svg|ico|webp|bmp)$", re.IGNORECASE),
    re.compile(r"\.(?:mp3|wav|ogg|mp4|webm)$", re.IGNORECASE),
    re.compile(r"\.(?:woff2?|ttf|eot|otf)$", re.IGNORECASE),
)


def filename(path: str) -> str:
    return path.rsplit("/", maxsplit=1)[-1]


def extension(path: str) -> str:
    name = filename(path)
    dot = name.rfind(".")
    return name[dot:].lower() if dot != -1 else ""


def matches_skip_pattern(path: str) -> bool:
    """Return *True* if *path* looks like a build artifact, test, config or binary."""
    lower = path.lower()
    return any(pattern.search(lower) for pattern in SKIP_PATTERNS)


def is_game_file(path: str) -> bool:
    return extension(path) in GAME_EXTENSIONS


def should_skip(entry: TreeEntry, max_file_size: int) -> bool:
    """Return *True* if the entry must be excluded regardless of any boost."""
    if entry.kind != "blob":
        return True
    if matches_skip_pattern(entry.path):
        return True
    if entry.size > max_file_size:
        return True
    return not is_game_file(entry.path)
