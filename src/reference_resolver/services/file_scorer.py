"""File relevance scoring — pick the files most likely to be game logic.

Scores are heuristic and deterministic: extension priority, well-known entry
point names, path depth and game-domain filename keywords.  Hint files from a
known-repository match get a large boost so they nearly always sort first.
Exclusions are authoritative: no boost can revive an excluded file.
"""

from __future__ import annotations

import re
from typing import Iterable, Sequence

from reference_resolver.domain.entities import ScoredFile, TreeEntry
from reference_resolver.services.file_filter import (
    GAME_EXTENSIONS,
    extension,
    filename,
    should_skip,
)

# ── Heuristic weight constants ──────────────────────────────────────────────

EXCLUDED = -1.0
DEFAULT_MAX_FILES = 8

_ENTRY_POINT_BONUS = 10.0
_DEPTH_PENALTY = 0.5
_GAME_KEYWORD_BONUS = 3.0
_UTILITY_BONUS = 1.0
_README_PENALTY = 2.0
_HINT_BONUS = 20.0

ENTRY_POINT_NAMES: frozenset[str] = frozenset(
    {
        "index.html", "game.html", "main.html",
        "game.js", "main.js", "app.js", "index.js", "script.js",
        "game.ts", "main.ts", "app.ts",
    }
)

_GAME_KEYWORD_RE = re.compile(
    r"game|player|enemy|level|scene|render|physics|collision|input|controls",
    re.IGNORECASE,
)
_UTILITY_RE = re.compile(r"util|helper|config|constant", re.IGNORECASE)
_README_RE = re.compile(r"readme", re.IGNORECASE)


def _extension_rank(path: str) -> float:
    return float(len(GAME_EXTENSIONS) - GAME_EXTENSIONS.index(extension(path)))


def _depth(path: str) -> int:
    return path.count("/")


def _is_hinted(path: str, hint_files: Sequence[str]) -> bool:
    return any(path == hint or path.endswith(hint) for hint in hint_files if hint)


# ── Public API ──────────────────────────────────────────────────────────────


def score_file(
    path: str,
    size: int,
    max_file_size: int,
    hint_files: Sequence[str] = (),
) -> float:
    """Return the relevance score of one blob, or ``EXCLUDED`` (-1)."""
    if should_skip(TreeEntry(path=path, kind="blob", size=size), max_file_size):
        return EXCLUDED

    name = filename(path).lower()
    score = _extension_rank(path)

    if name in ENTRY_POINT_NAMES:
        score += _ENTRY_POINT_BONUS

    score -= _depth(path) * _DEPTH_PENALTY

    if _GAME_KEYWORD_RE.search(name):
        score += _GAME_KEYWORD_BONUS
    if _UTILITY_RE.search(name):
        score += _UTILITY_BONUS
    if _README_RE.search(name):
        score -= _README_PENALTY

    if _is_hinted(path, hint_files):
        score += _HINT_BONUS

    return score


def score_tree(
    tree: Iterable[TreeEntry],
    max_file_size: int,
    hint_files: Sequence[str] = (),
) -> list[ScoredFile]:
    """Score every blob and return the non-excluded ones, best first.

    A file whose bonuses and penalties net out below zero is dropped too.
    Sorting is stable, so equal scores keep tree order.
    """
    scored = [
        ScoredFile(
            path=entry.path,
            size=entry.size,
            score=score_file(entry.path, entry.size, max_file_size, hint_files),
        )
        for entry in tree
        if entry.kind == "blob"
    ]
    kept = [sf for sf in scored if sf.score >= 0]
    kept.sort(key=lambda sf: sf.score, reverse=True)
    return kept


def select_files(
    tree: Iterable[TreeEntry],
    char_budget: int,
    max_file_size: int,
    hint_files: Sequence[str] = (),
    max_files: int = DEFAULT_MAX_FILES,
) -> list[ScoredFile]:
    """Greedily pick the best files whose combined size fits *char_budget*.

    File size in bytes stands in for character count.  A file that would
    overflow the budget is skipped and smaller, lower-ranked files are still
    tried; selection stops once *max_files* are accepted.
    """
    selected: list[ScoredFile] = []
    total = 0

    for sf in score_tree(tree, max_file_size, hint_files):
        if total + sf.size > char_budget:
            continue
        selected.append(sf)
        total += sf.size
        if len(selected) >= max_files:
            break

    return selected
