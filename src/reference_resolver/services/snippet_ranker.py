"""Snippet ranking — score the compiled-in library against genre and prompt."""

from __future__ import annotations

import re
from typing import Sequence

from reference_resolver.domain.entities import RankedSnippet, SnippetEntry
from reference_resolver.snippets.library import SNIPPET_LIBRARY

_GENRE_SCORE = 2
_KEYWORD_SCORE = 1

# Keywords this short only count as whole words ("ai" is not in "rain")
_WHOLE_WORD_MAX_LEN = 2


def keyword_in(keyword: str, prompt_lower: str) -> bool:
    if len(keyword) <= _WHOLE_WORD_MAX_LEN:
        return re.search(rf"\b{re.escape(keyword)}\b", prompt_lower) is not None
    return keyword in prompt_lower


def score_snippet(snippet: SnippetEntry, genre: str | None, prompt_lower: str) -> int:
    score = 0
    if genre and genre in snippet.genres:
        score += _GENRE_SCORE
    # Keyword hits count once per snippet, however many match
    if any(keyword_in(kw, prompt_lower) for kw in snippet.keywords):
        score += _KEYWORD_SCORE
    return score


def rank_snippets(
    genre: str | None,
    prompt: str | None,
    library: Sequence[SnippetEntry] = SNIPPET_LIBRARY,
) -> list[RankedSnippet]:
    """Return relevant snippets, highest score first, library order on ties."""
    lower = (prompt or "").lower()
    ranked: list[RankedSnippet] = []
    for snippet in library:
        score = score_snippet(snippet, genre, lower)
        if score > 0:
            ranked.append(RankedSnippet(snippet=snippet, score=score))
    ranked.sort(key=lambda r: r.score, reverse=True)
    return ranked
