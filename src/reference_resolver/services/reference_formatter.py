"""Reference formatter — renders each source as a banner-delimited chunk.

Every block names its provenance inline so a human reviewing a generation can
see exactly what reference material influenced it.
"""

from __future__ import annotations

from typing import Sequence

from reference_resolver.domain.entities import (
    ReferenceChunk,
    RepoCode,
    SnippetEntry,
    TemplateResult,
)
from reference_resolver.domain.value_objects import RepositoryRef

BANNER = (
    "REFERENCE CODE LIBRARY (use these as a starting point — "
    "adapt to match the kid's request):"
)
_RULE = "// " + "═" * 58


def github_chunk(
    tag: str, ref: RepositoryRef, repo_code: RepoCode, description: str = ""
) -> ReferenceChunk:
    lines = [
        _RULE,
        f"// GITHUB REFERENCE: {ref.full_name}",
    ]
    if description:
        lines.append(f"// {description}")
    lines += [
        f"// Files: {', '.join(repo_code.files)}",
        "// Adapt this code to match what the kid wants. Don't copy it exactly —",
        "// use it as inspiration for mechanics, structure, and patterns.",
        _RULE,
        "",
        repo_code.code,
    ]
    return ReferenceChunk(source_tag=f"{tag}:{ref.full_name}", text="\n".join(lines))


def template_chunk(template: TemplateResult, genre: str) -> ReferenceChunk:
    text = "\n".join(
        [
            _RULE,
            f"// BUILT-IN TEMPLATE: {genre} ({template.filename})",
            f"// This is a working {genre} game template. Use it as your starting point.",
            "// Restyle, retheme, and modify it to match the kid's description.",
            _RULE,
            "",
            template.content,
        ]
    )
    return ReferenceChunk(source_tag=f"template:{template.filename}", text=text)


def snippet_chunk(snippet: SnippetEntry) -> ReferenceChunk:
    return ReferenceChunk(
        source_tag=f"snippet:{snippet.name}",
        text=f"// ── SNIPPET: {snippet.name} ──\n{snippet.content}",
    )


def assemble(chunks: Sequence[ReferenceChunk]) -> str:
    """Join admitted chunks under the leading banner; empty input gives ``""``."""
    if not chunks:
        return ""
    return "\n".join([BANNER, "", *(c.text for c in chunks)])
