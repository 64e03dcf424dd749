"""Content sanitizer — neutralises risky code before it reaches the prompt.

This is pattern matching, not parsing.  It catches the common shapes of
hard-coded credentials, outbound network calls and dynamic evaluation in
fetched JavaScript, and nothing more: obfuscated or unusual code will get
through.  Treat it as one layer of defence, never as a trust boundary.

All regex patterns are pre-compiled.  The pass is idempotent: sanitizing
already-sanitized text changes nothing.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from reference_resolver.domain.entities import FetchedFile

# ── Compiled patterns ───────────────────────────────────────────────────────

# A quoted literal whose content contains a credential marker.  Only
# identifier-like characters may precede the marker inside the literal, so
# code sitting between two unrelated literals is never swallowed.  An opening
# quote glued to a word or another quote is a closing one, which keeps the
# single-quoted replacement from pairing with a later stray quote.
_SECRET_LITERAL_RE = re.compile(
    r"""(?<![\w'"`])(['"`])[\w.\-]*?(?:sk-|api[_\-]?key|token|secret|password)[^'"`\n]*\1""",
    re.IGNORECASE,
)

_NETWORK_CALL_RE = re.compile(
    r"""\b(?:fetch|axios(?:\.\w+)?)\s*\(\s*['"`]https?://[^)]*\)""",
    re.IGNORECASE,
)

_EVAL_RE = re.compile(r"\beval\s*\(")
_FUNCTION_CTOR_RE = re.compile(r"\bnew\s+Function\s*\(")

_REDACTED_LITERAL = "'REDACTED'"
_NETWORK_CALL_MARKER = "/* fetch removed for safety */"
_EVAL_MARKER = "/* eval removed */ ("
_FUNCTION_CTOR_MARKER = "/* Function removed */ ("

_RULES: list[tuple[str, re.Pattern[str], str]] = [
    ("SECRET", _SECRET_LITERAL_RE, _REDACTED_LITERAL),
    ("NETWORK", _NETWORK_CALL_RE, _NETWORK_CALL_MARKER),
    ("EVAL", _EVAL_RE, _EVAL_MARKER),
    ("FUNCTION", _FUNCTION_CTOR_RE, _FUNCTION_CTOR_MARKER),
]


# ── Result type ─────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class SanitizedResult:
    """Outcome of a sanitization pass."""

    clean_text: str
    redaction_count: int


# ── Public API ──────────────────────────────────────────────────────────────


def sanitize(text: str) -> SanitizedResult:
    """Apply every rule to *text* and count the replacements made."""
    count = 0
    result = text

    for _label, pattern, replacement in _RULES:
        # Replacement strings are literal text, not templates
        result, num = pattern.subn(lambda _m, r=replacement: r, result)
        count += num

    return SanitizedResult(clean_text=result, redaction_count=count)


def sanitize_files(files: Iterable[FetchedFile]) -> tuple[list[FetchedFile], int]:
    """Sanitize a batch of fetched files; return cleaned files + total redactions."""
    total = 0
    cleaned: list[FetchedFile] = []
    for f in files:
        res = sanitize(f.content)
        cleaned.append(FetchedFile(path=f.path, content=res.clean_text))
        total += res.redaction_count
    return cleaned, total
