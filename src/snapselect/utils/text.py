from __future__ import annotations

import re

# Regex pré-compilado para performance
_WHITESPACE_RUN = re.compile(r"\s+")


def collapse_whitespace(s: str | None) -> str:
    """Trim and collapse internal whitespace runs to a single space.

    Case and accents are preserved; visible-text matching stays
    case-sensitive even on the fallback pass.

    Examples:
        >>> collapse_whitespace("  Onion \\n  gravy ")
        'Onion gravy'
        >>> collapse_whitespace(None)
        ''
    """
    if not s:
        return ""
    return _WHITESPACE_RUN.sub(" ", s.strip())
