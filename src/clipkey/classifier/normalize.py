"""Input normalisation — trim whitespace and one layer of quotes."""

from __future__ import annotations

from typing import Optional

_QUOTES = ('"', "'")


def normalize(raw: Optional[str]) -> str:
    """Trim *raw* and strip one matching pair of surrounding quotes.

    >>> normalize('  "sk_live_abc"\\n')
    'sk_live_abc'
    >>> normalize('""')
    '""'
    """
    if not raw:
        return ""
    text = raw.strip()
    if len(text) > 2:
        for quote in _QUOTES:
            if text.startswith(quote) and text.endswith(quote):
                text = text[1:-1]
                break
    return text.strip()
