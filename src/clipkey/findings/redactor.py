"""Value redaction for safe output.

Partial redaction keeps a vendor-style head (``ghp_``, ``sk_live_``,
``xoxb-``) or the first 4 characters, plus the last 2. At least
``MIN_HIDDEN`` characters always stay hidden.
"""

from __future__ import annotations

import re

MASK = "[REDACTED]"
MIN_HIDDEN = 6
MAX_HEAD = 12
TAIL = 2

# letter words joined by _ or -, ending in a delimiter: "sk_live_", "github_pat_"
_VENDOR_HEAD = re.compile(r"[A-Za-z]+(?:[_-][A-Za-z]+)*[_.-]")


def _head(value: str) -> str:
    m = _VENDOR_HEAD.match(value)
    if m and len(m.group()) <= MAX_HEAD and len(value) - m.end() - TAIL >= MIN_HIDDEN:
        return m.group()
    return value[:4]


def redact_partial(value: str) -> str:
    """Partial reveal: vendor head (or first 4) + last 2 chars.

    Example: ``ghp_R7kT...aK7e`` → ``ghp_...7e``
    """
    head = _head(value)
    if len(value) - len(head) - TAIL < MIN_HIDDEN:
        return MASK
    return f"{head}...{value[-TAIL:]}"


def redact_full(_value: str) -> str:
    return MASK


def redact(value: str, *, full: bool = False) -> str:
    """Redact a classified value."""
    if full:
        return redact_full(value)
    return redact_partial(value)
