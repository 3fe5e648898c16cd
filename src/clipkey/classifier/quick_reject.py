"""Quick rejects — cheap checks that rule out obvious non-secrets."""

from __future__ import annotations

from typing import Optional

from clipkey.classifier.stats import longest_run
from clipkey.rules.models import RuleSet

# Phrases are longer than this; keys have no spaces.
MAX_SPACED_LENGTH = 15

MAX_RUN = 4
MAX_RUN_RATIO = 0.3

_URL_STARTS = ("http://", "https://", "www.")
_URL_PATH_MARKERS = (".com/", ".org/", ".net/")


def has_excessive_repetition(s: str) -> bool:
    """True for runs like ``aaaa`` or a run covering more than 30% of *s*."""
    if len(s) < 6:
        return False
    run = longest_run(s)
    return run >= MAX_RUN or run / len(s) > MAX_RUN_RATIO


def looks_like_url(lowered: str, rules: RuleSet) -> bool:
    """URL-shaped text, unless it names a credential-bearing domain."""
    if rules.has_domain(lowered):
        return False
    return lowered.startswith(_URL_STARTS) or any(m in lowered for m in _URL_PATH_MARKERS)


def quick_reject_reason(s: str, n: int, rules: RuleSet) -> Optional[str]:
    """Return why *s* is obviously not a secret, or None."""
    lowered = s.lower()

    marker = rules.has_marker(lowered)
    if marker is not None:
        return f"contains placeholder marker '{marker}'"
    if rules.is_allowlisted(s):
        return "matches allowlist"
    if " " in s and n > MAX_SPACED_LENGTH:
        return "contains spaces"
    if has_excessive_repetition(s):
        return "excessive repetition"
    if looks_like_url(lowered, rules):
        return "looks like a URL"
    if "@" in lowered and "." in lowered:
        return "looks like an email address"
    if s.count("/") >= 2:
        return "looks like a path"
    return None


def quick_reject(s: str, n: int, rules: RuleSet) -> bool:
    return quick_reject_reason(s, n, rules) is not None
