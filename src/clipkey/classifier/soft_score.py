"""Soft scoring — weighted entropy and character-mix features.

Used when no hard signal settled the verdict. Every applicable row of the
table below adds its delta; the total is compared against a threshold that
relaxes as the value gets longer.
"""

from __future__ import annotations

from clipkey.classifier.stats import char_stats, shannon_entropy
from clipkey.findings.models import ScoreCard
from clipkey.rules.models import RuleSet

# (minimum length, bonus); only the first matching bucket applies
LENGTH_BONUSES = ((40, 1.5), (32, 1.2), (24, 0.8), (16, 0.3))

# (minimum entropy in bits/char, delta); below the last bucket scores -0.5
ENTROPY_BUCKETS = ((4.5, 2.0), (4.0, 1.5), (3.5, 1.0), (3.0, 0.5))
LOW_ENTROPY_PENALTY = -0.5


def threshold_for(n: int) -> float:
    if n >= 32:
        return 2.0
    if n >= 20:
        return 2.5
    return 3.0


def looks_like_filename(s: str) -> bool:
    """A 2–5 letter extension after the last dot, e.g. ``report.pdf``."""
    dot = s.rfind(".")
    if dot < 0:
        return False
    ext = s[dot + 1:]
    return 2 <= len(ext) <= 5 and ext.isalpha()


def score_breakdown(s: str, n: int, rules: RuleSet) -> ScoreCard:
    """Score *s* row by row. ``n`` must be ``len(s)`` and non-zero."""
    stats = char_stats(s)
    digit_ratio = stats.digits / n
    symbol_ratio = stats.symbols / n
    upper_ratio = stats.upper / n
    lower_ratio = stats.lower / n
    variety = stats.variety
    entropy = shannon_entropy(s)

    card = ScoreCard(length=n, threshold=threshold_for(n), entropy=entropy)

    for min_len, bonus in LENGTH_BONUSES:
        if n >= min_len:
            card.add(f"length >= {min_len}", bonus)
            break

    if variety >= 0.75:
        card.add("3+ character classes", 1.0)
    elif variety >= 0.50:
        card.add("2 character classes", 0.5)

    for min_entropy, delta in ENTROPY_BUCKETS:
        if entropy >= min_entropy:
            card.add(f"entropy >= {min_entropy}", delta)
            break
    else:
        card.add("entropy < 3.0", LOW_ENTROPY_PENALTY)

    if 0.15 <= digit_ratio <= 0.6:
        card.add("balanced digits", 0.4)
    if 0.05 <= symbol_ratio <= 0.3:
        card.add("some symbols", 0.5)
    if upper_ratio >= 0.2 and lower_ratio >= 0.2:
        card.add("mixed case", 0.4)
    if "=" in s and n >= 24:
        card.add("padding '='", 0.3)

    if lower_ratio > 0.7 and digit_ratio < 0.1 and symbol_ratio < 0.05:
        card.add("mostly lowercase letters", -2.0)
    if looks_like_filename(s):
        card.add("looks like a filename", -1.5)
    if stats.upper == n or stats.lower == n:
        card.add("single letter case", -0.8)
    if stats.symbols == 0 and stats.digits == 0:
        card.add("letters only", -1.5)
    if rules.has_common_word(s.lower()):
        card.add("contains a common word", -2.0)

    return card


def soft_score(s: str, n: int, rules: RuleSet) -> bool:
    return score_breakdown(s, n, rules).is_secret
