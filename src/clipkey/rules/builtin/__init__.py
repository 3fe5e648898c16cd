"""Built-in tables — aggregate all categories."""

from clipkey.rules.builtin.denylist import COMMON_WORDS, PLACEHOLDER_MARKERS
from clipkey.rules.builtin.domains import SECRET_DOMAINS
from clipkey.rules.builtin.prefixes import ALL_PREFIXES
from clipkey.rules.models import KeyPrefix, RuleSet

ALL_BUILTIN_PREFIXES: list[KeyPrefix] = [*ALL_PREFIXES]

DEFAULT_RULES = RuleSet(
    prefixes=tuple(ALL_BUILTIN_PREFIXES),
    markers=tuple(PLACEHOLDER_MARKERS),
    domains=tuple(SECRET_DOMAINS),
    common_words=tuple(COMMON_WORDS),
)

__all__ = [
    "ALL_BUILTIN_PREFIXES",
    "COMMON_WORDS",
    "DEFAULT_RULES",
    "PLACEHOLDER_MARKERS",
    "SECRET_DOMAINS",
]
