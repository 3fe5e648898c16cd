"""Lookup-table models — vendor key prefixes and the frozen rule set."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class KeyPrefix:
    """A literal prefix that vendors put in front of their keys.

    ``min_length`` is the total length a key with this prefix normally has.
    ``None`` means the prefix only qualifies through the generic fallback.
    """

    id: str
    name: str
    prefix: str
    min_length: Optional[int] = None

    def matches(self, text: str) -> bool:
        return text.startswith(self.prefix)


@dataclass(frozen=True)
class RuleSet:
    """Immutable tables consulted by the classifier.

    Built once (at import for the built-ins, once per ``Classifier`` for
    configured tables) and never mutated afterwards, so a single instance can
    be shared between threads.
    """

    prefixes: Tuple[KeyPrefix, ...] = ()
    markers: Tuple[str, ...] = ()  # lowercase placeholder markers
    domains: Tuple[str, ...] = ()  # lowercase secret-bearing domain suffixes
    common_words: Tuple[str, ...] = ()
    allowlist: Tuple[re.Pattern[str], ...] = field(default=(), compare=False)

    def match_prefix(self, text: str) -> Optional[KeyPrefix]:
        """Return the first prefix *text* starts with, if any."""
        for prefix in self.prefixes:
            if prefix.matches(text):
                return prefix
        return None

    def has_marker(self, lowered: str) -> Optional[str]:
        for marker in self.markers:
            if marker in lowered:
                return marker
        return None

    def has_domain(self, lowered: str) -> Optional[str]:
        for domain in self.domains:
            if lowered.endswith(domain) or domain in lowered:
                return domain
        return None

    def has_common_word(self, lowered: str) -> bool:
        return any(word in lowered for word in self.common_words)

    def is_allowlisted(self, text: str) -> bool:
        return any(p.search(text) for p in self.allowlist)
