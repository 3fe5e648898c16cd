"""Hard signals — structural patterns strong enough to settle a verdict.

Checked in order: known vendor prefix, JWT, hex blob, base64 blob,
credential-bearing domain. The first that fires wins; when none does the
value is left to the soft scorer.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from clipkey.rules.models import RuleSet

# Any known prefix qualifies at this length even below its own minimum.
GENERIC_PREFIX_MIN_LENGTH = 16

JWT_MIN_LENGTH = 100
JWT_MIN_SEGMENT = 8

HEX_MIN_LENGTH = 32
HEX_MAX_LENGTH = 128

BASE64_MIN_LENGTH = 32

_BASE64URL_CHARS = frozenset(string.ascii_letters + string.digits + "-_")
_HEX_CHARS = frozenset(string.hexdigits)
_BASE64_CHARS = frozenset(string.ascii_letters + string.digits + "+/=")
_BASE64_MARKS = frozenset("+/=")


class HardSignal(Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    UNDECIDED = "undecided"


@dataclass(frozen=True)
class SignalMatch:
    signal: HardSignal
    reason: str = ""
    label: Optional[str] = None

    @property
    def decided(self) -> bool:
        return self.signal is not HardSignal.UNDECIDED


UNDECIDED = SignalMatch(HardSignal.UNDECIDED)


def looks_like_jwt(s: str) -> bool:
    """Three dot-separated base64url segments of at least 8 characters."""
    parts = s.split(".")
    if len(parts) != 3:
        return False
    return all(
        len(seg) >= JWT_MIN_SEGMENT and all(ch in _BASE64URL_CHARS for ch in seg)
        for seg in parts
    )


def looks_like_hex(s: str) -> bool:
    return bool(s) and all(ch in _HEX_CHARS for ch in s)


def looks_like_base64(s: str) -> bool:
    """Base64 alphabet only, padded to a multiple of four."""
    return bool(s) and len(s) % 4 == 0 and all(ch in _BASE64_CHARS for ch in s)


def _prefix_signal(s: str, n: int, rules: RuleSet) -> Optional[SignalMatch]:
    prefix = rules.match_prefix(s)
    if prefix is None:
        return None
    if prefix.min_length is not None and n >= prefix.min_length:
        return SignalMatch(HardSignal.POSITIVE, f"{prefix.name} prefix", prefix.name)
    if n >= GENERIC_PREFIX_MIN_LENGTH:
        return SignalMatch(HardSignal.POSITIVE, f"known prefix '{prefix.prefix}'", prefix.name)
    return None


def hard_signal(s: str, n: int, rules: RuleSet) -> SignalMatch:
    """Classify *s* by structure alone, or return ``UNDECIDED``."""
    match = _prefix_signal(s, n, rules)
    if match is not None:
        return match

    if n >= JWT_MIN_LENGTH and looks_like_jwt(s):
        return SignalMatch(HardSignal.POSITIVE, "JSON Web Token", "JSON Web Token")

    if HEX_MIN_LENGTH <= n <= HEX_MAX_LENGTH and looks_like_hex(s):
        return SignalMatch(HardSignal.POSITIVE, "hex blob")

    if n >= BASE64_MIN_LENGTH and looks_like_base64(s):
        has_digit = any(ch in string.digits for ch in s)
        if has_digit or any(ch in _BASE64_MARKS for ch in s):
            return SignalMatch(HardSignal.POSITIVE, "base64 blob")

    domain = rules.has_domain(s.lower())
    if domain is not None:
        return SignalMatch(HardSignal.POSITIVE, f"credential domain '{domain}'")

    return UNDECIDED
