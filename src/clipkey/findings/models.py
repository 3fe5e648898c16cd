"""Verdict and finding data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Stage(str, Enum):
    """Pipeline stage that settled a verdict."""

    LENGTH = "length"
    QUICK_REJECT = "quick_reject"
    HARD_SIGNAL = "hard_signal"
    SOFT_SCORE = "soft_score"


@dataclass(frozen=True)
class Verdict:
    """Outcome of classifying one value.

    ``reason`` describes the deciding rule and never quotes the value itself.
    """

    is_secret: bool
    stage: Stage
    reason: str
    length: int
    score: Optional[float] = None
    threshold: Optional[float] = None
    label: Optional[str] = None  # vendor name when a known prefix matched

    def __bool__(self) -> bool:
        return self.is_secret


@dataclass(frozen=True, slots=True)
class ScoreItem:
    """One row of the soft-score table that applied."""

    label: str
    delta: float


@dataclass
class ScoreCard:
    """Soft-score breakdown for a single value."""

    length: int
    threshold: float
    items: List[ScoreItem] = field(default_factory=list)
    entropy: float = 0.0

    def add(self, label: str, delta: float) -> None:
        self.items.append(ScoreItem(label, delta))

    @property
    def score(self) -> float:
        return sum(item.delta for item in self.items)

    @property
    def is_secret(self) -> bool:
        return self.score >= self.threshold


@dataclass
class Finding:
    """A secret-looking value found while scanning text line by line."""

    id: str  # e.g. FINDING-001
    value: str
    verdict: Verdict
    line_numbers: List[int] = field(default_factory=list)

    @property
    def first_line(self) -> int:
        return self.line_numbers[0] if self.line_numbers else 0


@dataclass
class ScanResult:
    """Complete result of scanning a block of text."""

    findings: List[Finding] = field(default_factory=list)
    scanned_lines: int = 0
    scan_duration_ms: float = 0.0

    @property
    def total_findings(self) -> int:
        return len(self.findings)

    @property
    def flagged(self) -> bool:
        return bool(self.findings)
