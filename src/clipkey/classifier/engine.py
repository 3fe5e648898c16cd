"""Top-level classifier — runs the stages in order and reports the verdict.

The classifier is total: any ``str`` (or ``None``) yields a Verdict and
nothing is raised. Log records carry the deciding stage and the length of
the value, never the value itself.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from clipkey.classifier.hard_signals import HardSignal, hard_signal
from clipkey.classifier.normalize import normalize
from clipkey.classifier.quick_reject import quick_reject_reason
from clipkey.classifier.soft_score import score_breakdown
from clipkey.config.schema import ClipkeyConfig, LimitsConfig
from clipkey.findings.models import ScoreCard, Stage, Verdict
from clipkey.rules.builtin import DEFAULT_RULES
from clipkey.rules.models import RuleSet

logger = logging.getLogger(__name__)

DEFAULT_MIN_LENGTH = LimitsConfig.min_length
DEFAULT_MAX_LENGTH = LimitsConfig.max_length


class Classifier:
    """Decide whether short text looks like an API key or token."""

    def __init__(
        self,
        rules: RuleSet = DEFAULT_RULES,
        *,
        min_length: int = DEFAULT_MIN_LENGTH,
        max_length: int = DEFAULT_MAX_LENGTH,
    ) -> None:
        if min_length < 1:
            raise ValueError(f"min_length must be at least 1, got {min_length}")
        if max_length < min_length:
            raise ValueError(f"max_length ({max_length}) is below min_length ({min_length})")
        self.rules = rules
        self.min_length = min_length
        self.max_length = max_length

    @classmethod
    def from_config(cls, config: ClipkeyConfig, root: Path) -> "Classifier":
        """Build a classifier from *config* plus custom prefixes under *root*."""
        from clipkey.rules.registry import build_registry

        registry = build_registry(config, root)
        return cls(
            registry.build(),
            min_length=config.limits.min_length,
            max_length=config.limits.max_length,
        )

    def classify(self, raw: Optional[str]) -> Verdict:
        s = normalize(raw)
        n = len(s)

        if n < self.min_length:
            return self._done(Verdict(False, Stage.LENGTH, f"shorter than {self.min_length}", n))
        if n > self.max_length:
            return self._done(Verdict(False, Stage.LENGTH, f"longer than {self.max_length}", n))

        reason = quick_reject_reason(s, n, self.rules)
        if reason is not None:
            return self._done(Verdict(False, Stage.QUICK_REJECT, reason, n))

        match = hard_signal(s, n, self.rules)
        if match.decided:
            return self._done(
                Verdict(
                    match.signal is HardSignal.POSITIVE,
                    Stage.HARD_SIGNAL,
                    match.reason,
                    n,
                    label=match.label,
                )
            )

        card = score_breakdown(s, n, self.rules)
        return self._done(
            Verdict(
                card.is_secret,
                Stage.SOFT_SCORE,
                f"score {card.score:.1f} vs threshold {card.threshold:.1f}",
                n,
                score=card.score,
                threshold=card.threshold,
            )
        )

    def explain(self, raw: Optional[str]) -> Optional[ScoreCard]:
        """Soft-score breakdown of *raw*, or None when it is out of length bounds."""
        s = normalize(raw)
        n = len(s)
        if n < self.min_length or n > self.max_length:
            return None
        return score_breakdown(s, n, self.rules)

    def is_likely_secret(self, raw: Optional[str]) -> bool:
        return self.classify(raw).is_secret

    @staticmethod
    def _done(verdict: Verdict) -> Verdict:
        logger.debug(
            "len=%d stage=%s secret=%s (%s)",
            verdict.length, verdict.stage.value, verdict.is_secret, verdict.reason,
        )
        return verdict


_default = Classifier()


def classify(raw: Optional[str]) -> Verdict:
    """Classify *raw* with the built-in tables and default length bounds."""
    return _default.classify(raw)


def is_likely_secret(raw: Optional[str]) -> bool:
    """True when *raw* looks like an API key, token or other opaque secret."""
    return _default.classify(raw).is_secret
