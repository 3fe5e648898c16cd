"""Classifier — normaliser, quick rejects, hard signals, soft scorer."""

from clipkey.classifier.batch import scan_text
from clipkey.classifier.engine import Classifier, classify, is_likely_secret
from clipkey.classifier.hard_signals import HardSignal, SignalMatch, hard_signal
from clipkey.classifier.normalize import normalize
from clipkey.classifier.quick_reject import quick_reject, quick_reject_reason
from clipkey.classifier.soft_score import score_breakdown, soft_score
from clipkey.classifier.stats import CharStats, char_stats, shannon_entropy

__all__ = [
    "CharStats",
    "Classifier",
    "HardSignal",
    "SignalMatch",
    "char_stats",
    "classify",
    "hard_signal",
    "is_likely_secret",
    "normalize",
    "quick_reject",
    "quick_reject_reason",
    "scan_text",
    "score_breakdown",
    "shannon_entropy",
    "soft_score",
]
