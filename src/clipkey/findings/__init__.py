"""Verdict and finding models, aggregation, and redaction."""

from clipkey.findings.aggregator import deduplicate
from clipkey.findings.models import Finding, ScanResult, ScoreCard, ScoreItem, Stage, Verdict
from clipkey.findings.redactor import redact

__all__ = [
    "Finding",
    "ScanResult",
    "ScoreCard",
    "ScoreItem",
    "Stage",
    "Verdict",
    "deduplicate",
    "redact",
]
