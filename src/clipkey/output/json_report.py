"""JSON reporter for scripts and editor integrations."""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from clipkey.findings.models import ScanResult, ScoreCard, Verdict
from clipkey.findings.redactor import redact


def verdict_to_dict(
    verdict: Verdict,
    value: str,
    *,
    card: Optional[ScoreCard] = None,
    redact_all: bool = False,
) -> Dict[str, Any]:
    """Convert a Verdict to a JSON-serialisable dict."""
    data: Dict[str, Any] = {
        "is_secret": verdict.is_secret,
        "stage": verdict.stage.value,
        "reason": verdict.reason,
        "length": verdict.length,
        "value": redact(value, full=redact_all),
        **({"label": verdict.label} if verdict.label else {}),
        **({"score": round(verdict.score, 2)} if verdict.score is not None else {}),
        **({"threshold": verdict.threshold} if verdict.threshold is not None else {}),
    }
    if card is not None:
        data["breakdown"] = [
            {"feature": item.label, "delta": item.delta} for item in card.items
        ]
        data["entropy"] = round(card.entropy, 3)
    return data


def scan_to_dict(result: ScanResult, *, redact_all: bool = False) -> Dict[str, Any]:
    """Convert a ScanResult to a JSON-serialisable dict."""
    return {
        "version": "1.0",
        "scanned_lines": result.scanned_lines,
        "total_findings": result.total_findings,
        "flagged": result.flagged,
        "findings": [
            {
                "id": f.id,
                "lines": f.line_numbers,
                "value": redact(f.value, full=redact_all),
                "stage": f.verdict.stage.value,
                "reason": f.verdict.reason,
                **({"label": f.verdict.label} if f.verdict.label else {}),
            }
            for f in result.findings
        ],
        "scan_duration_ms": result.scan_duration_ms,
    }


def render_verdict(verdict: Verdict, value: str, **kwargs: Any) -> str:
    """Return formatted JSON string for a single verdict."""
    return json.dumps(verdict_to_dict(verdict, value, **kwargs), indent=2)


def render_scan(result: ScanResult, *, redact_all: bool = False) -> str:
    """Return formatted JSON string for a scan."""
    return json.dumps(scan_to_dict(result, redact_all=redact_all), indent=2)
