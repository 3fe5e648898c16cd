"""Merge per-line hits into findings."""

from __future__ import annotations

from typing import Dict, List, Tuple

from clipkey.findings.models import Finding, Verdict


def deduplicate(hits: List[Tuple[int, str, Verdict]]) -> List[Finding]:
    """Merge ``(line_no, value, verdict)`` hits that share the same value.

    Order follows the first line each value appeared on.
    """
    merged: Dict[str, Finding] = {}
    counter = 0

    for line_no, value, verdict in hits:
        existing = merged.get(value)
        if existing is not None:
            if line_no not in existing.line_numbers:
                existing.line_numbers.append(line_no)
            continue
        counter += 1
        merged[value] = Finding(
            id=f"FINDING-{counter:03d}",
            value=value,
            verdict=verdict,
            line_numbers=[line_no],
        )

    return list(merged.values())
