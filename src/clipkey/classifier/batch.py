"""Line-by-line scanning of a text blob."""

from __future__ import annotations

import time
from typing import List, Optional, Tuple

from clipkey.classifier.engine import Classifier
from clipkey.classifier.normalize import normalize
from clipkey.findings.aggregator import deduplicate
from clipkey.findings.models import ScanResult, Verdict


def scan_text(text: str, classifier: Optional[Classifier] = None) -> ScanResult:
    """Classify every non-blank line of *text*. Returns a ScanResult."""
    clf = classifier or Classifier()
    start = time.perf_counter()

    hits: List[Tuple[int, str, Verdict]] = []
    scanned = 0
    for line_no, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        scanned += 1
        verdict = clf.classify(line)
        if verdict.is_secret:
            hits.append((line_no, normalize(line), verdict))

    elapsed = (time.perf_counter() - start) * 1000
    return ScanResult(
        findings=deduplicate(hits),
        scanned_lines=scanned,
        scan_duration_ms=round(elapsed, 2),
    )
