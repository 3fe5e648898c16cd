"""clipkey — tell API keys and tokens apart from ordinary clipboard text."""

__version__ = "0.3.0"

from clipkey.classifier.engine import Classifier, classify, is_likely_secret  # noqa: E402
from clipkey.findings.models import Stage, Verdict  # noqa: E402

__all__ = [
    "Classifier",
    "Stage",
    "Verdict",
    "__version__",
    "classify",
    "is_likely_secret",
]
