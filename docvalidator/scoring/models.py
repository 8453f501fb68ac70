from dataclasses import dataclass

from docvalidator.analysis.models import MatchResult
from docvalidator.categories.models import DocumentCategory


@dataclass(frozen=True)
class ScoringInputs:
    """Signals the scoring rules read."""

    category: DocumentCategory
    edge_score: float
    text_density: float
    face_detected: bool
    content_match: MatchResult
    has_barcodes: bool


@dataclass(frozen=True)
class RuleOutcome:
    """Contribution of one rule: added weight plus an optional explanation."""

    weight: float = 0.0
    reason: str | None = None
    penalty: str | None = None


@dataclass(frozen=True)
class ScoringResult:
    confidence: float
    is_valid: bool
    reason: str
