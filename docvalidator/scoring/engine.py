"""Weighted fusion of validation signals into a confidence and decision.

Rules are evaluated in the fixed order of ``RULES``; each returns the weight
it awards and an optional positive reason or penalty. After clamping, a hard
rejection caps confidence for images that show no sign of being a document.
"""

from collections.abc import Callable

from docvalidator.analysis.models import MatchResult
from docvalidator.categories.models import DocumentCategory
from docvalidator.scoring.models import RuleOutcome, ScoringInputs, ScoringResult

KEYWORD_WEIGHT = 0.35
PATTERN_WEIGHT = 0.20
EDGE_WEIGHT = 0.15
TEXT_DENSITY_WEIGHT = 0.15
FACE_WEIGHT = 0.10
BARCODE_WEIGHT = 0.05

EDGE_PRESENT_THRESHOLD = 0.3
TEXT_DENSITY_SATURATION = 0.3
NEAR_ZERO_TEXT_DENSITY = 0.02
HARD_REJECTION_EDGE_SCORE = 0.1
HARD_REJECTION_CAP = 0.1
MAX_REASON_CLAUSES = 2


def _keyword_rule(inputs: ScoringInputs) -> RuleOutcome:
    if inputs.content_match.keyword_match:
        return RuleOutcome(KEYWORD_WEIGHT, reason="Text contains expected keywords")
    if inputs.category.keyword_groups:
        return RuleOutcome(penalty="No expected keywords found in text")
    return RuleOutcome()


def _pattern_rule(inputs: ScoringInputs) -> RuleOutcome:
    if inputs.content_match.pattern_match:
        return RuleOutcome(
            PATTERN_WEIGHT, reason="Expected patterns detected (dates, IDs, etc.)"
        )
    return RuleOutcome()


def _edge_rule(inputs: ScoringInputs) -> RuleOutcome:
    if not inputs.category.expects_document_edges:
        # partial credit when edges are not required
        return RuleOutcome(EDGE_WEIGHT * 0.5)
    if inputs.edge_score > EDGE_PRESENT_THRESHOLD:
        return RuleOutcome(EDGE_WEIGHT * inputs.edge_score, reason="Document edges detected")
    return RuleOutcome(penalty="No document edges detected")


def _text_density_rule(inputs: ScoringInputs) -> RuleOutcome:
    density = inputs.text_density
    if density >= inputs.category.minimum_text_density:
        return RuleOutcome(
            TEXT_DENSITY_WEIGHT * min(density / TEXT_DENSITY_SATURATION, 1.0),
            reason="Text density is appropriate",
        )
    if density < NEAR_ZERO_TEXT_DENSITY:
        return RuleOutcome(penalty="Almost no text detected in image")
    return RuleOutcome()


def _face_rule(inputs: ScoringInputs) -> RuleOutcome:
    if not inputs.category.expects_face:
        return RuleOutcome(FACE_WEIGHT)
    if inputs.face_detected:
        return RuleOutcome(FACE_WEIGHT, reason="Expected face/photo detected")
    return RuleOutcome(penalty="Expected face/photo not found")


def _barcode_rule(inputs: ScoringInputs) -> RuleOutcome:
    if inputs.has_barcodes:
        return RuleOutcome(BARCODE_WEIGHT, reason="Barcode detected")
    return RuleOutcome()


RULES: tuple[Callable[[ScoringInputs], RuleOutcome], ...] = (
    _keyword_rule,
    _pattern_rule,
    _edge_rule,
    _text_density_rule,
    _face_rule,
    _barcode_rule,
)


def is_hard_rejection(text_density: float, edge_score: float, has_barcodes: bool) -> bool:
    """True when the image carries almost no text, no outline and no barcode."""
    return (
        text_density < NEAR_ZERO_TEXT_DENSITY
        and edge_score < HARD_REJECTION_EDGE_SCORE
        and not has_barcodes
    )


def score(
    category: DocumentCategory,
    edge_score: float,
    text_density: float,
    face_detected: bool,
    content_match: MatchResult,
    has_barcodes: bool,
    threshold: float,
) -> ScoringResult:
    inputs = ScoringInputs(
        category=category,
        edge_score=edge_score,
        text_density=text_density,
        face_detected=face_detected,
        content_match=content_match,
        has_barcodes=has_barcodes,
    )

    confidence = 0.0
    reasons: list[str] = []
    penalties: list[str] = []
    for rule in RULES:
        outcome = rule(inputs)
        confidence += outcome.weight
        if outcome.reason:
            reasons.append(outcome.reason)
        if outcome.penalty:
            penalties.append(outcome.penalty)

    confidence = min(max(confidence, 0.0), 1.0)

    if is_hard_rejection(text_density, edge_score, has_barcodes):
        confidence = min(confidence, HARD_REJECTION_CAP)
        penalties.append("Image does not appear to contain a document")

    is_valid = confidence >= threshold
    return ScoringResult(
        confidence=confidence,
        is_valid=is_valid,
        reason=_explain(category, is_valid, reasons, penalties),
    )


def _explain(
    category: DocumentCategory,
    is_valid: bool,
    reasons: list[str],
    penalties: list[str],
) -> str:
    if is_valid:
        return _sentence(f"Document appears to be a valid {category.name}.", reasons)
    if penalties:
        return _sentence(f"Does not appear to be a valid {category.name}.", penalties)
    return f"Low confidence that this is a valid {category.name}."


def _sentence(headline: str, clauses: list[str]) -> str:
    if not clauses:
        return headline
    return f"{headline} {'. '.join(clauses[:MAX_REASON_CLAUSES])}."
