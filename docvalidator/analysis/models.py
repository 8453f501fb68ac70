from dataclasses import dataclass, field


@dataclass(frozen=True)
class MatchResult:
    """Keyword and pattern hits for one category, in declaration order."""

    keyword_match: bool = False
    matched_keyword_groups: tuple[tuple[str, ...], ...] = field(default_factory=tuple)
    pattern_match: bool = False
    matched_patterns: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class LegibilityResult:
    """Sharpness and OCR-confidence assessment of an image.

    Attributes:
        score: 0.6 * sharpness + 0.4 * OCR confidence.
        sharpness_score: 0-1, normalized Laplacian variance.
        ocr_confidence: Mean per-line OCR confidence, 0.0 without lines.
        feedback: Retake advice, present only when ``score`` is below 0.5.
    """

    score: float
    sharpness_score: float
    ocr_confidence: float
    feedback: str | None = None
