from dataclasses import asdict, dataclass, field

from docvalidator.categories.models import DocumentCategory
from docvalidator.config.settings import Settings
from docvalidator.sensors.models import BarcodePayload, OcrLevel

DEFAULT_CONFIDENCE_THRESHOLD = 0.45


@dataclass(frozen=True)
class ValidationOptions:
    """Per-call validation options."""

    ocr_level: OcrLevel = OcrLevel.ACCURATE
    confidence_threshold: float = DEFAULT_CONFIDENCE_THRESHOLD

    @classmethod
    def from_settings(cls, settings: Settings) -> "ValidationOptions":
        return cls(
            ocr_level=settings.ocr_level,
            confidence_threshold=settings.confidence_threshold,
        )


@dataclass(frozen=True)
class ValidationSignals:
    """Everything measured for one validation call."""

    document_edge_score: float
    text_density_score: float
    face_detected: bool
    keyword_match: bool
    matched_keywords: tuple[tuple[str, ...], ...]
    pattern_match: bool
    matched_patterns: tuple[str, ...]
    ocr_lines: tuple[str, ...]
    barcode_payloads: tuple[BarcodePayload, ...]
    legibility_score: float
    sharpness_score: float
    ocr_confidence: float


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    confidence: float
    reason: str
    expected_category: DocumentCategory
    signals: ValidationSignals
    quality_feedback: str | None = None
    failed_sensors: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, object]:
        """JSON-ready representation (enums become their string values)."""
        data = asdict(self)
        data["signals"]["barcode_payloads"] = [
            {"kind": p.kind.value, "raw_string": p.raw_string}
            for p in self.signals.barcode_payloads
        ]
        return data
