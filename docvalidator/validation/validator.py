from collections.abc import Sequence

from docvalidator.categories.models import DocumentCategory
from docvalidator.config.settings import Settings
from docvalidator.logging.logger import Log
from docvalidator.sensors.base import SensorSuite
from docvalidator.sensors.factory import SensorFactory
from docvalidator.sensors.image import DecodedImage, ImageSource
from docvalidator.sensors.orchestrator import SensorOrchestrator
from docvalidator.validation.models import (
    ValidationOptions,
    ValidationResult,
    ValidationSignals,
)
from docvalidator.validation.pipeline import ValidationContext, ValidationStep
from docvalidator.validation.steps import (
    AssessLegibilityStep,
    DecodeImageStep,
    MatchContentStep,
    ObserveStep,
    ScoreStep,
)


class DocumentValidator:
    """Decides whether an image plausibly depicts a claimed document category.

    Pipeline: decode -> observe (concurrent sensors) -> legibility ->
    content match -> score.
    """

    def __init__(
        self,
        steps: Sequence[ValidationStep],
        default_options: ValidationOptions | None = None,
    ) -> None:
        self._steps = list(steps)
        self._default_options = default_options or ValidationOptions()

    def validate(
        self,
        image: ImageSource | DecodedImage,
        expected: DocumentCategory,
        options: ValidationOptions | None = None,
    ) -> ValidationResult:
        """Validate ``image`` against ``expected``.

        Raises:
            InvalidImageError: if the image cannot be decoded. No other
                failure escapes; sensor problems lower the confidence instead.
        """
        context = ValidationContext(
            source=image,
            category=expected,
            options=options or self._default_options,
        )
        return self._run(context)

    def classify(
        self,
        image: ImageSource | DecodedImage,
        candidates: Sequence[DocumentCategory],
        options: ValidationOptions | None = None,
        *,
        reuse_observations: bool = False,
    ) -> list[ValidationResult]:
        """Validate against every candidate and rank by descending confidence.

        Candidates are evaluated one after another. Equal confidences keep the
        order in which candidates were supplied. With ``reuse_observations``
        the sensors run once and their bundle is shared by all candidates.
        """
        options = options or self._default_options
        results: list[ValidationResult] = []
        shared: ValidationContext | None = None
        for category in candidates:
            context = ValidationContext(source=image, category=category, options=options)
            if reuse_observations and shared is not None:
                context.image = shared.image
                context.bundle = shared.bundle
                context.legibility = shared.legibility
            results.append(self._run(context))
            if shared is None:
                shared = context

        ranked = sorted(results, key=lambda r: r.confidence, reverse=True)
        if ranked:
            Log.info(
                "Classification finished",
                candidates=len(ranked),
                best=ranked[0].expected_category.id,
                confidence=ranked[0].confidence,
            )
        return ranked

    def _run(self, context: ValidationContext) -> ValidationResult:
        Log.info("Validating image", category=context.category.id)
        try:
            for step in self._steps:
                context = step.run(context)
        except Exception as exc:
            Log.error(f"Validation aborted for {context.category.id}: {exc}")
            raise
        result = self._build_result(context)
        Log.info(
            "Validation finished",
            category=context.category.id,
            confidence=result.confidence,
            valid=result.is_valid,
        )
        return result

    @staticmethod
    def _build_result(context: ValidationContext) -> ValidationResult:
        bundle = context.bundle
        legibility = context.legibility
        match = context.content_match
        scoring = context.scoring
        if bundle is None or legibility is None or match is None or scoring is None:
            raise ValueError("Validation pipeline finished without a complete context")

        signals = ValidationSignals(
            document_edge_score=bundle.edge_score,
            text_density_score=bundle.ocr.density,
            face_detected=bundle.face_detected,
            keyword_match=match.keyword_match,
            matched_keywords=match.matched_keyword_groups,
            pattern_match=match.pattern_match,
            matched_patterns=match.matched_patterns,
            ocr_lines=tuple(bundle.ocr.texts),
            barcode_payloads=bundle.barcodes,
            legibility_score=legibility.score,
            sharpness_score=legibility.sharpness_score,
            ocr_confidence=legibility.ocr_confidence,
        )
        return ValidationResult(
            is_valid=scoring.is_valid,
            confidence=scoring.confidence,
            reason=scoring.reason,
            expected_category=context.category,
            signals=signals,
            quality_feedback=legibility.feedback,
            failed_sensors=bundle.failed_sensors,
        )


def default_steps(orchestrator: SensorOrchestrator) -> list[ValidationStep]:
    return [
        DecodeImageStep(),
        ObserveStep(orchestrator),
        AssessLegibilityStep(),
        MatchContentStep(),
        ScoreStep(),
    ]


def build_validator(
    settings: Settings,
    sensors: SensorSuite | None = None,
) -> DocumentValidator:
    """Build a DocumentValidator with the configured sensor suite."""
    orchestrator = SensorOrchestrator(
        sensors if sensors is not None else SensorFactory.create(settings),
        timeout_seconds=settings.sensor_timeout_seconds,
        max_workers=settings.sensor_max_workers,
    )
    return DocumentValidator(
        steps=default_steps(orchestrator),
        default_options=ValidationOptions.from_settings(settings),
    )
