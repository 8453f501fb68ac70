from docvalidator.analysis import content_matcher, legibility
from docvalidator.logging.logger import Log
from docvalidator.scoring import engine
from docvalidator.sensors.image import decode_image
from docvalidator.sensors.orchestrator import SensorOrchestrator
from docvalidator.validation.pipeline import ValidationContext, ValidationStep


class DecodeImageStep(ValidationStep):
    def run(self, context: ValidationContext) -> ValidationContext:
        if context.image is None:
            context.image = decode_image(context.source)
            Log.debug(
                "Decoded image", width=context.image.width, height=context.image.height
            )
        return context


class ObserveStep(ValidationStep):
    def __init__(self, orchestrator: SensorOrchestrator) -> None:
        self._orchestrator = orchestrator

    def run(self, context: ValidationContext) -> ValidationContext:
        if context.image is None:
            raise ValueError("ValidationContext.image must be set before observation")
        if context.bundle is None:
            context.bundle = self._orchestrator.observe(context.image, context.options.ocr_level)
            Log.info(
                "Sensors finished",
                ocr_lines=len(context.bundle.ocr.lines),
                edge_score=context.bundle.edge_score,
                face=context.bundle.face_detected,
                barcodes=len(context.bundle.barcodes),
                failed=",".join(context.bundle.failed_sensors) or "none",
            )
        return context


class AssessLegibilityStep(ValidationStep):
    def run(self, context: ValidationContext) -> ValidationContext:
        if context.image is None or context.bundle is None:
            raise ValueError("ValidationContext.image and bundle must be set before legibility")
        if context.legibility is None:
            # reuses the OCR confidences so OCR never runs twice
            context.legibility = legibility.analyze(
                context.image, context.bundle.ocr.confidences
            )
        return context


class MatchContentStep(ValidationStep):
    def run(self, context: ValidationContext) -> ValidationContext:
        if context.bundle is None:
            raise ValueError("ValidationContext.bundle must be set before content matching")
        context.content_match = content_matcher.match(
            context.bundle.ocr.joined_text,
            context.bundle.barcode_text,
            context.category,
        )
        return context


class ScoreStep(ValidationStep):
    def run(self, context: ValidationContext) -> ValidationContext:
        if context.bundle is None or context.content_match is None:
            raise ValueError("ValidationContext.content_match must be set before scoring")
        context.scoring = engine.score(
            category=context.category,
            edge_score=context.bundle.edge_score,
            text_density=context.bundle.ocr.density,
            face_detected=context.bundle.face_detected,
            content_match=context.content_match,
            has_barcodes=bool(context.bundle.barcodes),
            threshold=context.options.confidence_threshold,
        )
        return context
