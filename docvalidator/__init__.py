from docvalidator.categories.models import DocumentCategory
from docvalidator.categories.presets import ALL_BUSINESS, ALL_INDIVIDUAL
from docvalidator.categories.registry import CategoryRegistry
from docvalidator.sensors.base import (
    BaseBarcodeDetector,
    BaseFaceDetector,
    BaseRectangleDetector,
    BaseTextRecognizer,
    SensorSuite,
)
from docvalidator.sensors.callback_adapter import (
    CallbackBarcodeDetector,
    CallbackFaceDetector,
    CallbackRectangleDetector,
    CallbackTextRecognizer,
    run_callback_sensor,
)
from docvalidator.sensors.completion import OneShotCompletion
from docvalidator.sensors.models import BarcodeKind, BarcodePayload, OcrLevel, OcrLine, OcrResult
from docvalidator.validation.exceptions import (
    CategoryError,
    InvalidImageError,
    SensorCompletionError,
    SensorError,
    ValidatorError,
)
from docvalidator.validation.models import ValidationOptions, ValidationResult, ValidationSignals
from docvalidator.validation.validator import DocumentValidator, build_validator

__all__ = [
    "ALL_BUSINESS",
    "ALL_INDIVIDUAL",
    "BarcodeKind",
    "BarcodePayload",
    "BaseBarcodeDetector",
    "BaseFaceDetector",
    "BaseRectangleDetector",
    "BaseTextRecognizer",
    "CallbackBarcodeDetector",
    "CallbackFaceDetector",
    "CallbackRectangleDetector",
    "CallbackTextRecognizer",
    "CategoryError",
    "CategoryRegistry",
    "DocumentCategory",
    "DocumentValidator",
    "InvalidImageError",
    "OcrLevel",
    "OcrLine",
    "OcrResult",
    "OneShotCompletion",
    "SensorCompletionError",
    "SensorError",
    "SensorSuite",
    "ValidationOptions",
    "ValidationResult",
    "ValidationSignals",
    "ValidatorError",
    "build_validator",
    "run_callback_sensor",
]
