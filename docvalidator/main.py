import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from docvalidator.categories.registry import CategoryRegistry
from docvalidator.config.settings import Settings
from docvalidator.logging.logger import Log
from docvalidator.sensors.models import OcrLevel
from docvalidator.validation.exceptions import CategoryError, InvalidImageError
from docvalidator.validation.models import ValidationOptions
from docvalidator.validation.validator import build_validator

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="docvalidator",
        description="Check whether an image plausibly depicts a document category.",
    )
    parser.add_argument("image", type=Path, help="Path to the image to validate")
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--category", help="Expected category id, e.g. drivers_license")
    target.add_argument(
        "--classify", action="store_true", help="Rank every registered category"
    )
    parser.add_argument("--threshold", type=float, default=None)
    parser.add_argument(
        "--ocr-level", choices=[level.value for level in OcrLevel], default=None
    )
    return parser.parse_args(argv)


def build_registry(settings: Settings) -> CategoryRegistry:
    registry = CategoryRegistry.with_presets()
    if settings.custom_categories_path is not None:
        registry.load_json(settings.custom_categories_path)
    return registry


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: settings -> registry -> validator -> JSON on stdout."""
    args = _parse_args(argv)
    try:
        settings = Settings()
    except ValidationError as exc:
        Log.error(f"Invalid configuration: {exc}")
        return EXIT_ERROR
    Log.configure(settings.log_level)

    defaults = ValidationOptions.from_settings(settings)
    options = ValidationOptions(
        ocr_level=OcrLevel(args.ocr_level) if args.ocr_level else defaults.ocr_level,
        confidence_threshold=(
            args.threshold if args.threshold is not None else defaults.confidence_threshold
        ),
    )

    try:
        registry = build_registry(settings)
        validator = build_validator(settings)
        if args.classify:
            results = validator.classify(
                args.image, list(registry), options, reuse_observations=True
            )
            print(json.dumps([r.to_dict() for r in results], indent=2))
            return EXIT_VALID
        result = validator.validate(args.image, registry.get(args.category), options)
    except (InvalidImageError, CategoryError) as exc:
        Log.error(str(exc))
        return EXIT_ERROR

    print(json.dumps(result.to_dict(), indent=2))
    return EXIT_VALID if result.is_valid else EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
