from abc import ABC, abstractmethod
from dataclasses import dataclass

from docvalidator.analysis.models import LegibilityResult, MatchResult
from docvalidator.categories.models import DocumentCategory
from docvalidator.scoring.models import ScoringResult
from docvalidator.sensors.image import DecodedImage, ImageSource
from docvalidator.sensors.models import SensorBundle
from docvalidator.validation.models import ValidationOptions


@dataclass(slots=True)
class ValidationContext:
    source: ImageSource | DecodedImage
    category: DocumentCategory
    options: ValidationOptions
    image: DecodedImage | None = None
    bundle: SensorBundle | None = None
    legibility: LegibilityResult | None = None
    content_match: MatchResult | None = None
    scoring: ScoringResult | None = None


class ValidationStep(ABC):
    @abstractmethod
    def run(self, context: ValidationContext) -> ValidationContext:
        raise NotImplementedError
