from abc import ABC, abstractmethod
from dataclasses import dataclass

from docvalidator.sensors.image import DecodedImage
from docvalidator.sensors.models import BarcodePayload, OcrLevel, OcrResult


class BaseTextRecognizer(ABC):
    """Contract for OCR adapters."""

    @abstractmethod
    def recognize(self, image: DecodedImage, level: OcrLevel) -> OcrResult:
        """Recognize text lines in the image.

        Args:
            image: Decoded image shared by all sensors. Must not be mutated.
            level: Latency/quality trade-off requested by the caller.

        Returns:
            OcrResult with one entry per recognized line.

        Raises:
            SensorError: on any failure.
        """


class BaseRectangleDetector(ABC):
    """Contract for document-outline detectors."""

    @abstractmethod
    def detect(self, image: DecodedImage) -> float:
        """Return 0-1 confidence that a document-shaped rectangle is present.

        Raises:
            SensorError: on any failure.
        """


class BaseFaceDetector(ABC):
    """Contract for face-presence detectors."""

    @abstractmethod
    def detect(self, image: DecodedImage) -> bool:
        """Return True if at least one face is present.

        Raises:
            SensorError: on any failure.
        """


class BaseBarcodeDetector(ABC):
    """Contract for barcode decoders."""

    @abstractmethod
    def detect(self, image: DecodedImage) -> list[BarcodePayload]:
        """Return every decoded barcode payload.

        Raises:
            SensorError: on any failure.
        """


@dataclass(frozen=True)
class SensorSuite:
    """The four external sensors the orchestrator fans out to."""

    text: BaseTextRecognizer
    rectangles: BaseRectangleDetector
    faces: BaseFaceDetector
    barcodes: BaseBarcodeDetector
