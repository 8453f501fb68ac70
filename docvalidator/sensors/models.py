from dataclasses import dataclass, field
from enum import Enum

OCR_DENSITY_SATURATION = 40.0


class OcrLevel(str, Enum):
    """Trade-off between OCR latency and quality."""

    FAST = "fast"
    ACCURATE = "accurate"


class BarcodeKind(str, Enum):
    PDF417 = "pdf417"
    QR = "qr"
    AZTEC = "aztec"
    DATA_MATRIX = "dataMatrix"
    OTHER = "other"

    @classmethod
    def from_symbology(cls, symbology: str) -> "BarcodeKind":
        """Map a decoder symbology name (e.g. "QR_CODE", "PDF_417") onto a kind."""
        key = symbology.replace("_", "").replace("-", "").replace(" ", "").lower()
        return _SYMBOLOGY_ALIASES.get(key, cls.OTHER)


_SYMBOLOGY_ALIASES: dict[str, BarcodeKind] = {
    "pdf417": BarcodeKind.PDF417,
    "qr": BarcodeKind.QR,
    "qrcode": BarcodeKind.QR,
    "aztec": BarcodeKind.AZTEC,
    "azteccode": BarcodeKind.AZTEC,
    "datamatrix": BarcodeKind.DATA_MATRIX,
}


@dataclass(frozen=True)
class BarcodePayload:
    """A decoded barcode, consumed as-is."""

    kind: BarcodeKind
    raw_string: str


@dataclass(frozen=True)
class OcrLine:
    """One recognized text line with its 0-1 confidence."""

    text: str
    confidence: float


@dataclass(frozen=True)
class OcrResult:
    """Output of the text recognizer."""

    lines: tuple[OcrLine, ...] = field(default_factory=tuple)

    @property
    def texts(self) -> list[str]:
        return [line.text for line in self.lines]

    @property
    def confidences(self) -> list[float]:
        return [line.confidence for line in self.lines]

    @property
    def density(self) -> float:
        """Saturating observation count: ``min(lines / 40, 1)``."""
        return min(len(self.lines) / OCR_DENSITY_SATURATION, 1.0)

    @property
    def joined_text(self) -> str:
        return " ".join(self.texts).upper()


@dataclass(frozen=True)
class SensorBundle:
    """Fully populated sensor observations for one image.

    Failed sensors contribute their default value and are listed in
    ``failed_sensors``.
    """

    ocr: OcrResult = field(default_factory=OcrResult)
    edge_score: float = 0.0
    face_detected: bool = False
    barcodes: tuple[BarcodePayload, ...] = field(default_factory=tuple)
    failed_sensors: tuple[str, ...] = field(default_factory=tuple)

    @property
    def barcode_text(self) -> str:
        return " ".join(barcode.raw_string for barcode in self.barcodes)
