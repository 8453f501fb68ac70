"""Static sensor adapters.

They return fixed observations without any computer vision. Useful for local
development, tests, and as a template for new provider adapters: implement
the ABCs in ``sensors.base`` and register the engine in ``SensorFactory``.
"""

from collections.abc import Sequence

from docvalidator.sensors.base import (
    BaseBarcodeDetector,
    BaseFaceDetector,
    BaseRectangleDetector,
    BaseTextRecognizer,
    SensorSuite,
)
from docvalidator.sensors.image import DecodedImage
from docvalidator.sensors.models import BarcodeKind, BarcodePayload, OcrLevel, OcrLine, OcrResult


class StaticTextRecognizer(BaseTextRecognizer):
    def __init__(self, lines: Sequence[OcrLine] = ()) -> None:
        self._result = OcrResult(lines=tuple(lines))

    def recognize(self, image: DecodedImage, level: OcrLevel) -> OcrResult:
        _ = image, level
        return self._result


class StaticRectangleDetector(BaseRectangleDetector):
    def __init__(self, score: float = 0.0) -> None:
        self._score = score

    def detect(self, image: DecodedImage) -> float:
        _ = image
        return self._score


class StaticFaceDetector(BaseFaceDetector):
    def __init__(self, detected: bool = False) -> None:
        self._detected = detected

    def detect(self, image: DecodedImage) -> bool:
        _ = image
        return self._detected


class StaticBarcodeDetector(BaseBarcodeDetector):
    def __init__(self, payloads: Sequence[BarcodePayload] = ()) -> None:
        self._payloads = list(payloads)

    def detect(self, image: DecodedImage) -> list[BarcodePayload]:
        _ = image
        return list(self._payloads)


def static_suite(
    *,
    lines: Sequence[tuple[str, float]] = (),
    edge_score: float = 0.0,
    face_detected: bool = False,
    barcodes: Sequence[tuple[str, str]] = (),
) -> SensorSuite:
    """Build a suite from plain values.

    Args:
        lines: ``(text, confidence)`` pairs.
        barcodes: ``(symbology, payload)`` pairs, e.g. ``("PDF_417", "ANSI ...")``.
    """
    return SensorSuite(
        text=StaticTextRecognizer([OcrLine(text=t, confidence=c) for t, c in lines]),
        rectangles=StaticRectangleDetector(edge_score),
        faces=StaticFaceDetector(face_detected),
        barcodes=StaticBarcodeDetector(
            [BarcodePayload(kind=BarcodeKind.from_symbology(s), raw_string=p) for s, p in barcodes]
        ),
    )
