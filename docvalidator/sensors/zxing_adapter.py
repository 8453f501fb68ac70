"""Barcode sensor backed by zxing-cpp."""

import zxingcpp

from docvalidator.sensors.base import BaseBarcodeDetector
from docvalidator.sensors.image import DecodedImage
from docvalidator.sensors.models import BarcodeKind, BarcodePayload
from docvalidator.validation.exceptions import SensorError


class ZxingBarcodeDetector(BaseBarcodeDetector):
    """Decodes every barcode zxing-cpp finds (PDF417, QR, Aztec, DataMatrix, 1-D codes).

    Format names are mapped through ``BarcodeKind.from_symbology``; anything
    outside the four known kinds is reported as ``BarcodeKind.OTHER``.
    """

    def detect(self, image: DecodedImage) -> list[BarcodePayload]:
        try:
            results = zxingcpp.read_barcodes(image.gray.copy())
        except Exception as exc:
            raise SensorError(f"barcode detection failed: {exc}") from exc
        return [
            BarcodePayload(
                kind=BarcodeKind.from_symbology(result.format.name),
                raw_string=result.text,
            )
            for result in results
            if result.text
        ]
