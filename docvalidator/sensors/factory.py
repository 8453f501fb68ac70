from collections.abc import Callable
from typing import ClassVar

from docvalidator.config.settings import Settings
from docvalidator.sensors.base import SensorSuite
from docvalidator.sensors.opencv_adapters import OpenCvFaceDetector, OpenCvRectangleDetector
from docvalidator.sensors.static_adapter import static_suite
from docvalidator.sensors.tesseract_adapter import TesseractTextRecognizer
from docvalidator.sensors.zxing_adapter import ZxingBarcodeDetector


def _opencv_suite(settings: Settings) -> SensorSuite:
    return SensorSuite(
        text=TesseractTextRecognizer(tesseract_cmd=settings.tesseract_cmd),
        rectangles=OpenCvRectangleDetector(),
        faces=OpenCvFaceDetector(),
        barcodes=ZxingBarcodeDetector(),
    )


def _static_suite(settings: Settings) -> SensorSuite:
    _ = settings
    return static_suite()


class SensorFactory:
    """Creates the sensor suite selected by settings."""

    ENGINES: ClassVar[dict[str, Callable[[Settings], SensorSuite]]] = {
        "opencv": _opencv_suite,
        "static": _static_suite,
    }

    @classmethod
    def create(cls, settings: Settings) -> SensorSuite:
        engine = settings.sensor_engine.lower()
        builder = cls.ENGINES.get(engine)
        if builder is None:
            raise ValueError(
                f"Unknown sensor engine '{engine}'. Choose from: {list(cls.ENGINES)}"
            )
        return builder(settings)
