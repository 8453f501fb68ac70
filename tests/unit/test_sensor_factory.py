from unittest.mock import Mock

import pytest

from docvalidator.config.settings import Settings
from docvalidator.sensors.base import SensorSuite
from docvalidator.sensors.factory import SensorFactory
from docvalidator.sensors.opencv_adapters import OpenCvRectangleDetector
from docvalidator.sensors.static_adapter import StaticTextRecognizer
from docvalidator.sensors.tesseract_adapter import TesseractTextRecognizer
from docvalidator.sensors.zxing_adapter import ZxingBarcodeDetector


class TestSensorFactory:
    def test_creates_opencv_suite(self) -> None:
        settings = Mock(spec=Settings)
        settings.sensor_engine = "opencv"
        settings.tesseract_cmd = ""
        suite = SensorFactory.create(settings)
        assert isinstance(suite, SensorSuite)
        assert isinstance(suite.text, TesseractTextRecognizer)
        assert isinstance(suite.rectangles, OpenCvRectangleDetector)
        assert isinstance(suite.barcodes, ZxingBarcodeDetector)

    def test_creates_static_suite(self) -> None:
        settings = Mock(spec=Settings)
        settings.sensor_engine = "static"
        suite = SensorFactory.create(settings)
        assert isinstance(suite.text, StaticTextRecognizer)

    def test_engine_name_is_case_insensitive(self) -> None:
        settings = Mock(spec=Settings)
        settings.sensor_engine = "STATIC"
        assert isinstance(SensorFactory.create(settings).text, StaticTextRecognizer)

    def test_unknown_engine_raises(self) -> None:
        settings = Mock(spec=Settings)
        settings.sensor_engine = "vision-kit"
        with pytest.raises(ValueError, match="Unknown sensor engine 'vision-kit'"):
            SensorFactory.create(settings)
