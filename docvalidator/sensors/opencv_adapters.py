"""OpenCV-backed rectangle and face sensors."""

from typing import ClassVar

import cv2
import numpy as np

from docvalidator.sensors.base import BaseFaceDetector, BaseRectangleDetector
from docvalidator.sensors.image import DecodedImage
from docvalidator.validation.exceptions import SensorError


class OpenCvRectangleDetector(BaseRectangleDetector):
    """Scores the most document-like quadrilateral outline in the image.

    Confidence is rectangularity (polygon area over its minimum bounding
    rectangle) times image coverage, where coverage saturates at
    ``FULL_COVERAGE`` of the frame. Only the best observation counts.
    """

    MIN_ASPECT_RATIO: ClassVar[float] = 0.4  # short side / long side
    MIN_CONFIDENCE: ClassVar[float] = 0.2
    FULL_COVERAGE: ClassVar[float] = 0.25

    def detect(self, image: DecodedImage) -> float:
        try:
            return self._best_confidence(image.gray.copy())
        except SensorError:
            raise
        except Exception as exc:
            raise SensorError(f"rectangle detection failed: {exc}") from exc

    def _best_confidence(self, gray: np.ndarray) -> float:
        blurred = cv2.GaussianBlur(gray, (5, 5), 0)
        edges = cv2.Canny(blurred, 50, 150)
        edges = cv2.dilate(edges, np.ones((3, 3), np.uint8), iterations=1)
        contours, _ = cv2.findContours(edges, cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_SIMPLE)

        image_area = float(gray.shape[0] * gray.shape[1])
        best = max((self._score(c, image_area) for c in contours), default=0.0)
        return best if best >= self.MIN_CONFIDENCE else 0.0

    def _score(self, contour: np.ndarray, image_area: float) -> float:
        area = cv2.contourArea(contour)
        if area <= 0:
            return 0.0
        perimeter = cv2.arcLength(contour, True)
        approx = cv2.approxPolyDP(contour, 0.02 * perimeter, True)
        if len(approx) != 4 or not cv2.isContourConvex(approx):
            return 0.0

        _center, (width, height), _angle = cv2.minAreaRect(approx)
        short_side, long_side = sorted((width, height))
        if short_side <= 0 or short_side / long_side < self.MIN_ASPECT_RATIO:
            return 0.0

        rectangularity = min(cv2.contourArea(approx) / (width * height), 1.0)
        coverage = min(area / image_area / self.FULL_COVERAGE, 1.0)
        return float(rectangularity * coverage)


class OpenCvFaceDetector(BaseFaceDetector):
    """Detects frontal faces with the Haar cascade bundled with OpenCV."""

    CASCADE_FILE: ClassVar[str] = "haarcascade_frontalface_default.xml"

    def __init__(self, scale_factor: float = 1.1, min_neighbors: int = 5) -> None:
        self._cascade = cv2.CascadeClassifier(cv2.data.haarcascades + self.CASCADE_FILE)
        self._scale_factor = scale_factor
        self._min_neighbors = min_neighbors

    def detect(self, image: DecodedImage) -> bool:
        if self._cascade.empty():
            raise SensorError(f"Face cascade '{self.CASCADE_FILE}' could not be loaded")
        try:
            gray = cv2.equalizeHist(image.gray.copy())
            min_side = max(24, int(min(gray.shape) * 0.05))
            faces = self._cascade.detectMultiScale(
                gray,
                scaleFactor=self._scale_factor,
                minNeighbors=self._min_neighbors,
                minSize=(min_side, min_side),
            )
        except Exception as exc:
            raise SensorError(f"face detection failed: {exc}") from exc
        return len(faces) > 0
