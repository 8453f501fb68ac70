"""Image legibility from Laplacian-variance sharpness and OCR confidence."""

from collections.abc import Sequence

import numpy as np

from docvalidator.analysis.models import LegibilityResult
from docvalidator.sensors.image import DecodedImage

# Laplacian variance treated as "very sharp"
SHARPNESS_SCALE = 500.0
SHARPNESS_WEIGHT = 0.6
OCR_CONFIDENCE_WEIGHT = 0.4
FEEDBACK_THRESHOLD = 0.5

TOO_BLURRY = "Image is too blurry, please retake with a steady hand"
SLIGHTLY_BLURRY = "Image is slightly blurry, try better lighting or hold the camera steadier"
HARD_TO_READ = "Text is difficult to read, ensure the document is well-lit and in focus"
UNREADABLE = (
    "Image is too blurry to read. Please retake the photo with good lighting "
    "and a steady hand."
)
LOW_QUALITY = "Image quality is too low to validate."


def analyze(image: DecodedImage, ocr_confidences: Sequence[float]) -> LegibilityResult:
    """Combine sharpness of ``image`` with the mean OCR line confidence."""
    sharpness = measure_sharpness(image.gray)
    ocr_confidence = (
        float(sum(ocr_confidences)) / len(ocr_confidences) if ocr_confidences else 0.0
    )
    score = sharpness * SHARPNESS_WEIGHT + ocr_confidence * OCR_CONFIDENCE_WEIGHT
    return LegibilityResult(
        score=score,
        sharpness_score=sharpness,
        ocr_confidence=ocr_confidence,
        feedback=generate_feedback(sharpness, ocr_confidence, score),
    )


def measure_sharpness(gray: np.ndarray) -> float:
    """Normalize Laplacian variance of a grayscale buffer into [0, 1]."""
    variance = laplacian_variance(gray)
    return min(max(variance / SHARPNESS_SCALE, 0.0), 1.0)


def apply_laplacian(gray: np.ndarray) -> np.ndarray:
    """Convolve interior pixels with [[0,1,0],[1,-4,1],[0,1,0]].

    Border pixels lack a full neighborhood and stay zero.
    """
    pixels = np.asarray(gray, dtype=np.float64)
    output = np.zeros_like(pixels)
    if pixels.ndim != 2 or pixels.shape[0] < 3 or pixels.shape[1] < 3:
        return output
    output[1:-1, 1:-1] = (
        pixels[:-2, 1:-1]
        + pixels[2:, 1:-1]
        + pixels[1:-1, :-2]
        + pixels[1:-1, 2:]
        - 4.0 * pixels[1:-1, 1:-1]
    )
    return output


def laplacian_variance(gray: np.ndarray) -> float:
    """Variance of the Laplacian response as E[x^2] - E[x]^2, never negative."""
    response = apply_laplacian(gray)
    if response.size == 0:
        return 0.0
    mean = float(response.mean())
    mean_sq = float(np.square(response).mean())
    return max(mean_sq - mean * mean, 0.0)


def generate_feedback(sharpness: float, ocr_confidence: float, score: float) -> str | None:
    if score >= FEEDBACK_THRESHOLD:
        return None

    if sharpness < 0.15 and ocr_confidence < 0.2:
        return UNREADABLE

    issues = []
    if sharpness < 0.2:
        issues.append(TOO_BLURRY)
    elif sharpness < 0.35:
        issues.append(SLIGHTLY_BLURRY)

    if 0 < ocr_confidence < 0.3:
        issues.append(HARD_TO_READ)

    if not issues:
        return LOW_QUALITY
    return ". ".join(issues) + "."
