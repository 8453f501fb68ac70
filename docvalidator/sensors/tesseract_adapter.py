from typing import Any, ClassVar

import pytesseract
from PIL import Image
from pytesseract import Output

from docvalidator.sensors.base import BaseTextRecognizer
from docvalidator.sensors.image import DecodedImage
from docvalidator.sensors.models import OcrLevel, OcrLine, OcrResult
from docvalidator.validation.exceptions import SensorError

LineKey = tuple[int, int, int]


class TesseractTextRecognizer(BaseTextRecognizer):
    """Recognizes text lines with Tesseract via pytesseract."""

    PROFILES: ClassVar[dict[OcrLevel, str]] = {
        OcrLevel.FAST: "--oem 1 --psm 11",
        OcrLevel.ACCURATE: "--oem 1 --psm 3",
    }
    # accurate mode upscales images whose short side is below this
    UPSCALE_MIN_SIDE: ClassVar[int] = 1000

    def __init__(self, tesseract_cmd: str = "") -> None:
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    def recognize(self, image: DecodedImage, level: OcrLevel) -> OcrResult:
        try:
            prepared = self._prepare(image, level)
            data = pytesseract.image_to_data(
                prepared,
                config=self.PROFILES[level],
                output_type=Output.DICT,
            )
        except SensorError:
            raise
        except Exception as exc:
            raise SensorError(f"tesseract recognition failed: {exc}") from exc
        return OcrResult(lines=tuple(group_lines(data)))

    def _prepare(self, image: DecodedImage, level: OcrLevel) -> Image.Image:
        gray = image.rgb.convert("L")
        if level is not OcrLevel.ACCURATE:
            return gray
        short_side = min(gray.size)
        if 0 < short_side < self.UPSCALE_MIN_SIDE:
            scale = self.UPSCALE_MIN_SIDE / short_side
            size = (round(gray.width * scale), round(gray.height * scale))
            return gray.resize(size, Image.Resampling.LANCZOS)
        return gray


def group_lines(data: dict[str, list[Any]]) -> list[OcrLine]:
    """Group Tesseract word rows into lines keyed by (block, paragraph, line).

    Words with empty text or a negative confidence (non-text rows) are
    dropped. Line confidence is the mean word confidence scaled to 0-1.
    """
    words: dict[LineKey, list[str]] = {}
    confidences: dict[LineKey, list[float]] = {}

    for i, raw_text in enumerate(data.get("text", [])):
        text = (raw_text or "").strip()
        if not text:
            continue
        conf = _parse_confidence(data["conf"][i])
        if conf is None or conf < 0:
            continue
        key = (int(data["block_num"][i]), int(data["par_num"][i]), int(data["line_num"][i]))
        words.setdefault(key, []).append(text)
        confidences.setdefault(key, []).append(conf)

    lines = []
    for key, line_words in words.items():
        scores = confidences[key]
        mean = sum(scores) / len(scores) / 100.0
        lines.append(OcrLine(text=" ".join(line_words), confidence=min(max(mean, 0.0), 1.0)))
    return lines


def _parse_confidence(raw: object) -> float | None:
    try:
        return float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
