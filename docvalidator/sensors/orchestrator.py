import time
from collections.abc import Callable
from concurrent import futures

from docvalidator.logging.logger import Log
from docvalidator.sensors.base import SensorSuite
from docvalidator.sensors.image import DecodedImage, ImageSource, decode_image
from docvalidator.sensors.models import OcrLevel, OcrResult, SensorBundle

TEXT = "text"
RECTANGLES = "rectangles"
FACES = "faces"
BARCODES = "barcodes"


class SensorOrchestrator:
    """Runs the four sensors concurrently and joins on all of them.

    A failing or timed-out sensor degrades to its default value (empty OCR,
    0.0 edge score, no face, no barcodes) without cancelling its siblings.
    Only an undecodable image aborts, and it does so before any sensor starts.
    """

    def __init__(
        self,
        sensors: SensorSuite,
        *,
        timeout_seconds: float | None = None,
        max_workers: int = 4,
    ) -> None:
        self._sensors = sensors
        self._timeout_seconds = timeout_seconds or None
        self._max_workers = max_workers

    def observe(
        self,
        source: ImageSource | DecodedImage,
        level: OcrLevel = OcrLevel.ACCURATE,
    ) -> SensorBundle:
        """Collect every sensor observation for one image.

        Raises:
            InvalidImageError: if the image cannot be decoded.
        """
        image = decode_image(source)
        tasks: dict[str, Callable[[], object]] = {
            TEXT: lambda: self._sensors.text.recognize(image, level),
            RECTANGLES: lambda: self._sensors.rectangles.detect(image),
            FACES: lambda: self._sensors.faces.detect(image),
            BARCODES: lambda: self._sensors.barcodes.detect(image),
        }
        defaults: dict[str, object] = {
            TEXT: OcrResult(),
            RECTANGLES: 0.0,
            FACES: False,
            BARCODES: [],
        }

        results: dict[str, object] = {}
        failed: list[str] = []
        # one thread per sensor so a queued sensor never waits out the shared deadline
        executor = futures.ThreadPoolExecutor(
            max_workers=max(self._max_workers, len(tasks)), thread_name_prefix="sensor"
        )
        try:
            submitted = {name: executor.submit(task) for name, task in tasks.items()}
            deadline = (
                time.monotonic() + self._timeout_seconds
                if self._timeout_seconds is not None
                else None
            )
            for name, future in submitted.items():
                try:
                    results[name] = future.result(timeout=self._remaining(deadline))
                except futures.TimeoutError:
                    future.cancel()
                    Log.warning("Sensor timed out, using default", sensor=name)
                    results[name] = defaults[name]
                    failed.append(name)
                except Exception as exc:
                    Log.warning("Sensor failed, using default", sensor=name, error=exc)
                    results[name] = defaults[name]
                    failed.append(name)
        finally:
            # timed-out sensor threads are abandoned rather than joined
            executor.shutdown(wait=False, cancel_futures=True)

        return SensorBundle(
            ocr=results[TEXT],  # type: ignore[arg-type]
            edge_score=min(max(float(results[RECTANGLES]), 0.0), 1.0),  # type: ignore[arg-type]
            face_detected=bool(results[FACES]),
            barcodes=tuple(results[BARCODES]),  # type: ignore[arg-type]
            failed_sensors=tuple(failed),
        )

    @staticmethod
    def _remaining(deadline: float | None) -> float | None:
        if deadline is None:
            return None
        return max(deadline - time.monotonic(), 0.0)
