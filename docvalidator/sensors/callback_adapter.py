"""Adapters for sensor providers that report results through callbacks.

A provider exposes ``start(image, ..., on_success, on_failure)`` and may call
either callback from any thread, possibly more than once. Each adapter routes
the callbacks through a ``OneShotCompletion`` so the blocking sensor call
settles exactly once.
"""

from collections.abc import Callable
from typing import Any

from docvalidator.sensors.base import (
    BaseBarcodeDetector,
    BaseFaceDetector,
    BaseRectangleDetector,
    BaseTextRecognizer,
)
from docvalidator.sensors.completion import OneShotCompletion
from docvalidator.sensors.image import DecodedImage
from docvalidator.sensors.models import BarcodePayload, OcrLevel, OcrResult
from docvalidator.validation.exceptions import SensorError


OnSuccess = Callable[[Any], object]
OnFailure = Callable[[BaseException], object]


def run_callback_sensor(
    start: Callable[[OnSuccess, OnFailure], None],
    *,
    name: str,
    timeout_seconds: float | None = None,
) -> Any:
    """Invoke a callback-style provider and block until it settles once.

    Raises:
        SensorError: if the provider reports a failure, raises while starting,
            or never settles within ``timeout_seconds``.
    """
    completion: OneShotCompletion[Any] = OneShotCompletion()
    try:
        start(completion.succeed, completion.fail)
    except Exception as exc:
        completion.fail(exc)

    try:
        return completion.wait(timeout_seconds)
    except SensorError:
        raise
    except Exception as exc:
        raise SensorError(f"{name} failed: {exc}") from exc


class CallbackTextRecognizer(BaseTextRecognizer):
    def __init__(
        self,
        start: Callable[[DecodedImage, OcrLevel, OnSuccess, OnFailure], None],
        timeout_seconds: float | None = None,
    ) -> None:
        self._start = start
        self._timeout_seconds = timeout_seconds

    def recognize(self, image: DecodedImage, level: OcrLevel) -> OcrResult:
        return run_callback_sensor(
            lambda ok, err: self._start(image, level, ok, err),
            name="text recognizer",
            timeout_seconds=self._timeout_seconds,
        )


class CallbackRectangleDetector(BaseRectangleDetector):
    def __init__(
        self,
        start: Callable[[DecodedImage, OnSuccess, OnFailure], None],
        timeout_seconds: float | None = None,
    ) -> None:
        self._start = start
        self._timeout_seconds = timeout_seconds

    def detect(self, image: DecodedImage) -> float:
        return float(
            run_callback_sensor(
                lambda ok, err: self._start(image, ok, err),
                name="rectangle detector",
                timeout_seconds=self._timeout_seconds,
            )
        )


class CallbackFaceDetector(BaseFaceDetector):
    def __init__(
        self,
        start: Callable[[DecodedImage, OnSuccess, OnFailure], None],
        timeout_seconds: float | None = None,
    ) -> None:
        self._start = start
        self._timeout_seconds = timeout_seconds

    def detect(self, image: DecodedImage) -> bool:
        return bool(
            run_callback_sensor(
                lambda ok, err: self._start(image, ok, err),
                name="face detector",
                timeout_seconds=self._timeout_seconds,
            )
        )


class CallbackBarcodeDetector(BaseBarcodeDetector):
    def __init__(
        self,
        start: Callable[[DecodedImage, OnSuccess, OnFailure], None],
        timeout_seconds: float | None = None,
    ) -> None:
        self._start = start
        self._timeout_seconds = timeout_seconds

    def detect(self, image: DecodedImage) -> list[BarcodePayload]:
        return list(
            run_callback_sensor(
                lambda ok, err: self._start(image, ok, err),
                name="barcode detector",
                timeout_seconds=self._timeout_seconds,
            )
        )
