"""Exactly-once settlement for callback-style sensor APIs."""

import threading
from concurrent import futures
from typing import Generic, TypeVar

from docvalidator.validation.exceptions import SensorCompletionError

T = TypeVar("T")


class OneShotCompletion(Generic[T]):
    """A result slot that can be settled only once.

    The first call to ``succeed`` or ``fail`` wins; later calls (a sensor
    calling back twice, or calling back after its error path fired) are
    ignored and return False.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._settled = False
        self._future: futures.Future[T] = futures.Future()

    @property
    def settled(self) -> bool:
        with self._lock:
            return self._settled

    def _claim(self) -> bool:
        with self._lock:
            if self._settled:
                return False
            self._settled = True
            return True

    def succeed(self, value: T) -> bool:
        if not self._claim():
            return False
        self._future.set_result(value)
        return True

    def fail(self, error: BaseException) -> bool:
        if not self._claim():
            return False
        self._future.set_exception(error)
        return True

    def wait(self, timeout: float | None = None) -> T:
        """Block until settled and return the value or raise the failure.

        Raises:
            SensorCompletionError: if nothing settles within ``timeout`` seconds.
        """
        try:
            return self._future.result(timeout=timeout)
        except futures.TimeoutError as exc:
            raise SensorCompletionError(
                f"Sensor did not complete within {timeout} seconds"
            ) from exc
