import logging
import sys


def _format_fields(fields: dict[str, object]) -> str:
    parts = []
    for key, value in fields.items():
        if isinstance(value, float):
            value = f"{value:.3f}"
        parts.append(f"{key}={value}")
    return " ".join(parts)


class Log:
    """Centralized logging for the validator.

    Keyword arguments are appended to the message as ``key=value`` pairs so
    that sensor and scoring events stay grep-friendly in plain-text logs.
    """

    _logger: logging.Logger = logging.getLogger("docvalidator")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Configure the logger with the specified level and stderr handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def _emit(cls, level: int, message: str, fields: dict[str, object]) -> None:
        if not cls._logger.isEnabledFor(level):
            return
        if fields:
            message = f"{message} {_format_fields(fields)}"
        cls._logger.log(level, message)

    @classmethod
    def info(cls, message: str, **fields: object) -> None:
        cls._emit(logging.INFO, message, fields)

    @classmethod
    def error(cls, message: str, **fields: object) -> None:
        cls._emit(logging.ERROR, message, fields)

    @classmethod
    def warning(cls, message: str, **fields: object) -> None:
        cls._emit(logging.WARNING, message, fields)

    @classmethod
    def debug(cls, message: str, **fields: object) -> None:
        cls._emit(logging.DEBUG, message, fields)
