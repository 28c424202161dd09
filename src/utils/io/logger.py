"""Centralized console logger.

Every module logs through the static :class:`Logger` facade so messages share a
single format and level. Records are written to whatever ``sys.stdout`` is at
emit time, which lets :class:`OutputSuppressor` silence or capture them.
"""

import logging
import sys

from src.utils.config.parameters import ParameterLoader

_LOGGER_NAME = "monthly_options"
_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_SEPARATOR = "-" * 80
SUCCESS = 25

logging.addLevelName(SUCCESS, "SUCCESS")


class _CurrentStdoutHandler(logging.StreamHandler):
    """Stream handler bound lazily to the current ``sys.stdout``."""

    @property  # type: ignore[override]
    def stream(self):  # noqa: D401
        """Current process stdout."""
        return sys.stdout

    @stream.setter
    def stream(self, _value) -> None:
        pass


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(str(name).strip().upper())
    return level if isinstance(level, int) else logging.INFO


def _build_logger() -> logging.Logger:
    logger = logging.getLogger(_LOGGER_NAME)
    if not logger.handlers:
        handler = _CurrentStdoutHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, _DATE_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(_resolve_level(ParameterLoader().get("log_level", "INFO")))
    logger.propagate = False
    return logger


class Logger:
    """Static logging facade used across the code-base."""

    _LOGGER = _build_logger()

    @staticmethod
    def debug(message: str) -> None:
        """Log a diagnostic message."""
        Logger._LOGGER.debug(message)

    @staticmethod
    def info(message: str) -> None:
        """Log an informational message."""
        Logger._LOGGER.info(message)

    @staticmethod
    def success(message: str) -> None:
        """Log the successful completion of a step."""
        Logger._LOGGER.log(SUCCESS, message)

    @staticmethod
    def warning(message: str) -> None:
        """Log a recoverable problem."""
        Logger._LOGGER.warning(message)

    @staticmethod
    def error(message: str) -> None:
        """Log a failure."""
        Logger._LOGGER.error(message)

    @staticmethod
    def separator() -> None:
        """Print a visual separator between pipeline stages."""
        Logger._LOGGER.info(_SEPARATOR)
