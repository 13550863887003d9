"""
Logger adapter backed by the standard logging module.
"""

import logging
import sys

from ...core.ports.logger import Logger


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class StandardLogger(Logger):
    """Implements the Logger port on top of logging.Logger with a stderr console handler."""

    def __init__(self, name: str = "skill_metrics", level: int = logging.INFO):
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)

        if not self._logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setLevel(level)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self._logger.addHandler(handler)

    def info(self, message: str, **kwargs) -> None:
        self._logger.info(self._format(message, kwargs))

    def error(self, message: str, **kwargs) -> None:
        self._logger.error(self._format(message, kwargs))

    def warn(self, message: str, **kwargs) -> None:
        self._logger.warning(self._format(message, kwargs))

    def debug(self, message: str, **kwargs) -> None:
        self._logger.debug(self._format(message, kwargs))

    def get_logger(self) -> logging.Logger:
        """Return the underlying logging.Logger."""
        return self._logger

    def set_level(self, level) -> None:
        """Set the level on the logger and every attached handler."""
        self._logger.setLevel(level)
        for handler in self._logger.handlers:
            handler.setLevel(level)

    @staticmethod
    def _format(message: str, fields: dict) -> str:
        if not fields:
            return message
        pairs = " ".join(f"{key}={value}" for key, value in fields.items())
        return f"{message} {pairs}"
