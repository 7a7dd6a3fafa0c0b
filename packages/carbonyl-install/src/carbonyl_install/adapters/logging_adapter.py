"""Standard library implementation of the LoggingPort."""

from __future__ import annotations

import logging

DEFAULT_LOGGER_NAME = "carbonyl_install"


class StdlibLoggingAdapter:
    """Adapter forwarding LoggingPort calls to a logging.Logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(DEFAULT_LOGGER_NAME)

    def info(self, message: str) -> None:
        self._logger.info(message)

    def warning(self, message: str) -> None:
        self._logger.warning(message)
