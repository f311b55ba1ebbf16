"""
Logger implementation for devcenter internal diagnostics.

Wraps stdlib logging with configurable handlers for console (stderr) and file.
On a CI runner stderr ends up in the step log, next to the workflow commands
the reporter writes to stdout.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, ClassVar

from ..core.interfaces.logger import ILogger


class DevCenterLogger(ILogger):
    """
    Logger implementation using stdlib logging.

    Supports output to stderr and, optionally, a rotating log file.
    """

    DEFAULT_LOG_FILE = Path.home() / ".devcenter" / "devcenter.log"
    MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
    BACKUP_COUNT = 3

    LEVEL_MAP: ClassVar[dict[str, int]] = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
    }

    def __init__(
        self,
        name: str = "devcenter",
        level: str = "info",
        console_enabled: bool = True,
        file_enabled: bool = False,
        file_path: Path | None = None,
    ) -> None:
        """
        Initialize logger.

        Args:
            name: Logger name
            level: Initial log level (debug, info, warning, error)
            console_enabled: Enable stderr output
            file_enabled: Enable file output
            file_path: Log file location (defaults to ~/.devcenter/devcenter.log)
        """
        self._logger = logging.getLogger(name)
        self._logger.setLevel(logging.DEBUG)  # Let handlers filter
        self._logger.handlers.clear()
        self._logger.propagate = False

        self._console_handler: logging.Handler | None = None
        self._file_handler: logging.Handler | None = None

        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        log_level = self.LEVEL_MAP.get(level.lower(), logging.INFO)

        if console_enabled:
            console = logging.StreamHandler(sys.stderr)
            console.setLevel(log_level)
            console.setFormatter(formatter)
            self._logger.addHandler(console)
            self._console_handler = console

        if file_enabled:
            self._setup_file_handler(formatter, log_level, file_path or self.DEFAULT_LOG_FILE)

        if not self._logger.handlers:
            # Keeps records away from logging.lastResort (stderr)
            self._logger.addHandler(logging.NullHandler())

    def _setup_file_handler(self, formatter: logging.Formatter, level: int, path: Path) -> None:
        """Set up rotating file handler."""
        path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            path,
            maxBytes=self.MAX_FILE_SIZE,
            backupCount=self.BACKUP_COUNT,
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        self._logger.addHandler(file_handler)
        self._file_handler = file_handler

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.error(message, *args, **kwargs)

    def set_level(self, level: str) -> None:
        """Set log level for all handlers."""
        lvl = self.LEVEL_MAP.get(level.lower(), logging.INFO)
        for handler in (self._console_handler, self._file_handler):
            if handler:
                handler.setLevel(lvl)


class NullLogger(ILogger):
    """No-op logger for testing or when logging is disabled."""

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def set_level(self, level: str) -> None:
        pass
