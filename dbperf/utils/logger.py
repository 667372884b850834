"""Centralized logging for dbperf.

Logging must be configured once before use; benchmark cases and the runner
fetch their loggers through this facade.

Usage:
    from dbperf.utils.logger import Logger

    # Configure once at startup (required before any logging)
    Logger.configure(level="INFO", output="stderr")

    # Get a logger anywhere in the codebase
    log = Logger.get("runner")
    log.info("Start running cases")
"""

import logging
import sys
from enum import Enum
from typing import TextIO


class LogLevel(Enum):
    """Log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_logging_level(self) -> int:
        """Convert to Python logging level."""
        level: int = getattr(logging, self.value)
        return level


class LoggerNotConfiguredError(Exception):
    """Raised when trying to use Logger before calling Logger.configure()."""

    def __init__(self) -> None:
        super().__init__(
            "Logger not configured. Call Logger.configure() at application startup."
        )


class Logger:
    """Centralized logging for dbperf.

    Must be configured once before use. Attempting to log before configuration
    raises LoggerNotConfiguredError.

    Example:
        >>> Logger.configure(level="INFO", output="stderr")
        >>> log = Logger.get("benchmark.Orders.fetchAll")
        >>> log.info("Running case...")
    """

    _configured: bool = False
    _root_name: str = "dbperf"

    @classmethod
    def configure(
        cls,
        level: str | LogLevel = "INFO",
        output: str | TextIO | None = None,
        timestamps: bool = True,
    ) -> None:
        """Configure the logger. Must be called before any logging.

        Args:
            level: Log level name or a LogLevel enum value.
            output: None for stdout, "stderr", or any writable stream.
            timestamps: Include timestamps in messages (default True).

        Raises:
            ValueError: If output is none of the above.
        """
        if isinstance(level, str):
            level = LogLevel(level.upper())

        logger = logging.getLogger(cls._root_name)
        logger.setLevel(level.to_logging_level())

        for existing_handler in logger.handlers[:]:
            logger.removeHandler(existing_handler)
            existing_handler.close()

        new_handler: logging.Handler
        if output is None:
            new_handler = logging.StreamHandler(sys.stdout)
        elif output == "stderr":
            new_handler = logging.StreamHandler(sys.stderr)
        elif hasattr(output, "write"):
            new_handler = logging.StreamHandler(output)
        else:
            raise ValueError(f"Invalid output: {type(output)}")

        new_handler.setLevel(level.to_logging_level())

        parts = ["%(levelname)s", "[%(name)s]", "%(message)s"]
        if timestamps:
            parts.insert(0, "%(asctime)s")
        new_handler.setFormatter(logging.Formatter(" ".join(parts)))
        logger.addHandler(new_handler)
        logger.propagate = False

        cls._configured = True

    @classmethod
    def get(cls, name: str | None = None) -> logging.Logger:
        """Get a logger instance.

        Args:
            name: Logger name (appended to "dbperf."). If None, returns root logger.

        Returns:
            Logger instance.

        Raises:
            LoggerNotConfiguredError: If configure() hasn't been called.
        """
        if not cls._configured:
            raise LoggerNotConfiguredError()

        if name:
            return logging.getLogger(f"{cls._root_name}.{name}")
        return logging.getLogger(cls._root_name)

    @classmethod
    def set_level(cls, level: str | LogLevel) -> None:
        """Change log level without reconfiguring.

        Raises:
            LoggerNotConfiguredError: If configure() hasn't been called.
        """
        if not cls._configured:
            raise LoggerNotConfiguredError()

        if isinstance(level, str):
            level = LogLevel(level.upper())

        logger = logging.getLogger(cls._root_name)
        logger.setLevel(level.to_logging_level())
        for handler in logger.handlers:
            handler.setLevel(level.to_logging_level())

    @classmethod
    def is_configured(cls) -> bool:
        """Check if logger has been configured."""
        return cls._configured
