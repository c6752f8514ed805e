"""Centralized logging for clientbench.

Logging must be configured once before use, usually by the CLI entry point.

Usage:
    from clientbench.utils.logger import Logger

    # Configure once at startup (required before any logging)
    Logger.configure(level="INFO", timestamps=True)

    # Get a logger anywhere in the codebase
    log = Logger.get("runner")
    log.info("Starting measured repetitions...")
"""

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import TextIO

import click


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


class DimDebugFormatter(logging.Formatter):
    """Formatter rendering DEBUG records in a faint ANSI style.

    Transport traces are logged at DEBUG and are noisy next to the per-scenario
    summary lines, so they are dimmed on terminals.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if record.levelno <= logging.DEBUG:
            return click.style(message, dim=True)
        return message


class Logger:
    """Centralized logging for clientbench.

    Must be configured once before use. get() raises LoggerNotConfiguredError
    before configuration; component() falls back to the unconfigured logger.

    Example:
        >>> Logger.configure(level="INFO")
        >>> log = Logger.get("transport")
        >>> log.debug("HEAD / -> 200")
    """

    _configured: bool = False
    _root_name: str = "clientbench"

    @classmethod
    def configure(
        cls,
        level: str | LogLevel = "INFO",
        output: str | Path | TextIO | None = None,
        timestamps: bool = True,
        include_location: bool = False,
        format_string: str | None = None,
        dim_debug: bool = False,
    ) -> None:
        """Configure the logger. Must be called before any logging.

        Args:
            level: Log level - "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"
                or a LogLevel enum value.
            output: Where to send logs:
                - None: stderr (default, keeps stdout for scenario summaries)
                - "stdout": sys.stdout
                - str/Path: File path
                - TextIO: Any file-like object
            timestamps: Include timestamps in messages (default True).
            include_location: Include [filename:lineno] (default False).
            format_string: Custom format string (overrides timestamps/include_location).
            dim_debug: Render DEBUG records in a faint terminal style.
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
            new_handler = logging.StreamHandler(sys.stderr)
        elif output == "stdout":
            new_handler = logging.StreamHandler(sys.stdout)
        elif isinstance(output, str | Path):
            new_handler = logging.FileHandler(str(output))
        elif hasattr(output, "write"):
            new_handler = logging.StreamHandler(output)
        else:
            raise ValueError(f"Invalid output: {type(output)}")

        new_handler.setLevel(level.to_logging_level())

        if format_string is None:
            parts = []
            if timestamps:
                parts.append("%(asctime)s")
            parts.append("%(levelname)s")
            parts.append("[%(name)s]")
            if include_location:
                parts.append("[%(filename)s:%(lineno)d]")
            parts.append("%(message)s")
            format_string = " ".join(parts)

        formatter_cls = DimDebugFormatter if dim_debug else logging.Formatter
        new_handler.setFormatter(formatter_cls(format_string))
        logger.addHandler(new_handler)
        logger.propagate = False

        cls._configured = True

    @classmethod
    def get(cls, name: str | None = None) -> logging.Logger:
        """Get a logger instance.

        Args:
            name: Logger name (appended to "clientbench."). If None, returns
                the root clientbench logger.

        Raises:
            LoggerNotConfiguredError: If configure() hasn't been called.
        """
        if not cls._configured:
            raise LoggerNotConfiguredError()

        if name:
            return logging.getLogger(f"{cls._root_name}.{name}")
        return logging.getLogger(cls._root_name)

    @classmethod
    def component(cls, name: str) -> logging.Logger:
        """Get a component logger without requiring configuration.

        Library classes (runner, reporter, transport) log through this so they
        can be used before configure(). Unconfigured, the plain
        ``clientbench.<name>`` logger is returned and only WARNING and above
        reach stderr through logging's last-resort handler.
        """
        if cls._configured:
            return cls.get(name)
        return logging.getLogger(f"{cls._root_name}.{name}")

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
