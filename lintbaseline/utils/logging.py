"""
Logging for lintbaseline.

All package loggers live below the ``lintbaseline`` logger. Console output
goes to stderr through rich, or as JSON lines for machine consumers. A
rotating log file can be added next to the console handler.

Library code logs through :class:`ComponentLogger`, which turns keyword
context into ``key=value`` pairs in the message and keeps the same pairs on
the record for :class:`JSONFormatter`.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from lintbaseline.core.config import LoggingConfig

console = Console(stderr=True)

ROOT_LOGGER_NAME = "lintbaseline"
FILE_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per record, with the component context attached."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = getattr(record, "context", None)
        if context:
            entry["context"] = context
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def _level(name: str) -> int:
    level = getattr(logging, name.upper(), None)
    return level if isinstance(level, int) else logging.INFO


def _console_handler(level: int, json_format: bool) -> logging.Handler:
    handler: logging.Handler
    if json_format:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(JSONFormatter())
    else:
        # Messages contain file paths and rule ids, never rich markup
        handler = RichHandler(console=console, show_path=False, markup=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s"))
    handler.setLevel(level)
    return handler


def _file_handler(log_file: Path, json_format: bool, max_file_size_mb: int, backup_count: int) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_file,
        maxBytes=max_file_size_mb * 1024 * 1024,
        backupCount=backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(JSONFormatter() if json_format else logging.Formatter(FILE_FORMAT))
    handler.setLevel(logging.DEBUG)
    return handler


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    json_format: bool = False,
    max_file_size_mb: int = 10,
    backup_count: int = 5,
) -> logging.Logger:
    """
    Configure the ``lintbaseline`` logger.

    Calling it again replaces the handlers of an earlier call, so the CLI
    can first apply its flags and later the merged configuration.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional rotating log file, which always receives DEBUG
        json_format: Emit JSON lines instead of rich console output
        max_file_size_mb: Size at which the log file is rotated
        backup_count: Number of rotated files to keep

    Returns:
        The package logger
    """
    console_level = _level(level)
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_console_handler(console_level, json_format))
    if log_file:
        logger.addHandler(_file_handler(Path(log_file), json_format, max_file_size_mb, backup_count))
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(console_level)

    logger.propagate = False
    return logger


def setup_logging_from_config(config: "LoggingConfig") -> logging.Logger:
    """Configure logging from the ``logging`` section of the configuration."""
    return setup_logging(
        level=config.level,
        log_file=config.file,
        json_format=config.json_format,
        max_file_size_mb=config.max_file_size_mb,
        backup_count=config.backup_count,
    )


class ComponentLogger:
    """
    Logger of one component, named ``lintbaseline.<parent>.<component>``.

    Keyword context is appended to the message as ``key=value`` pairs and
    attached to the record as ``context``.
    """

    def __init__(self, component: str, parent: Optional[str] = None):
        self.component = component
        parts = [ROOT_LOGGER_NAME, parent, component]
        self._logger = logging.getLogger(".".join(p for p in parts if p))

    @property
    def name(self) -> str:
        return self._logger.name

    def debug(self, msg: str, **context: Any) -> None:
        self._log(logging.DEBUG, msg, None, context)

    def info(self, msg: str, **context: Any) -> None:
        self._log(logging.INFO, msg, None, context)

    def warning(self, msg: str, **context: Any) -> None:
        self._log(logging.WARNING, msg, None, context)

    def error(self, msg: str, exc: Optional[BaseException] = None, **context: Any) -> None:
        """Log an error, with the traceback of ``exc`` when given."""
        self._log(logging.ERROR, msg, exc, context)

    def _log(self, level: int, msg: str, exc: Optional[BaseException], context: dict[str, Any]) -> None:
        if not self._logger.isEnabledFor(level):
            return
        if context:
            msg = " | ".join([msg, *(f"{key}={value}" for key, value in context.items())])
        self._logger.log(
            level,
            msg,
            exc_info=exc,
            extra={"context": {"component": self.component, **context}},
        )


def get_logger(component: str, parent: Optional[str] = None) -> ComponentLogger:
    """Get the logger of a component, e.g. ``get_logger("loader", parent="baseline")``."""
    return ComponentLogger(component, parent)
