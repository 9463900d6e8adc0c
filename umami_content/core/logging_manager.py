#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Logging for the content seeder.

ContentLogger writes two rotating files per component:

    <component>.log   every record, DEBUG and up
    errors.log        errors with their context and traceback

Warnings also go to the console. Each record is stamped with the seeder
context: the pipeline step that is running (see ContentLogger.step) and
any bound fields such as the ledger key (see ContentLogger.bind).

    10:02:11 - seeder - WARNING - [articles ledger_key=umami_content_uuids]
        Asset file not found: {"path": ".../images/cake.png"}

Usage:
    logger = ContentLogger(LOG_DIR / "operations", "seeder")
    logger.bind(ledger_key="umami_content_uuids")
    with logger.step("articles"):
        logger.log_warning("Asset file not found", {"path": str(path)})
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import sys
import traceback
from contextlib import contextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

# --- Third party imports ---
import click

LOG_FORMAT = "%(asctime)s - %(component)s - %(levelname)s - [%(seed_context)s] %(message)s"


class SeedContextFilter(logging.Filter):
    """Stamp records with the component name and seeder context of a logger."""

    def __init__(self, owner: ContentLogger) -> None:
        super().__init__()
        self.owner = owner

    def filter(self, record: logging.LogRecord) -> bool:
        record.component = self.owner.component_name
        record.seed_context = self.owner.context_label()
        return True


class ContentLogger:
    """
    File-backed logger for the seeder and its content store.

    Attributes:
        log_dir: Directory for log files
        component_name: Component name, also the name of the main log file
        context: Fields bound with bind(), added to every record
        main_logger: Logger behind <component>.log and the console
        error_logger: Logger behind errors.log
    """

    def __init__(
        self,
        log_dir: Path,
        component_name: str = "seeder",
        console_level: int = logging.WARNING,
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5,
    ) -> None:
        """
        Args:
            log_dir: Directory for log files (created if missing)
            component_name: 'seeder' for the pipeline, 'database' for ContentDB
            console_level: Lowest level echoed to the console
            max_bytes: Size at which a log file is rotated
            backup_count: Rotated files to keep
        """
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.console_level = console_level
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self.context: Dict[str, str] = {}
        self._steps: List[str] = []
        self._setup_loggers()

    def _setup_loggers(self) -> None:
        self.log_dir.mkdir(parents=True, exist_ok=True)
        context_filter = SeedContextFilter(self)

        self.main_logger = self._reset_logger("operations", logging.DEBUG)
        self.main_logger.addFilter(context_filter)
        self.main_logger.addHandler(
            self._file_handler(self.log_dir / f"{self.component_name}.log", logging.DEBUG)
        )
        console_handler = logging.StreamHandler()
        console_handler.setLevel(self.console_level)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        self.main_logger.addHandler(console_handler)

        self.error_logger = self._reset_logger("errors", logging.ERROR)
        self.error_logger.addFilter(context_filter)
        self.error_logger.addHandler(
            self._file_handler(self.log_dir / "errors.log", logging.ERROR)
        )

    def _reset_logger(self, channel: str, level: int) -> logging.Logger:
        # A second ContentLogger for the same component takes over its loggers
        logger = logging.getLogger(f"{self.component_name}.{channel}")
        logger.setLevel(level)
        logger.propagate = False
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        for old_filter in list(logger.filters):
            logger.removeFilter(old_filter)
        return logger

    def _file_handler(self, path: Path, level: int) -> RotatingFileHandler:
        handler = RotatingFileHandler(
            path,
            maxBytes=self.max_bytes,
            backupCount=self.backup_count,
            encoding="utf-8",
        )
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        return handler

    def close(self) -> None:
        """Close and detach all handlers."""
        for logger in (self.main_logger, self.error_logger):
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)

    # ---- Seeder context ----

    def bind(self, **fields: Any) -> None:
        """Add fields to every following record. None values unbind a field."""
        for name, value in fields.items():
            if value is None:
                self.context.pop(name, None)
            else:
                self.context[name] = str(value)

    @contextmanager
    def step(self, name: str) -> Iterator[None]:
        """
        Mark records logged inside the block as belonging to a pipeline step.

        Steps nest; the label shows the whole path, e.g. 'delete/file'.
        """
        self._steps.append(name)
        try:
            yield
        finally:
            self._steps.pop()

    @property
    def current_step(self) -> Optional[str]:
        return "/".join(self._steps) if self._steps else None

    def context_label(self) -> str:
        parts = [self.current_step] if self._steps else []
        parts += [f"{name}={value}" for name, value in self.context.items()]
        return " ".join(parts) or "-"

    # ---- Records ----

    def _emit(
        self, level: int, message: str, details: Optional[Dict[str, Any]]
    ) -> None:
        if details:
            message = f"{message}: {json.dumps(details, default=str)}"
        self.main_logger.log(level, message)

    def log_operation(
        self, operation: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        """Record the start or outcome of a pipeline operation."""
        self._emit(logging.INFO, f"OPERATION {operation}", details)

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self._emit(logging.DEBUG, message, details)

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self._emit(logging.INFO, message, details)

    def log_warning(
        self, message: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        self._emit(logging.WARNING, message, details)

    def log_error(
        self, error: Exception, context: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Write an error with its context and traceback to errors.log.

        The running step is added to the context unless it names one.
        """
        context = dict(context or {})
        if self._steps:
            context.setdefault("step", self.current_step)

        message = f"{type(error).__name__}: {error}"
        if context:
            message += " | " + ", ".join(f"{k}={v}" for k, v in context.items())
        self.error_logger.error(message, exc_info=error)

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """Log a failed command and return the message shown to the user."""
        self.log_error(error, context or {"source": "cli"})
        return format_cli_error(error, show_traceback)


def format_cli_error(error: Exception, show_traceback: bool = False) -> str:
    """One-line error for the terminal, optionally followed by the traceback."""
    message = f"❌ {type(error).__name__}: {error}"
    if show_traceback:
        tb = "".join(
            traceback.format_exception(type(error), error, error.__traceback__)
        )
        message = f"{message}\n\n{tb}"
    return message


def handle_cli_error(
    ctx: click.Context,
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    Report a failed command and exit.

    Full details go to errors.log through the logger in ctx.obj, tagged
    with the command and the ledger key in use. The user gets one line on
    stderr, plus the traceback under --verbose.

    Never returns.
    """
    obj = ctx.obj or {}
    context: Dict[str, Any] = {"operation": operation}
    config = obj.get("config")
    if config is not None:
        context["ledger_key"] = config.ledger_key
    if additional_context:
        context.update(additional_context)

    message = safe_logger(obj.get("logger")).log_cli_error(
        error, context, show_traceback=obj.get("verbose", False)
    )
    click.echo(message, err=True)
    sys.exit(exit_code)


class NullLogger:
    """ContentLogger stand-in that records nothing."""

    context: Dict[str, str] = {}
    current_step: Optional[str] = None

    def bind(self, **fields: Any) -> None:
        pass

    @contextmanager
    def step(self, name: str) -> Iterator[None]:
        yield

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        return format_cli_error(error, show_traceback)


_null_logger = NullLogger()


def safe_logger(logger: Optional[ContentLogger]) -> ContentLogger:
    """
    Return the logger, or a shared NullLogger when it is None.

    Lets callers write safe_logger(self.logger).log_info(...) without
    checking for a configured logger first.
    """
    return logger if logger is not None else _null_logger  # type: ignore[return-value]
