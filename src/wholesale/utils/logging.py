"""Logging configuration for the wholesale service.

Standard library logging carries the handlers (console plus rotating files);
structlog sits on top of it and renders key/value events, as JSON in
production and as coloured console output everywhere else.

Environment variables:
    LOG_LEVEL                        explicit level, overrides the default
    ENV / ENVIRONMENT / PROTEAN_ENV  selects the default level and renderer
    LOG_TO_FILE                      "0", "false" or "no" disables log files
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any

import structlog

DEFAULT_LEVELS = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}
JSON_ENVIRONMENTS = ("production", "staging")

MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5

# Chatty libraries are capped at WARNING whatever the service level is
QUIET_LOGGERS = ("asyncio", "protean", "uvicorn.access")


def get_environment() -> str:
    return (os.getenv("ENV") or os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development").lower()


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", DEFAULT_LEVELS.get(get_environment(), "INFO"))


def _file_logging_enabled() -> bool:
    return os.getenv("LOG_TO_FILE", "1").lower() not in ("0", "false", "no")


def _rotating_handler(path: Path, level) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    return handler


def setup_stdlib_logging(level: str | None = None, log_dir: str = "logs", log_file_prefix: str = "wholesale") -> None:
    """Route the root logger to stdout and, unless disabled, to log files.

    Errors are additionally written to ``<prefix>_error.log`` so they survive
    rotation of the main log.
    """
    log_level = level or get_log_level()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if _file_logging_enabled():
        directory = Path(log_dir)
        directory.mkdir(exist_ok=True)
        handlers.append(_rotating_handler(directory / f"{log_file_prefix}.log", log_level))
        handlers.append(_rotating_handler(directory / f"{log_file_prefix}_error.log", logging.ERROR))

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = []
    for handler in handlers:
        if handler.level == logging.NOTSET:
            handler.setLevel(log_level)
        root_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def _renderer():
    if get_environment() in JSON_ENVIRONMENTS:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=True,
        exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=False, max_frames=2),
    )


def setup_structlog() -> None:
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.CallsiteParameterAdder(
                parameters=[
                    structlog.processors.CallsiteParameter.FILENAME,
                    structlog.processors.CallsiteParameter.LINENO,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                ]
            ),
            _renderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(level: str | None = None, log_dir: str = "logs", log_file_prefix: str = "wholesale") -> None:
    """Configure all logging for the service."""
    setup_stdlib_logging(level=level, log_dir=log_dir, log_file_prefix=log_file_prefix)
    setup_structlog()


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def add_context(**kwargs: Any) -> None:
    """Bind values that are included in every later log event of this context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
