"""Logger configuration.

Sinks per environment:

- development: colored stdout and a rotating file with every DEBUG record
- testing: colored stdout only
- production: plain stderr, Loki when ``LOKI_URL`` is set, and standard
  ``logging`` records routed through loguru
"""

import logging
import sys
from collections.abc import Mapping
from typing import Any, TextIO

from loguru import logger
from loki_logger_handler.formatters.loguru_formatter import LoguruFormatter
from loki_logger_handler.loki_logger_handler import LokiLoggerHandler

from .config import settings

__all__ = ["QUIET_PATHS", "InterceptHandler", "config_logger"]


# Access log lines for these paths are dropped, probes hit them constantly
QUIET_PATHS = ("/health", "/metrics")


def config_logger() -> None:
    """Replace the default loguru sink with the sinks of the environment."""
    logger.remove()

    if settings.app_env == "production":
        _route_stdlib_logging()
        _add_console_sink(sys.stderr, plain=True)
        if settings.loki_url:
            _add_loki_sink(settings.loki_url)
        return

    if settings.app_env == "development":
        _add_file_sink()
    _add_console_sink(sys.stdout, plain=False)


def _route_stdlib_logging() -> None:
    """Send records of every standard library logger to loguru."""
    handler = InterceptHandler()
    logging.basicConfig(handlers=[handler], level=settings.log_level, force=True)

    for name in list(logging.root.manager.loggerDict):
        stdlib_logger = logging.getLogger(name)
        stdlib_logger.handlers = []
        stdlib_logger.propagate = True


def _add_console_sink(stream: TextIO, *, plain: bool) -> None:
    logger.add(
        stream,
        format=_production_format if plain else _development_format,
        level=settings.log_level,
        colorize=not plain,
        enqueue=True,
        backtrace=not plain,
        diagnose=not plain,
        catch=not plain,
    )


def _add_file_sink() -> None:
    logger.add(
        settings.log_path,
        rotation=settings.rotation,
        format=_development_format,
        enqueue=True,
        backtrace=False,
        diagnose=False,
        compression="zip",
        colorize=False,
        level=logging.DEBUG,
    )


def _add_loki_sink(url: str) -> None:
    handler = LokiLoggerHandler(
        url=url,
        labels={
            "application": "newsfeed",
            "environment": settings.app_env,
            "version": settings.version,
        },
        timeout=5,
        enable_structured_loki_metadata=True,
        default_formatter=LoguruFormatter(),  # type: ignore[arg-type]
    )
    logger.add(handler, serialize=True, enqueue=True, level=settings.log_level)


class InterceptHandler(logging.Handler):
    """Forward standard ``logging`` records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        if not self.filter(record) or _is_probe_access(record):
            return

        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip logging internals so loguru reports the original call site
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_back and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def _is_probe_access(record: logging.LogRecord) -> bool:
    if record.name != "uvicorn.access":
        return False
    message = record.getMessage()
    return any(f" {path} " in message for path in QUIET_PATHS)


def _render_extras(extra: Mapping[str, Any], *, colored: bool) -> str:
    if colored:
        pairs = (f"<yellow>{k}</yellow>=<cyan>{{extra[{k}]}}</cyan>" for k in extra)
    else:
        pairs = (f"{k}={{extra[{k}]}}" for k in extra)
    return " | " + " | ".join(pairs)


def _production_format(record: Mapping[str, Any]) -> str:
    """Single plain line: time, level, module and line, message, extras."""
    line = (
        "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{line} - {message}"
    )
    if record["extra"]:
        line += _render_extras(record["extra"], colored=False)
    return line + "\n{exception}"


def _development_format(record: Mapping[str, Any]) -> str:
    line = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
        "<cyan>{name}:{function}:{line}</cyan> - {message}"
    )
    if record["extra"]:
        line += _render_extras(record["extra"], colored=True)
    return line + "\n{exception}"
