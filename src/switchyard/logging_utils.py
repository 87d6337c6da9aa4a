"""Runtime logging helpers."""

from __future__ import annotations

import logging
import os
import sys
from logging import Handler
from typing import TYPE_CHECKING, Literal

from loguru import logger
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from loguru import Record

LogProfile = Literal["default", "cli"]

LOG_FILTER_ENV = "SWITCHYARD_LOG_FILTER"
_DEFAULT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<6} | {name}:{function}:{line} | {message}"
_CONFIGURED_PROFILE: LogProfile | None = None


class InterceptHandler(logging.Handler):
    """Forward stdlib records to loguru under the stdlib logger's name.

    The record keeps its ``logging`` name, function and line, so module entries
    in SWITCHYARD_LOG_FILTER also select records from libraries that log
    through the standard library.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        def _origin(message_record: Record) -> None:
            message_record["name"] = record.name
            message_record["function"] = record.funcName
            message_record["line"] = record.lineno

        logger.patch(_origin).opt(exception=record.exc_info).log(level, record.getMessage())


def _build_cli_handler() -> Handler:
    # stdout carries command output (``--json``); log lines render on stderr.
    return RichHandler(
        console=Console(stderr=True),
        show_level=True,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )


def parse_log_filter(raw: str | None = None) -> tuple[str, dict[str | None, str | int | bool]]:
    """Parse the SWITCHYARD_LOG_FILTER value.

    Format: "level" or "level,module1=level,module2=false"
    Examples:
        - "info" - global INFO level
        - "debug,switchyard.catalog=debug" - global DEBUG, catalog at DEBUG
        - "info,switchyard.policy=false" - global INFO, policy logs disabled

    Returns:
        (global_level, module_filter_dict)
    """
    filter_env = (raw if raw is not None else os.getenv(LOG_FILTER_ENV, "info")).lower()
    parts = [p.strip() for p in filter_env.split(",") if p.strip()]

    filter_dict: dict[str | None, str | int | bool] = {}
    global_level = "info"

    for part in parts:
        if "=" in part:
            module, level = part.split("=", 1)
            module = module.strip()
            level = level.strip()
            if level == "false":
                filter_dict[module] = False
            else:
                filter_dict[module] = level.upper()
        else:
            global_level = part

    return global_level, filter_dict


def _setup_stdlib_intercept() -> None:
    """Forward stdlib logging to loguru."""
    root_logger = logging.getLogger()
    if not any(isinstance(handler, InterceptHandler) for handler in root_logger.handlers):
        root_logger.addHandler(InterceptHandler())


def configure_logging(*, profile: LogProfile = "default") -> None:
    """Configure process-level logging once per profile.

    Log levels controlled by SWITCHYARD_LOG_FILTER:
    - "info" - global INFO level
    - "debug,switchyard.catalog=debug" - global DEBUG with catalog at DEBUG
    - "info,switchyard.policy=false" - global INFO, policy disabled
    """
    global _CONFIGURED_PROFILE
    if profile == _CONFIGURED_PROFILE:
        return

    global_level, module_filter = parse_log_filter()

    logger.remove()

    if profile == "cli":
        logger.add(
            _build_cli_handler(),
            level=global_level.upper(),
            format="{message}",
            backtrace=False,
            diagnose=False,
            filter=module_filter,
        )
    else:
        logger.add(
            sys.stderr,
            level=global_level.upper(),
            format=_DEFAULT_FORMAT,
            backtrace=False,
            diagnose=False,
            filter=module_filter,
        )

    _setup_stdlib_intercept()

    _CONFIGURED_PROFILE = profile
