"""Structured logging for bankacct.

structlog renders each event and hands the result to the standard logging
module, which writes it to stderr. Stdout is left to the account listing
printed by /I.

Inside an invocation every event carries the invocation_id and, once the
database file is known, its path. Values typed on the command line are never
logged, only command names and account numbers.
"""

import logging
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from bankacct.config import Settings, get_settings

PACKAGE_LOGGER = "bankacct"


def _app_stamp(settings: Settings) -> Processor:
    def add_app(
        logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> EventDict:
        event_dict.setdefault("app", settings.app_name)
        event_dict.setdefault("version", settings.app_version)
        return event_dict

    return add_app


def build_processors(settings: Settings) -> list[Processor]:
    """Processor chain ending in the renderer picked by settings.log_format.

    JSON events also carry the application name and version so that lines
    from several tools can share one collector.
    """
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if settings.log_format == "json":
        processors += [
            _app_stamp(settings),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=False,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )
    return processors


def configure_logging(settings: Settings | None = None) -> None:
    """Route structlog through the bankacct stdlib logger.

    The level comes from settings.log_level, or DEBUG when settings.debug is
    set. Safe to call more than once; a log file is attached only once.
    """
    if settings is None:
        settings = get_settings()

    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level.value)

    structlog.configure(
        processors=build_processors(settings),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)

    if settings.log_file:
        _attach_log_file(package_logger, settings.log_file, level)


def _attach_log_file(logger: logging.Logger, log_file: Path, level: int) -> None:
    target = os.path.abspath(log_file)
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == target:
            handler.setLevel(level)
            return

    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.stdlib.get_logger(name)


@contextmanager
def log_context(**values: Any) -> Iterator[None]:
    """Attach values to every event logged inside the block.

    Values bound by an enclosing block come back once this one exits.
    """
    with structlog.contextvars.bound_contextvars(**values):
        yield
