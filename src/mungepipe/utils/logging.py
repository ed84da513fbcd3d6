"""Logging configuration for munge runs.

mungepipe logs through structlog but never configures logging on import.
Applications that want to see munge progress call ``setup_logging`` once.
Handlers are attached to the ``mungepipe`` logger only; whatever the
application has installed on the root logger is left in place.
"""

import logging
import sys
from pathlib import Path

import structlog

from mungepipe.config.schema import LoggingConfig

PACKAGE_LOGGER = "mungepipe"

# Marks handlers installed here so a repeated setup replaces only those.
_OWNED = "_mungepipe_owned"


def _structlog_processors() -> list:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _owned_handler(handler: logging.Handler, level: int, renderer) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(processor=renderer))
    setattr(handler, _OWNED, True)
    return handler


def _remove_owned_handlers(logger: logging.Logger) -> None:
    for handler in [h for h in logger.handlers if getattr(h, _OWNED, False)]:
        logger.removeHandler(handler)
        handler.close()


def setup_logging(
    verbose: bool = False,
    log_file: Path | str | None = None,
    propagate: bool = False,
) -> logging.Logger:
    """Route mungepipe's structlog events to the console and optionally a file.

    Args:
        verbose: If True, the console also shows DEBUG events such as
            unnamed mungepieces. Otherwise only named pieces are reported.
        log_file: Optional path to a JSON-lines log file, written at DEBUG.
        propagate: Also pass records on to the application's root handlers.

    Returns:
        The configured ``mungepipe`` stdlib logger.

    Example:
        >>> setup_logging(verbose=True, log_file="logs/munge.log.json")
        <Logger mungepipe (DEBUG)>

    Calling this again replaces the handlers it installed earlier and keeps
    any other handler on the ``mungepipe`` logger.
    """
    structlog.configure(
        processors=_structlog_processors(),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logger = logging.getLogger(PACKAGE_LOGGER)
    _remove_owned_handlers(logger)
    logger.setLevel(logging.DEBUG)
    logger.propagate = propagate

    logger.addHandler(
        _owned_handler(
            logging.StreamHandler(sys.stderr),
            logging.DEBUG if verbose else logging.INFO,
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        )
    )

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.addHandler(
            _owned_handler(
                logging.FileHandler(log_file, encoding="utf-8"),
                logging.DEBUG,
                structlog.processors.JSONRenderer(),
            )
        )

    return logger


def setup_logging_from_config(config: LoggingConfig) -> logging.Logger:
    """Apply the ``logging`` section of an AppConfig."""
    return setup_logging(verbose=config.verbose, log_file=config.log_file)
