"""
Structured logging for randid.

Library loggers are structlog loggers wrapped around stdlib loggers under the
``randid`` namespace. A NullHandler is installed on that namespace, so nothing
is emitted until the host application either configures stdlib logging or
calls configure_logging() to attach a JSON or console handler.
"""

import logging
import os
import sys
import threading
from typing import IO, Any, Optional

import structlog

ROOT_LOGGER_NAME = "randid"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())

_lock = threading.Lock()
_handler: Optional[logging.Handler] = None


def add_service_info(
    logger: structlog.typing.WrappedLogger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Processor to add service info to log entries."""
    event_dict["service"] = ROOT_LOGGER_NAME
    return event_dict


# Run on every event before it reaches the stdlib logger
_PROCESSORS: list[structlog.typing.Processor] = [
    structlog.stdlib.filter_by_level,
    structlog.contextvars.merge_contextvars,
    add_service_info,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
    structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
]


def configure_logging(
    level: str = "INFO",
    format: str = "json",
    show_timestamps: bool = True,
    stream: Optional[IO[str]] = None,
) -> logging.Handler:
    """
    Attach a rendering handler to the ``randid`` logger.

    Only the ``randid`` namespace is touched: the root logger and the global
    structlog configuration are left to the host. Calling this again replaces
    the handler installed by the previous call.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        format: Output format ('json' or 'console')
        show_timestamps: Whether to include timestamps
        stream: Output stream (default sys.stderr)

    Returns:
        The installed handler
    """
    global _handler

    # Environment wins over arguments
    level = os.getenv("LOG_LEVEL", level).upper()
    format = os.getenv("LOG_FORMAT", format).lower()
    stream = stream if stream is not None else sys.stderr

    renderer: structlog.typing.Processor
    if format == "console":
        renderer = structlog.dev.ConsoleRenderer(colors=stream.isatty())
    else:
        renderer = structlog.processors.JSONRenderer()

    processors: list[structlog.typing.Processor] = [
        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
    ]
    if show_timestamps:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))
    processors.append(renderer)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=processors,
            foreign_pre_chain=[add_service_info, structlog.stdlib.add_log_level],
        )
    )

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    with _lock:
        if _handler is not None:
            logger.removeHandler(_handler)
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level, logging.INFO))
        logger.propagate = False
        _handler = handler
    return handler


def reset_logging() -> None:
    """Remove the handler installed by configure_logging() and restore defaults."""
    global _handler
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    with _lock:
        if _handler is not None:
            logger.removeHandler(_handler)
            _handler = None
        logger.setLevel(logging.NOTSET)
        logger.propagate = True


def get_logger(name: str = ROOT_LOGGER_NAME) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger routed through stdlib ``logging``.

    Args:
        name: Logger name under the ``randid`` namespace

    Returns:
        Structured logger
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def generator_logger() -> structlog.stdlib.BoundLogger:
    """Get logger for identifier generation events."""
    return get_logger(f"{ROOT_LOGGER_NAME}.generator")


def config_logger() -> structlog.stdlib.BoundLogger:
    """Get logger for configuration loading."""
    return get_logger(f"{ROOT_LOGGER_NAME}.config")
