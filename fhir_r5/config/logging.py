"""
Structured logging configuration for the FHIR R5 codec.

The library only emits events; applications decide where they go by
calling ``configure_logging``. Events raised while one document is being
parsed carry that document's correlation ID.
"""

import logging
import sys
import uuid
from collections.abc import Callable
from contextvars import ContextVar
from typing import Any

import structlog

DOCUMENT_ID_LENGTH = 8

# Context variable for document correlation ID
document_id_var: ContextVar[str] = ContextVar("document_id", default="")


# BoundLogger method name -> stdlib level
_METHOD_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "exception": logging.ERROR,
    "critical": logging.CRITICAL,
}


class LevelCheckedLogger(structlog.stdlib.BoundLogger):
    """
    Stdlib-backed BoundLogger that drops events below the stdlib logger's
    effective level before any processor runs.
    """

    def _proxy_to_logger(
        self, method_name: str, event: str | None = None, *event_args: Any, **event_kw: Any
    ) -> Any:
        level = _METHOD_LEVELS.get(method_name)
        if level is not None and not self._logger.isEnabledFor(level):
            return None
        return super()._proxy_to_logger(method_name, event, *event_args, **event_kw)


def get_document_id() -> str:
    """Get the current document ID from context."""
    return document_id_var.get()


def set_document_id(document_id: str | None = None) -> str:
    """Set a new document ID in context. Generates one if not provided."""
    new_id = document_id or str(uuid.uuid4())[:DOCUMENT_ID_LENGTH]
    document_id_var.set(new_id)
    return new_id


def add_document_id(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor to add the document ID to log events."""
    document_id = get_document_id()
    if document_id:
        event_dict["document_id"] = document_id
    return event_dict


def configure_logging(
    level: str = "WARNING",
    json_format: bool = False,
) -> None:
    """
    Configure structured logging for the codec.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: If True, output JSON logs; otherwise, use console format
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    shared_processors: list[Callable] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        add_document_id,
    ]

    if json_format:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=LevelCheckedLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )
    logging.getLogger("fhir_r5").setLevel(log_level)


def configure_from_settings() -> None:
    """Configure logging from the ``FHIR_R5_LOG_*`` settings."""
    from fhir_r5.config.settings import get_settings

    settings = get_settings()
    configure_logging(level=settings.log_level, json_format=settings.log_json)


def get_logger(name: str | None = None) -> LevelCheckedLogger:
    """
    Get a structlog logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Structlog logger bound to the stdlib logger of that name, so events
        follow the host application's logging levels and handlers. Disabled
        levels cost no processing, configured or not.
    """
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=LevelCheckedLogger)
