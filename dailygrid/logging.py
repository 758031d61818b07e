import logging
import sys
from typing import Any

import structlog

# Shared by structlog loggers and stdlib records coming from uvicorn
_pre_chain = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="%H:%M:%S"),
]


def _renderer(json: bool):
    if json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(level: str = "INFO", json: bool = False) -> None:
    structlog.configure(
        processors=[*_pre_chain, _renderer(json)],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level.upper())),
        logger_factory=structlog.WriteLoggerFactory(file=sys.stderr),
    )
    # Query-level chatter from the driver is never useful here
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


def get_logger(name: str | None = None):
    return structlog.get_logger(name or "dailygrid")


def uvicorn_log_config(level: str = "INFO", json: bool = False) -> dict[str, Any]:
    """dictConfig for uvicorn so its access and error logs match ours."""
    formatter = {
        "()": structlog.stdlib.ProcessorFormatter,
        "processor": _renderer(json),
        "foreign_pre_chain": _pre_chain,
    }
    level = level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": formatter},
        "handlers": {
            "default": {"formatter": "default", "class": "logging.StreamHandler", "stream": "ext://sys.stderr"},
        },
        "loggers": {
            "uvicorn": {"handlers": ["default"], "level": level, "propagate": False},
            "uvicorn.error": {"level": level},
            "uvicorn.access": {"handlers": ["default"], "level": level, "propagate": False},
        },
    }
