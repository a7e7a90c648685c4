# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# logger.py

"""
Structured logging for the verifier.

Console output by default, JSON lines when `json_logs` is set (or
ZK_VERIFIER_LOG_JSON=1). Usage:

    from zk_verifier.logger import get_logger, setup_logging

    setup_logging()
    logger = get_logger(__name__)
    logger.info("groth16_verify", accepted=True, compute_units=123)
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from zk_verifier.constants import LOG_JSON, LOG_LEVEL


def _add_service_context(
    logger: logging.Logger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    event_dict.setdefault("service", "zk-verifier")
    return event_dict


def setup_logging(log_level: str = LOG_LEVEL, json_logs: bool = LOG_JSON) -> None:
    """
    Configure structlog on top of the standard library logging module.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Whether to render JSON instead of console output
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _add_service_context,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_logs:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger("zk_verifier")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, log_level.upper()))


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance backed by a standard library logger.

    Records always end up in the `logging` module, so nothing is printed
    until the application (or `setup_logging`) attaches a handler.

    Args:
        name: Logger name (typically __name__)
    """
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )


logging.getLogger("zk_verifier").addHandler(logging.NullHandler())
