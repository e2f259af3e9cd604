"""
Structured logging utilities.

Configures structlog on top of the standard library logger and provides a
context manager for timing operations such as outbound GitHub calls.
"""

from __future__ import annotations

import logging
import sys
import time
from contextlib import asynccontextmanager
from typing import Any

import structlog

logger = structlog.get_logger()


def configure_logging(level: str = "INFO", json_output: bool = False) -> None:
    """
    Route structlog through the standard library logger.

    Args:
        level: Root log level name (e.g. "INFO", "DEBUG").
        json_output: Render JSON lines instead of the console format.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s",
        stream=sys.stdout,
    )

    renderer: Any = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


@asynccontextmanager
async def log_operation(
    operation: str,
    subject_ids: dict[str, str] | None = None,
    **context: Any,
) -> Any:  # AsyncGenerator[None, None]
    """
    Context manager for structured operation logging.

    Logs operation start, completion, and errors with timing information.

    Args:
        operation: Name of the operation being performed
        subject_ids: Dictionary of subject identifiers (e.g., {"repo": "owner/repo"})
        **context: Additional context to include in logs

    Example:
        async with log_operation("workflow_dispatch", repo=repo, workflow=workflow):
            await client.post(...)
    """
    start_time = time.time()
    log = logger.bind(operation=operation, **(subject_ids or {}), **context)

    log.info("operation_started")

    try:
        yield
    except Exception as e:
        latency_ms = int((time.time() - start_time) * 1000)
        log.error("operation_failed", error=str(e), latency_ms=latency_ms)
        raise
    else:
        latency_ms = int((time.time() - start_time) * 1000)
        log.info("operation_completed", latency_ms=latency_ms)
