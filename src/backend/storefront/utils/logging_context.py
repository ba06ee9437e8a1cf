"""
Logging Configuration and Context Utilities

Configures structlog on top of the standard logging module and provides
helpers for adding scoped context to structured logs.
"""

import logging
import logging.handlers
import os
import sys
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

import structlog
from dotenv import load_dotenv
from structlog.contextvars import bind_contextvars, unbind_contextvars


def configure_logging(log_level: Optional[str] = None, env: Optional[str] = None):
    """
    Configure structured logging using structlog.

    - Production (ENV=production): JSON output for log aggregation
    - Development (ENV=development): Human-readable console output
    - Optional rotating file output when LOG_FILE_PATH is set

    Args:
        log_level: Level name; defaults to $LOG_LEVEL or INFO
        env: Environment name; defaults to $ENV or development

    Returns:
        Module logger
    """
    load_dotenv()
    env = (env or os.getenv("ENV", "development")).lower()
    log_level_str = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, log_level_str, logging.INFO)

    shared_processors = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.contextvars.merge_contextvars,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if env == "production":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=sys.stderr.isatty(),
            exception_formatter=structlog.dev.plain_traceback
        )

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handlers = []
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    handlers.append(stream_handler)

    log_file_path = os.getenv("LOG_FILE_PATH")
    if log_file_path:
        log_file = Path(log_file_path).resolve()
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            filename=str(log_file),
            maxBytes=10 * 1024 * 1024,  # 10MB per file
            backupCount=5,
            encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    root_logger = logging.getLogger()
    root_logger.handlers = handlers
    root_logger.setLevel(level)

    return structlog.get_logger(__name__)


@contextmanager
def log_context(**context_vars):
    """
    Context manager for temporary logging context.

    Context is automatically added on enter and removed on exit.

    Example:
        ```python
        with log_context(operation="product_search", search_term="headphones"):
            logger.info("searching products")  # Includes operation, search_term
        ```
    """
    bind_contextvars(**context_vars)
    try:
        yield
    finally:
        unbind_contextvars(*context_vars.keys())


@contextmanager
def log_performance(operation_name: str, logger=None):
    """
    Context manager for logging operation duration at debug level.

    Example:
        ```python
        with log_performance("filter_and_rank"):
            results = filter_and_rank(products, criteria)
        # Logs: filter_and_rank_completed, duration_ms
        ```
    """
    if logger is None:
        logger = structlog.get_logger()

    start_time = time.perf_counter()
    try:
        yield
    finally:
        duration_ms = round((time.perf_counter() - start_time) * 1000, 3)
        logger.debug(
            f"{operation_name}_completed",
            operation=operation_name,
            duration_ms=duration_ms
        )
