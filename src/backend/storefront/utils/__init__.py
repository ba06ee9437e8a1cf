"""Utility functions and helpers for logging configuration and context management."""

from .logging_context import (
    configure_logging,
    log_context,
    log_performance,
)

__all__ = [
    "configure_logging",
    "log_context",
    "log_performance",
]
