"""Logging infrastructure for sqlbuilder.

This module provides structured logging with JSON output, context tracking
and OpenTelemetry trace correlation.
"""

from sqlbuilder.logging.filters import (
    ContextFilter,
    clear_request_context,
    dialect_scope,
    set_logging_context,
    set_request_context,
)
from sqlbuilder.logging.logger import CustomJsonFormatter, get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
    "CustomJsonFormatter",
    "ContextFilter",
    "set_logging_context",
    "set_request_context",
    "clear_request_context",
    "dialect_scope",
]
