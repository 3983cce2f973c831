"""Logging filters for context injection.

This module provides filters that inject context variables into log records,
so records emitted while a query is being built can be correlated with the
caller's request and the dialect in use.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Dict, Iterator, Optional

from sqlbuilder.__version__ import __version__

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)
dialect_var: ContextVar[Optional[str]] = ContextVar("dialect", default=None)

_static_environment: Optional[str] = None
_static_extra: Dict[str, Any] = {}


class ContextFilter(logging.Filter):
    """Logging filter that adds context variables to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Add context variables to the log record.

        Args:
            record: Log record to enhance

        Returns:
            Always True (doesn't filter out any records)
        """
        if _static_environment is not None:
            setattr(record, "environment", _static_environment)
        for key, value in _static_extra.items():
            if not hasattr(record, key):
                setattr(record, key, value)

        setattr(record, "request_id", request_id_var.get())
        if not hasattr(record, "dialect"):
            setattr(record, "dialect", dialect_var.get())
        setattr(record, "sdk_name", "sqlbuilder")
        setattr(record, "sdk_version", __version__)

        return True


def set_logging_context(
    environment: Optional[str] = None,
    extra: Optional[Dict[str, Any]] = None,
) -> None:
    """Set process-wide values attached to every record."""
    global _static_environment, _static_extra
    _static_environment = environment
    _static_extra = dict(extra or {})


def set_request_context(request_id: Optional[str] = None) -> None:
    """Set request context variables."""
    if request_id is not None:
        request_id_var.set(request_id)


def clear_request_context() -> None:
    """Clear all request context variables."""
    request_id_var.set(None)


@contextmanager
def dialect_scope(dialect: str) -> Iterator[None]:
    """Tag every record emitted inside the block with ``dialect``."""
    token = dialect_var.set(dialect)
    try:
        yield
    finally:
        dialect_var.reset(token)
