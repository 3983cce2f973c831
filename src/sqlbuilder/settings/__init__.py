"""Settings for sqlbuilder, built on Pydantic Settings.

Configuration Sources (precedence order):
    1. Constructor arguments passed to ``QueryBuilder`` (highest priority)
    2. Environment variables prefixed with ``SQLBUILDER_`` (or a ``.env`` file)
    3. Default values in code (lowest priority)

Quick Start:
    >>> from sqlbuilder.settings import get_settings
    >>> settings = get_settings()
    >>> settings.default_dialect
    <DialectType.MYSQL: 'mysql'>
"""

from .base import BuilderSettings
from .main import _reload_settings, get_settings

__all__ = [
    "BuilderSettings",
    "get_settings",
    "_reload_settings",
]
