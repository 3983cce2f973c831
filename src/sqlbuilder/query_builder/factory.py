"""Dialect and Query Builder Factory.

This module resolves dialect identifiers to dialect strategies and creates
query builders configured from environment settings.
"""

from typing import TYPE_CHECKING, Dict, Optional, Type, Union

from sqlbuilder.common.exceptions import dialect_not_supported_error, validation_error
from sqlbuilder.constants import DialectType
from sqlbuilder.query_builder.base import BaseDialect
from sqlbuilder.query_builder.mysql.dialect import MySQLDialect
from sqlbuilder.query_builder.oracle.dialect import OracleDialect

if TYPE_CHECKING:
    from sqlbuilder.query_builder.select import QueryBuilder


DialectLike = Union[DialectType, str, BaseDialect]


class DialectFactory:
    """Factory for dialect strategies.

    Every ``DialectType`` member must have an entry in ``_registry``; lookups
    for anything else raise a ``DIALECT_NOT_SUPPORTED`` error rather than
    rendering without dialect-specific clauses.

    Example:
        >>> DialectFactory.create("oracle")
        OracleDialect()
        >>> DialectFactory.create(DialectType.MARIADB)
        MySQLDialect()
    """

    _registry: Dict[DialectType, Type[BaseDialect]] = {
        DialectType.MYSQL: MySQLDialect,
        DialectType.ORACLE: OracleDialect,
    }

    @classmethod
    def resolve_type(cls, dialect: Union[DialectType, str]) -> DialectType:
        """Resolve an enum member, value (``"mysql"``) or name (``"MARIADB"``).

        Raises:
            QueryBuilderError: If the value names no known dialect.
        """
        if isinstance(dialect, DialectType):
            return dialect

        key = dialect.strip()
        try:
            return DialectType(key.lower())
        except ValueError:
            pass

        if key.upper() in DialectType.__members__:
            return DialectType[key.upper()]

        raise dialect_not_supported_error(dialect)

    @classmethod
    def create(cls, dialect: DialectLike) -> BaseDialect:
        """Create the dialect strategy for ``dialect``.

        Args:
            dialect: ``DialectType``, its value or name, or a ready dialect
                     instance (returned unchanged).

        Returns:
            Dialect strategy instance.

        Raises:
            QueryBuilderError: If the dialect is unknown or of the wrong type.
        """
        if isinstance(dialect, BaseDialect):
            return dialect

        if not isinstance(dialect, str):
            raise validation_error(
                f"Dialect must be a DialectType, str or BaseDialect, got {type(dialect).__name__}",
                field="dialect",
                value=dialect,
            )

        dialect_type = cls.resolve_type(dialect)
        dialect_class = cls._registry.get(dialect_type)
        if dialect_class is None:
            raise dialect_not_supported_error(dialect_type.value)
        return dialect_class()

    @classmethod
    def supported(cls) -> Dict[DialectType, Type[BaseDialect]]:
        """Return a copy of the dialect registry."""
        return dict(cls._registry)


def get_dialect(dialect: Optional[DialectLike] = None) -> BaseDialect:
    """Get a dialect strategy, defaulting to the configured dialect.

    Args:
        dialect: Dialect to resolve. ``None`` uses
                 ``settings.default_dialect``.
    """
    if dialect is None:
        from sqlbuilder.settings import get_settings
        dialect = get_settings().default_dialect
    return DialectFactory.create(dialect)


def get_query_builder(dialect: Optional[DialectLike] = None) -> "QueryBuilder":
    """Get a fresh query builder auto-configured from settings.

    Example:
        >>> builder = get_query_builder("oracle")
        >>> builder.select(["id"]).from_("users").limit(1).build()
        'SELECT id FROM users FETCH FIRST 1 ROWS ONLY'
    """
    from sqlbuilder.query_builder.select import QueryBuilder
    return QueryBuilder(dialect)
