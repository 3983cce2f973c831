from sqlbuilder.__version__ import __version__
from sqlbuilder.constants import RESERVED_KEYWORDS, DialectType
from sqlbuilder.common.exceptions import ErrorCode, QueryBuilderError
from sqlbuilder.query_builder import (
    BaseDialect,
    DialectFactory,
    MySQLDialect,
    OracleDialect,
    QueryBuilder,
    get_dialect,
    get_query_builder,
)
from sqlbuilder.settings import get_settings


__all__ = [
    "__version__",

    "QueryBuilder",
    "DialectType",
    "RESERVED_KEYWORDS",

    # Dialects
    "BaseDialect",
    "MySQLDialect",
    "OracleDialect",
    "DialectFactory",
    "get_dialect",
    "get_query_builder",

    # Exceptions (public API)
    "QueryBuilderError",
    "ErrorCode",

    "get_settings",
]
