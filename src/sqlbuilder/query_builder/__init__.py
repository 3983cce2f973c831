"""Query builder module for dialect-specific SELECT generation.

Query builders only generate SQL strings; they never connect to a database
or execute anything.

Architecture:
    - base.py: Abstract dialect strategy (quoting, date literals, index
      hints, pagination)
    - mysql/: MySQL / MariaDB dialect
    - oracle/: Oracle dialect
    - factory.py: Dialect resolution and settings-driven construction
    - select.py: The fluent ``QueryBuilder``

Example:
    >>> from sqlbuilder.query_builder import QueryBuilder
    >>> QueryBuilder("oracle").select(["id", "DATE"]).from_("events").limit(10).build()
    'SELECT id, "DATE" FROM events FETCH FIRST 10 ROWS ONLY'

Platform Differences:
    MySQL / MariaDB:
        - `backtick` quoting for reserved column names
        - FORCE INDEX(name) after the table
        - LIMIT n OFFSET m

    Oracle:
        - "double quote" quoting for reserved column names
        - /*+ INDEX(table, name) */ hint after SELECT
        - FETCH FIRST n ROWS ONLY (no offset)
        - TO_TIMESTAMP('...', 'YYYY-MM-DD HH24:MI:SS') date literals
"""

from sqlbuilder.query_builder.base import BaseDialect, IndexHint
from sqlbuilder.query_builder.factory import (
    DialectFactory,
    get_dialect,
    get_query_builder,
)
from sqlbuilder.query_builder.mysql.dialect import MySQLDialect
from sqlbuilder.query_builder.oracle.dialect import OracleDialect
from sqlbuilder.query_builder.select import QueryBuilder

__all__ = [
    "BaseDialect",
    "IndexHint",
    "DialectFactory",
    "get_dialect",
    "get_query_builder",
    "MySQLDialect",
    "OracleDialect",
    "QueryBuilder",
]
