"""MySQL-family dialect.

Covers MySQL and MariaDB, which share quoting, index hint and
pagination syntax.

Example:
    from sqlbuilder.query_builder import QueryBuilder
    from sqlbuilder.query_builder.mysql import MySQLDialect

    sql = QueryBuilder(MySQLDialect()).select(["id"]).from_("users").limit(5).build()
    # SELECT id FROM users LIMIT 5
"""

from sqlbuilder.query_builder.mysql.dialect import MySQLDialect

__all__ = [
    "MySQLDialect"
]
