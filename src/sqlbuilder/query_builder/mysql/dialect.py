"""MySQL / MariaDB dialect implementation."""

from typing import Optional

from sqlbuilder.constants import DialectType
from sqlbuilder.query_builder.base import BaseDialect, IndexHint


class MySQLDialect(BaseDialect):
    """Dialect for MySQL and MariaDB.

    Differences from Oracle:
        - Backtick identifier quoting
        - Index hint is ``FORCE INDEX(name)`` after the table name
        - ``LIMIT n [OFFSET m]`` pagination
        - Timestamps are plain quoted strings
    """

    dialect_type = DialectType.MYSQL
    supports_offset = True

    def quote_identifier(self, identifier: str) -> str:
        return f"`{identifier}`"

    def format_datetime_literal(self, value: str) -> str:
        return f"'{value}'"

    def render_index_hint(self, table: str, index_name: str) -> IndexHint:
        return IndexHint(after_table=f" FORCE INDEX({index_name}) ")

    def render_pagination(self, limit: Optional[int], offset: Optional[int]) -> str:
        """Build the LIMIT/OFFSET clause.

        OFFSET is only emitted together with a LIMIT and when positive.
        """
        if limit is None or limit < 0:
            return ""

        sql = f" LIMIT {limit}"
        if offset is not None and offset > 0:
            sql += f" OFFSET {offset}"
        return sql
