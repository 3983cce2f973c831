"""Oracle dialect implementation."""

from typing import Optional

from sqlbuilder.constants import ORACLE_TIMESTAMP_FORMAT, DialectType
from sqlbuilder.query_builder.base import BaseDialect, IndexHint


class OracleDialect(BaseDialect):
    """Dialect for Oracle Database.

    Differences from MySQL:
        - Double-quote identifier quoting
        - Index hint is an optimizer comment right after SELECT
        - ``FETCH FIRST n ROWS ONLY`` pagination; OFFSET is not rendered
        - Timestamps go through ``TO_TIMESTAMP`` with an explicit format mask
    """

    dialect_type = DialectType.ORACLE

    def quote_identifier(self, identifier: str) -> str:
        return f'"{identifier}"'

    def format_datetime_literal(self, value: str) -> str:
        return f"TO_TIMESTAMP('{value}', '{ORACLE_TIMESTAMP_FORMAT}')"

    def render_index_hint(self, table: str, index_name: str) -> IndexHint:
        return IndexHint(after_select=f" /*+ INDEX({table}, {index_name}) */ ")

    def render_pagination(self, limit: Optional[int], offset: Optional[int]) -> str:
        if limit is None or limit < 0:
            return ""
        return f" FETCH FIRST {limit} ROWS ONLY"
