"""Oracle-family dialect."""

from sqlbuilder.query_builder.oracle.dialect import OracleDialect

__all__ = [
    "OracleDialect"
]
