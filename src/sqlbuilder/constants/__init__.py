"""Constants module for sqlbuilder.

Organization:
    - sql: Dialect enumeration, reserved keywords and literal formats
"""

from sqlbuilder.constants.sql import (
    DATETIME_FORMAT,
    ORACLE_TIMESTAMP_FORMAT,
    RESERVED_KEYWORDS,
    DialectType,
)

__all__ = [
    "DialectType",
    "RESERVED_KEYWORDS",
    "DATETIME_FORMAT",
    "ORACLE_TIMESTAMP_FORMAT",
]
