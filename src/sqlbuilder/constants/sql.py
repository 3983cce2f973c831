"""SQL dialect constants.

These constants sit at the bottom of the package and import nothing from it,
so any module can use them without creating circular dependencies.
"""

from enum import Enum


class DialectType(str, Enum):
    """Supported SQL dialects.

    Values:
        MYSQL: MySQL-family syntax (MySQL, MariaDB).
            - Backtick identifier quoting
            - ``FORCE INDEX(...)`` after the table name
            - ``LIMIT n OFFSET m`` pagination
        ORACLE: Oracle-family syntax.
            - Double-quote identifier quoting
            - ``/*+ INDEX(table, index) */`` optimizer hint after SELECT
            - ``FETCH FIRST n ROWS ONLY`` pagination
    """

    MYSQL = "mysql"
    MARIADB = "mysql"
    ORACLE = "oracle"


# Identifiers that collide with reserved words and must be quoted when used
# as column names. Matching is case-sensitive.
RESERVED_KEYWORDS = frozenset({"DATE", "USER", "ORDER", "GROUP", "INDEX"})

# Format applied to datetime/date objects before they become SQL literals.
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"

ORACLE_TIMESTAMP_FORMAT = "YYYY-MM-DD HH24:MI:SS"
