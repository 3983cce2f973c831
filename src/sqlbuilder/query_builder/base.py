from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Any, NamedTuple, Optional

from sqlbuilder.constants import DATETIME_FORMAT, RESERVED_KEYWORDS, DialectType


class IndexHint(NamedTuple):
    """Index hint fragments and where they go in the statement.

    Attributes:
        after_select: Text emitted directly after ``SELECT ``
        after_table: Text emitted directly after ``FROM <table>``
    """
    after_select: str = ""
    after_table: str = ""


class BaseDialect(ABC):
    """Base interface for SQL dialect strategies.

    A dialect owns every rendering decision that differs between SQL
    variants: identifier quoting, date literals, index hints and pagination.
    ``QueryBuilder`` assembles the statement and asks its dialect for these
    fragments, so adding a dialect means adding one subclass and registering
    it with ``DialectFactory``.

    Dialects hold no per-query state and may be shared between builders.
    """

    dialect_type: DialectType

    #: Whether ``render_pagination`` can express an OFFSET.
    supports_offset: bool = False

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        # Concrete dialects must declare which DialectType they render.
        is_abstract = any(
            getattr(getattr(cls, attr, None), "__isabstractmethod__", False)
            for attr in dir(cls)
        )
        if not is_abstract and not isinstance(getattr(cls, "dialect_type", None), DialectType):
            raise TypeError(
                f"{cls.__name__} must set 'dialect_type' to a DialectType member"
            )

    @property
    def name(self) -> str:
        return self.dialect_type.value

    @abstractmethod
    def quote_identifier(self, identifier: str) -> str:
        """Quote an identifier unconditionally.

        Args:
            identifier: Column name to quote

        Returns:
            Quoted identifier
        """
        pass

    @abstractmethod
    def format_datetime_literal(self, value: str) -> str:
        """Wrap an already formatted timestamp string as a SQL literal.

        Args:
            value: Timestamp text, expected as ``YYYY-MM-DD HH:MM:SS``

        Returns:
            Platform-specific timestamp literal
        """
        pass

    @abstractmethod
    def render_index_hint(self, table: str, index_name: str) -> IndexHint:
        """Render the hint telling the optimizer to use ``index_name``.

        Args:
            table: Table the hint applies to
            index_name: Index to prefer

        Returns:
            Fragments to splice after SELECT and after the table name
        """
        pass

    @abstractmethod
    def render_pagination(self, limit: Optional[int], offset: Optional[int]) -> str:
        """Render the row-limiting clause.

        Args:
            limit: Maximum number of rows, or None when unset
            offset: Rows to skip, or None when unset

        Returns:
            Clause including its leading space, or an empty string
        """
        pass

    def escape_identifier(self, field: str) -> str:
        """Quote ``field`` only if it is a reserved keyword."""
        if field in RESERVED_KEYWORDS:
            return self.quote_identifier(field)
        return field

    def format_datetime(self, value: Any) -> str:
        """Format a date/time value as a timestamp literal.

        Strings are used as given; ``datetime`` and ``date`` objects are
        formatted as ``YYYY-MM-DD HH:MM:SS`` first.
        """
        return self.format_datetime_literal(to_sql_text(value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


def to_sql_text(value: Any) -> str:
    """Stringify a value for splicing into SQL text."""
    if isinstance(value, datetime):
        return value.strftime(DATETIME_FORMAT)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day).strftime(DATETIME_FORMAT)
    return str(value)
