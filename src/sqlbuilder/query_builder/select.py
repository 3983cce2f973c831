"""Fluent SELECT statement builder."""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from sqlbuilder.__version__ import __version__
from sqlbuilder.common.exceptions import ErrorCode, build_error, configuration_error
from sqlbuilder.logging import dialect_scope, get_logger
from sqlbuilder.query_builder.base import BaseDialect, IndexHint, to_sql_text
from sqlbuilder.query_builder.factory import DialectLike, get_dialect
from sqlbuilder.settings import BuilderSettings, get_settings
from sqlbuilder.telemetry import get_tracer

logger = get_logger(__name__)

Conditions = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


class QueryBuilder:
    """Accumulate a SELECT statement and render it for one SQL dialect.

    Every mutator returns the builder itself so calls can be chained. No
    mutator validates its input; ``build()`` renders whatever state has been
    collected and may be called any number of times.

    Reserved-keyword column names (``DATE``, ``USER``, ``ORDER``, ``GROUP``,
    ``INDEX``) passed to ``select``, ``where``, ``where_with_placeholder`` and
    ``order_by`` are quoted for the dialect. Table names, join clauses and
    values are inserted verbatim, so values must not come from untrusted
    input.

    A builder is not thread-safe; create one per query.

    Example:
        >>> sql = (
        ...     QueryBuilder("mysql")
        ...     .select(["id", "name", "DATE"])
        ...     .distinct()
        ...     .from_("users")
        ...     .index("idx_users_name")
        ...     .where_with_placeholder([("join_date", "?joindate")])
        ...     .set_value("?joindate", "SYSDATE")
        ...     .inner_join("orders", "users.id = orders.user_id")
        ...     .order_by("name")
        ...     .limit(10)
        ...     .offset(5)
        ...     .build()
        ... )

    Args:
        dialect: ``DialectType``, dialect name, or dialect instance. Defaults
                 to ``settings.default_dialect``.
        strict_build: Raise from ``build()`` when the table is missing or an
                      OFFSET cannot be rendered. Defaults to
                      ``settings.strict_build``.
        replace_all_placeholders: Substitute every occurrence of each
                                  placeholder instead of only the first.
                                  Defaults to
                                  ``settings.replace_all_placeholders``.
        settings: Settings to read defaults from. Defaults to
                  ``get_settings()``.
    """

    def __init__(
        self,
        dialect: Optional[DialectLike] = None,
        *,
        strict_build: Optional[bool] = None,
        replace_all_placeholders: Optional[bool] = None,
        settings: Optional[BuilderSettings] = None,
    ):
        self.settings = settings or get_settings()
        if dialect is None:
            dialect = self.settings.default_dialect
        self.dialect: BaseDialect = get_dialect(dialect)

        self.strict_build = (
            self.settings.strict_build if strict_build is None else strict_build
        )
        self.replace_all_placeholders = (
            self.settings.replace_all_placeholders
            if replace_all_placeholders is None
            else replace_all_placeholders
        )

        self.selected_fields: List[str] = []
        self.table_name: str = ""
        self.is_distinct: bool = False
        self.where_conditions: List[str] = []
        self.joins: List[str] = []
        self.order_by_clause: str = ""
        self.index_name: str = ""
        self.limit_value: Optional[int] = None
        self.offset_value: Optional[int] = None
        self.values: Dict[str, str] = {}

    def select(self, fields: Iterable[str]) -> "QueryBuilder":
        """Append columns to the select list; none selects ``*``."""
        for field in fields:
            self.selected_fields.append(self.dialect.escape_identifier(field))
        return self

    def from_(self, table: str) -> "QueryBuilder":
        self.table_name = table
        return self

    def distinct(self) -> "QueryBuilder":
        self.is_distinct = True
        return self

    def where(self, conditions: Conditions, is_datetime: bool = False) -> "QueryBuilder":
        """Add ``field = value`` conditions, combined with AND.

        Args:
            conditions: ``(field, value)`` pairs or a mapping of field to value
            is_datetime: Format every value in this call as a timestamp literal
        """
        for field, value in _iter_conditions(conditions):
            if is_datetime:
                formatted = self.dialect.format_datetime(value)
            else:
                formatted = to_sql_text(value)
            self._add_condition(field, formatted)
        return self

    def where_with_placeholder(self, conditions: Conditions) -> "QueryBuilder":
        """Add conditions whose values are placeholder tokens.

        Tokens are resolved at build time from values registered with
        ``set_value``; unbound tokens are left in the SQL as written.
        """
        for field, placeholder in _iter_conditions(conditions):
            self._add_condition(field, to_sql_text(placeholder))
        return self

    def set_value(self, placeholder: str, value: Any) -> "QueryBuilder":
        self.values[placeholder] = to_sql_text(value)
        return self

    def inner_join(self, table: str, on_condition: str) -> "QueryBuilder":
        self.joins.append(f"INNER JOIN {table} ON {on_condition}")
        return self

    def order_by(self, field: str, ascending: bool = True) -> "QueryBuilder":
        """Set the single ORDER BY column, replacing any earlier one."""
        direction = "ASC" if ascending else "DESC"
        self.order_by_clause = f"{self.dialect.escape_identifier(field)} {direction}"
        return self

    def index(self, index_name: str) -> "QueryBuilder":
        self.index_name = index_name
        return self

    def limit(self, limit: int) -> "QueryBuilder":
        self.limit_value = limit
        return self

    def offset(self, offset: int) -> "QueryBuilder":
        self.offset_value = offset
        return self

    def build(self) -> str:
        """Render the collected state as a SQL SELECT statement.

        Returns:
            SQL text for the builder's dialect

        Raises:
            QueryBuilderError: Only in strict mode, when the table name is
                missing or a requested OFFSET would be dropped.
        """
        tracer = get_tracer("sqlbuilder", __version__)
        with dialect_scope(self.dialect.name):
            with tracer.start_as_current_span("sqlbuilder.build") as span:
                span.set_attribute("sqlbuilder.dialect", self.dialect.name)
                span.set_attribute("sqlbuilder.table", self.table_name)

                if self.strict_build:
                    self._check_strict()

                sql = self._render()

                extra: Dict[str, Any] = {
                    "table": self.table_name,
                    "field_count": len(self.selected_fields),
                    "condition_count": len(self.where_conditions),
                }
                if self.settings.log_queries:
                    max_len = self.settings.max_logged_query_length
                    extra["sql"] = sql[:max_len] + "..." if len(sql) > max_len else sql
                logger.debug("Built SELECT statement", extra=extra)

        return sql

    def _render(self) -> str:
        if self.index_name:
            hint = self.dialect.render_index_hint(self.table_name, self.index_name)
        else:
            hint = IndexHint()

        sql = "SELECT "
        sql += hint.after_select

        if not self.selected_fields:
            sql += "*"
        else:
            if self.is_distinct:
                sql += " DISTINCT  "
            sql += ", ".join(self.selected_fields)

        sql += f" FROM {self.table_name}"
        sql += hint.after_table

        for join in self.joins:
            sql += f" {join}"

        if self.where_conditions:
            sql += f" WHERE {self._substitute_placeholders(' AND '.join(self.where_conditions))}"

        if self.order_by_clause:
            sql += f" ORDER BY {self.order_by_clause}"

        sql += self.dialect.render_pagination(self.limit_value, self.offset_value)
        return sql

    def _substitute_placeholders(self, where_clause: str) -> str:
        # Bindings apply in registration order; by default only the first
        # occurrence of each token is replaced.
        count = -1 if self.replace_all_placeholders else 1
        for placeholder, value in self.values.items():
            where_clause = where_clause.replace(placeholder, value, count)
        return where_clause

    def _check_strict(self) -> None:
        if not self.table_name or not self.table_name.strip():
            raise configuration_error(
                "Cannot build SELECT statement: no table name set. Call from_() before build().",
                config_key="table_name",
                error_code=ErrorCode.CONFIG_MISSING,
                details={"dialect": self.dialect.name},
            )

        if self.offset_value is not None and self.offset_value > 0:
            has_limit = self.limit_value is not None and self.limit_value >= 0
            if not has_limit or not self.dialect.supports_offset:
                reason = (
                    "OFFSET requires a LIMIT"
                    if not has_limit
                    else f"the {self.dialect.name} dialect does not render OFFSET"
                )
                raise build_error(
                    f"Cannot build SELECT statement: offset {self.offset_value} would be ignored because {reason}",
                    dialect=self.dialect.name,
                    table=self.table_name,
                )

    def _add_condition(self, field: str, value: str) -> None:
        self.where_conditions.append(f"{self.dialect.escape_identifier(field)} = {value}")

    def __str__(self) -> str:
        return self.build()

    def __repr__(self) -> str:
        return f"QueryBuilder(dialect={self.dialect.name!r}, table={self.table_name!r})"


def _iter_conditions(conditions: Conditions) -> Iterable[Tuple[str, Any]]:
    if isinstance(conditions, Mapping):
        return conditions.items()
    return conditions
