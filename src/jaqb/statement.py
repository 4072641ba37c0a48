import logging
from collections.abc import Sequence
from typing import Any, Self

from jaqb import syntax
from jaqb.fields import Fields, for_kind
from jaqb.condition import Condition
from jaqb.errors import ArgumentError, UnsupportedOperationError
from jaqb.settings import DEFAULT_SETTINGS, RenderSettings

logger = logging.getLogger(__name__)


class Statement:
    def __init__(
        self,
        kind: syntax.StatementKind,
        tables: Sequence[str] = (),
        *,
        settings: RenderSettings = DEFAULT_SETTINGS,
    ) -> None:
        self._kind: syntax.StatementKind = kind
        self._tables = list(tables)
        self._settings = settings
        self._fields = for_kind(kind, settings)
        self._where: Condition | None = None

    @property
    def kind(self) -> syntax.StatementKind:
        return self._kind

    @property
    def settings(self) -> RenderSettings:
        return self._settings

    @property
    def table_names(self) -> list[str]:
        return list(self._tables)

    def field(self, *args: Any) -> Self:
        """Declare fields.

        SELECT statements take any number of field names. The other kinds take
        a single ``name`` and an optional ``value`` (a column type for CREATE).
        """
        if not args:
            raise ArgumentError("No field name specified")
        if self._kind == "SELECT":
            for name in args:
                self._fields.set(name)
        elif len(args) > 2:
            raise ArgumentError(
                f"{self._kind} takes a field name and a value, got {len(args)} arguments"
            )
        else:
            self._fields.set(*args)
        return self

    def fields(self) -> Fields:
        return self._fields

    def tables(self, *names: str) -> Self:
        self._tables.extend(names)
        return self

    def where(self, *args: Any) -> Condition:
        if args:
            raise UnsupportedOperationError("where() does not take arguments")
        self._where = Condition(self)
        return self._where

    def _where_clause(self) -> str:
        if self._where is None:
            return ""
        condition = self._where.render()
        return f" WHERE {condition}" if condition else ""

    def render(self) -> str:
        match self._kind:
            case "SELECT":
                sql = (
                    f"SELECT {self._fields.render()} FROM {', '.join(self._tables)}"
                    + self._where_clause()
                )
            case "INSERT":
                sql = f"INSERT INTO {self._tables[0]} {self._fields.render()}"
            case "UPDATE":
                sql = (
                    f"UPDATE {self._tables[0]} SET {self._fields.render()}"
                    + self._where_clause()
                )
            case "CREATE":
                sql = (
                    f"CREATE TABLE IF NOT EXISTS {self._tables[0]} "
                    f"({self._fields.render()})"
                )
        logger.debug("Rendered %s statement: %s", self._kind, sql)
        return sql

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._kind} {self._tables!r}>"
