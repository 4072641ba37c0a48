"""Fluent builder for SQLite statements.

>>> str(select("t1").field("a").where().field("a").gt().value(1).end())
"SELECT a FROM t1 WHERE a > '1'"
"""

from jaqb.condition import Condition
from jaqb.errors import (
    ArgumentError,
    IncompleteConditionError,
    InjectionRiskWarning,
    JaqbError,
    MissingArgumentError,
    TooManyOperandsError,
    UnsupportedOperationError,
)
from jaqb.settings import DEFAULT_SETTINGS, RenderSettings
from jaqb.statement import Statement


def select(*tables: str, settings: RenderSettings = DEFAULT_SETTINGS) -> Statement:
    return Statement("SELECT", tables, settings=settings)


def insert(*tables: str, settings: RenderSettings = DEFAULT_SETTINGS) -> Statement:
    if not tables:
        raise MissingArgumentError("Missing insert table")
    return Statement("INSERT", tables, settings=settings)


def update(*tables: str, settings: RenderSettings = DEFAULT_SETTINGS) -> Statement:
    if not tables:
        raise MissingArgumentError("Missing update table")
    return Statement("UPDATE", tables, settings=settings)


def create(*tables: str, settings: RenderSettings = DEFAULT_SETTINGS) -> Statement:
    if not tables:
        raise MissingArgumentError("Missing create table")
    return Statement("CREATE", tables, settings=settings)


__all__ = [
    "ArgumentError",
    "Condition",
    "DEFAULT_SETTINGS",
    "IncompleteConditionError",
    "InjectionRiskWarning",
    "JaqbError",
    "MissingArgumentError",
    "RenderSettings",
    "Statement",
    "TooManyOperandsError",
    "UnsupportedOperationError",
    "create",
    "insert",
    "select",
    "update",
]
