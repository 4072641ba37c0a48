import logging
from collections.abc import Sequence
from typing import Any, Literal, Self

import pydantic

from jaqb import syntax, values
from jaqb.settings import DEFAULT_SETTINGS, RenderSettings

logger = logging.getLogger(__name__)


type DataTypes = Literal["TEXT", "INTEGER", "BLOB", "REAL", "INTEGER PRIMARY KEY"]

ALL_DATATYPES: Sequence[DataTypes] = ("TEXT", "INTEGER", "BLOB", "REAL")
PRIMARY_KEY = "PRIMARY"
DEFAULT_DATATYPE: DataTypes = "TEXT"


class ColumnInfo(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(frozen=True)
    name: str
    datatype: DataTypes

    def render(self) -> str:
        return f"{self.name} {self.datatype}"


class Fields:
    """Field declarations of one statement kind, rendered as a SQL fragment."""

    def __init__(self, settings: RenderSettings = DEFAULT_SETTINGS) -> None:
        self._settings = settings

    def set(self, *args: Any) -> None:
        raise NotImplementedError

    def field(self, *args: Any) -> Self:
        self.set(*args)
        return self

    def render(self) -> str:
        raise NotImplementedError

    def __len__(self) -> int:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.render()


class SelectFields(Fields):
    def __init__(self, settings: RenderSettings = DEFAULT_SETTINGS) -> None:
        super().__init__(settings)
        self._names: list[str] = []

    # Repeated names are kept
    def set(self, name: str, value: Any = None) -> None:
        self._names.append(name)

    def render(self) -> str:
        if not self._names:
            return "*"
        return ", ".join(self._names)

    def __len__(self) -> int:
        return len(self._names)


class _KeyedFields(Fields):
    def __init__(self, settings: RenderSettings = DEFAULT_SETTINGS) -> None:
        super().__init__(settings)
        self._values: dict[str, Any] = {}

    def set(self, name: str, value: Any = None) -> None:
        self._values[name] = value

    def _quoted(self) -> dict[str, str]:
        return {
            name: values.quote(value, self._settings)
            for name, value in self._values.items()
        }

    def __len__(self) -> int:
        return len(self._values)


class InsertFields(_KeyedFields):
    def render(self) -> str:
        quoted = self._quoted()
        return f"({', '.join(quoted)}) VALUES ({', '.join(quoted.values())})"


class UpdateFields(_KeyedFields):
    def render(self) -> str:
        return ", ".join(f"{name} = {value}" for name, value in self._quoted().items())


def _datatype_from(datatype: str | None) -> DataTypes:
    match datatype.upper() if isinstance(datatype, str) else None:
        case "TEXT":
            return "TEXT"
        case "INTEGER":
            return "INTEGER"
        case "BLOB":
            return "BLOB"
        case "REAL":
            return "REAL"
        case "PRIMARY":
            return "INTEGER PRIMARY KEY"
        case None:
            return DEFAULT_DATATYPE
        case _:
            logger.debug("Unknown column type %r, using %s", datatype, DEFAULT_DATATYPE)
            return DEFAULT_DATATYPE


class CreateFields(Fields):
    def __init__(self, settings: RenderSettings = DEFAULT_SETTINGS) -> None:
        super().__init__(settings)
        self._columns: dict[str, ColumnInfo] = {}

    def set(self, name: str, datatype: str | None = None) -> None:
        self._columns[name] = ColumnInfo(name=name, datatype=_datatype_from(datatype))

    def primary_key(self, name: str) -> Self:
        self.set(name, PRIMARY_KEY)
        return self

    @property
    def columns(self) -> list[ColumnInfo]:
        return list(self._columns.values())

    def render(self) -> str:
        return ", ".join(col.render() for col in self._columns.values())

    def __len__(self) -> int:
        return len(self._columns)


_FIELDS_BY_KIND: dict[syntax.StatementKind, type[Fields]] = {
    "SELECT": SelectFields,
    "INSERT": InsertFields,
    "UPDATE": UpdateFields,
    "CREATE": CreateFields,
}


def for_kind(
    kind: syntax.StatementKind, settings: RenderSettings = DEFAULT_SETTINGS
) -> Fields:
    return _FIELDS_BY_KIND[kind](settings)
