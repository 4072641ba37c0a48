import dataclasses
from typing import Any, Literal, TypeAlias

type StatementKind = Literal["SELECT", "INSERT", "UPDATE", "CREATE"]
type Operator = Literal["=", ">", "<", "<=", ">="]
type Connective = Literal["AND", "OR"]


@dataclasses.dataclass(frozen=True, slots=True)
class Field:
    name: str


@dataclasses.dataclass(frozen=True, slots=True)
class Value:
    value: Any


Operand: TypeAlias = Field | Value
