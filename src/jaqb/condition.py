"""WHERE condition chains.

A :class:`Condition` holds one comparison and optionally links a child
condition through ``AND`` or ``OR``. :meth:`Condition.and_` and
:meth:`Condition.or_` return the *child*, so every call made after them builds
the nested group, not the node they were called on::

    where = query.where().field("a").equals().field("b")
    where.or_().field("c").equals().field("d").and_().field("e").lte().value(5)
    # a = b OR (c = d AND (e <= '5'))

Keep a reference to a node to extend it later; chaining always moves one
level deeper.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

from jaqb import syntax, values
from jaqb.errors import IncompleteConditionError, TooManyOperandsError

if TYPE_CHECKING:
    from jaqb.statement import Statement

MAX_OPERANDS = 2


class Condition:
    def __init__(self, statement: Statement) -> None:
        self._statement = statement
        self._operands: list[syntax.Operand] = []
        self._operator: syntax.Operator | None = None
        self._connective: syntax.Connective | None = None
        self._next: Condition | None = None

    @property
    def left(self) -> syntax.Operand | None:
        return self._operands[0] if self._operands else None

    @property
    def right(self) -> syntax.Operand | None:
        return self._operands[1] if len(self._operands) > 1 else None

    @property
    def operator(self) -> syntax.Operator | None:
        return self._operator

    @property
    def connective(self) -> syntax.Connective | None:
        return self._connective

    @property
    def next(self) -> Condition | None:
        return self._next

    def _push(self, operand: syntax.Operand) -> Self:
        if len(self._operands) >= MAX_OPERANDS:
            raise TooManyOperandsError(
                f"Condition already has {MAX_OPERANDS} operands, cannot add {operand!r}"
            )
        self._operands.append(operand)
        return self

    def field(self, name: str) -> Self:
        return self._push(syntax.Field(name))

    def value(self, value: Any) -> Self:
        return self._push(syntax.Value(value))

    def _compare(self, operator: syntax.Operator) -> Self:
        self._operator = operator
        return self

    def equals(self) -> Self:
        return self._compare("=")

    def gt(self) -> Self:
        return self._compare(">")

    def lt(self) -> Self:
        return self._compare("<")

    def lte(self) -> Self:
        return self._compare("<=")

    def gte(self) -> Self:
        return self._compare(">=")

    def extend(self, connective: syntax.Connective) -> Condition:
        """Link a new child condition and return it.

        Replaces any child this node already had.
        """
        self._connective = connective
        self._next = Condition(self._statement)
        return self._next

    def and_(self) -> Condition:
        return self.extend("AND")

    def or_(self) -> Condition:
        return self.extend("OR")

    def end(self) -> Statement:
        return self._statement

    def _render_operand(self, operand: syntax.Operand) -> str:
        match operand:
            case syntax.Field(name):
                return name
            case syntax.Value(value):
                return values.quote(value, self._statement.settings)

    def render(self) -> str:
        child = self._next.render() if self._next is not None else ""
        # Nodes used only as scaffolding for a leading and_()/or_()
        if not self._operands and self._operator is None:
            return child
        if self._operator is None or len(self._operands) < MAX_OPERANDS:
            raise IncompleteConditionError(
                f"Condition needs two operands and an operator, got "
                f"operands={self._operands!r} operator={self._operator!r}"
            )
        left, right = (self._render_operand(operand) for operand in self._operands)
        clause = f"{left} {self._operator} {right}"
        if child:
            clause += f" {self._connective} ({child})"
        return clause

    def __str__(self) -> str:
        return self.render()
