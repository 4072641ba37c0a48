import pytest

import jaqb
from jaqb import syntax


def test_and() -> None:
    query = jaqb.select("t1")
    where = query.where().field("first").equals().field("second")
    where.and_().field("second").equals().field("second")
    assert (
        query.render() == "SELECT * FROM t1 WHERE first = second AND (second = second)"
    )


def test_or() -> None:
    query = jaqb.select("t1")
    where = query.where().field("first").equals().field("second")
    where.or_().field("second").equals().field("second")
    assert (
        query.render() == "SELECT * FROM t1 WHERE first = second OR (second = second)"
    )


def test_or_then_and_nests_groups() -> None:
    query = jaqb.select("t1")
    where = query.where().field("first").equals().field("second")
    or_ = where.or_().field("second").equals().field("second")
    or_.and_().field("third").lte().value("fifty")
    assert query.render() == (
        "SELECT * FROM t1 WHERE "
        "first = second OR (second = second AND (third <= 'fifty'))"
    )


def test_connective_returns_child() -> None:
    root = jaqb.select("t1").where()
    child = root.or_()
    assert child is not root
    assert root.next is child
    assert root.connective == "OR"


def test_leading_connective_is_skipped() -> None:
    query = jaqb.select("t1")
    query.where().or_().field("a").equals().field("b")
    assert query.render() == "SELECT * FROM t1 WHERE a = b"


def test_dangling_connective_is_dropped() -> None:
    query = jaqb.select("t1")
    query.where().field("a").equals().field("b").and_()
    assert query.render() == "SELECT * FROM t1 WHERE a = b"


def test_reconnecting_replaces_child() -> None:
    where = jaqb.select("t1").where().field("a").equals().field("b")
    where.and_().field("c").equals().field("d")
    where.or_().field("e").equals().field("f")
    assert where.render() == "a = b OR (e = f)"


@pytest.mark.parametrize(
    ("method", "symbol"),
    [("equals", "="), ("gt", ">"), ("lt", "<"), ("lte", "<="), ("gte", ">=")],
)
def test_operators(method: str, symbol: str) -> None:
    condition = getattr(jaqb.select("t1").where().field("a"), method)()
    assert condition.field("b").render() == f"a {symbol} b"


def test_last_operator_wins() -> None:
    condition = jaqb.select("t1").where().field("a").gt().lt().field("b")
    assert condition.operator == "<"
    assert str(condition) == "a < b"


def test_operands() -> None:
    condition = jaqb.select("t1").where().value(1).equals().field("a")
    assert condition.left == syntax.Value(1)
    assert condition.right == syntax.Field("a")
    assert condition.render() == "'1' = a"


def test_third_operand_is_rejected() -> None:
    condition = jaqb.select("t1").where().field("a").equals().field("b")
    with pytest.raises(jaqb.TooManyOperandsError):
        condition.field("c")
    with pytest.raises(jaqb.TooManyOperandsError):
        condition.value("c")
    assert condition.render() == "a = b"


@pytest.mark.parametrize(
    "build",
    [
        lambda c: c.field("a"),
        lambda c: c.equals(),
        lambda c: c.field("a").equals(),
        lambda c: c.field("a").field("b"),
    ],
)
def test_incomplete_condition(build) -> None:  # pyright: ignore[reportMissingParameterType]
    query = jaqb.select("t1")
    build(query.where())
    with pytest.raises(jaqb.IncompleteConditionError):
        query.render()


def test_incomplete_nested_condition() -> None:
    query = jaqb.update("t1").field("a", 1)
    query.where().field("a").equals().value(1).and_().field("b").gt()
    with pytest.raises(jaqb.IncompleteConditionError):
        query.render()


def test_end_returns_statement() -> None:
    query = jaqb.select("t1")
    assert query.where().or_().and_().end() is query
