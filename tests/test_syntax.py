import dataclasses

import pytest

from lovely.span import Span
from lovely.syntax import (
    BoolLiteral,
    Expression,
    ExpressionStatement,
    Ident,
    Infix,
    InfixOperator,
    IntLiteral,
    Precedence,
    Program,
    TypeName,
    UnitLiteral,
    VariableDecl,
)


def _int(value, start):
    return Expression(IntLiteral(value), Span(start, start + len(str(value))))


def test_precedence_orders_weakest_first():
    ordered = [
        Precedence.LOWEST,
        Precedence.EQUALITY,
        Precedence.COMPARISON,
        Precedence.SUM,
        Precedence.PRODUCT,
        Precedence.GROUP,
        Precedence.PREFIX,
    ]
    looked_up = [Precedence(level.value) for level in ordered]
    assert looked_up == ordered
    assert sorted(looked_up, reverse=True) == list(reversed(ordered))
    assert all(a < b for a, b in zip(looked_up, looked_up[1:]))


def test_expressions_compare_structurally():
    first = Expression(Infix(_int(1, 0), InfixOperator.PLUS, _int(2, 4)), Span(0, 5))
    second = Expression(Infix(_int(1, 0), InfixOperator.PLUS, _int(2, 4)), Span(0, 5))
    assert first == second
    assert hash(first) == hash(second)


def test_expressions_differ_by_span():
    assert Expression(Ident("x"), Span(0, 1)) != Expression(Ident("x"), Span(1, 2))
    assert Expression(Ident("x"), Span(0, 1)) == Expression(Ident("x"), Span(0, 1))


def test_unit_literals_are_equal():
    assert UnitLiteral() == UnitLiteral()
    assert UnitLiteral() != BoolLiteral(False)


def test_nodes_are_immutable():
    expr = Expression(BoolLiteral(True), Span(0, 4))
    with pytest.raises(dataclasses.FrozenInstanceError):
        expr.span = Span(1, 2)


def test_variable_decl_type_defaults_to_none():
    decl = VariableDecl("foo", _int(4, 7), False)
    assert decl.ty is None
    typed = VariableDecl("bar", _int(4, 7), True, TypeName("Int"))
    assert typed.ty == TypeName("Int")


def test_program_iterates_statements():
    statements = (
        ExpressionStatement(_int(1, 0), True),
        ExpressionStatement(_int(2, 3), False),
    )
    program = Program(statements)
    assert len(program) == 2
    assert list(program) == list(statements)
    assert len(Program()) == 0