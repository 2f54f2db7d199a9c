"""Syntax tree produced by the parser."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import Union

from lovely.span import Span

__all__ = [
    "Program",
    "ExpressionStatement",
    "Expression",
    "ExpressionKind",
    "UnitLiteral",
    "BoolLiteral",
    "IntLiteral",
    "Ident",
    "Prefix",
    "Infix",
    "VariableDecl",
    "Function",
    "FunctionCall",
    "PrefixOperator",
    "InfixOperator",
    "FunctionArgument",
    "FunctionParameter",
    "LabeledParameter",
    "UnlabeledParameter",
    "TypeName",
    "Precedence",
]


class PrefixOperator(Enum):
    """Operators written before their operand."""

    LOGICAL_NOT = auto()
    NEGATIVE = auto()


class InfixOperator(Enum):
    """Operators written between two operands."""

    PLUS = auto()
    MINUS = auto()
    DIVIDE = auto()
    MULTIPLY = auto()
    EQUAL = auto()
    NOT_EQUAL = auto()
    LESS_THAN = auto()
    GREATER_THAN = auto()
    LESS_THAN_OR_EQUAL = auto()
    GREATER_THAN_OR_EQUAL = auto()


class Precedence(IntEnum):
    """Binding strength of operators, weakest first."""

    LOWEST = auto()
    EQUALITY = auto()  # == or !=
    COMPARISON = auto()  # <, <=, >, >=
    SUM = auto()  # + or -
    PRODUCT = auto()  # * or /
    GROUP = auto()  # ( )
    PREFIX = auto()  # -X or !X


@dataclass(frozen=True)
class TypeName:
    """A type referred to by name."""

    name: str


@dataclass(frozen=True)
class UnitLiteral:
    """The ``unit`` value."""


@dataclass(frozen=True)
class BoolLiteral:
    value: bool


@dataclass(frozen=True)
class IntLiteral:
    value: int


@dataclass(frozen=True)
class Ident:
    """A reference to a variable by name."""

    name: str


@dataclass(frozen=True)
class Prefix:
    operator: PrefixOperator
    expression: Expression


@dataclass(frozen=True)
class Infix:
    left: Expression
    operator: InfixOperator
    right: Expression


@dataclass(frozen=True)
class VariableDecl:
    """``name :: value`` (immutable) or ``name : Type = value`` (mutable)."""

    name: str
    value: Expression
    mutable: bool
    ty: TypeName | None = None


@dataclass(frozen=True)
class LabeledParameter:
    """A parameter whose label must be given at the call site."""

    internal_name: str
    external_name: str | None
    ty: TypeName


@dataclass(frozen=True)
class UnlabeledParameter:
    """A parameter passed positionally, written ``~name: Type``."""

    name: str
    ty: TypeName


FunctionParameter = Union[LabeledParameter, UnlabeledParameter]


@dataclass(frozen=True)
class Function:
    parameters: tuple[FunctionParameter, ...]
    return_type: TypeName | None
    body: tuple[ExpressionStatement, ...]


@dataclass(frozen=True)
class FunctionArgument:
    label: str | None
    value: Expression


@dataclass(frozen=True)
class FunctionCall:
    name: str
    arguments: tuple[FunctionArgument, ...]


ExpressionKind = Union[
    UnitLiteral,
    BoolLiteral,
    IntLiteral,
    Ident,
    Prefix,
    Infix,
    VariableDecl,
    Function,
    FunctionCall,
]


@dataclass(frozen=True)
class Expression:
    """An expression node together with the source span it covers."""

    kind: ExpressionKind
    span: Span


@dataclass(frozen=True)
class ExpressionStatement:
    """An expression; ``discarded`` is true when a semicolon followed it."""

    expr: Expression
    discarded: bool


@dataclass(frozen=True)
class Program:
    """A whole source file: a sequence of statements."""

    statements: tuple[ExpressionStatement, ...] = ()

    def __iter__(self) -> Iterator[ExpressionStatement]:
        return iter(self.statements)

    def __len__(self) -> int:
        return len(self.statements)