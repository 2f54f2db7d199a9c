"""Type-checker state: scopes, scoped types and variables, and check errors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from lovely.span import Span
from lovely.syntax import TypeName

__all__ = [
    "TypeId",
    "ScopeId",
    "VariableId",
    "INT_ID",
    "BOOL_ID",
    "UNIT_ID",
    "Scope",
    "ScopedVariable",
    "NamedType",
    "FunctionType",
    "TypeKind",
    "ScopedType",
    "TypeMismatch",
    "VariableNotFound",
    "TypeNotFound",
    "ErrorKind",
    "CheckError",
    "Checker",
]

TypeId = int
ScopeId = int
VariableId = int

INT_ID: TypeId = 0
BOOL_ID: TypeId = 1
UNIT_ID: TypeId = 2


@dataclass(frozen=True)
class Scope:
    """A lexical scope; the root scope has no parent."""

    parent_scope: ScopeId | None = None


@dataclass(frozen=True)
class ScopedVariable:
    """A variable declared in a scope, with the id of its type."""

    name: str
    type_id: TypeId
    scope_id: ScopeId


@dataclass(frozen=True)
class NamedType:
    """A type known by its name, such as ``Int``."""

    name: str


@dataclass(frozen=True)
class FunctionType:
    """The type of a function: its parameter types and its return type."""

    parameters: tuple[ScopedType, ...]
    return_type: ScopedType


TypeKind = Union[NamedType, FunctionType]


@dataclass(frozen=True)
class ScopedType:
    """A type declared in a scope."""

    kind: TypeKind
    scope_id: ScopeId

    @classmethod
    def named(cls, name: str, scope_id: ScopeId) -> ScopedType:
        """A named type declared in the given scope."""
        return cls(NamedType(name), scope_id)


@dataclass(frozen=True)
class TypeMismatch:
    """An expression had a type other than the one required."""

    expected: TypeId
    got: TypeId

    def __str__(self) -> str:
        return f"type mismatch: expected type {self.expected}, got type {self.got}"


@dataclass(frozen=True)
class VariableNotFound:
    """A name referred to no variable in scope."""

    name: str

    def __str__(self) -> str:
        return f"variable not found: {self.name}"


@dataclass(frozen=True)
class TypeNotFound:
    """A type name referred to no type in scope."""

    ty: TypeName

    def __str__(self) -> str:
        return f"type not found: {self.ty.name}"


ErrorKind = Union[TypeMismatch, VariableNotFound, TypeNotFound]


class CheckError(Exception):
    """An error found while checking a program, tied to a source span."""

    def __init__(self, kind: ErrorKind, span: Span) -> None:
        super().__init__(str(kind))
        self.kind = kind
        self.span = span

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CheckError):
            return NotImplemented
        return self.kind == other.kind and self.span == other.span

    def __hash__(self) -> int:
        return hash((self.kind, self.span))

    def __repr__(self) -> str:
        return f"CheckError(kind={self.kind!r}, span={self.span!r})"

    @classmethod
    def type_mismatch(cls, expected: TypeId, got: TypeId, span: Span) -> CheckError:
        """An error for a value of type ``got`` where ``expected`` was needed."""
        return cls(TypeMismatch(expected, got), span)

    @classmethod
    def variable_not_found(cls, name: str, span: Span) -> CheckError:
        """An error for a reference to an unknown variable."""
        return cls(VariableNotFound(name), span)

    @classmethod
    def type_not_found(cls, ty: TypeName, span: Span) -> CheckError:
        """An error for a reference to an unknown type."""
        return cls(TypeNotFound(ty), span)


def _builtin_types() -> list[ScopedType]:
    return [
        ScopedType.named("Int", 0),
        ScopedType.named("Bool", 0),
        ScopedType.named("Unit", 0),
    ]


@dataclass
class Checker:
    """State of the checker: scopes, types and variables, indexed by id.

    A fresh checker has the root scope and the builtin types ``Int``,
    ``Bool`` and ``Unit`` under the ids ``INT_ID``, ``BOOL_ID`` and ``UNIT_ID``.
    """

    cur_scope: ScopeId = 0
    scopes: list[Scope] = field(default_factory=lambda: [Scope(None)])
    types: list[ScopedType] = field(default_factory=_builtin_types)
    variables: list[ScopedVariable] = field(default_factory=list)
    type_errors: list[CheckError] = field(default_factory=list)