import pytest

from lovely.checker import (
    BOOL_ID,
    INT_ID,
    UNIT_ID,
    CheckError,
    Checker,
    FunctionType,
    NamedType,
    Scope,
    ScopedType,
    ScopedVariable,
    TypeMismatch,
    TypeNotFound,
    VariableNotFound,
)
from lovely.span import Span
from lovely.syntax import TypeName


def test_named_type_holds_name_and_scope():
    ty = ScopedType.named("Int", 3)
    assert ty.kind == NamedType("Int")
    assert ty.scope_id == 3


def test_function_type_composes_scoped_types():
    int_ty = ScopedType.named("Int", 0)
    bool_ty = ScopedType.named("Bool", 0)
    fn = ScopedType(FunctionType((int_ty, int_ty), bool_ty), 0)
    assert fn.kind.parameters == (int_ty, int_ty)
    assert fn.kind.return_type == bool_ty


def test_scoped_variable_fields():
    var = ScopedVariable("x", INT_ID, 2)
    assert (var.name, var.type_id, var.scope_id) == ("x", INT_ID, 2)


def test_root_scope_has_no_parent():
    assert Scope().parent_scope is None
    assert Scope(0).parent_scope == 0


def test_type_mismatch_error():
    span = Span(1, 4)
    err = CheckError.type_mismatch(INT_ID, BOOL_ID, span)
    assert err.kind == TypeMismatch(expected=INT_ID, got=BOOL_ID)
    assert err.span == span


def test_variable_not_found_error_is_raisable():
    span = Span(0, 3)
    with pytest.raises(CheckError) as info:
        raise CheckError.variable_not_found("foo", span)
    assert info.value.kind == VariableNotFound("foo")
    assert info.value.span == span
    assert "foo" in str(info.value)


def test_type_not_found_error():
    span = Span(5, 8)
    err = CheckError.type_not_found(TypeName("Str"), span)
    assert err.kind == TypeNotFound(TypeName("Str"))
    assert "Str" in str(err)


def test_check_errors_compare_by_kind_and_span():
    a = CheckError.variable_not_found("x", Span(0, 1))
    b = CheckError.variable_not_found("x", Span(0, 1))
    c = CheckError.variable_not_found("x", Span(1, 2))
    assert a == b
    assert hash(a) == hash(b)
    assert not a == c


def test_new_checker_has_builtin_types():
    checker = Checker()
    assert checker.types[INT_ID] == ScopedType.named("Int", 0)
    assert checker.types[BOOL_ID] == ScopedType.named("Bool", 0)
    assert checker.types[UNIT_ID] == ScopedType.named("Unit", 0)
    assert len(checker.types) == 3


def test_new_checker_starts_in_root_scope():
    checker = Checker()
    assert checker.cur_scope == 0
    assert checker.scopes == [Scope(None)]
    assert checker.variables == []
    assert checker.type_errors == []


def test_checkers_do_not_share_state():
    first = Checker()
    second = Checker()
    first.variables.append(ScopedVariable("x", INT_ID, 0))
    first.scopes.append(Scope(0))
    assert second.variables == []
    assert len(second.scopes) == 1