import pytest

from pyi_stubgen.info import (
    ArgInfo,
    MethodInfo,
    NewInfo,
    PyClassInfo,
    PyErrorInfo,
    PyFunctionInfo,
    PyVariableInfo,
    Registry,
    SignatureArg,
    SignatureKind,
    compare_op_type_input,
    module_variable,
    no_return_type_output,
)
from pyi_stubgen.typeinfo import TypeInfo


def test_compare_op_is_int():
    assert compare_op_type_input() == TypeInfo.builtin("int")
    assert compare_op_type_input().name == "builtins.int"


def test_no_return_is_none():
    assert no_return_type_output() == TypeInfo.none()


def test_signature_arg_equality():
    assert SignatureArg(SignatureKind.ASSIGN, "2") == SignatureArg(SignatureKind.ASSIGN, "2")
    assert SignatureArg(SignatureKind.ASSIGN, "2") != SignatureArg(SignatureKind.ASSIGN, "3")
    assert SignatureArg(SignatureKind.STAR) == SignatureArg(SignatureKind.STAR)
    assert SignatureArg(SignatureKind.ARGS) != SignatureArg(SignatureKind.KEYWORDS)


def test_signature_arg_default_rules():
    with pytest.raises(ValueError):
        SignatureArg(SignatureKind.ASSIGN)
    with pytest.raises(ValueError):
        SignatureArg(SignatureKind.IDENT, "1")


def test_sequences_are_frozen_to_tuples():
    arg = ArgInfo("x", TypeInfo.builtin("int"))
    method = MethodInfo("foo", args=[arg])
    assert method.args == (arg,)
    assert NewInfo(args=[arg]).args == (arg,)
    assert method.return_type == TypeInfo.none()


def test_registry_keeps_order_per_kind():
    registry = Registry()
    first = PyFunctionInfo("a")
    second = PyFunctionInfo("b")
    cls = PyClassInfo(struct_id=object, pyclass_name="A")
    registry.submit(first)
    registry.submit(cls)
    registry.submit(second)
    assert list(registry.iter_of(PyFunctionInfo)) == [first, second]
    assert list(registry.iter_of(PyClassInfo)) == [cls]
    assert list(registry.iter_of(PyErrorInfo)) == []


def test_registry_rejects_other_objects():
    registry = Registry()
    with pytest.raises(TypeError):
        registry.submit(ArgInfo("x", TypeInfo.none()))


def test_module_variable_from_python_type():
    registry = Registry()
    info = module_variable("pure", "MY_CONSTANT", int, registry)
    assert info == PyVariableInfo("MY_CONSTANT", "pure", TypeInfo.builtin("int"))
    assert list(registry.iter_of(PyVariableInfo)) == [info]


def test_module_variable_from_type_info():
    registry = Registry()
    tinfo = TypeInfo.with_module("pathlib.Path", "pathlib")
    info = module_variable("pure", "ROOT", tinfo, registry)
    assert info.type is tinfo
    assert info.module == "pure"