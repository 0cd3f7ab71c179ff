import collections
import datetime
import pathlib
import typing

import pytest

from pyi_stubgen.stub_types import (
    numpy_array,
    numpy_untyped_array,
    register_stub_type,
    type_input,
    type_output,
)
from pyi_stubgen.typeinfo import ModuleRef, TypeInfo


def refs(*names):
    return frozenset(ModuleRef.named(n) for n in names)


@pytest.mark.parametrize(
    "info, name, imports",
    [
        (type_input(bool), "builtins.bool", refs("builtins")),
        (type_input(str), "builtins.str", refs("builtins")),
        (type_input(list[int]), "typing.Sequence[builtins.int]", refs("typing", "builtins")),
        (type_output(list[int]), "builtins.list[builtins.int]", refs("builtins")),
        (
            type_input(dict[int, str]),
            "typing.Mapping[builtins.int, builtins.str]",
            refs("typing", "builtins"),
        ),
        (type_output(dict[int, str]), "builtins.dict[builtins.int, builtins.str]", refs("builtins")),
        (
            type_input(collections.OrderedDict[int, str]),
            "typing.Mapping[builtins.int, builtins.str]",
            refs("typing", "builtins"),
        ),
        (
            type_output(collections.OrderedDict[int, str]),
            "builtins.dict[builtins.int, builtins.str]",
            refs("builtins"),
        ),
        (
            type_input(dict[int, list[int]]),
            "typing.Mapping[builtins.int, typing.Sequence[builtins.int]]",
            refs("builtins", "typing"),
        ),
        (
            type_output(dict[int, list[int]]),
            "builtins.dict[builtins.int, builtins.list[builtins.int]]",
            refs("builtins"),
        ),
        (type_input(set[int]), "builtins.set[builtins.int]", refs("builtins")),
        (type_input(frozenset[int]), "builtins.set[builtins.int]", refs("builtins")),
    ],
)
def test_source_cases(info, name, imports):
    assert info.name == name
    assert info.imports == imports


def test_path_input_and_output():
    assert type_output(pathlib.Path) == TypeInfo.builtin("str")
    info = type_input(pathlib.Path)
    assert info.name == "builtins.str | os.PathLike | pathlib.Path"
    assert info.imports == refs("builtins", "os", "pathlib")


def test_none():
    assert type_output(None) == TypeInfo.none()
    assert type_output(type(None)) == TypeInfo.none()
    assert type_output(tuple[()]) == TypeInfo.none()


def test_optional():
    for tp in (typing.Optional[str], str | None):
        info = type_input(tp)
        assert info.name == "typing.Optional[builtins.str]"
        assert info.imports == refs("typing", "builtins")


def test_optional_uses_input_of_inner():
    assert type_input(typing.Optional[list[int]]).name == "typing.Optional[typing.Sequence[builtins.int]]"


def test_union_without_none():
    assert type_output(int | str) == TypeInfo.builtin("int") | TypeInfo.builtin("str")


def test_tuple():
    info = type_output(tuple[int, str])
    assert info.name == "tuple[builtins.int, builtins.str]"
    assert info.imports == refs("builtins")


def test_tuple_length_limits():
    with pytest.raises(TypeError):
        type_output(tuple[int])
    with pytest.raises(TypeError):
        type_output(tuple[(int,) * 10])


def test_datetime_types():
    assert type_output(datetime.datetime) == TypeInfo.with_module("datetime.datetime", "datetime")
    assert type_output(datetime.timezone) == TypeInfo.with_module("datetime.tzinfo", "datetime")
    assert type_input(datetime.timedelta) == TypeInfo.with_module("datetime.timedelta", "datetime")


def test_bare_containers_are_unqualified():
    assert type_output(dict) == TypeInfo.unqualified("dict")
    assert type_output(bytearray).imports == frozenset()


def test_any():
    assert type_output(typing.Any) == TypeInfo.any()
    assert type_input(object) == TypeInfo.any()


def test_unknown_type_raises():
    class Unknown:
        pass

    with pytest.raises(TypeError):
        type_output(Unknown)
    with pytest.raises(TypeError):
        type_input(list[Unknown])


def test_registered_class():
    class Placeholder:
        pass

    register_stub_type(Placeholder, TypeInfo.with_module("Placeholder", ModuleRef.default()))
    info = type_output(list[Placeholder])
    assert info.name == "builtins.list[Placeholder]"
    assert info.imports == frozenset({ModuleRef.named("builtins"), ModuleRef.default()})
    assert type_input(Placeholder) == type_output(Placeholder)


def test_registered_with_separate_input():
    class Wrapper:
        pass

    output = TypeInfo.builtin("int")
    accepted = TypeInfo.builtin("int") | TypeInfo.builtin("str")
    register_stub_type(Wrapper, output, accepted)
    assert type_output(Wrapper) == output
    assert type_input(Wrapper) == accepted


def test_numpy_array():
    info = numpy_array("float64")
    assert info.name == "numpy.typing.NDArray[numpy.float64]"
    assert info.imports == refs("numpy", "numpy.typing")


def test_numpy_array_rejects_unknown_dtype():
    with pytest.raises(ValueError):
        numpy_array("float16")


def test_numpy_untyped_array():
    info = numpy_untyped_array()
    assert info.name == "numpy.typing.NDArray[typing.Any]"
    assert info.imports == refs("numpy.typing", "typing")