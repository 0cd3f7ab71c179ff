"""Map Python type annotations to the names used in generated stubs."""

from __future__ import annotations

import collections
import datetime
import operator
import pathlib
import types
import typing
from functools import reduce
from typing import Any, get_args, get_origin

from .typeinfo import ModuleRef, TypeInfo

_NONE_TYPE = type(None)
_TYPING = ModuleRef.named("typing")

_NUMPY_SCALARS = frozenset(
    {
        "int8",
        "int16",
        "int32",
        "int64",
        "uint8",
        "uint16",
        "uint32",
        "uint64",
        "float32",
        "float64",
        "complex64",
        "complex128",
    }
)


def _same(info: TypeInfo) -> tuple[TypeInfo, TypeInfo]:
    return info, info


def _datetime(name: str) -> tuple[TypeInfo, TypeInfo]:
    return _same(TypeInfo.with_module(f"datetime.{name}", "datetime"))


_PATH_INPUT = (
    TypeInfo.builtin("str")
    | TypeInfo.with_module("os.PathLike", "os")
    | TypeInfo.with_module("pathlib.Path", "pathlib")
)

_KNOWN: dict[Any, tuple[TypeInfo, TypeInfo]] = {
    bool: _same(TypeInfo.builtin("bool")),
    int: _same(TypeInfo.builtin("int")),
    float: _same(TypeInfo.builtin("float")),
    complex: _same(TypeInfo.builtin("complex")),
    str: _same(TypeInfo.builtin("str")),
    bytes: _same(TypeInfo.builtin("bytes")),
    pathlib.Path: (TypeInfo.builtin("str"), _PATH_INPUT),
    datetime.datetime: _datetime("datetime"),
    datetime.date: _datetime("date"),
    datetime.time: _datetime("time"),
    datetime.tzinfo: _datetime("tzinfo"),
    datetime.timezone: _datetime("tzinfo"),
    datetime.timedelta: _datetime("timedelta"),
    typing.Any: _same(TypeInfo.any()),
    object: _same(TypeInfo.any()),
    list: _same(TypeInfo.unqualified("list")),
    tuple: _same(TypeInfo.unqualified("tuple")),
    slice: _same(TypeInfo.unqualified("slice")),
    dict: _same(TypeInfo.unqualified("dict")),
    set: _same(TypeInfo.unqualified("set")),
    bytearray: _same(TypeInfo.unqualified("bytearray")),
    type: _same(TypeInfo.unqualified("type")),
}

_registered: dict[Any, tuple[TypeInfo, TypeInfo]] = {}


def register_stub_type(tp: Any, output: TypeInfo, input: TypeInfo | None = None) -> None:
    """Declare how ``tp`` is written in stubs.

    ``output`` is used for return values and members, ``input`` for
    arguments; ``input`` defaults to ``output``.
    """
    _registered[tp] = (output, output if input is None else input)


def type_output(tp: Any) -> TypeInfo:
    """Annotation of ``tp`` where it is returned or exposed as a member."""
    return _resolve(tp, as_input=False)


def type_input(tp: Any) -> TypeInfo:
    """Annotation of ``tp`` where it is accepted as an argument."""
    return _resolve(tp, as_input=True)


def numpy_array(dtype: str) -> TypeInfo:
    """``numpy.typing.NDArray`` of the scalar type named ``dtype``."""
    if dtype not in _NUMPY_SCALARS:
        raise ValueError(f"unsupported numpy scalar type: {dtype!r}")
    return TypeInfo(
        f"numpy.typing.NDArray[numpy.{dtype}]",
        frozenset({ModuleRef.named("numpy"), ModuleRef.named("numpy.typing")}),
    )


def numpy_untyped_array() -> TypeInfo:
    """``numpy.typing.NDArray`` with an unknown element type."""
    return TypeInfo(
        "numpy.typing.NDArray[typing.Any]",
        frozenset({ModuleRef.named("numpy.typing"), _TYPING}),
    )


def _lookup(tp: Any) -> tuple[TypeInfo, TypeInfo] | None:
    try:
        return _registered.get(tp) or _KNOWN.get(tp)
    except TypeError:
        return None


def _single_arg(tp: Any, args: tuple[Any, ...]) -> Any:
    if len(args) != 1:
        raise TypeError(f"{tp!r} must have exactly one type argument")
    return args[0]


def _resolve(tp: Any, as_input: bool) -> TypeInfo:
    if tp is None or tp is _NONE_TYPE:
        return TypeInfo.none()
    entry = _lookup(tp)
    if entry is not None:
        return entry[1] if as_input else entry[0]

    origin = get_origin(tp)
    args = get_args(tp)

    if origin is list:
        item = _single_arg(tp, args)
        if as_input:
            inner = _resolve(item, True)
            return TypeInfo(f"typing.Sequence[{inner.name}]", inner.imports | {_TYPING})
        return TypeInfo.list_of(_resolve(item, False))

    if origin in (set, frozenset):
        return TypeInfo.set_of(_resolve(_single_arg(tp, args), False))

    if origin in (dict, collections.OrderedDict):
        if len(args) != 2:
            raise TypeError(f"{tp!r} must have a key and a value type")
        key = _resolve(args[0], as_input)
        value = _resolve(args[1], as_input)
        if as_input:
            return TypeInfo(
                f"typing.Mapping[{key.name}, {value.name}]",
                key.imports | value.imports | {_TYPING},
            )
        return TypeInfo(
            f"builtins.dict[{key.name}, {value.name}]",
            key.imports | value.imports | {ModuleRef.named("builtins")},
        )

    if origin is tuple:
        if not args:
            return TypeInfo.none()
        if not 2 <= len(args) <= 9:
            raise TypeError(f"tuples of {len(args)} elements are not supported: {tp!r}")
        parts = [_resolve(arg, as_input) for arg in args]
        names = ", ".join(part.name for part in parts)
        return TypeInfo(f"tuple[{names}]", frozenset().union(*(p.imports for p in parts)))

    if origin is typing.Union or origin is types.UnionType:
        members = [arg for arg in args if arg is not _NONE_TYPE]
        combined = reduce(operator.or_, (_resolve(m, as_input) for m in members))
        if len(members) < len(args):
            return TypeInfo(f"typing.Optional[{combined.name}]", combined.imports | {_TYPING})
        return combined

    raise TypeError(f"no stub type registered for {tp!r}")