"""Metadata records describing an extension module, and the registry collecting them."""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .stub_types import type_input, type_output
from .typeinfo import TypeInfo


def compare_op_type_input() -> TypeInfo:
    """Argument type of the comparison operator passed to ``__richcmp__``."""
    return type_input(int)


def no_return_type_output() -> TypeInfo:
    """Return type of a function that returns nothing."""
    return TypeInfo.none()


def _freeze(obj: Any, *names: str) -> None:
    for name in names:
        object.__setattr__(obj, name, tuple(getattr(obj, name)))


class SignatureKind(Enum):
    """How an argument appears in an explicit signature."""

    IDENT = "ident"
    ASSIGN = "assign"
    STAR = "star"
    ARGS = "args"
    KEYWORDS = "keywords"


@dataclass(frozen=True)
class SignatureArg:
    """One entry of an explicit signature; ``default`` is the rendered default of an assignment."""

    kind: SignatureKind
    default: str | None = None

    def __post_init__(self) -> None:
        if self.kind is SignatureKind.ASSIGN and self.default is None:
            raise ValueError("an assigned signature argument needs a default")
        if self.kind is not SignatureKind.ASSIGN and self.default is not None:
            raise ValueError(f"a {self.kind.value} signature argument takes no default")


@dataclass(frozen=True)
class ArgInfo:
    """An argument of a function or method."""

    name: str
    type: TypeInfo
    signature: SignatureArg | None = None


@dataclass(frozen=True)
class MethodInfo:
    """A method of a class."""

    name: str
    args: tuple[ArgInfo, ...] = ()
    return_type: TypeInfo = field(default_factory=no_return_type_output)
    doc: str = ""
    is_static: bool = False
    is_class: bool = False

    def __post_init__(self) -> None:
        _freeze(self, "args")


@dataclass(frozen=True)
class MemberInfo:
    """A readable attribute of a class."""

    name: str
    type: TypeInfo


@dataclass(frozen=True)
class NewInfo:
    """The constructor of a class."""

    args: tuple[ArgInfo, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "args")


@dataclass(frozen=True)
class PyMethodsInfo:
    """Methods, getters and constructor attached to the class keyed by ``struct_id``."""

    struct_id: Hashable
    new: NewInfo | None = None
    getters: tuple[MemberInfo, ...] = ()
    methods: tuple[MethodInfo, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "getters", "methods")


@dataclass(frozen=True)
class PyClassInfo:
    """A class exposed to Python; ``module`` None means the default module."""

    struct_id: Hashable
    pyclass_name: str
    module: str | None = None
    doc: str = ""
    members: tuple[MemberInfo, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "members")


@dataclass(frozen=True)
class PyEnumInfo:
    """An enumeration exposed to Python."""

    enum_id: Hashable
    pyclass_name: str
    module: str | None = None
    doc: str = ""
    variants: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "variants")


@dataclass(frozen=True)
class PyFunctionInfo:
    """A module-level function."""

    name: str
    args: tuple[ArgInfo, ...] = ()
    return_type: TypeInfo = field(default_factory=no_return_type_output)
    doc: str = ""
    module: str | None = None

    def __post_init__(self) -> None:
        _freeze(self, "args")


@dataclass(frozen=True)
class PyErrorInfo:
    """An exception class and the name of its builtin base."""

    name: str
    module: str
    base: str


@dataclass(frozen=True)
class PyVariableInfo:
    """A module-level variable."""

    name: str
    module: str
    type: TypeInfo


_INFO_TYPES = (
    PyMethodsInfo,
    PyClassInfo,
    PyEnumInfo,
    PyFunctionInfo,
    PyErrorInfo,
    PyVariableInfo,
)


class Registry:
    """Collects metadata records in the order they are submitted."""

    def __init__(self) -> None:
        self._items: dict[type, list[Any]] = {}

    def submit(self, info: Any) -> Any:
        """Record ``info`` and return it."""
        if not isinstance(info, _INFO_TYPES):
            raise TypeError(f"cannot register {type(info).__name__}")
        self._items.setdefault(type(info), []).append(info)
        return info

    def iter_of(self, kind: type) -> Iterator[Any]:
        """Yield the records of class ``kind`` in submission order."""
        yield from list(self._items.get(kind, ()))


default_registry = Registry()


def module_variable(
    module: str,
    name: str,
    type_info: TypeInfo | Any,
    registry: Registry | None = None,
) -> PyVariableInfo:
    """Register a module-level variable; ``type_info`` may be a TypeInfo or a Python type."""
    resolved = type_info if isinstance(type_info, TypeInfo) else type_output(type_info)
    target = default_registry if registry is None else registry
    return target.submit(PyVariableInfo(name=name, module=module, type=resolved))