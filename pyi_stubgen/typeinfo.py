"""Python type annotations together with the modules they need imported."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering


@total_ordering
@dataclass(frozen=True)
class ModuleRef:
    """A module that a stub file must import.

    A reference without a name stands for the default module of the
    extension, whose name is only known when the stubs are generated.
    Named references sort before the default one.
    """

    name: str | None = None

    @classmethod
    def named(cls, name: str) -> ModuleRef:
        """Reference to the module called ``name``."""
        return cls(name)

    @classmethod
    def default(cls) -> ModuleRef:
        """Placeholder for the extension's default module."""
        return cls(None)

    def get(self) -> str | None:
        """The module name, or None for the default module."""
        return self.name

    def _sort_key(self) -> tuple[int, str]:
        return (1, "") if self.name is None else (0, self.name)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ModuleRef):
            return NotImplemented
        return self._sort_key() < other._sort_key()


def _as_ref(module: ModuleRef | str) -> ModuleRef:
    return module if isinstance(module, ModuleRef) else ModuleRef.named(module)


_BUILTINS = ModuleRef.named("builtins")
_TYPING = ModuleRef.named("typing")


@dataclass(frozen=True)
class TypeInfo:
    """A type annotation as written in a stub, plus the modules it refers to."""

    name: str
    imports: frozenset[ModuleRef] = frozenset()

    def __str__(self) -> str:
        return self.name

    def __or__(self, other: TypeInfo) -> TypeInfo:
        if not isinstance(other, TypeInfo):
            return NotImplemented
        return TypeInfo(f"{self.name} | {other.name}", self.imports | other.imports)

    @classmethod
    def none(cls) -> TypeInfo:
        """The ``None`` annotation."""
        return cls("None")

    @classmethod
    def any(cls) -> TypeInfo:
        """The ``typing.Any`` annotation."""
        return cls("typing.Any", frozenset({_TYPING}))

    @classmethod
    def list_of(cls, item: TypeInfo) -> TypeInfo:
        """A ``list`` of ``item``."""
        return cls(f"builtins.list[{item.name}]", item.imports | {_BUILTINS})

    @classmethod
    def set_of(cls, item: TypeInfo) -> TypeInfo:
        """A ``set`` of ``item``."""
        return cls(f"builtins.set[{item.name}]", item.imports | {_BUILTINS})

    @classmethod
    def dict_of(cls, key: TypeInfo, value: TypeInfo) -> TypeInfo:
        """A mapping annotation built from ``key`` and ``value``."""
        return cls(
            f"builtins.set[{key.name}, {value.name}]",
            key.imports | value.imports | {_BUILTINS},
        )

    @classmethod
    def builtin(cls, name: str) -> TypeInfo:
        """A type from the ``builtins`` module, such as ``int`` or ``str``."""
        return cls(f"builtins.{name}", frozenset({_BUILTINS}))

    @classmethod
    def unqualified(cls, name: str) -> TypeInfo:
        """A type name used as is, with nothing to import."""
        return cls(name)

    @classmethod
    def with_module(cls, name: str, module: ModuleRef | str) -> TypeInfo:
        """A qualified type name whose module must be imported."""
        return cls(name, frozenset({_as_ref(module)}))