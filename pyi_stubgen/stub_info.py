"""Gathering of registered metadata into per-module stubs, and writing them out."""

from __future__ import annotations

import logging
from collections.abc import Hashable
from dataclasses import dataclass, field
from pathlib import Path

from .defs import ClassDef, EnumDef, ErrorDef, FunctionDef, MemberDef, MethodDef, NewDef, VariableDef
from .info import (
    PyClassInfo,
    PyEnumInfo,
    PyErrorInfo,
    PyFunctionInfo,
    PyMethodsInfo,
    PyVariableInfo,
    Registry,
    default_registry,
)
from .pyproject import PyProject
from .typeinfo import ModuleRef

logger = logging.getLogger(__name__)

_HEADER = "# This file is automatically generated by pyi_stubgen\n# ruff: noqa: E501, F401\n\n"


@dataclass
class Module:
    """Everything that goes into the ``*.pyi`` file of one (sub-)module."""

    name: str = ""
    default_module_name: str = ""
    classes: dict[Hashable, ClassDef] = field(default_factory=dict)
    enums: dict[Hashable, EnumDef] = field(default_factory=dict)
    functions: dict[str, FunctionDef] = field(default_factory=dict)
    errors: dict[str, ErrorDef] = field(default_factory=dict)
    variables: dict[str, VariableDef] = field(default_factory=dict)
    submodules: set[str] = field(default_factory=set)

    def imports(self) -> set[ModuleRef]:
        """Modules referred to by the classes and functions of this module."""
        result: set[ModuleRef] = set()
        for class_def in self.classes.values():
            result |= class_def.imports()
        for function in self.functions.values():
            result |= function.imports()
        return result

    def __str__(self) -> str:
        parts = [_HEADER]
        for ref in sorted(self.imports()):
            name = ref.get() or self.default_module_name
            if name != self.name:
                parts.append(f"import {name}\n")
        parts.extend(f"from . import {sub}\n" for sub in sorted(self.submodules))
        if self.enums:
            parts.append("from enum import Enum, auto\n")
        parts.append("\n")

        parts.extend(f"{self.variables[key]}\n" for key in sorted(self.variables))
        parts.extend(str(c) for c in sorted(self.classes.values(), key=lambda c: c.name))
        parts.extend(str(e) for e in sorted(self.enums.values(), key=lambda e: e.name))
        parts.extend(str(self.functions[key]) for key in sorted(self.functions))
        parts.extend(f"{self.errors[key]}\n" for key in sorted(self.errors))
        return "".join(parts)


@dataclass
class StubInfo:
    """Stubs of every module of a project, keyed by module name."""

    modules: dict[str, Module]
    pyproject: PyProject

    @classmethod
    def from_pyproject_toml(
        cls, path: str | Path, registry: Registry | None = None
    ) -> StubInfo:
        """Gather the records of ``registry`` for the project described at ``path``."""
        return build_stub_info(PyProject.parse_toml(path), registry)

    def generate(self) -> list[Path]:
        """Write one stub file per module and return the paths written."""
        root = self.pyproject.python_source()
        if root is None:
            root = self.pyproject.toml_path.parent
        written: list[Path] = []
        for name, module in self.modules.items():
            rel = Path(*name.split("."))
            if module.submodules:
                dest = root / rel / "__init__.pyi"
            else:
                dest = root / rel.with_name(f"{rel.name}.pyi")
            dest.parent.mkdir(parents=True, exist_ok=True)
            dest.write_text(str(module), encoding="utf-8")
            logger.info("Generate stub file of a module `%s` at %s", name, dest)
            written.append(dest)
        return written


class _Builder:
    def __init__(self, pyproject: PyProject) -> None:
        self.pyproject = pyproject
        self.default_module_name = pyproject.module_name()
        self.modules: dict[str, Module] = {}

    def module(self, name: str | None) -> Module:
        name = self.default_module_name if name is None else name
        module = self.modules.setdefault(name, Module())
        module.name = name
        module.default_module_name = self.default_module_name
        return module

    def register_submodules(self) -> None:
        children: dict[str, set[str]] = {}
        for name in self.modules:
            *parent, child = name.split(".")
            if parent:
                children.setdefault(".".join(parent), set()).add(child)
        for parent, names in children.items():
            if parent in self.modules:
                self.modules[parent].submodules |= names

    def add_methods(self, info: PyMethodsInfo) -> None:
        for name in sorted(self.modules):
            entry = self.modules[name].classes.get(info.struct_id)
            if entry is None:
                continue
            entry.members.extend(MemberDef.from_info(getter) for getter in info.getters)
            entry.methods.extend(MethodDef.from_info(method) for method in info.methods)
            if info.new is not None:
                entry.new = NewDef.from_info(info.new)
            return
        raise LookupError(f"missing class for struct_id = {info.struct_id!r}")

    def build(self, registry: Registry) -> StubInfo:
        for info in registry.iter_of(PyClassInfo):
            self.module(info.module).classes[info.struct_id] = ClassDef.from_info(info)
        for info in registry.iter_of(PyEnumInfo):
            self.module(info.module).enums[info.enum_id] = EnumDef.from_info(info)
        for info in registry.iter_of(PyFunctionInfo):
            self.module(info.module).functions[info.name] = FunctionDef.from_info(info)
        for info in registry.iter_of(PyErrorInfo):
            self.module(info.module).errors[info.name] = ErrorDef.from_info(info)
        for info in registry.iter_of(PyVariableInfo):
            self.module(info.module).variables[info.name] = VariableDef.from_info(info)
        for info in registry.iter_of(PyMethodsInfo):
            self.add_methods(info)
        self.register_submodules()
        modules = {name: self.modules[name] for name in sorted(self.modules)}
        return StubInfo(modules=modules, pyproject=self.pyproject)


def build_stub_info(pyproject: PyProject, registry: Registry | None = None) -> StubInfo:
    """Merge the records of ``registry`` into modules of the project ``pyproject``."""
    return _Builder(pyproject).build(default_registry if registry is None else registry)