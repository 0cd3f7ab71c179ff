"""Reading of the ``[project]`` and ``[tool.maturin]`` tables of ``pyproject.toml``."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


def _table(value: Any, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"{where} must be a table")
    return value


def _optional_str(table: dict[str, Any], key: str, where: str) -> str | None:
    value = table.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"{where}.{key} must be a string")
    return value


@dataclass(frozen=True)
class Maturin:
    """The ``[tool.maturin]`` table."""

    python_source: str | None = None
    module_name: str | None = None

    @classmethod
    def _from_table(cls, value: Any) -> Maturin:
        table = _table(value, "tool.maturin")
        return cls(
            python_source=_optional_str(table, "python-source", "tool.maturin"),
            module_name=_optional_str(table, "module-name", "tool.maturin"),
        )


@dataclass(frozen=True)
class Tool:
    """The ``[tool]`` table, of which only ``maturin`` is read."""

    maturin: Maturin | None = None

    @classmethod
    def _from_table(cls, value: Any) -> Tool:
        table = _table(value, "tool")
        maturin = table.get("maturin")
        return cls(maturin=None if maturin is None else Maturin._from_table(maturin))


@dataclass(frozen=True)
class Project:
    """The ``[project]`` table."""

    name: str

    @classmethod
    def _from_table(cls, value: Any) -> Project:
        table = _table(value, "project")
        if "name" not in table:
            raise ValueError("project.name is missing")
        name = table["name"]
        if not isinstance(name, str):
            raise ValueError("project.name must be a string")
        return cls(name=name)


@dataclass(frozen=True)
class PyProject:
    """The parts of ``pyproject.toml`` that decide where stubs go."""

    project: Project
    tool: Tool | None = None
    toml_path: Path = field(default_factory=Path)

    @classmethod
    def parse_toml(cls, path: str | Path) -> PyProject:
        """Read ``path``, which must be a file named ``pyproject.toml``."""
        path = Path(path)
        if path.name != "pyproject.toml":
            raise ValueError(f"{path} is not a pyproject.toml")
        with path.open("rb") as handle:
            data = tomllib.load(handle)
        if "project" not in data:
            raise ValueError("missing [project] table")
        tool = data.get("tool")
        return cls(
            project=Project._from_table(data["project"]),
            tool=None if tool is None else Tool._from_table(tool),
            toml_path=path,
        )

    def _maturin(self) -> Maturin | None:
        return None if self.tool is None else self.tool.maturin

    def module_name(self) -> str:
        """``tool.maturin.module-name`` if set, else ``project.name``."""
        maturin = self._maturin()
        if maturin is not None and maturin.module_name is not None:
            return maturin.module_name
        return self.project.name

    def python_source(self) -> Path | None:
        """Directory of Python sources for a mixed project, relative to the toml file."""
        maturin = self._maturin()
        if maturin is None or maturin.python_source is None:
            return None
        return self.toml_path.parent / maturin.python_source