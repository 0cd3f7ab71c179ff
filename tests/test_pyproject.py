from pathlib import Path

import pytest

from pyi_stubgen.pyproject import Maturin, Project, PyProject, Tool


def _write(tmp_path: Path, text: str, name: str = "pyproject.toml") -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_rejects_other_file_names(tmp_path):
    path = _write(tmp_path, '[project]\nname = "pure"\n', name="Cargo.toml")
    with pytest.raises(ValueError, match="is not a pyproject.toml"):
        PyProject.parse_toml(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        PyProject.parse_toml(tmp_path / "pyproject.toml")


def test_pure_project_uses_project_name(tmp_path):
    path = _write(tmp_path, '[project]\nname = "pure"\n')
    pyproject = PyProject.parse_toml(path)
    assert pyproject.project == Project(name="pure")
    assert pyproject.tool is None
    assert pyproject.module_name() == "pure"
    assert pyproject.python_source() is None
    assert pyproject.toml_path == path


def test_mixed_project_reads_maturin_table(tmp_path):
    path = _write(
        tmp_path,
        '[project]\nname = "mixed"\n\n'
        '[tool.maturin]\npython-source = "python"\nmodule-name = "mixed.main_mod"\n',
    )
    pyproject = PyProject.parse_toml(path)
    assert pyproject.tool == Tool(
        maturin=Maturin(python_source="python", module_name="mixed.main_mod")
    )
    assert pyproject.module_name() == "mixed.main_mod"
    assert pyproject.python_source() == tmp_path / "python"


def test_tool_without_maturin(tmp_path):
    path = _write(tmp_path, '[project]\nname = "pure"\n\n[tool.other]\nkey = 1\n')
    pyproject = PyProject.parse_toml(path)
    assert pyproject.tool == Tool(maturin=None)
    assert pyproject.module_name() == "pure"
    assert pyproject.python_source() is None


def test_maturin_without_module_name_falls_back(tmp_path):
    path = _write(
        tmp_path, '[project]\nname = "pure"\n\n[tool.maturin]\npython-source = "src"\n'
    )
    pyproject = PyProject.parse_toml(path)
    assert pyproject.module_name() == "pure"
    assert pyproject.python_source() == tmp_path / "src"


def test_missing_project_table(tmp_path):
    path = _write(tmp_path, '[tool.maturin]\nmodule-name = "x"\n')
    with pytest.raises(ValueError):
        PyProject.parse_toml(path)


def test_missing_project_name(tmp_path):
    path = _write(tmp_path, '[project]\nversion = "1.0"\n')
    with pytest.raises(ValueError, match="project.name"):
        PyProject.parse_toml(path)


def test_wrong_type_for_module_name(tmp_path):
    path = _write(tmp_path, '[project]\nname = "p"\n\n[tool.maturin]\nmodule-name = 3\n')
    with pytest.raises(ValueError, match="module-name"):
        PyProject.parse_toml(path)


def test_invalid_toml(tmp_path):
    path = _write(tmp_path, "[project\nname = \n")
    with pytest.raises(ValueError):
        PyProject.parse_toml(path)


def test_relative_path_python_source():
    pyproject = PyProject(
        project=Project(name="p"),
        tool=Tool(maturin=Maturin(python_source="python")),
        toml_path=Path("pyproject.toml"),
    )
    assert pyproject.python_source() == Path("python")