# pyi_stubgen

`pyi_stubgen` writes Python type stub files (`*.pyi`) for compiled extension
modules. You describe what a module exposes: classes with their members and
methods, enums, functions, exceptions and module-level variables. The package
gathers those descriptions, groups them by module and writes one stub file per
module into your project's Python source tree.

It needs nothing outside the standard library and supports Python 3.11 and
later.

## Modules

- `pyi_stubgen.typeinfo`: `TypeInfo`, an annotation string together with the
  modules it needs imported, and `ModuleRef`, a reference to a named module or
  to the project's default module.
- `pyi_stubgen.stub_types`: `type_output(tp)` and `type_input(tp)` turn Python
  types into annotations for return values and for arguments.
  `register_stub_type(tp, output, input=None)` adds your own types.
  `numpy_array(dtype)` and `numpy_untyped_array()` give
  `numpy.typing.NDArray` annotations.
- `pyi_stubgen.util`: `fmt_py_obj(obj)` renders default values for
  signatures. `all_builtin_types(obj)` tells whether a value can be rendered.
- `pyi_stubgen.info`: the metadata records (`PyClassInfo`, `PyMethodsInfo`,
  `PyEnumInfo`, `PyFunctionInfo`, `PyErrorInfo`, `PyVariableInfo` and their
  parts `ArgInfo`, `SignatureArg`, `SignatureKind`, `MethodInfo`,
  `MemberInfo`, `NewInfo`), the `Registry` that collects them, and
  `module_variable(...)`.
- `pyi_stubgen.exception`: `create_exception(...)` builds an exception class
  and registers it. `native_exception_name(...)` checks that a base class is
  a builtin exception.
- `pyi_stubgen.pyproject`: `PyProject.parse_toml(path)` reads the `[project]`
  and `[tool.maturin]` tables.
- `pyi_stubgen.defs`: the `*Def` classes, whose `str()` is the stub text for
  one class, method, function, enum, exception or variable.
- `pyi_stubgen.stub_info`: `Module` (one stub file), `StubInfo` and
  `build_stub_info(pyproject, registry=None)`.

## Type annotations

```python
from pyi_stubgen.typeinfo import TypeInfo
from pyi_stubgen.stub_types import type_input, type_output

annotation = TypeInfo.builtin("int") | TypeInfo.none()
print(annotation)               # builtins.int | None

print(type_input(list[int]))    # typing.Sequence[builtins.int]
print(type_output(list[int]))   # builtins.list[builtins.int]
print(type_output(dict[int, str] | None))
# typing.Optional[builtins.dict[builtins.int, builtins.str]]
```

Each `TypeInfo` keeps the modules it needs in `imports`, so the generated stub
gets matching `import` lines. A type that `stub_types` does not know raises
`TypeError` until you register it with `register_stub_type`.

## Describing a module and generating stubs

```python
from pyi_stubgen.info import (
    ArgInfo, MemberInfo, MethodInfo, NewInfo, PyClassInfo, PyFunctionInfo,
    PyMethodsInfo, Registry, SignatureArg, SignatureKind, module_variable,
)
from pyi_stubgen.exception import create_exception
from pyi_stubgen.stub_info import StubInfo
from pyi_stubgen.stub_types import type_input, type_output
from pyi_stubgen.typeinfo import ModuleRef, TypeInfo
from pyi_stubgen.util import fmt_py_obj

registry = Registry()
a_type = TypeInfo.with_module("A", ModuleRef.default())

registry.submit(PyClassInfo(struct_id="A", pyclass_name="A",
                            members=(MemberInfo("x", type_output(int)),)))
registry.submit(PyMethodsInfo(struct_id="A",
                              new=NewInfo(args=(ArgInfo("x", type_input(int)),)),
                              methods=(MethodInfo("show_x"),)))
registry.submit(PyFunctionInfo(
    name="create_a",
    args=(ArgInfo("x", type_input(int),
                  SignatureArg(SignatureKind.ASSIGN, fmt_py_obj(2))),),
    return_type=a_type,
))
create_exception("pure", "MyError", RuntimeError, registry=registry)
module_variable("pure", "MY_CONSTANT", int, registry)

stubs = StubInfo.from_pyproject_toml("pyproject.toml", registry)
written = stubs.generate()   # list of the stub paths written
```

Methods are merged into the class whose `struct_id` matches. A
`PyMethodsInfo` without a matching class raises `LookupError`. When no
registry is passed, `module_variable`, `create_exception`,
`StubInfo.from_pyproject_toml` and `build_stub_info` use a shared default
registry.

## Where the stubs go

Stub placement follows `pyproject.toml`:

- The default module name is `tool.maturin.module-name` if set, otherwise
  `project.name`. Records without an explicit module go there.
- Stubs are written under `tool.maturin.python-source`, relative to
  `pyproject.toml`, if that is set. Otherwise they go in the directory of
  `pyproject.toml` itself.
- A module with submodules gets `<path>/__init__.pyi`, with a
  `from . import <child>` line for each submodule. Any other module gets
  `<path>.pyi`. Dotted module names become directories.

`PyProject.parse_toml` raises `ValueError` for a file that is not named
`pyproject.toml` or that lacks `project.name`.

## Default values

`fmt_py_obj` writes a value by its `repr` when the value is made only of
strings, booleans, integers, floats, `None`, and lists, tuples and dicts of
these. Anything else becomes `...`.

## What it does not do

`pyi_stubgen` does not inspect compiled modules or their source code. Every
class, method and function must be described by hand as records in a
`Registry`. The package has no command-line tool. You write stubs by calling
`StubInfo.generate()` from your own script.