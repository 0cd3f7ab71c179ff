"""Rendering of default argument values for stub signatures."""

from __future__ import annotations

from typing import Any

_SCALARS = (str, bool, int, float)


def all_builtin_types(obj: Any) -> bool:
    """Whether ``obj`` is built only from str, bool, int, float, None, dict, list and tuple."""
    if obj is None or isinstance(obj, _SCALARS):
        return True
    if isinstance(obj, dict):
        return all(
            all_builtin_types(key) and all_builtin_types(value)
            for key, value in obj.items()
        )
    if isinstance(obj, (list, tuple)):
        return all(all_builtin_types(item) for item in obj)
    return False


def fmt_py_obj(obj: Any) -> str:
    """The ``repr`` of ``obj`` when it is made of builtin types, ``...`` otherwise."""
    if all_builtin_types(obj):
        try:
            return repr(obj)
        except Exception:
            pass
    return "..."