"""Exception classes whose stubs derive from Python's builtin exceptions."""

from __future__ import annotations

from .info import PyErrorInfo, Registry, default_registry

_NATIVE_EXCEPTIONS: frozenset[type] = frozenset(
    {
        ArithmeticError,
        AssertionError,
        AttributeError,
        BaseException,
        BlockingIOError,
        BrokenPipeError,
        BufferError,
        BytesWarning,
        ChildProcessError,
        ConnectionAbortedError,
        ConnectionError,
        ConnectionRefusedError,
        ConnectionResetError,
        DeprecationWarning,
        EOFError,
        EnvironmentError,
        Exception,
        FileExistsError,
        FileNotFoundError,
        FloatingPointError,
        FutureWarning,
        GeneratorExit,
        IOError,
        ImportError,
        ImportWarning,
        IndexError,
        InterruptedError,
        IsADirectoryError,
        KeyError,
        KeyboardInterrupt,
        LookupError,
        MemoryError,
        ModuleNotFoundError,
        NameError,
        NotADirectoryError,
        NotImplementedError,
        OSError,
        OverflowError,
        PendingDeprecationWarning,
        PermissionError,
        ProcessLookupError,
        RecursionError,
        ReferenceError,
        ResourceWarning,
        RuntimeError,
        RuntimeWarning,
        StopAsyncIteration,
        StopIteration,
        SyntaxError,
        SyntaxWarning,
        SystemError,
        SystemExit,
        TimeoutError,
        TypeError,
        UnboundLocalError,
        UnicodeDecodeError,
        UnicodeEncodeError,
        UnicodeError,
        UnicodeTranslateError,
        UnicodeWarning,
        UserWarning,
        ValueError,
        Warning,
        ZeroDivisionError,
    }
)


def native_exception_name(exc_type: type) -> str:
    """Name of a builtin exception class as written in stubs."""
    if exc_type not in _NATIVE_EXCEPTIONS:
        raise TypeError(f"{exc_type!r} is not a native Python exception")
    return exc_type.__name__


def create_exception(
    module: str,
    name: str,
    base: type[BaseException],
    doc: str = "",
    registry: Registry | None = None,
) -> type[BaseException]:
    """Create exception class ``name`` in ``module`` deriving from ``base`` and register it."""
    base_name = native_exception_name(base)
    exc_type = type(name, (base,), {"__doc__": doc or None, "__module__": module})
    target = default_registry if registry is None else registry
    target.submit(PyErrorInfo(name=name, module=module, base=base_name))
    return exc_type