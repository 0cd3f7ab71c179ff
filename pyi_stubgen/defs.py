"""Definitions that render the parts of a ``*.pyi`` stub file."""

from __future__ import annotations

from dataclasses import dataclass, field

from .info import (
    ArgInfo,
    MemberInfo,
    MethodInfo,
    NewInfo,
    PyClassInfo,
    PyEnumInfo,
    PyErrorInfo,
    PyFunctionInfo,
    PyVariableInfo,
    SignatureArg,
    SignatureKind,
)
from .typeinfo import ModuleRef, TypeInfo

INDENT = "    "


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part.removesuffix("\r") for part in parts]


def _doc_block(doc: str, indent: str) -> str:
    if not doc:
        return ""
    body = "".join(f"{indent}{line}\n" for line in _lines(doc))
    return f'{indent}r"""\n{body}{indent}"""\n'


@dataclass
class Arg:
    """An argument in a signature."""

    name: str
    type: TypeInfo
    signature: SignatureArg | None = None

    @classmethod
    def from_info(cls, info: ArgInfo) -> Arg:
        return cls(name=info.name, type=info.type, signature=info.signature)

    def imports(self) -> set[ModuleRef]:
        return set(self.type.imports)

    def __str__(self) -> str:
        kind = None if self.signature is None else self.signature.kind
        if kind is SignatureKind.ASSIGN:
            return f"{self.name}:{self.type}={self.signature.default}"
        if kind is SignatureKind.STAR:
            return "*"
        if kind is SignatureKind.ARGS:
            return f"*{self.name}"
        if kind is SignatureKind.KEYWORDS:
            return f"**{self.name}"
        return f"{self.name}:{self.type}"


@dataclass
class MemberDef:
    """An annotated attribute of a class."""

    name: str
    type: TypeInfo

    @classmethod
    def from_info(cls, info: MemberInfo) -> MemberDef:
        return cls(name=info.name, type=info.type)

    def imports(self) -> set[ModuleRef]:
        return set(self.type.imports)

    def __str__(self) -> str:
        return f"{INDENT}{self.name}: {self.type}\n"


@dataclass
class NewDef:
    """The ``__new__`` method of a class."""

    args: list[Arg] = field(default_factory=list)

    @classmethod
    def from_info(cls, info: NewInfo) -> NewDef:
        return cls(args=[Arg.from_info(arg) for arg in info.args])

    def imports(self) -> set[ModuleRef]:
        return set().union(*(arg.imports() for arg in self.args))

    def __str__(self) -> str:
        args = ", ".join(str(arg) for arg in self.args)
        return f"{INDENT}def __new__(cls,{args}): ...\n"


@dataclass
class MethodDef:
    """A method of a class."""

    name: str
    args: list[Arg] = field(default_factory=list)
    return_type: TypeInfo = field(default_factory=TypeInfo.none)
    doc: str = ""
    is_static: bool = False
    is_class: bool = False

    @classmethod
    def from_info(cls, info: MethodInfo) -> MethodDef:
        return cls(
            name=info.name,
            args=[Arg.from_info(arg) for arg in info.args],
            return_type=info.return_type,
            doc=info.doc,
            is_static=info.is_static,
            is_class=info.is_class,
        )

    def imports(self) -> set[ModuleRef]:
        return set(self.return_type.imports).union(*(arg.imports() for arg in self.args))

    def __str__(self) -> str:
        head = ""
        if self.is_static:
            head = f"{INDENT}@staticmethod\n"
            params: list[str] = []
        elif self.is_class:
            head = f"{INDENT}@classmethod\n"
            params = ["cls"]
        else:
            params = ["self"]
        params.extend(str(arg) for arg in self.args)
        body_indent = INDENT * 2
        return (
            f"{head}{INDENT}def {self.name}({', '.join(params)}) -> {self.return_type}:\n"
            f"{_doc_block(self.doc, body_indent)}{body_indent}...\n\n"
        )


@dataclass
class ClassDef:
    """A class, with the members and methods gathered for it."""

    name: str
    doc: str = ""
    new: NewDef | None = None
    members: list[MemberDef] = field(default_factory=list)
    methods: list[MethodDef] = field(default_factory=list)

    @classmethod
    def from_info(cls, info: PyClassInfo) -> ClassDef:
        """Start a class from its declaration; methods are merged in later."""
        return cls(
            name=info.pyclass_name,
            doc=info.doc,
            members=[MemberDef.from_info(member) for member in info.members],
        )

    def imports(self) -> set[ModuleRef]:
        result: set[ModuleRef] = set()
        if self.new is not None:
            result |= self.new.imports()
        for member in self.members:
            result |= member.imports()
        for method in self.methods:
            result |= method.imports()
        return result

    def __str__(self) -> str:
        parts = [f"class {self.name}:\n", _doc_block(self.doc.strip(), INDENT)]
        parts.extend(str(member) for member in self.members)
        if self.new is not None:
            parts.append(str(self.new))
        parts.extend(str(method) for method in self.methods)
        if not self.members and not self.methods:
            parts.append(f"{INDENT}...\n")
        parts.append("\n")
        return "".join(parts)


@dataclass
class EnumDef:
    """An enumeration rendered as an ``Enum`` subclass."""

    name: str
    doc: str = ""
    variants: tuple[str, ...] = ()

    @classmethod
    def from_info(cls, info: PyEnumInfo) -> EnumDef:
        return cls(name=info.pyclass_name, doc=info.doc, variants=tuple(info.variants))

    def __str__(self) -> str:
        variants = "".join(f"{INDENT}{variant} = auto()\n" for variant in self.variants)
        return (
            f"class {self.name}(Enum):\n"
            f"{_doc_block(self.doc.strip(), INDENT)}{variants}\n"
        )


@dataclass
class ErrorDef:
    """An exception class."""

    name: str
    base: str

    @classmethod
    def from_info(cls, info: PyErrorInfo) -> ErrorDef:
        return cls(name=info.name, base=info.base)

    def __str__(self) -> str:
        return f"class {self.name}({self.base}): ...\n"


@dataclass
class FunctionDef:
    """A module-level function."""

    name: str
    args: list[Arg] = field(default_factory=list)
    return_type: TypeInfo = field(default_factory=TypeInfo.none)
    doc: str = ""

    @classmethod
    def from_info(cls, info: PyFunctionInfo) -> FunctionDef:
        return cls(
            name=info.name,
            args=[Arg.from_info(arg) for arg in info.args],
            return_type=info.return_type,
            doc=info.doc,
        )

    def imports(self) -> set[ModuleRef]:
        return set(self.return_type.imports).union(*(arg.imports() for arg in self.args))

    def __str__(self) -> str:
        args = ", ".join(str(arg) for arg in self.args)
        return (
            f"def {self.name}({args}) -> {self.return_type}:\n"
            f"{_doc_block(self.doc, INDENT)}{INDENT}...\n\n"
        )


@dataclass
class VariableDef:
    """A module-level variable annotation."""

    name: str
    type: TypeInfo

    @classmethod
    def from_info(cls, info: PyVariableInfo) -> VariableDef:
        return cls(name=info.name, type=info.type)

    def __str__(self) -> str:
        return f"{self.name}: {self.type}"