"""
Rust AST node definitions.

These nodes represent the structure of a Rust source file for code
generation. They are built from the IR module tree and then serialized
to source code.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class RustNode:
    """Base class for all Rust AST nodes."""

    pass


@dataclass
class UseStatement(RustNode):
    """Represents a use declaration."""

    path: str = ""

    def to_string(self) -> str:
        return f"use {self.path};"


@dataclass
class RustParameter(RustNode):
    """Represents a function parameter."""

    name: str = ""
    type_name: str = ""


@dataclass
class RustField(RustNode):
    """Represents a named struct field."""

    name: str = ""
    type_name: str = ""
    is_pub: bool = True
    docs: list[str] = field(default_factory=list)


@dataclass
class RustStruct(RustNode):
    """Represents a struct declaration."""

    name: str = ""
    is_pub: bool = True
    derives: list[str] = field(default_factory=list)
    attributes: list[str] = field(default_factory=list)
    fields: list[RustField] = field(default_factory=list)
    docs: list[str] = field(default_factory=list)


@dataclass
class RustFunction(RustNode):
    """Represents a function or associated function."""

    name: str = ""
    is_pub: bool = True
    parameters: list[RustParameter] = field(default_factory=list)
    return_type: str | None = None
    body: list[str] = field(default_factory=list)
    docs: list[str] = field(default_factory=list)


@dataclass
class RustImpl(RustNode):
    """Represents an inherent impl block."""

    type_name: str = ""
    functions: list[RustFunction] = field(default_factory=list)


@dataclass
class RustModule(RustNode):
    """Represents an inline module (``mod name { ... }``)."""

    name: str = ""
    is_pub: bool = True
    attributes: list[str] = field(default_factory=list)  # Outer, e.g. #[cfg(...)]
    inner_attributes: list[str] = field(default_factory=list)  # Inner, e.g. #![allow(...)]
    uses: list[UseStatement] = field(default_factory=list)
    structs: list[RustStruct] = field(default_factory=list)
    impls: list[RustImpl] = field(default_factory=list)
    submodules: list[RustModule] = field(default_factory=list)


@dataclass
class RustFile(RustNode):
    """Represents a complete Rust source file."""

    header: str = ""
    modules: list[RustModule] = field(default_factory=list)
