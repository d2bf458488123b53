"""
AST-based code generation backends.

The Rust backend builds a Rust AST from the module tree and serializes
it, instead of concatenating template strings.
"""

from __future__ import annotations

from .base import AstBackend
from .rust_ast_backend import RustAstBackend
from .rust_serializer import RustSerializer

__all__ = [
    "AstBackend",
    "RustAstBackend",
    "RustSerializer",
]
