"""
Base class for AST-based code generation backends.

Defines the interface that language-specific AST backends implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..analyzer.ir_nodes import ModuleNode, TypeRef
from ..config import CodeGeneratorConfig


class AstBackend(ABC):
    """Abstract base class for AST-based code generation backends."""

    # Type mapping from specification primitives to language types
    TYPE_MAP: dict = {}

    def __init__(self, config: CodeGeneratorConfig):
        """
        Initialize the backend.

        Args:
            config: Code generation configuration
        """
        self.config = config

    @abstractmethod
    def generate(self, root: ModuleNode, header: str = "") -> str:
        """
        Generate code from the module tree.

        Args:
            root: Root of the finished module tree
            header: Comment block placed at the top of the file

        Returns:
            Generated code as a string
        """

    @abstractmethod
    def translate_type(self, type_ref: TypeRef) -> str:
        """
        Translate an IR type to a language-specific type string.

        Args:
            type_ref: The type reference

        Returns:
            Language-specific type string
        """
