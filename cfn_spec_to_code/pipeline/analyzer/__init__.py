"""
Analyzer module.

Contains name resolution, type resolution, and module tree building.
"""

from __future__ import annotations

from .ir_nodes import FieldDef, ModuleNode, StructDef, TypeKind, TypeRef
from .module_tree import ModuleTreeBuilder
from .name_resolver import NameResolver, TypeMetadata
from .type_resolver import TypeResolver

__all__ = [
    "FieldDef",
    "ModuleNode",
    "ModuleTreeBuilder",
    "NameResolver",
    "StructDef",
    "TypeKind",
    "TypeMetadata",
    "TypeRef",
    "TypeResolver",
]
