"""
Schema AST module.

Contains the node definitions and loader for resource specifications.
"""

from __future__ import annotations

from .nodes import (
    LIST_TYPE,
    MAP_TYPE,
    PrimitiveType,
    PropertySpec,
    ResourceSpecification,
    TypeSpec,
    UpdateType,
)
from .parser import SchemaLoader

__all__ = [
    "LIST_TYPE",
    "MAP_TYPE",
    "PrimitiveType",
    "PropertySpec",
    "ResourceSpecification",
    "SchemaLoader",
    "TypeSpec",
    "UpdateType",
]
