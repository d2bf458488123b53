"""
Node definitions for a resource specification document.

These nodes represent the decoded type catalog before any name
resolution or language-specific processing. They are immutable once
loaded.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class PrimitiveType(str, Enum):
    """Primitive kinds a property or list/map item can declare."""

    STRING = "String"
    BOOLEAN = "Boolean"
    INTEGER = "Integer"
    DOUBLE = "Double"
    TIMESTAMP = "Timestamp"
    JSON = "Json"
    LONG = "Long"


class UpdateType(str, Enum):
    """How a property change affects the deployed resource (documentation only)."""

    MUTABLE = "Mutable"
    IMMUTABLE = "Immutable"
    CONDITIONAL = "Conditional"


# Composite kinds a property "Type" can name
LIST_TYPE = "List"
MAP_TYPE = "Map"


@dataclass(frozen=True)
class PropertySpec:
    """A single property of a resource or property type."""

    required: bool = False
    documentation: str = ""
    primitive_type: PrimitiveType = PrimitiveType.STRING
    update_type: UpdateType = UpdateType.IMMUTABLE

    # "List", "Map" or the name of another type
    type: str | None = None

    # Item type for List/Map of composite items
    item_type: str | None = None

    # Item type for List/Map of primitives
    primitive_item_type: PrimitiveType | None = None


@dataclass(frozen=True)
class TypeSpec:
    """A resource type or property type, keyed by its qualified name."""

    name: str = ""  # e.g. "AWS::EMR::Cluster.VolumeSpecification"
    documentation: str = ""
    properties: dict[str, PropertySpec] = field(default_factory=dict)

    # "resource" or "property": the grouping it was loaded from
    kind: str = "property"


@dataclass
class ResourceSpecification:
    """The complete decoded specification document."""

    version: str = ""
    types: list[TypeSpec] = field(default_factory=list)

    def get(self, name: str) -> TypeSpec | None:
        """Look up a type by qualified name.

        Lookup helper for callers inspecting a loaded specification; the
        pipeline itself only iterates ``types``.
        """
        return next((t for t in self.types if t.name == name), None)
