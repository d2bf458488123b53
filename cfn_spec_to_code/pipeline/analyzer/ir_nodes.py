"""
IR (Intermediate Representation) node definitions.

These nodes represent the analyzed specification, ready for code
generation: every type name is resolved into a module path and every
property into a concrete type expression.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ..schema_ast.nodes import PrimitiveType, UpdateType


class TypeKind(Enum):
    """Kind of type in the IR."""

    PRIMITIVE = "primitive"  # String, bool, i32, ...
    REFERENCE = "reference"  # Another generated struct, by name
    LIST = "list"  # Vec<T>
    MAP = "map"  # HashMap<String, T>
    OPTIONAL = "optional"  # Option<T>


@dataclass
class TypeRef:
    """A resolved type expression."""

    kind: TypeKind = TypeKind.PRIMITIVE

    # For PRIMITIVE
    primitive: PrimitiveType | None = None

    # For REFERENCE: the struct name
    name: str = ""

    # For LIST/OPTIONAL: [item]; for MAP: [key, value]
    type_args: list[TypeRef] = field(default_factory=list)

    @property
    def is_optional(self) -> bool:
        return self.kind == TypeKind.OPTIONAL


@dataclass
class FieldDef:
    """A field of a generated struct."""

    name: str = ""
    type_ref: TypeRef | None = None
    documentation: str = ""
    update_type: UpdateType = UpdateType.IMMUTABLE

    @property
    def is_optional(self) -> bool:
        return self.type_ref is not None and self.type_ref.is_optional


@dataclass
class StructDef:
    """A generated struct with its constructor."""

    name: str = ""
    qualified_name: str = ""  # Original specification key
    documentation: str = ""
    is_sub_property: bool = False

    fields: list[FieldDef] = field(default_factory=list)

    @property
    def constructor_fields(self) -> list[FieldDef]:
        """Constructor parameters: every field, in declaration order."""
        return list(self.fields)


@dataclass
class ModuleNode:
    """A module in the generated namespace tree."""

    name: str = ""
    path: tuple[str, ...] = ()
    is_public: bool = True

    # Child modules by name; insertion order is emission order
    children: dict[str, ModuleNode] = field(default_factory=dict)

    structs: list[StructDef] = field(default_factory=list)

    # Outer attributes (at most one conditional-compilation gate)
    attributes: list[str] = field(default_factory=list)

    # Use paths
    imports: list[str] = field(default_factory=list)

    @property
    def depth(self) -> int:
        return len(self.path)

    def get_child(self, name: str) -> ModuleNode | None:
        return self.children.get(name)

    def add_child(self, child: ModuleNode) -> ModuleNode:
        if child.name in self.children:
            raise ValueError(f"Module {'::'.join(self.path) or '<root>'} already has a child named {child.name!r}")
        self.children[child.name] = child
        return child

    def find(self, path: tuple[str, ...]) -> ModuleNode | None:
        """Return the descendant at a relative path."""
        node = self
        for segment in path:
            node = node.children.get(segment)
            if node is None:
                return None
        return node

    def walk(self):
        """Yield this node and all descendants, depth first."""
        yield self
        for child in self.children.values():
            yield from child.walk()
