"""
Type resolver for property definitions.

Turns the declared kind of a property into a TypeRef. References to
other types are kept by name and are not checked against the loaded
types; the target compiler binds them.
"""

from __future__ import annotations

from ..schema_ast.nodes import LIST_TYPE, MAP_TYPE, PrimitiveType, PropertySpec
from .ir_nodes import FieldDef, TypeKind, TypeRef
from .name_resolver import NameResolver


class TypeResolver:
    """Resolves PropertySpecs into TypeRefs."""

    def __init__(self, name_resolver: NameResolver | None = None):
        self.name_resolver = name_resolver or NameResolver()

    def resolve(self, prop: PropertySpec) -> TypeRef:
        """
        Resolve the type of a property.

        The first matching rule wins:
        1. List -> list of the item type
        2. Map -> map of String to the item type
        3. any other Type -> reference to that type
        4. no Type -> the property's primitive type

        Optional properties are wrapped; required ones never are.
        """
        if prop.type == LIST_TYPE:
            type_ref = TypeRef(kind=TypeKind.LIST, type_args=[self._resolve_item(prop)])
        elif prop.type == MAP_TYPE:
            type_ref = TypeRef(
                kind=TypeKind.MAP,
                type_args=[self._primitive(PrimitiveType.STRING), self._resolve_item(prop)],
            )
        elif prop.type:
            type_ref = self._reference(prop.type)
        else:
            type_ref = self._primitive(prop.primitive_type or PrimitiveType.STRING)

        if not prop.required:
            type_ref = TypeRef(kind=TypeKind.OPTIONAL, type_args=[type_ref])
        return type_ref

    def resolve_field(self, name: str, prop: PropertySpec) -> FieldDef:
        """Build the struct field for a property."""
        return FieldDef(
            name=name,
            type_ref=self.resolve(prop),
            documentation=prop.documentation,
            update_type=prop.update_type,
        )

    def _resolve_item(self, prop: PropertySpec) -> TypeRef:
        """Item type of a List or Map: explicit type, then primitive, then String."""
        if prop.item_type:
            return self._reference(prop.item_type)
        if prop.primitive_item_type is not None:
            return self._primitive(prop.primitive_item_type)
        return self._primitive(PrimitiveType.STRING)

    def _reference(self, type_name: str) -> TypeRef:
        return TypeRef(kind=TypeKind.REFERENCE, name=self.name_resolver.leaf_name(type_name))

    @staticmethod
    def _primitive(primitive: PrimitiveType) -> TypeRef:
        return TypeRef(kind=TypeKind.PRIMITIVE, primitive=primitive)
