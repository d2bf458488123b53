"""
Module tree builder.

Folds every TypeSpec into one namespace tree. Nodes are created on
demand and merged when paths collide, so all sub-properties of a
resource end up next to the resource in a single module.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ...utils import feature_name
from ..config import CodeGeneratorConfig
from ..errors import DuplicateTypeError
from ..schema_ast.nodes import TypeSpec
from .ir_nodes import ModuleNode, StructDef
from .name_resolver import NameResolver
from .type_resolver import TypeResolver

logger = logging.getLogger(__name__)


class ModuleTreeBuilder:
    """Builds the module tree that the emitter linearizes.

    The builder owns the tree while types are inserted. Once ``build``
    returns, the tree is handed off and must not be modified.
    """

    def __init__(self, config: CodeGeneratorConfig | None = None):
        self.config = config or CodeGeneratorConfig()
        self.name_resolver = NameResolver(self.config.namespace_separator, self.config.sub_property_marker)
        self.type_resolver = TypeResolver(self.name_resolver)
        self.root = ModuleNode(name=self.config.root_module, attributes=[f"#![{a}]" for a in self.config.root_attributes])

        foundational = self.name_resolver.resolve(self.config.foundational_type)
        self._foundational_path = foundational.module_path
        self._foundational_struct = foundational.struct_name
        self._foundational_import = "::".join(("crate", self.config.root_module, *foundational.module_path, foundational.struct_name))

        # (module path, struct name) -> qualified name
        self._defined: dict[tuple[tuple[str, ...], str], str] = {}
        self.modules_created = 0

    def build(self, types: Iterable[TypeSpec]) -> ModuleNode:
        """
        Insert every type and return the finished tree.

        Types are inserted in qualified-name order so the tree, and the
        code emitted from it, does not depend on input order.
        """
        for type_spec in sorted(types, key=lambda t: t.name):
            self.insert(type_spec)

        struct_count = sum(len(node.structs) for node in self.root.walk())
        logger.info("Built module tree: %d structs in %d modules", struct_count, self.modules_created)
        if struct_count and self.root.find(self._foundational_path) is None:
            logger.warning("%s is not defined; imports of %s will not resolve", self.config.foundational_type, self._foundational_import)
        return self.root

    def insert(self, type_spec: TypeSpec) -> ModuleNode:
        """
        Insert one type into the tree.

        Args:
            type_spec: The type to generate

        Returns:
            The module node the struct was attached to
        """
        meta = self.name_resolver.resolve(type_spec.name)
        is_foundational = meta.struct_name == self._foundational_struct

        node = self.root
        for segment in meta.module_path:
            child = node.get_child(segment)
            if child is None:
                child = node.add_child(self._new_module(node, segment, is_foundational))
            node = child

        key = (node.path, meta.struct_name)
        if key in self._defined:
            raise DuplicateTypeError(meta.struct_name, node.path, self._defined[key], type_spec.name)
        self._defined[key] = type_spec.name

        node.structs.append(self._build_struct(type_spec, meta.struct_name, meta.is_sub_property))
        # A module defining a struct of that name cannot also import it
        if is_foundational and self._foundational_import in node.imports:
            node.imports.remove(self._foundational_import)
        logger.debug("Attached %s to module %s", meta.struct_name, "::".join(node.path))
        return node

    def _new_module(self, parent: ModuleNode, name: str, inserting_foundational: bool) -> ModuleNode:
        """Create a module with the standard imports and, at depth 1, a feature gate."""
        module = ModuleNode(name=name, path=(*parent.path, name))
        module.imports.extend(self.config.standard_imports)

        # The foundational type's module must not import it from itself
        if not inserting_foundational and module.path != self._foundational_path:
            module.imports.append(self._foundational_import)

        # The foundational module is gated too: crates enabling a single feature
        # must also enable the foundational one (or the catch-all)
        if module.depth == 1:
            module.attributes.append(f'#[cfg(any(feature = "{self.config.catch_all_feature}", feature = "{feature_name(name)}"))]')

        self.modules_created += 1
        logger.debug("Created module %s", "::".join(module.path))
        return module

    def _build_struct(self, type_spec: TypeSpec, struct_name: str, is_sub_property: bool) -> StructDef:
        properties = type_spec.properties.items()
        if self.config.sort_properties:
            properties = sorted(properties)

        return StructDef(
            name=struct_name,
            qualified_name=type_spec.name,
            documentation=type_spec.documentation,
            is_sub_property=is_sub_property,
            fields=[self.type_resolver.resolve_field(name, prop) for name, prop in properties],
        )
