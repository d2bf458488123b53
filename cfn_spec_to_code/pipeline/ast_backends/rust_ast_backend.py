"""
Rust AST backend.

Converts the IR module tree into a Rust AST, then serializes it to
source code. Every struct gets one ``new`` constructor taking all of its
fields, in declaration order.
"""

from __future__ import annotations

from ...utils import escape_keyword
from ..analyzer.ir_nodes import FieldDef, ModuleNode, StructDef, TypeKind, TypeRef
from ..schema_ast.nodes import PrimitiveType
from .base import AstBackend
from .rust_ast_nodes import (
    RustField,
    RustFile,
    RustFunction,
    RustImpl,
    RustModule,
    RustParameter,
    RustStruct,
    UseStatement,
)
from .rust_serializer import RustSerializer


class RustAstBackend(AstBackend):
    """Generates Rust source code through a Rust AST."""

    TYPE_MAP = {
        PrimitiveType.STRING: "String",
        PrimitiveType.BOOLEAN: "bool",
        PrimitiveType.INTEGER: "i32",
        PrimitiveType.DOUBLE: "f32",
        PrimitiveType.TIMESTAMP: "u32",
        PrimitiveType.JSON: "Value",
        PrimitiveType.LONG: "u32",
    }

    # Used with widen_numeric_types
    WIDE_TYPE_MAP = {
        **TYPE_MAP,
        PrimitiveType.DOUBLE: "f64",
        PrimitiveType.TIMESTAMP: "u64",
        PrimitiveType.LONG: "i64",
    }

    def __init__(self, config):
        super().__init__(config)
        self.type_map = self.WIDE_TYPE_MAP if config.widen_numeric_types else self.TYPE_MAP
        self.serializer = RustSerializer()

    def generate(self, root: ModuleNode, header: str = "") -> str:
        """Generate Rust source code from the module tree."""
        return self.serializer.serialize(self.build_file(root, header))

    def build_file(self, root: ModuleNode, header: str = "") -> RustFile:
        """Build the Rust AST for the whole tree."""
        return RustFile(header=header, modules=[self._build_module(root)])

    def translate_type(self, type_ref: TypeRef) -> str:
        """Translate an IR type to a Rust type string."""
        kind = type_ref.kind
        if kind == TypeKind.PRIMITIVE:
            return self.type_map[type_ref.primitive]
        if kind == TypeKind.REFERENCE:
            return type_ref.name
        if kind == TypeKind.LIST:
            return f"Vec<{self.translate_type(type_ref.type_args[0])}>"
        if kind == TypeKind.MAP:
            key, value = type_ref.type_args
            return f"HashMap<{self.translate_type(key)}, {self.translate_type(value)}>"
        if kind == TypeKind.OPTIONAL:
            return f"Option<{self.translate_type(type_ref.type_args[0])}>"
        raise ValueError(f"Unsupported type kind: {kind}")

    def _build_module(self, node: ModuleNode) -> RustModule:
        module = RustModule(
            name=node.name,
            is_pub=node.is_public,
            attributes=[a for a in node.attributes if not a.startswith("#!")],
            inner_attributes=[a for a in node.attributes if a.startswith("#!")],
            uses=[UseStatement(path) for path in node.imports],
        )
        for struct in node.structs:
            module.structs.append(self._build_struct(struct))
            module.impls.append(self._build_impl(struct))
        for child in node.children.values():
            module.submodules.append(self._build_module(child))
        return module

    def _build_struct(self, struct: StructDef) -> RustStruct:
        return RustStruct(
            name=struct.name,
            derives=list(self.config.struct_derives),
            fields=[self._build_field(f) for f in struct.fields],
            docs=self._documentation_link(struct.documentation),
        )

    def _build_field(self, field_def: FieldDef) -> RustField:
        docs = self._documentation_link(field_def.documentation)
        if self.config.document_update_type:
            docs.append(f"Update type: {field_def.update_type.value}")
        return RustField(
            name=escape_keyword(field_def.name),
            type_name=self.translate_type(field_def.type_ref),
            docs=docs,
        )

    def _build_impl(self, struct: StructDef) -> RustImpl:
        parameters = [RustParameter(escape_keyword(f.name), self.translate_type(f.type_ref)) for f in struct.constructor_fields]
        if parameters:
            body = f"Self {{ {', '.join(p.name for p in parameters)} }}"
        else:
            body = "Self {}"
        constructor = RustFunction(
            name="new",
            parameters=parameters,
            return_type="Self",
            body=[body],
            docs=[f"Create a new `{struct.name}`"],
        )
        return RustImpl(type_name=struct.name, functions=[constructor])

    @staticmethod
    def _documentation_link(documentation: str) -> list[str]:
        if not documentation:
            return []
        return [f"Official documentation: [{documentation}]({documentation})"]
