"""
Rust AST Serializer.

Converts Rust AST nodes to Rust source code, following rustfmt's
default layout:
- 4-space indentation
- Opening braces on the declaration line
- Blank line between items
- Attributes and doc comments on separate lines above declarations
"""

from __future__ import annotations

from .rust_ast_nodes import (
    RustField,
    RustFile,
    RustFunction,
    RustImpl,
    RustModule,
    RustStruct,
)


class RustSerializer:
    """Serializes Rust AST nodes to source code."""

    INDENT = "    "  # 4 spaces

    def serialize(self, file: RustFile) -> str:
        """Serialize a complete Rust file to source code."""
        blocks: list[list[str]] = []

        if file.header:
            blocks.append(file.header.splitlines())

        for module in file.modules:
            blocks.append(self._serialize_module(module))

        return "\n".join(self._join_blocks(blocks)) + "\n"

    def _join_blocks(self, blocks: list[list[str]]) -> list[str]:
        """Join blocks of lines with one blank line between them."""
        lines: list[str] = []
        for block in blocks:
            if lines:
                lines.append("")
            lines.extend(block)
        return lines

    def _indent_lines(self, lines: list[str], level: int = 1) -> list[str]:
        """Add indentation to a list of lines."""
        prefix = self.INDENT * level
        return [prefix + line if line.strip() else line for line in lines]

    def _serialize_docs(self, docs: list[str]) -> list[str]:
        lines = []
        for doc in docs:
            for doc_line in doc.splitlines() or [""]:
                lines.append(f"/// {doc_line}".rstrip())
        return lines

    def _visibility(self, is_pub: bool) -> str:
        return "pub " if is_pub else ""

    def _serialize_module(self, module: RustModule) -> list[str]:
        """Serialize a module and everything nested in it."""
        lines: list[str] = list(module.attributes)
        lines.append(f"{self._visibility(module.is_pub)}mod {module.name} {{")

        blocks: list[list[str]] = []
        if module.inner_attributes:
            blocks.append(list(module.inner_attributes))
        if module.uses:
            blocks.append([use.to_string() for use in module.uses])

        impls = {impl.type_name: impl for impl in module.impls}
        for struct in module.structs:
            blocks.append(self._serialize_struct(struct))
            impl = impls.pop(struct.name, None)
            if impl is not None:
                blocks.append(self._serialize_impl(impl))

        # Impl blocks without a struct in this module
        for impl in impls.values():
            blocks.append(self._serialize_impl(impl))

        for submodule in module.submodules:
            blocks.append(self._serialize_module(submodule))

        lines.extend(self._indent_lines(self._join_blocks(blocks)))
        lines.append("}")
        return lines

    def _serialize_struct(self, struct: RustStruct) -> list[str]:
        """Serialize a struct declaration."""
        lines = self._serialize_docs(struct.docs)

        if struct.derives:
            lines.append(f"#[derive({', '.join(struct.derives)})]")
        lines.extend(struct.attributes)

        declaration = f"{self._visibility(struct.is_pub)}struct {struct.name}"
        if not struct.fields:
            lines.append(f"{declaration} {{}}")
            return lines

        lines.append(f"{declaration} {{")
        for field in struct.fields:
            lines.extend(self._indent_lines(self._serialize_field(field)))
        lines.append("}")
        return lines

    def _serialize_field(self, field: RustField) -> list[str]:
        """Serialize a struct field."""
        lines = self._serialize_docs(field.docs)
        lines.append(f"{self._visibility(field.is_pub)}{field.name}: {field.type_name},")
        return lines

    def _serialize_impl(self, impl: RustImpl) -> list[str]:
        """Serialize an impl block."""
        lines = [f"impl {impl.type_name} {{"]
        body: list[list[str]] = [self._serialize_function(f) for f in impl.functions]
        lines.extend(self._indent_lines(self._join_blocks(body)))
        lines.append("}")
        return lines

    def _serialize_function(self, function: RustFunction) -> list[str]:
        """Serialize a function declaration."""
        lines = self._serialize_docs(function.docs)

        params = ", ".join(f"{p.name}: {p.type_name}" for p in function.parameters)
        signature = f"{self._visibility(function.is_pub)}fn {function.name}({params})"
        if function.return_type:
            signature += f" -> {function.return_type}"

        lines.append(f"{signature} {{")
        lines.extend(self._indent_lines(function.body))
        lines.append("}")
        return lines
