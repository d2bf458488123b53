"""
Pipeline generator.

Runs every phase of the pipeline in order:

1. Load: decode the specification into TypeSpecs
2. Analyze: resolve names and property types, build the module tree
3. Emit: build a Rust AST from the tree and serialize it
4. Format: optional rustfmt pass
5. Write: atomic write of the single output file
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import jinja2

from .analyzer.ir_nodes import ModuleNode
from .analyzer.module_tree import ModuleTreeBuilder
from .ast_backends.rust_ast_backend import RustAstBackend
from .config import CodeGeneratorConfig, OutputMode
from .errors import EmissionError
from .formatters.rustfmt_formatter import RustfmtFormatter
from .schema_ast.nodes import ResourceSpecification
from .schema_ast.parser import SchemaLoader
from .writer.atomic_writer import AtomicWriter

logger = logging.getLogger(__name__)

CURRENT_DIR = Path(__file__).resolve().parent.parent


class PipelineGenerator:
    """Generates one Rust source file from a resource specification."""

    def __init__(self, schema: Any, config: CodeGeneratorConfig | None = None, command_line: str = ""):
        """
        Initialize the generator.

        Args:
            schema: The decoded specification document
            config: Code generation configuration
            command_line: Command shown in the generation comment
        """
        self.schema = schema
        self.config = config or CodeGeneratorConfig()
        self.command_line = command_line
        self._spec: ResourceSpecification | None = None

        self.jinja_env = jinja2.Environment(lstrip_blocks=True, trim_blocks=True, autoescape=False)
        with open(CURRENT_DIR / "templates/rust/prefix.rs.jinja2", encoding="utf-8") as f:
            self.prefix = self.jinja_env.from_string(f.read())

        self.loader = SchemaLoader(
            include_resource_types=self.config.include_resource_types,
            include_property_types=self.config.include_property_types,
            ignore_types=self.config.ignore_types,
        )
        self.backend = RustAstBackend(self.config)
        self.formatter = RustfmtFormatter()
        self.writer = AtomicWriter()

    @classmethod
    def from_file(cls, path: str | Path, config: CodeGeneratorConfig | None = None, command_line: str = "") -> PipelineGenerator:
        """Create a generator for a specification file."""
        generator = cls(None, config, command_line)
        generator._spec = generator.loader.load_file(path)
        return generator

    def load(self) -> ResourceSpecification:
        """Phase 1: decode the specification."""
        if self._spec is None:
            self._spec = self.loader.load(self.schema)
        return self._spec

    def build_tree(self) -> ModuleNode:
        """Phase 2: build the module tree from the loaded types."""
        return ModuleTreeBuilder(self.config).build(self.load().types)

    def generate(self) -> str:
        """
        Generate the Rust source code.

        Returns:
            The complete file content
        """
        spec = self.load()
        root = self.build_tree()

        header = ""
        if self.config.add_generation_comment:
            header = self.prefix.render(
                command_line=self.command_line,
                spec_version=spec.version,
                type_count=len(spec.types),
            )

        code = self.backend.generate(root, header)

        if self.config.formatter.enabled:
            code = self.formatter.format(code, self.config.formatter)

        logger.debug("Generated %d lines of Rust", code.count("\n"))
        return code

    def write(self, path: str | Path) -> str:
        """
        Generate the code and write it to ``path``.

        Nothing is written if any phase fails.

        Returns:
            The written content
        """
        path = Path(path)
        code = self.generate()
        output = self.config.output

        if output.mode == OutputMode.ERROR_IF_EXISTS:
            self.writer.write_if_not_exists(path, code, validate=output.validate_before_write)
        elif output.atomic_write:
            self.writer.write(path, code, validate=output.validate_before_write)
        else:
            if output.validate_before_write:
                self.writer.validate_content(code)
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
                with open(path, "w", encoding="utf-8", newline="\n") as f:
                    f.write(code)
            except OSError as e:
                raise EmissionError(f"Cannot write {path}: {e}") from e
        return code
