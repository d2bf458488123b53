"""
Configuration for the code generator pipeline.

Controls naming of the generated module tree, the imports and derives
attached to every generated module, and how the output file is written.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

DEFAULT_STANDARD_IMPORTS = [
    "serde_json::Value",
    "serde::Serialize",
    "std::collections::HashMap",
    "derive_builder::Builder",
]

DEFAULT_STRUCT_DERIVES = ["Default", "Clone", "Debug", "Serialize", "Builder"]


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Raise error if file exists
    FORCE = "force"  # Overwrite the generated file


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to validate code before writing
        atomic_write: Whether to use atomic file writes
    """

    mode: OutputMode = OutputMode.FORCE
    validate_before_write: bool = True
    atomic_write: bool = True


@dataclass
class FormatterConfig:
    """Configuration for the rustfmt post-processing step."""

    # Whether formatting is enabled
    enabled: bool = False

    # Rust edition passed to rustfmt
    edition: str = "2021"


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Name of the outermost generated module
    root_module: str = "AWS"

    # Type shared across all branches; its own module never imports it
    foundational_type: str = "Tag"

    # Feature flag that enables every top-level branch
    catch_all_feature: str = "all"

    # Qualified name syntax
    namespace_separator: str = "::"
    sub_property_marker: str = "."

    # Use paths attached to every freshly created module
    standard_imports: list[str] = field(default_factory=lambda: list(DEFAULT_STANDARD_IMPORTS))

    # Derives attached to every generated struct
    struct_derives: list[str] = field(default_factory=lambda: list(DEFAULT_STRUCT_DERIVES))

    # Inner attributes of the root module
    root_attributes: list[str] = field(default_factory=lambda: ["allow(unused_imports, non_snake_case)"])

    # Sort properties by name instead of following document order
    sort_properties: bool = True

    # Map Double/Timestamp/Long to 64-bit types instead of 32-bit ones
    widen_numeric_types: bool = False

    # Which groupings of the input document to generate
    include_resource_types: bool = True
    include_property_types: bool = True

    # Qualified names to skip
    ignore_types: list[str] = field(default_factory=list)

    # Add generation comment at top of file
    add_generation_comment: bool = True

    # Mention the property update semantics in field documentation
    document_update_type: bool = False

    formatter: FormatterConfig = field(default_factory=FormatterConfig)

    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if k == "formatter" and isinstance(v, dict):
                config.formatter = FormatterConfig(**v)
            elif k == "output" and isinstance(v, dict):
                mode = v.get("mode", OutputMode.FORCE)
                if isinstance(mode, str):
                    mode = OutputMode(mode)
                config.output = OutputConfig(
                    mode=mode,
                    validate_before_write=v.get("validate_before_write", True),
                    atomic_write=v.get("atomic_write", True),
                )
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "root_module": self.root_module,
            "foundational_type": self.foundational_type,
            "catch_all_feature": self.catch_all_feature,
            "namespace_separator": self.namespace_separator,
            "sub_property_marker": self.sub_property_marker,
            "standard_imports": self.standard_imports,
            "struct_derives": self.struct_derives,
            "root_attributes": self.root_attributes,
            "sort_properties": self.sort_properties,
            "widen_numeric_types": self.widen_numeric_types,
            "include_resource_types": self.include_resource_types,
            "include_property_types": self.include_property_types,
            "ignore_types": self.ignore_types,
            "add_generation_comment": self.add_generation_comment,
            "document_update_type": self.document_update_type,
            "formatter": {
                "enabled": self.formatter.enabled,
                "edition": self.formatter.edition,
            },
            "output": {
                "mode": self.output.mode.value,
                "validate_before_write": self.output.validate_before_write,
                "atomic_write": self.output.atomic_write,
            },
        }
