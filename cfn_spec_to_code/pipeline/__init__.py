"""
Pipeline - AST-based resource specification to Rust generator.

This module provides a multi-phase architecture for generating Rust
types from a resource specification:

1. Phase 1 (Loader): Decode the specification into TypeSpecs
2. Phase 2 (Analyzer): Resolve names and types, build the module tree
3. Phase 3 (AST Backend): Generate a Rust AST from the module tree
4. Phase 4 (Serializer): Convert the AST to source code
5. Phase 5 (Formatter): Optional post-processing with rustfmt
6. Phase 6 (Writer): Atomic write of the output file
"""

from __future__ import annotations

from .config import CodeGeneratorConfig, FormatterConfig, OutputConfig, OutputMode
from .errors import (
    CodeGenerationError,
    DuplicateTypeError,
    EmissionError,
    NameResolutionError,
    SchemaLoadError,
)
from .generator import PipelineGenerator
from .writer import AtomicWriter

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "FormatterConfig",
    "OutputConfig",
    "OutputMode",
    "CodeGenerationError",
    "DuplicateTypeError",
    "EmissionError",
    "NameResolutionError",
    "SchemaLoadError",
    "AtomicWriter",
]
