"""Resource Specification to Rust Code Generator

A Python package for generating Rust types from CloudFormation-style
resource specifications. Produces one source file with a nested module
tree of structs, each with a constructor taking all of its fields.
"""

__version__ = "0.3.0"

from .pipeline import (
    AtomicWriter,
    CodeGenerationError,
    CodeGeneratorConfig,
    FormatterConfig,
    OutputConfig,
    OutputMode,
    PipelineGenerator,
)

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "CodeGenerationError",
    "FormatterConfig",
    "OutputConfig",
    "OutputMode",
    "AtomicWriter",
]
