"""
Exceptions raised by the code generator pipeline.

Every failure is fatal: the pipeline produces one complete output file
or none at all.
"""

from __future__ import annotations


class CodeGenerationError(Exception):
    """Base class for all pipeline failures."""

    pass


class SchemaLoadError(CodeGenerationError):
    """Raised when the specification document is missing or malformed.

    This can happen when:
    - The file does not exist or cannot be read
    - The content is not valid JSON
    - A type or property definition has the wrong shape
    - A primitive or update tag is not one of the known values
    """

    pass


class NameResolutionError(CodeGenerationError):
    """Raised when a qualified type name has empty or missing segments."""

    def __init__(self, qualified_name: str, reason: str):
        self.qualified_name = qualified_name
        self.reason = reason
        super().__init__(f"Cannot resolve type name {qualified_name!r}: {reason}")


class DuplicateTypeError(CodeGenerationError):
    """Raised when two types would be generated with one name in one module."""

    def __init__(self, struct_name: str, module_path: tuple[str, ...], first: str, second: str):
        self.struct_name = struct_name
        self.module_path = module_path
        super().__init__(f"Types {first!r} and {second!r} both generate struct {struct_name!r} in module {'::'.join(module_path)}")


class EmissionError(CodeGenerationError):
    """Raised when the generated code fails validation or cannot be written."""

    pass
