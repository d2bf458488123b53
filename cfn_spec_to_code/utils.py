"""
Utility functions for the resource specification to Rust generator.
"""

import re

# Rust keywords (strict and reserved) that cannot be used as plain identifiers
RUST_KEYWORDS = {
    "abstract",
    "as",
    "async",
    "await",
    "become",
    "box",
    "break",
    "const",
    "continue",
    "crate",
    "do",
    "dyn",
    "else",
    "enum",
    "extern",
    "false",
    "final",
    "fn",
    "for",
    "if",
    "impl",
    "in",
    "let",
    "loop",
    "macro",
    "match",
    "mod",
    "move",
    "mut",
    "override",
    "priv",
    "pub",
    "ref",
    "return",
    "self",
    "Self",
    "static",
    "struct",
    "super",
    "trait",
    "true",
    "try",
    "type",
    "typeof",
    "unsafe",
    "unsized",
    "use",
    "virtual",
    "where",
    "while",
    "yield",
}

# Keywords that cannot be written as raw identifiers either
_NON_RAW_KEYWORDS = {"crate", "self", "Self", "super"}

_FEATURE_INVALID_CHARS = re.compile(r"[^a-z0-9_\-]")


def escape_keyword(name: str) -> str:
    """Escape a Rust keyword as a raw identifier.

    Examples:
        "Type" -> "Type"
        "type" -> "r#type"
        "self" -> "self_"

    Args:
        name: The identifier to escape

    Returns:
        An identifier that is valid in Rust source
    """
    if name in _NON_RAW_KEYWORDS:
        return f"{name}_"
    if name in RUST_KEYWORDS:
        return f"r#{name}"
    return name


def feature_name(module_name: str) -> str:
    """Cargo feature name gating a top-level module.

    Examples:
        "EC2" -> "ec2"
        "Service" -> "service"
        "Alexa.ASK" -> "alexa_ask"
    """
    return _FEATURE_INVALID_CHARS.sub("_", module_name.lower())
