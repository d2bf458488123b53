"""
Atomic file writer for safe code generation.

Ensures that file writes are atomic so that an interrupted run never
leaves a truncated output file behind.
"""

from __future__ import annotations

import logging
import tempfile
from collections.abc import Callable
from pathlib import Path

from ..errors import EmissionError

logger = logging.getLogger(__name__)


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(self, validate_rust: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate_rust: Optional validation function for Rust code
        """
        self.validate_content = validate_rust or self._default_validate_rust

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            EmissionError: If validation or the write fails
        """
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)

            # Same directory ensures atomic rename on the same filesystem
            temp_fd, temp_path_str = tempfile.mkstemp(
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                text=True,
            )
        except OSError as e:
            raise EmissionError(f"Cannot write {path}: {e}") from e

        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)

            if validate:
                self.validate_content(content)

            temp_path.replace(path)
        except OSError as e:
            temp_path.unlink(missing_ok=True)
            raise EmissionError(f"Cannot write {path}: {e}") from e
        except Exception:
            temp_path.unlink(missing_ok=True)
            raise

        logger.info("Wrote %d bytes to %s", len(content.encode("utf-8")), path)

    def write_if_not_exists(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content only if the file doesn't exist.

        Raises:
            EmissionError: If the file already exists or the write fails
        """
        path = Path(path)
        if path.exists():
            raise EmissionError(f"Output file already exists: {path}. Use force mode to overwrite.")
        self.write(path, content, validate)

    def _default_validate_rust(self, content: str) -> None:
        """Default Rust validation.

        Args:
            content: Rust code to validate

        Raises:
            EmissionError: If validation fails
        """
        # Basic structural checks (no full parsing)
        if "mod " not in content:
            raise EmissionError("Generated Rust code has no module declaration")

        # Comments and doc comments may contain arbitrary text
        code = "\n".join(line for line in content.splitlines() if not line.lstrip().startswith("//"))
        open_braces = code.count("{")
        close_braces = code.count("}")
        if open_braces != close_braces:
            raise EmissionError(f"Generated Rust code has unbalanced braces: {open_braces} open, {close_braces} close")
