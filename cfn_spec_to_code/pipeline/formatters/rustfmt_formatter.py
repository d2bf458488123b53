"""
rustfmt formatter for Rust code.
"""

from __future__ import annotations

import logging
import subprocess

from ..config import FormatterConfig
from .base import Formatter

logger = logging.getLogger(__name__)


class RustfmtFormatter(Formatter):
    """Formatter using rustfmt for Rust code."""

    def __init__(self, executable: str = "rustfmt"):
        self.executable = executable
        self._available = None

    def is_available(self) -> bool:
        """Check if rustfmt is installed."""
        if self._available is None:
            try:
                result = subprocess.run(
                    [self.executable, "--version"],
                    capture_output=True,
                    text=True,
                    timeout=5,
                )
                self._available = result.returncode == 0
            except (subprocess.SubprocessError, FileNotFoundError):
                self._available = False
        return self._available

    def format(self, code: str, config: FormatterConfig) -> str:
        """
        Format Rust code using rustfmt.

        Args:
            code: Rust source code to format
            config: Formatter configuration

        Returns:
            Formatted code, or the input unchanged if rustfmt is unavailable or fails
        """
        if not self.is_available():
            logger.warning("rustfmt is not available, writing unformatted code")
            return code

        cmd = [self.executable]
        if config.edition:
            cmd.extend(["--edition", config.edition])

        try:
            # Without file arguments rustfmt reads stdin and writes stdout
            result = subprocess.run(
                cmd,
                input=code,
                capture_output=True,
                text=True,
                timeout=120,
            )
        except subprocess.SubprocessError as e:
            logger.warning("rustfmt failed: %s", e)
            return code

        if result.returncode == 0:
            return result.stdout
        logger.warning("rustfmt exited with status %d: %s", result.returncode, result.stderr.strip())
        return code


def format_with_rustfmt(code: str, edition: str = "2021") -> str:
    """
    Convenience function to format Rust code with rustfmt.

    Args:
        code: Rust source code
        edition: Rust edition

    Returns:
        Formatted code
    """
    formatter = RustfmtFormatter()
    config = FormatterConfig(enabled=True, edition=edition)
    return formatter.format(code, config)
