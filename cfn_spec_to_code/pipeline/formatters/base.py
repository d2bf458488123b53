"""
Post-processing hook for the emitted Rust source.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..config import FormatterConfig


class Formatter(ABC):
    """Rewrites the generated file before it is written."""

    @abstractmethod
    def format(self, code: str, config: FormatterConfig) -> str:
        """
        Return ``code`` reformatted.

        Implementations fall back to the input unchanged when the external
        tool fails, so a formatting problem never blocks generation.

        Args:
            code: The complete generated Rust file
            config: Formatter settings (edition)
        """

    @abstractmethod
    def is_available(self) -> bool:
        """Whether the external tool can be run on this machine."""
