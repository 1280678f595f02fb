"""
Base class for output formatters.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from ..config import FormatterConfig


class Formatter(ABC):
    """Abstract base class for formatters run on a written output file."""

    @abstractmethod
    def format_file(self, path: Path, config: FormatterConfig) -> bool:
        """
        Format the given file in place.

        Args:
            path: The generated file
            config: Formatter configuration

        Returns:
            True if the file was formatted, False if formatting was skipped or failed
        """

    @abstractmethod
    def is_available(self, config: FormatterConfig) -> bool:
        """
        Check if the formatter can be run.

        Returns:
            True if the formatter executable is installed
        """
