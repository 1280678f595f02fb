"""
gofmt formatter for generated Go code.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from ..config import FormatterConfig
from .base import Formatter

logger = logging.getLogger(__name__)


class GofmtFormatter(Formatter):
    """Runs gofmt (or a configured equivalent) on a written Go file."""

    def is_available(self, config: FormatterConfig) -> bool:
        """Check if the formatter executable is on PATH."""
        if not config.command:
            return False
        return shutil.which(config.command[0]) is not None

    def format_file(self, path: Path, config: FormatterConfig) -> bool:
        """
        Format a Go file in place.

        Failures never raise: the unformatted file stays on disk and a
        warning is logged.

        Args:
            path: The written Go file
            config: Formatter configuration

        Returns:
            True if the formatter exited successfully
        """
        if not self.is_available(config):
            logger.warning("Formatter %s not found, leaving %s unformatted", config.command[0] if config.command else "<none>", path)
            return False

        cmd = [*config.command, str(path)]
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=config.timeout,
            )
        except (subprocess.SubprocessError, OSError) as e:
            logger.warning("Failed to run %s: %s", " ".join(cmd), e)
            return False

        if result.returncode != 0:
            logger.warning("%s exited with status %d: %s", " ".join(cmd), result.returncode, result.stderr.strip())
            return False

        logger.debug("Formatted %s with %s", path, config.command[0])
        return True


def format_go_file(path: str | Path, config: FormatterConfig | None = None) -> bool:
    """
    Convenience function to format a Go file with gofmt.

    Args:
        path: The Go file to format
        config: Formatter configuration, gofmt -w by default

    Returns:
        True if the file was formatted
    """
    return GofmtFormatter().format_file(Path(path), config or FormatterConfig())
