"""
Atomic file writer for generated Go code.

Content goes to a temporary file next to the target and is renamed into
place, so an interrupted run never leaves a truncated output file.
"""

from __future__ import annotations

import logging
import re
import tempfile
from collections.abc import Callable
from pathlib import Path

from ..errors import OutputValidationError, WriteError

logger = logging.getLogger(__name__)

# Line comments, interpreted string literals and raw (tag) literals
_NON_CODE_PATTERN = re.compile(r'//[^\n]*|"(?:[^"\\\n]|\\.)*"|`[^`]*`')


def validate_go_source(content: str) -> None:
    """
    Structural sanity checks for generated Go code.

    Comments and literals are ignored, descriptions and enum values may
    contain any character.

    Args:
        content: Go source to check

    Raises:
        OutputValidationError: If a check fails
    """
    code = _NON_CODE_PATTERN.sub("", content)

    if not re.search(r"^package \w+$", code, re.MULTILINE):
        raise OutputValidationError("Generated Go code is missing a package clause")

    open_braces = code.count("{")
    close_braces = code.count("}")
    if open_braces != close_braces:
        raise OutputValidationError(f"Generated Go code has unbalanced braces: {open_braces} open, {close_braces} close")

    open_parens = code.count("(")
    close_parens = code.count(")")
    if open_parens != close_parens:
        raise OutputValidationError(f"Generated Go code has unbalanced parentheses: {open_parens} open, {close_parens} close")


class AtomicWriter:
    """Handles output file writes with optional validation.

    Uses a two-phase commit approach:
    1. Validate the content
    2. Write to a temporary file in the target directory
    3. Atomically replace the target file
    """

    def __init__(self, validate_go: Callable[[str], None] | None = None, atomic: bool = True):
        """Initialize the writer.

        Args:
            validate_go: Validation function for Go code, validate_go_source by default
            atomic: Write through a temporary file and rename
        """
        self._validate_go = validate_go or validate_go_source
        self._atomic = atomic

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to a file.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before writing

        Raises:
            OutputValidationError: If validation fails
            WriteError: If the file cannot be created
        """
        if validate:
            self._validate_go(content)

        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            if self._atomic:
                self._write_atomic(path, content)
            else:
                path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise WriteError(f"Failed to create output file {path}: {e}") from e

        logger.debug("Wrote %d bytes to %s", len(content), path)

    def _write_atomic(self, path: Path, content: str) -> None:
        # Same directory keeps the rename on one filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)
            temp_path.replace(path)
        except Exception:
            temp_path.unlink(missing_ok=True)
            raise
