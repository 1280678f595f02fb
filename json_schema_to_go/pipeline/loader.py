"""
Schema file loading.

Reads a JSON or YAML schema file into a plain document tree. The format is
chosen from the file suffix only.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from ..errors import ParseError, ReadError, UnsupportedFormatError

logger = logging.getLogger(__name__)

JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")
SUPPORTED_SUFFIXES = JSON_SUFFIXES + YAML_SUFFIXES


def parse_schema(text: str, suffix: str) -> Any:
    """
    Parse schema text according to a file suffix.

    Args:
        text: Raw file content
        suffix: File suffix including the dot (".json", ".yaml", ".yml")

    Returns:
        The parsed document

    Raises:
        UnsupportedFormatError: If the suffix is not supported
        ParseError: If the text is malformed
    """
    suffix = suffix.lower()
    if suffix in JSON_SUFFIXES:
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ParseError(f"Failed to parse JSON schema: {e}") from e
    if suffix in YAML_SUFFIXES:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ParseError(f"Failed to parse YAML schema: {e}") from e
    raise UnsupportedFormatError(f"Unsupported schema format '{suffix}': must be .json, .yaml, or .yml")


def load_schema(path: str | Path) -> Any:
    """
    Read and parse a schema file.

    Args:
        path: Path to a .json, .yaml or .yml file

    Returns:
        The parsed document

    Raises:
        UnsupportedFormatError: If the suffix is not supported
        ReadError: If the file cannot be read
        ParseError: If the content is malformed
    """
    path = Path(path)
    if path.suffix.lower() not in SUPPORTED_SUFFIXES:
        raise UnsupportedFormatError(f"Unsupported schema format '{path.suffix}': must be .json, .yaml, or .yml")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(f"Failed to read schema {path}: {e}") from e

    logger.debug("Loaded %d bytes from %s", len(text), path)
    return parse_schema(text, path.suffix)
