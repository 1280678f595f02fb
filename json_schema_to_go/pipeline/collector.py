"""
Definition collection.

Gathers the named type definitions of a schema document from every
container location the supported dialects use into one flat mapping.
"""

from __future__ import annotations

import logging
from typing import Any

from ..errors import EmptySchemaError

logger = logging.getLogger(__name__)

# Checked in order, later locations overwrite earlier ones on name collisions
DEFINITION_LOCATIONS: tuple[tuple[str, ...], ...] = (
    ("definitions",),
    ("$defs",),
    ("components", "schemas"),
    ("components", "contentDescriptors"),
    ("schemas",),
)


def _lookup(document: Any, path: tuple[str, ...]) -> dict | None:
    """Follow a key path, returning the node only if it is a mapping."""
    node = document
    for key in path:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node if isinstance(node, dict) else None


def collect_definitions(document: Any) -> dict[str, Any]:
    """
    Collect all named definitions of a schema document.

    Args:
        document: The parsed schema document

    Returns:
        Mapping of type name -> schema fragment

    Raises:
        EmptySchemaError: If no location contributes a definition
    """
    definitions: dict[str, Any] = {}
    for path in DEFINITION_LOCATIONS:
        container = _lookup(document, path)
        if container is None:
            continue
        logger.debug("Collecting %d definitions from %s", len(container), ".".join(path))
        for name, fragment in container.items():
            key = str(name)
            if not key:
                logger.debug("Skipping unnamed definition in %s", ".".join(path))
                continue
            if key in definitions:
                logger.debug("Definition %s from %s overrides an earlier one", key, ".".join(path))
            definitions[key] = fragment

    if not definitions:
        locations = ", ".join(".".join(path) for path in DEFINITION_LOCATIONS)
        raise EmptySchemaError(f"Schema contains no type definitions (checked: {locations})")

    return definitions
