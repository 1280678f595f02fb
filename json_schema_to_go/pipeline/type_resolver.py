"""
Type resolution from schema fragments to Go type expressions.
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)

DYNAMIC_TYPE = "interface{}"
TIME_TYPE = "time.Time"
SLICE_PREFIX = "[]"
MAP_PREFIX = "map[string]"

PRIMITIVE_TYPES = {"string", "integer", "number", "boolean", "object", "null"}

# (type, format) refinements, checked before TYPE_MAP
FORMAT_MAP: dict[tuple[str, str], str] = {
    ("string", "date-time"): TIME_TYPE,
    ("integer", "int32"): "int32",
    ("integer", "int64"): "int64",
    ("number", "float"): "float32",
}

TYPE_MAP: dict[str, str] = {
    "string": "string",
    "integer": "int",
    "number": "float64",
    "boolean": "bool",
    "null": DYNAMIC_TYPE,
}

COMPOSITION_KEYWORDS = ("oneOf", "anyOf", "allOf")


def is_collection_type(go_type: str) -> bool:
    """Slices and maps already represent absence with their zero value."""
    return go_type.startswith(SLICE_PREFIX) or go_type.startswith(MAP_PREFIX)


def has_composition(fragment: dict) -> bool:
    """Whether a fragment carries a non-empty oneOf/anyOf/allOf list."""
    return any(isinstance(fragment.get(key), list) and fragment[key] for key in COMPOSITION_KEYWORDS)


def ref_name(ref: str) -> str:
    """Final path segment of a $ref ("#/definitions/Task" -> "Task")."""
    return ref.rsplit("/", 1)[-1]


def literal_type(value: Any) -> str:
    """Go type of an enum literal, by its runtime kind."""
    # bool is checked first, it is a subclass of int
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, str):
        return "string"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float64"
    return DYNAMIC_TYPE


class TypeResolver:
    """Computes Go type expressions for schema fragments."""

    def __init__(self, definitions: dict[str, Any]):
        """
        Initialize the resolver.

        Args:
            definitions: The collected definitions (plus synthesized enums),
                used to report references that point nowhere
        """
        self.definitions = definitions
        self._in_flight: set[int] = set()

    def resolve(self, fragment: Any) -> str:
        """
        Resolve a schema fragment to a Go type expression.

        Args:
            fragment: A definition or property schema

        Returns:
            Go type string, DYNAMIC_TYPE when nothing better is known
        """
        if not isinstance(fragment, dict):
            return DYNAMIC_TYPE

        # Self-referential documents (YAML anchors) would otherwise never terminate
        marker = id(fragment)
        if marker in self._in_flight:
            logger.debug("Cyclic schema fragment, using %s", DYNAMIC_TYPE)
            return DYNAMIC_TYPE

        self._in_flight.add(marker)
        try:
            return self._resolve(fragment)
        finally:
            self._in_flight.discard(marker)

    def _resolve(self, fragment: dict) -> str:
        ref = fragment.get("$ref")
        if isinstance(ref, str):
            name = ref_name(ref)
            if name not in self.definitions:
                logger.debug("Reference %s does not match a collected definition", ref)
            return name

        schema_type = fragment.get("type")

        if schema_type == "array":
            items = fragment.get("items")
            if isinstance(items, dict):
                return SLICE_PREFIX + self.resolve(items)
            return SLICE_PREFIX + DYNAMIC_TYPE

        if isinstance(schema_type, str) and schema_type in PRIMITIVE_TYPES:
            return self._resolve_primitive(schema_type, fragment)

        if has_composition(fragment):
            return DYNAMIC_TYPE

        if "const" in fragment:
            return DYNAMIC_TYPE

        enum = fragment.get("enum")
        if isinstance(enum, list) and enum:
            return literal_type(enum[0])

        return DYNAMIC_TYPE

    def _resolve_primitive(self, schema_type: str, fragment: dict) -> str:
        if schema_type == "object":
            additional = fragment.get("additionalProperties")
            if isinstance(additional, dict):
                return MAP_PREFIX + self.resolve(additional)
            return MAP_PREFIX + DYNAMIC_TYPE

        schema_format = fragment.get("format")
        if isinstance(schema_format, str) and (schema_type, schema_format) in FORMAT_MAP:
            return FORMAT_MAP[(schema_type, schema_format)]
        return TYPE_MAP[schema_type]
