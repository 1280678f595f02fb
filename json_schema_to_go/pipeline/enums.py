"""
Inline enum discovery.

Properties that restrict their value with an "enum" list but have no
named definition of their own get a synthesized enum type, named from the
common prefix of their values (or from the property name).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from .naming import derive_enum_name, is_tag_safe
from .type_resolver import TypeResolver

logger = logging.getLogger(__name__)


@dataclass
class InlineEnum:
    """An enum synthesized from a property constraint."""

    name: str = ""
    values: list[Any] = field(default_factory=list)
    description: str | None = None
    base_type: str = "string"

    # "Definition.property" locations that produced this enum
    sources: list[str] = field(default_factory=list)


def property_enum(fragment: Any) -> list[Any] | None:
    """The non-empty enum list of a property fragment, if any."""
    if not isinstance(fragment, dict):
        return None
    enum = fragment.get("enum")
    if isinstance(enum, list) and enum:
        return enum
    return None


def discover_inline_enums(definitions: dict[str, Any], acronyms: frozenset[str]) -> dict[str, InlineEnum]:
    """
    Find property-level enums and synthesize a named type for each.

    Properties yielding the same derived name share a single record; the
    last one seen (definitions and properties are walked in sorted order)
    provides the values and description. A derived name that matches an
    existing definition is not synthesized, the definition takes precedence.

    Args:
        definitions: The collected definitions
        acronyms: Lowercase acronym tokens

    Returns:
        Mapping of derived name -> InlineEnum
    """
    resolver = TypeResolver(definitions)
    discovered: dict[str, InlineEnum] = {}

    for def_name in sorted(definitions):
        fragment = definitions[def_name]
        if not isinstance(fragment, dict):
            continue
        properties = fragment.get("properties")
        if not isinstance(properties, dict):
            continue

        for prop_name in sorted(properties, key=str):
            prop = properties[prop_name]
            values = property_enum(prop)
            if values is None or not is_tag_safe(str(prop_name)):
                continue

            name = derive_enum_name(values, prop_name, acronyms)
            source = f"{def_name}.{prop_name}"

            if name in definitions:
                logger.warning(
                    "Inline enum %s (from %s) clashes with a definition of the same name; using the definition",
                    name,
                    source,
                )
                continue

            description = prop.get("description")
            record = discovered.get(name)
            if record is None:
                record = discovered[name] = InlineEnum(name=name)
            else:
                logger.debug("Inline enum %s from %s merged with %s", name, source, ", ".join(record.sources))

            record.values = list(values)
            record.description = description if isinstance(description, str) else None
            record.base_type = resolver.resolve(prop)
            record.sources.append(source)

    return discovered
