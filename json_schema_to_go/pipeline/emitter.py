"""
Go source emitter.

Orders the collected definitions and synthesized enums and renders them
through the Go templates: inline enums first, then enum definitions, then
everything else, each group sorted by name.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import jinja2

from .config import CodeGeneratorConfig
from .enums import InlineEnum, property_enum
from .naming import PLACEHOLDER, derive_enum_name, is_tag_safe, meaningful_prefix, to_identifier
from .type_resolver import (
    DYNAMIC_TYPE,
    PRIMITIVE_TYPES,
    TIME_TYPE,
    TypeResolver,
    has_composition,
    is_collection_type,
    literal_type,
)

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent.parent / "templates" / "go"

# Go base type of an enum -> accepted literal kinds
ENUM_LITERAL_KINDS: dict[str, tuple[type, ...]] = {
    "string": (str,),
    "int": (int,),
    "int32": (int,),
    "int64": (int,),
    "float32": (int, float),
    "float64": (int, float),
    "bool": (bool,),
}

# Go import path needed by a type expression
TYPE_IMPORTS: dict[str, str] = {
    TIME_TYPE: "time",
}


def comment_lines(description: Any) -> list[str]:
    """Format a description as Go line comments."""
    if not isinstance(description, str) or not description.strip():
        return []
    lines = []
    for line in description.strip().split("\n"):
        line = line.strip()
        lines.append(f"// {line}" if line else "//")
    return lines


def format_literal(value: Any) -> str:
    """Render an enum value as a Go constant literal."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    return repr(value)


def _matches_kind(value: Any, base_type: str) -> bool:
    kinds = ENUM_LITERAL_KINDS[base_type]
    if isinstance(value, bool):
        return bool in kinds
    return isinstance(value, kinds)


def _unique(name: str, used: set[str]) -> str:
    candidate = name
    counter = 2
    while candidate in used:
        candidate = f"{name}{counter}"
        counter += 1
    used.add(candidate)
    return candidate


class GoEmitter:
    """Renders Go declarations for a set of definitions."""

    def __init__(self, config: CodeGeneratorConfig, acronyms: frozenset[str]):
        """
        Initialize the emitter.

        Args:
            config: Code generation configuration
            acronyms: The acronym table of this invocation
        """
        self.config = config
        self.acronyms = acronyms
        self.resolver = TypeResolver({})
        self.types_used: list[str] = []
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
            lstrip_blocks=True,
            trim_blocks=True,
        )
        self.prefix_template = self.jinja_env.get_template("prefix.go.jinja2")
        self.enum_template = self.jinja_env.get_template("enum.go.jinja2")
        self.struct_template = self.jinja_env.get_template("struct.go.jinja2")
        self.alias_template = self.jinja_env.get_template("alias.go.jinja2")

    def emit(self, definitions: dict[str, Any], inline_enums: dict[str, InlineEnum]) -> str:
        """
        Render the complete Go source file.

        Args:
            definitions: Collected definitions, name -> fragment
            inline_enums: Synthesized enums, name -> record

        Returns:
            Go source code
        """
        namespace = dict(definitions)
        namespace.update({name: record for name, record in inline_enums.items() if name not in definitions})
        self.resolver = TypeResolver(namespace)
        self.types_used = []

        blocks = []
        for name in sorted(inline_enums):
            record = inline_enums[name]
            blocks.append(self._render_enum(record.name, record.values, record.base_type, record.description))

        enum_names = []
        other_names = []
        for name in sorted(definitions):
            fragment = definitions[name]
            if not isinstance(fragment, dict):
                logger.debug("Skipping definition %s: not a schema object", name)
                continue
            if property_enum(fragment) is not None:
                enum_names.append(name)
            else:
                other_names.append(name)

        for name in enum_names:
            fragment = definitions[name]
            base_type = self.resolver.resolve(fragment)
            blocks.append(self._render_enum(name, fragment["enum"], base_type, fragment.get("description")))

        for name in other_names:
            blocks.append(self._render_definition(name, definitions[name]))

        prefix = self.prefix_template.render(
            package_name=self.config.package_name,
            imports=self._imports(),
        )
        return "\n\n".join(block.strip("\n") for block in [prefix, *blocks]) + "\n"

    def _imports(self) -> list[str]:
        paths = set()
        for go_type in self.types_used:
            for type_name, import_path in TYPE_IMPORTS.items():
                if type_name in go_type:
                    paths.add(f'"{import_path}"')
        return sorted(paths)

    def _comments(self, description: Any) -> list[str]:
        if not self.config.include_comments:
            return []
        return comment_lines(description)

    def _render_definition(self, name: str, fragment: dict) -> str:
        schema_type = fragment.get("type")
        is_alias_type = isinstance(schema_type, str) and (schema_type in PRIMITIVE_TYPES or schema_type == "array")

        if "properties" not in fragment and (is_alias_type or "$ref" in fragment):
            return self._render_alias(name, self.resolver.resolve(fragment), fragment.get("description"))

        if "properties" not in fragment and has_composition(fragment):
            return self._render_alias(name, DYNAMIC_TYPE, fragment.get("description"))

        return self._render_struct(name, fragment)

    def _render_alias(self, name: str, target: str, description: Any) -> str:
        self.types_used.append(target)
        return self.alias_template.render(
            name=name,
            target=target,
            comment_lines=self._comments(description),
        )

    def _render_enum(self, name: str, values: list[Any], base_type: str, description: Any) -> str:
        if base_type not in ENUM_LITERAL_KINDS:
            base_type = literal_type(values[0]) if values else "string"
            if base_type not in ENUM_LITERAL_KINDS:
                base_type = "string"
        self.types_used.append(base_type)

        literals = sorted({value for value in values if _matches_kind(value, base_type)})
        skipped = len([value for value in values if not _matches_kind(value, base_type)])
        if skipped:
            logger.debug("Enum %s: %d value(s) do not match base type %s", name, skipped, base_type)

        prefix = meaningful_prefix([value for value in literals if isinstance(value, str)])
        used: set[str] = set()
        constants = []
        for value in literals:
            constant_name = _unique(name + self._constant_suffix(value, prefix), used)
            constants.append({"name": constant_name, "literal": format_literal(value)})

        return self.enum_template.render(
            name=name,
            base_type=base_type,
            constants=constants,
            comment_lines=self._comments(description),
        )

    def _constant_suffix(self, value: Any, prefix: str) -> str:
        if not isinstance(value, str):
            text = str(value).replace("-", "Neg").replace(".", "_")
            return to_identifier(f"{PLACEHOLDER}_{text}", self.acronyms, preserve_case=True)
        remainder = value[len(prefix) :] if prefix else value
        if not remainder.strip("_"):
            remainder = value
        if remainder.lstrip("_")[:1].isdigit():
            remainder = f"{PLACEHOLDER}_{remainder}"
        return to_identifier(remainder, self.acronyms, preserve_case=True)

    def _render_struct(self, name: str, fragment: dict) -> str:
        properties = fragment.get("properties")
        if not isinstance(properties, dict):
            properties = {}
        required = fragment.get("required")
        required_names = {str(item) for item in required} if isinstance(required, list) else set()

        used: set[str] = set()
        fields = []
        for prop_name in sorted(properties, key=str):
            prop = properties[prop_name]
            if not isinstance(prop, dict):
                logger.debug("Skipping property %s.%s: not a schema object", name, prop_name)
                continue
            if not is_tag_safe(str(prop_name)):
                logger.warning("Skipping property %s.%r: name cannot be written into a json struct tag", name, prop_name)
                continue
            fields.append(self._prepare_field(name, str(prop_name), prop, str(prop_name) in required_names, used))

        return self.struct_template.render(
            name=name,
            fields=fields,
            comment_lines=self._comments(fragment.get("description")),
        )

    def _prepare_field(self, struct_name: str, prop_name: str, prop: dict, is_required: bool, used: set[str]) -> dict[str, Any]:
        enum = property_enum(prop)
        if enum is not None:
            go_type = derive_enum_name(enum, prop_name, self.acronyms)
        else:
            go_type = self.resolver.resolve(prop)

        if not is_required and "default" not in prop and not is_collection_type(go_type) and go_type != DYNAMIC_TYPE:
            go_type = f"*{go_type}"
        self.types_used.append(go_type)

        field_name = to_identifier(prop_name, self.acronyms)
        unique_name = _unique(field_name, used)
        if unique_name != field_name:
            logger.warning("Field %s.%s renamed to %s to avoid a duplicate Go field name", struct_name, prop_name, unique_name)

        return {
            "name": unique_name,
            "type": go_type,
            "tag": prop_name if is_required else f"{prop_name},omitempty",
            "comment_lines": self._comments(prop.get("description")),
        }
