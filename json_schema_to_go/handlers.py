"""
Built-in schema handlers.

Both dialects share the same pipeline: an OpenAPI document keeps its types
under components.schemas, which the collector already covers.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import ParseError, ReadError
from .pipeline.config import CodeGeneratorConfig
from .pipeline.generator import generate_types, validate_schema_file
from .registry import GeneratorRegistry, SchemaHandler

logger = logging.getLogger(__name__)

SCHEMA_SUFFIXES = (".json", ".yaml", ".yml")

# At least one must appear in an OpenAPI document
OPENAPI_MARKERS = ("openapi", "swagger")


class JsonRpcHandler(SchemaHandler):
    """JSON-RPC specifications and plain JSON Schema files."""

    name = "jsonrpc"
    description = "Generates Go types from JSON-RPC specifications and JSON Schema files"
    supported_formats = SCHEMA_SUFFIXES

    def generate(self, schema_path: Path, output_path: Path, config: CodeGeneratorConfig) -> None:
        generate_types(schema_path, output_path, config)

    def validate_schema(self, schema_path: Path) -> None:
        validate_schema_file(schema_path)


class OpenApiHandler(SchemaHandler):
    """OpenAPI 3.x and Swagger documents."""

    name = "openapi"
    description = "Generates Go types from OpenAPI 3.x specifications"
    supported_formats = SCHEMA_SUFFIXES

    def generate(self, schema_path: Path, output_path: Path, config: CodeGeneratorConfig) -> None:
        generate_types(schema_path, output_path, config)

    def validate_schema(self, schema_path: Path) -> None:
        try:
            content = Path(schema_path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ReadError(f"Failed to read schema {schema_path}: {e}") from e

        if not any(marker in content for marker in OPENAPI_MARKERS):
            raise ParseError(f"{schema_path} does not appear to be an OpenAPI specification")

        validate_schema_file(schema_path)


def create_default_registry() -> GeneratorRegistry:
    """Registry populated with the built-in handlers."""
    registry = GeneratorRegistry()
    registry.register(JsonRpcHandler())
    registry.register(OpenApiHandler())
    return registry
