"""JSON Schema to Go

Generates Go type declarations (structs, enums, aliases) from JSON Schema,
OpenAPI and JSON-RPC schema documents in JSON or YAML.
"""

__version__ = "0.1.0"

from .errors import SchemaToGoError
from .pipeline import CodeGeneratorConfig, PipelineGenerator, generate_types

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "SchemaToGoError",
    "generate_types",
]
