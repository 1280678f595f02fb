"""
Pipeline - JSON Schema / OpenAPI / JSON-RPC schema to Go type generator.

Phases:

1. Collector: gather named definitions from every container location
2. Enum discovery: synthesize named types for property-level enums
3. Emitter: resolve Go types, synthesize identifiers, render declarations
4. Writer: validate and atomically write the output file
5. Formatter: optional gofmt run on the written file
"""

from __future__ import annotations

from .collector import collect_definitions
from .config import CodeGeneratorConfig, FormatterConfig, OutputConfig
from .enums import InlineEnum, discover_inline_enums
from .generator import PipelineGenerator, generate_types, validate_schema, validate_schema_file
from .loader import load_schema
from .naming import derive_enum_name, to_identifier
from .writer import AtomicWriter

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "FormatterConfig",
    "OutputConfig",
    "InlineEnum",
    "AtomicWriter",
    "collect_definitions",
    "discover_inline_enums",
    "derive_enum_name",
    "to_identifier",
    "load_schema",
    "generate_types",
    "validate_schema",
    "validate_schema_file",
]
