"""
Pipeline generator: schema document in, Go source out.

Phases:
1. Collector: flatten the definition containers into one namespace
2. Enum discovery: synthesize named enums for property-level constraints
3. Emitter: resolve types, synthesize identifiers and render the file

File level helpers wrap the phases with loading, writing and formatting.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .collector import collect_definitions
from .config import CodeGeneratorConfig
from .emitter import GoEmitter
from .enums import discover_inline_enums
from .formatters import GofmtFormatter
from .loader import load_schema
from .writer import AtomicWriter

logger = logging.getLogger(__name__)


class PipelineGenerator:
    """Generates Go type declarations from one schema document."""

    def __init__(self, schema: Any, config: CodeGeneratorConfig | None = None):
        """
        Initialize the generator.

        Args:
            schema: The parsed schema document
            config: Code generation configuration
        """
        self.schema = schema
        self.config = config or CodeGeneratorConfig()

    def generate(self) -> str:
        """
        Generate the Go source file content.

        Returns:
            Go source code

        Raises:
            EmptySchemaError: If the document contains no definitions
        """
        acronyms = self.config.acronym_table()

        # Phase 1: Collect
        definitions = collect_definitions(self.schema)

        # Phase 2: Discover inline enums
        inline_enums = discover_inline_enums(definitions, acronyms)
        logger.debug("Collected %d definitions and %d inline enums", len(definitions), len(inline_enums))

        # Phase 3: Emit
        emitter = GoEmitter(self.config, acronyms)
        return emitter.emit(definitions, inline_enums)


def generate_types(
    schema_path: str | Path,
    output_path: str | Path,
    config: CodeGeneratorConfig | None = None,
) -> None:
    """
    Generate a Go file from a schema file.

    The output file is only created once generation has succeeded. A
    formatter failure leaves the unformatted file in place.

    Args:
        schema_path: Input .json, .yaml or .yml file
        output_path: Go file to write
        config: Code generation configuration

    Raises:
        SchemaToGoError: On any read, parse, empty-schema or write failure
    """
    config = config or CodeGeneratorConfig()
    output_path = Path(output_path)

    schema = load_schema(schema_path)
    code = PipelineGenerator(schema, config).generate()

    writer = AtomicWriter(atomic=config.output.atomic_write)
    writer.write(output_path, code, validate=config.output.validate_before_write)

    if config.format_output:
        GofmtFormatter().format_file(output_path, config.formatter)


def validate_schema(document: Any) -> None:
    """
    Check that a document contributes at least one definition.

    Raises:
        EmptySchemaError: If no definition container holds a definition
    """
    collect_definitions(document)


def validate_schema_file(path: str | Path) -> None:
    """
    Load a schema file and check that it contributes at least one definition.

    Raises:
        SchemaToGoError: On read, parse or empty-schema failure
    """
    validate_schema(load_schema(path))
