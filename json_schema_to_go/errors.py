"""
Exceptions raised by the schema to Go generator.

Every fatal condition derives from SchemaToGoError so callers (and the CLI)
can catch a single base class.
"""

from __future__ import annotations


class SchemaToGoError(Exception):
    """Base class for all generator errors."""


class ReadError(SchemaToGoError):
    """Raised when the schema file cannot be read."""


class ParseError(SchemaToGoError):
    """Raised when the schema file is not valid JSON or YAML.

    The message of the underlying parser is kept in the error message.
    """


class UnsupportedFormatError(SchemaToGoError):
    """Raised when the schema file suffix is not .json, .yaml or .yml."""


class EmptySchemaError(SchemaToGoError):
    """Raised when a schema document contributes no type definitions."""


class WriteError(SchemaToGoError):
    """Raised when the output file cannot be created or replaced."""


class OutputValidationError(SchemaToGoError):
    """Raised when generated Go code fails the structural sanity checks."""


class RegistryError(SchemaToGoError):
    """Raised for generator registry lookups and registrations."""


class ConfigError(SchemaToGoError):
    """Raised when a configuration file or mapping is malformed."""
