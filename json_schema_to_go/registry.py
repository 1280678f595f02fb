"""
Generator registry.

Schema handlers are looked up by name (``--generator``) or by the suffix of
the input file. The registry is an explicit object populated at startup,
see handlers.create_default_registry.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass, field
from pathlib import Path

from .errors import RegistryError
from .pipeline.config import CodeGeneratorConfig

logger = logging.getLogger(__name__)


class SchemaHandler(ABC):
    """A named schema dialect that can validate and generate from a file."""

    name: str = ""
    description: str = ""
    supported_formats: tuple[str, ...] = ()

    @abstractmethod
    def generate(self, schema_path: Path, output_path: Path, config: CodeGeneratorConfig) -> None:
        """
        Generate a Go file from a schema file.

        Raises:
            SchemaToGoError: On any generation failure
        """

    @abstractmethod
    def validate_schema(self, schema_path: Path) -> None:
        """
        Check that a schema file can be handled.

        Raises:
            SchemaToGoError: If the file cannot be handled
        """


@dataclass
class GeneratorInfo:
    """Metadata about a registered handler."""

    name: str
    description: str
    supported_formats: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


class GeneratorRegistry:
    """Registry of schema handlers, in registration order."""

    def __init__(self):
        self._handlers: dict[str, SchemaHandler] = {}

    def register(self, handler: SchemaHandler) -> None:
        """
        Register a handler under its name.

        Raises:
            RegistryError: If the name is empty or already registered
        """
        if not handler.name:
            raise RegistryError("Generator name cannot be empty")
        if handler.name in self._handlers:
            raise RegistryError(f"Generator with name '{handler.name}' already registered")
        self._handlers[handler.name] = handler
        logger.debug("Registered generator %s", handler.name)

    def get(self, name: str) -> SchemaHandler:
        """
        Look up a handler by name.

        Raises:
            RegistryError: If no handler has that name
        """
        try:
            return self._handlers[name]
        except KeyError:
            available = ", ".join(self._handlers) or "none"
            raise RegistryError(f"Generator '{name}' not found (available: {available})") from None

    def names(self) -> list[str]:
        return list(self._handlers)

    def get_by_format(self, path: str | Path) -> list[SchemaHandler]:
        """Handlers whose supported suffixes match the path, in registration order."""
        lowered = str(path).lower()
        return [
            handler
            for handler in self._handlers.values()
            if any(lowered.endswith(suffix) for suffix in handler.supported_formats)
        ]

    def info(self, name: str) -> GeneratorInfo:
        handler = self.get(name)
        return GeneratorInfo(
            name=handler.name,
            description=handler.description,
            supported_formats=list(handler.supported_formats),
        )

    def list_info(self) -> list[GeneratorInfo]:
        return [self.info(name) for name in self._handlers]
