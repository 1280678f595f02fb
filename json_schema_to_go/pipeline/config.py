"""
Configuration for the Go type generation pipeline.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from ..errors import ConfigError

# Lowercase tokens rendered fully upper-case in generated identifiers
DEFAULT_ACRONYMS: frozenset[str] = frozenset(
    {
        "a2a",
        "api",
        "html",
        "http",
        "https",
        "id",
        "json",
        "jsonrpc",
        "mime",
        "rpc",
        "sse",
        "uri",
        "url",
        "uuid",
    }
)


def build_acronym_table(overrides: dict[str, bool] | None = None) -> frozenset[str]:
    """
    Merge caller overrides into the default acronym table.

    Args:
        overrides: Mapping of token -> enabled. A true value adds the token,
            a false value removes it from the defaults.

    Returns:
        Immutable set of lowercase acronym tokens
    """
    table = set(DEFAULT_ACRONYMS)
    for token, enabled in (overrides or {}).items():
        key = str(token).lower()
        if enabled:
            table.add(key)
        else:
            table.discard(key)
    return frozenset(table)


@dataclass
class FormatterConfig:
    """Configuration for the post-generation formatter."""

    # Command run on the written file, the path is appended
    command: list[str] = field(default_factory=lambda: ["gofmt", "-w"])

    # Seconds before the formatter run is abandoned
    timeout: int = 30


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        atomic_write: Whether to write through a temporary file and rename
        validate_before_write: Whether to run structural checks on the Go code
    """

    atomic_write: bool = True
    validate_before_write: bool = True


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Go package clause of the generated file
    package_name: str = "types"

    # Acronym overrides merged into DEFAULT_ACRONYMS
    acronyms: dict[str, bool] = field(default_factory=dict)

    # Emit schema descriptions as leading comments
    include_comments: bool = True

    # Run the external formatter on the written file
    format_output: bool = True

    formatter: FormatterConfig = field(default_factory=FormatterConfig)

    output: OutputConfig = field(default_factory=OutputConfig)

    def acronym_table(self) -> frozenset[str]:
        """Build the immutable acronym table for one invocation."""
        return build_acronym_table(self.acronyms)

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """
        Create a config from a dictionary.

        Unknown top-level keys are ignored.

        Raises:
            ConfigError: If a section has the wrong shape or unknown keys
        """
        if not isinstance(d, dict):
            raise ConfigError(f"Configuration must be a JSON object, got {type(d).__name__}")
        config = CodeGeneratorConfig()
        known = {f.name for f in fields(config)}
        for k, v in d.items():
            if k == "formatter":
                config.formatter = _section(FormatterConfig, k, v)
            elif k == "output":
                config.output = _section(OutputConfig, k, v)
            elif k == "acronyms":
                if not isinstance(v, dict):
                    raise ConfigError("'acronyms' must be an object mapping tokens to true or false")
                config.acronyms = dict(v)
            elif k in known:
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "package_name": self.package_name,
            "acronyms": dict(self.acronyms),
            "include_comments": self.include_comments,
            "format_output": self.format_output,
            "formatter": {
                "command": list(self.formatter.command),
                "timeout": self.formatter.timeout,
            },
            "output": {
                "atomic_write": self.output.atomic_write,
                "validate_before_write": self.output.validate_before_write,
            },
        }


def _section(cls: type, key: str, value: Any) -> Any:
    """Build a nested config dataclass, rejecting unknown keys."""
    if not isinstance(value, dict):
        raise ConfigError(f"'{key}' must be an object")
    unknown = sorted(set(value) - {f.name for f in fields(cls)})
    if unknown:
        raise ConfigError(f"Unknown '{key}' option(s): {', '.join(map(str, unknown))}")
    return cls(**value)


def load_config_file(path: str | Path) -> CodeGeneratorConfig:
    """
    Load a JSON configuration file.

    Raises:
        ConfigError: If the file cannot be read or is not a valid configuration
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"Failed to read config {path}: {e}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(f"Failed to parse config {path}: {e}") from e
    return CodeGeneratorConfig.from_dict(data)
