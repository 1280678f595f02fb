"""
Post-processing formatters for generated code.
"""

from __future__ import annotations

from .base import Formatter
from .gofmt_formatter import GofmtFormatter, format_go_file

__all__ = [
    "Formatter",
    "GofmtFormatter",
    "format_go_file",
]
