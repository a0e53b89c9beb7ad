"""
Schema module.

Contains the schema nodes and the schema document parser.
"""

from __future__ import annotations

from .nodes import Argument, Field, Schema, SchemaObject, TypeReference, Wrapper
from .parser import SchemaParser, parse_type_reference

__all__ = [
    "Argument",
    "Field",
    "Schema",
    "SchemaObject",
    "TypeReference",
    "Wrapper",
    "SchemaParser",
    "parse_type_reference",
]
