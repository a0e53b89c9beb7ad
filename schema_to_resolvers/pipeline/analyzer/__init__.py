"""
Analyzer module.

Contains schema classification, type reference resolution and the
emission model.
"""

from __future__ import annotations

from .classifier import Classification, SchemaClassifier
from .model import NOT_IMPLEMENTED, EmissionModel, GeneratedObject, Resolver, StubModelBuilder
from .type_index import (
    EMPTY_STRUCT_PLACEHOLDER,
    NO_POINTED_TO_TYPE,
    ImportRegistry,
    TypeReferenceIndex,
)

__all__ = [
    "Classification",
    "SchemaClassifier",
    "EmissionModel",
    "GeneratedObject",
    "Resolver",
    "StubModelBuilder",
    "NOT_IMPLEMENTED",
    "ImportRegistry",
    "TypeReferenceIndex",
    "EMPTY_STRUCT_PLACEHOLDER",
    "NO_POINTED_TO_TYPE",
]
