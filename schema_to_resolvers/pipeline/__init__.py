"""
Pipeline - schema-driven resolver stub generator.

This module provides a multi-phase architecture for generating resolver
stubs from a schema:

1. Phase 1 (Parser): Parse the schema document into schema nodes
2. Phase 2 (Classifier): Select root objects and resolver-worthy fields,
   collecting type references in the type index
3. Phase 3 (Model builder): Aggregate into an immutable emission model
4. Phase 4 (Emission): Render the model through a Jinja2 template
5. Phase 5 (Writer): Validate and write the output atomically
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter
from .bindings import FieldOverride, TypeBindingEntry, TypeBindingTable
from .config import GeneratorConfig, OutputConfig, OutputMode
from .errors import ConfigurationError, GenerationError, RenderError
from .generator import ResolverStubGenerator

__all__ = [
    "ResolverStubGenerator",
    "GeneratorConfig",
    "OutputConfig",
    "OutputMode",
    "TypeBindingTable",
    "TypeBindingEntry",
    "FieldOverride",
    "GenerationError",
    "ConfigurationError",
    "RenderError",
    "AtomicWriter",
]
