"""Schema to Resolvers

A Python package for generating resolver stubs from a schema.
Objects whose fields take arguments get a resolver class with one
unimplemented method per such field; everything else is left to direct
field access on the bound or generated types.
"""

__version__ = "1.0.0"

from .pipeline import (
    AtomicWriter,
    ConfigurationError,
    GenerationError,
    GeneratorConfig,
    OutputConfig,
    OutputMode,
    RenderError,
    ResolverStubGenerator,
    TypeBindingTable,
)

__all__ = [
    "ResolverStubGenerator",
    "GeneratorConfig",
    "OutputConfig",
    "OutputMode",
    "TypeBindingTable",
    "GenerationError",
    "ConfigurationError",
    "RenderError",
    "AtomicWriter",
]
