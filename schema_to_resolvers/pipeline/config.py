"""
Configuration for the resolver stub generator.

A configuration value is passed explicitly to every generation run; nothing
is shared between runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .bindings import TypeBindingTable
from .errors import ConfigurationError


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Default: raise error if file exists
    FORCE = "force"  # Overwrite


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to check the generated code parses before writing
        atomic_write: Whether to write through a temporary file
    """

    mode: OutputMode = OutputMode.ERROR_IF_EXISTS
    validate_before_write: bool = True
    atomic_write: bool = True


@dataclass
class GeneratorConfig:
    """Configuration options for resolver stub generation."""

    # Name of the generated package, rendered in the module docstring
    package_name: str = "main"

    # Name of the root resolver class
    resolver_type: str = "Resolver"

    # Whether to emit the root resolver class
    has_root: bool = True

    # Fully-qualified type of the context parameter
    context_type: str = "typing.Any"

    # Module unbound schema types are imported from ("" = bare names)
    models_module: str = ""

    # Template file ("" = bundled template)
    template_path: str = ""

    # Add generation comment at top of file
    add_generation_comment: bool = True

    # Schema type name -> bound Python type (see TypeBindingTable.from_dict)
    bindings: dict[str, Any] = field(default_factory=dict)

    output: OutputConfig = field(default_factory=OutputConfig)

    def binding_table(self) -> TypeBindingTable:
        """Build a fresh binding table for one run."""
        return TypeBindingTable.from_dict(self.bindings)

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary."""
        if not isinstance(d, dict):
            raise ConfigurationError(f"Configuration must be an object, got {type(d).__name__}")
        config = GeneratorConfig()
        for k, v in d.items():
            if k == "output":
                if not isinstance(v, dict):
                    raise ConfigurationError(f"'output' must be an object, got {type(v).__name__}")
                mode = v.get("mode", OutputMode.ERROR_IF_EXISTS)
                try:
                    mode = OutputMode(mode)
                except ValueError as e:
                    raise ConfigurationError(f"Invalid output mode: {mode!r}") from e
                config.output = OutputConfig(
                    mode=mode,
                    validate_before_write=v.get("validate_before_write", True),
                    atomic_write=v.get("atomic_write", True),
                )
            elif hasattr(config, k):
                setattr(config, k, v)
        # Fail on malformed bindings before any work is done
        config.binding_table()
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "package_name": self.package_name,
            "resolver_type": self.resolver_type,
            "has_root": self.has_root,
            "context_type": self.context_type,
            "models_module": self.models_module,
            "template_path": self.template_path,
            "add_generation_comment": self.add_generation_comment,
            "bindings": self.bindings,
            "output": {
                "mode": self.output.mode.value,
                "validate_before_write": self.output.validate_before_write,
                "atomic_write": self.output.atomic_write,
            },
        }
