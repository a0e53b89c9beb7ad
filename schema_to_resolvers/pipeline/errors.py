"""
Errors raised by the resolver stub generator.

A generation run is all-or-nothing: every error below aborts the run and
nothing is written. Unresolvable type references are not errors; they are
logged and replaced by a placeholder type.
"""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for errors that abort a generation run."""

    pass


class ConfigurationError(GenerationError):
    """Raised before classification when the inputs cannot be used.

    This can happen when:
    - The schema document is not shaped like a schema
    - The configuration or binding table is malformed
    - The template file cannot be read
    - The output file already exists and overwriting is not allowed
    """

    pass


class RenderError(GenerationError):
    """Raised when the emission pass cannot produce valid output.

    This can happen when:
    - The template is malformed
    - The template references a binding that does not exist
    - The rendered code is not valid Python
    """

    pass
