"""
Python emission backend.

Renders resolver stub classes: one class per root object, one method per
resolver, plus an optional root resolver class.
"""

from __future__ import annotations

from typing import Any

import jinja2

from ...utils import snake_to_pascal_case
from ..analyzer.model import EmissionModel
from ..errors import RenderError
from .base import EmissionBackend


def _docstring(text: str) -> str:
    """Make free text safe inside a triple-quoted docstring."""
    return text.strip().replace("\\", "\\\\").replace('"', '\\"')


class PythonBackend(EmissionBackend):
    """Python emission backend."""

    TEMPLATE_LANG = "python"
    DEFAULT_TEMPLATE = "resolvers.py.jinja2"

    def _add_filters(self, env: jinja2.Environment) -> None:
        env.filters["snake_to_pascal"] = snake_to_pascal_case
        env.filters["docstring"] = _docstring

    def _prepare_context(self, package_name: str, filename: str, model: EmissionModel) -> dict[str, Any]:
        return {
            "package_name": package_name,
            "filename": filename,
            "model": model,
            "types": model.type_index,
            "imports": model.type_index.import_lines(),
            "generation_comment": model.generation_comment,
        }

    def validate(self, code: str, filename: str = "") -> None:
        # compile() rejects what ast.parse() accepts, e.g. duplicate argument names
        try:
            compile(code, filename or "<generated>", "exec")
        except (SyntaxError, ValueError) as e:
            raise RenderError(f"Generated Python code is not valid: {e}") from e
