"""
Base class for emission backends.

Defines the interface a backend implements to render an EmissionModel
through a template body.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import jinja2

from ..analyzer.model import EmissionModel
from ..errors import ConfigurationError, RenderError


class EmissionBackend(ABC):
    """Abstract base class for emission backends."""

    # Template directory name
    TEMPLATE_LANG: str = ""

    # Bundled template file name
    DEFAULT_TEMPLATE: str = ""

    def __init__(self):
        self._setup_environment()

    def _setup_environment(self) -> None:
        """Set up the Jinja2 environment."""
        self.template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(self.template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
            undefined=jinja2.StrictUndefined,
        )
        self._add_filters(self.jinja_env)

    def _add_filters(self, env: jinja2.Environment) -> None:
        """Register template filters."""

    def default_template(self) -> str:
        """Return the body of the bundled template."""
        return self.load_template(self.template_dir / self.DEFAULT_TEMPLATE)

    @staticmethod
    def load_template(path: str | Path) -> str:
        """
        Read a template body from disk.

        Raises:
            ConfigurationError: If the file cannot be read
        """
        try:
            return Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Cannot read template {path}: {e}") from e

    def render(self, package_name: str, filename: str, model: EmissionModel, template: str) -> str:
        """
        Render the model through a template body.

        Args:
            package_name: Package or module name of the output
            filename: Output destination identifier
            model: The emission model
            template: Template body

        Returns:
            Rendered source code

        Raises:
            RenderError: If the template is malformed or references an unknown binding
        """
        try:
            compiled = self.jinja_env.from_string(template)
            return compiled.render(self._prepare_context(package_name, filename, model))
        except jinja2.TemplateError as e:
            raise RenderError(f"Cannot render {filename or 'output'}: {e}") from e

    @abstractmethod
    def _prepare_context(self, package_name: str, filename: str, model: EmissionModel) -> dict[str, Any]:
        """
        Prepare the template context.

        Returns:
            Dictionary of template variables
        """

    @abstractmethod
    def validate(self, code: str, filename: str = "") -> None:
        """
        Check rendered code is structurally valid.

        Raises:
            RenderError: If it is not
        """
