"""
Resolver stub generator.

Runs the pipeline end to end:

1. Parse the schema document into schema nodes
2. Classify objects and fields, filling the type reference index
3. Build the emission model
4. Render the model through the template
5. Validate and write the output atomically
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .analyzer import EmissionModel, SchemaClassifier, StubModelBuilder, TypeReferenceIndex
from .atomic_writer import AtomicWriter
from .backends import PythonBackend
from .config import GeneratorConfig, OutputMode
from .errors import ConfigurationError
from .schema import Schema, SchemaParser

logger = logging.getLogger(__name__)


class ResolverStubGenerator:
    """Generates resolver stubs for one schema and one configuration."""

    def __init__(
        self,
        schema: Schema | dict[str, Any],
        config: GeneratorConfig | None = None,
        command_line: str = "schema_to_resolvers",
    ):
        """
        Initialize the generator.

        Args:
            schema: Parsed schema, or the schema document to parse
            config: Generation options (defaults when None)
            command_line: Command reproduced in the generation comment

        Raises:
            ConfigurationError: If the schema document or the configuration is malformed
        """
        self.config = config if config is not None else GeneratorConfig()
        self.schema = schema if isinstance(schema, Schema) else SchemaParser().parse(schema)
        self.command_line = command_line
        self.bindings = self.config.binding_table()
        self.backend = PythonBackend()
        if self.config.template_path:
            self.template = self.backend.load_template(self.config.template_path)
        else:
            self.template = self.backend.default_template()

    def build_model(self) -> EmissionModel:
        """Classify the schema and build the emission model."""
        type_index = TypeReferenceIndex(
            self.bindings,
            known_types=self.schema.type_names,
            models_module=self.config.models_module,
            reserved_names=(self.config.resolver_type,),
        )

        classification = SchemaClassifier(self.bindings, type_index).classify(self.schema.objects)
        logger.debug(
            "Classified %d object(s), %d resolver(s), %d type reference(s)",
            len(classification.objects),
            len(classification.resolvers),
            len(type_index),
        )

        builder = StubModelBuilder(
            package_name=self.config.package_name,
            resolver_type=self.config.resolver_type,
            has_root=self.config.has_root,
            context_type=self.config.context_type,
            generation_comment=self._generation_comment(),
        )
        return builder.build(classification.objects, classification.resolvers, type_index)

    def generate(self, filename: str = "") -> str:
        """
        Generate the stub module.

        Args:
            filename: Output destination identifier passed to the template

        Returns:
            Generated Python code

        Raises:
            RenderError: If rendering fails or produces invalid code
        """
        code = self._render(filename)
        if self.config.output.validate_before_write:
            self.backend.validate(code, filename)
        return code

    def write(self, path: str | Path) -> str:
        """
        Generate the stub module and write it to a file.

        Nothing is written when any step fails.

        Returns:
            The generated code

        Raises:
            ConfigurationError: If the file exists and the output mode forbids overwriting
            RenderError: If rendering fails or produces invalid code
        """
        path = Path(path)
        if self.config.output.mode == OutputMode.ERROR_IF_EXISTS and path.exists():
            raise ConfigurationError(f"Output file already exists: {path}. Use force mode to overwrite.")

        code = self._render(path.name)
        validate = self.config.output.validate_before_write
        if self.config.output.atomic_write:
            writer = AtomicWriter(validate=lambda content: self.backend.validate(content, path.name))
            if self.config.output.mode == OutputMode.FORCE:
                writer.write(path, code, validate)
            else:
                writer.write_if_not_exists(path, code, validate)
        else:
            if validate:
                self.backend.validate(code, path.name)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(code, encoding="utf-8")
            logger.info("Wrote %s", path)
        return code

    def _render(self, filename: str) -> str:
        model = self.build_model()
        return self.backend.render(self.config.package_name, filename, model, self.template)

    def _generation_comment(self) -> str:
        if not self.config.add_generation_comment:
            return ""
        return f"Generated by {self.command_line}"
