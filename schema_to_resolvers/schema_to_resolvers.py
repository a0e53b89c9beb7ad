import json
import logging

import click

from .cli_utils import reconstruct_command_line
from .pipeline import ConfigurationError, GenerationError, GeneratorConfig, OutputMode, ResolverStubGenerator


def _load_json(path, what):
    try:
        with open(path) as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid {what} file {path}: {e}") from e


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--package-name", "-p", default=None, type=str, help="Package name of the generated module")
@click.option("--template", "-t", default=None, type=click.Path(exists=True, resolve_path=True), help="Template file to render instead of the bundled one")
@click.option("--force", "-f", is_flag=True, default=False, help="Overwrite the output file if it exists")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log classification decisions")
@click.argument("path", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, type=click.Path(resolve_path=True))
def schema_to_resolvers(config, package_name, template, force, verbose, path, output):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    try:
        schema = _load_json(path, "schema")

        if config is not None:
            config = GeneratorConfig.from_dict(_load_json(config, "config"))
        else:
            config = GeneratorConfig()

        # CLI flags override the config file
        if package_name is not None:
            config.package_name = package_name
        if template is not None:
            config.template_path = template
        if force:
            config.output.mode = OutputMode.FORCE

        codegen = ResolverStubGenerator(schema, config, command_line=reconstruct_command_line())
        codegen.write(output)
    except GenerationError as e:
        raise click.ClickException(str(e)) from e
