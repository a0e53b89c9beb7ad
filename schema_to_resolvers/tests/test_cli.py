#!/usr/bin/env python3

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from schema_to_resolvers.cli_utils import reconstruct_command_line
from schema_to_resolvers.schema_to_resolvers import schema_to_resolvers

SCHEMAS = Path(__file__).parent / "test_data" / "schemas"


class TestCli:
    """Test cases for the command line entry point"""

    def test_generate(self, tmp_path):
        output = tmp_path / "resolvers.py"
        result = CliRunner().invoke(
            schema_to_resolvers,
            [str(SCHEMAS / "filesystem.schema.json"), str(output), "--config", str(SCHEMAS / "filesystem_config.json")],
        )

        assert result.exit_code == 0, result.output
        code = output.read_text()
        assert code.startswith(
            "# Generated by schema_to_resolvers filesystem.schema.json resolvers.py --config filesystem_config.json\n"
        )
        assert "class FilesystemResolver:" in code

    def test_package_name_flag(self, tmp_path):
        output = tmp_path / "resolvers.py"
        result = CliRunner().invoke(
            schema_to_resolvers,
            [str(SCHEMAS / "filesystem.schema.json"), str(output), "-p", "boxes"],
        )

        assert result.exit_code == 0, result.output
        assert '"""Resolvers for boxes.' in output.read_text()

    def test_existing_output_needs_force(self, tmp_path):
        output = tmp_path / "resolvers.py"
        output.write_text("# custom\n")
        args = [str(SCHEMAS / "filesystem.schema.json"), str(output)]

        result = CliRunner().invoke(schema_to_resolvers, args)
        assert result.exit_code != 0
        assert "already exists" in result.output
        assert output.read_text() == "# custom\n"

        result = CliRunner().invoke(schema_to_resolvers, args + ["--force"])
        assert result.exit_code == 0, result.output
        assert "--force" in output.read_text().splitlines()[0]

    def test_malformed_schema(self, tmp_path):
        schema = tmp_path / "schema.json"
        schema.write_text(json.dumps({"objects": []}))
        output = tmp_path / "resolvers.py"

        result = CliRunner().invoke(schema_to_resolvers, [str(schema), str(output)])

        assert result.exit_code != 0
        assert "types" in result.output
        assert not output.exists()

    def test_invalid_json(self, tmp_path):
        schema = tmp_path / "schema.json"
        schema.write_text("{")

        result = CliRunner().invoke(schema_to_resolvers, [str(schema), str(tmp_path / "out.py")])

        assert result.exit_code != 0
        assert "Invalid schema file" in result.output

    def test_values_are_shell_quoted(self, tmp_path):
        output = tmp_path / "resolvers.py"
        result = CliRunner().invoke(
            schema_to_resolvers,
            [str(SCHEMAS / "filesystem.schema.json"), str(output), "-p", "my boxes"],
        )

        assert result.exit_code == 0, result.output
        first_line = output.read_text().splitlines()[0]
        assert first_line == "# Generated by schema_to_resolvers filesystem.schema.json resolvers.py --package-name 'my boxes'"

    def test_reconstruct_command_line_without_context(self):
        # No active Click context outside a command invocation
        assert reconstruct_command_line() == "schema_to_resolvers"


if __name__ == "__main__":
    pytest.main([__file__])
