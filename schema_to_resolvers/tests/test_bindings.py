#!/usr/bin/env python3

import pytest

from schema_to_resolvers.pipeline import ConfigurationError, GeneratorConfig, OutputMode
from schema_to_resolvers.pipeline.bindings import FieldOverride, TypeBindingEntry, TypeBindingTable


class TestTypeBindingTable:
    """Test cases for the type binding table"""

    def test_absent_entry_is_not_bound(self):
        table = TypeBindingTable()

        assert table.lookup("Box") is None
        assert table.bound_type("Box") is None
        assert table.field_needs_resolver("Box", "open")

    def test_string_binding(self):
        table = TypeBindingTable.from_dict({"FSID": "dagger.FSID"})

        assert "FSID" in table
        assert table.bound_type("FSID") == "dagger.FSID"
        assert table.lookup("FSID") == TypeBindingEntry(model="dagger.FSID")

    def test_field_overrides(self):
        table = TypeBindingTable.from_dict(
            {
                "Widget": {
                    "model": "ext.Widget",
                    "fields": {"build": {"resolver": False}, "paint": {"resolver": True}},
                }
            }
        )

        assert table.bound_type("Widget") == "ext.Widget"
        assert not table.field_needs_resolver("Widget", "build")
        assert table.field_needs_resolver("Widget", "paint")
        assert table.field_needs_resolver("Widget", "other")
        assert table.lookup("Widget").fields["build"] == FieldOverride(resolver=False)

    def test_overrides_without_model(self):
        table = TypeBindingTable.from_dict({"Box": {"fields": {"open": {"resolver": False}}}})

        assert table.bound_type("Box") is None
        assert not table.field_needs_resolver("Box", "open")

    def test_round_trip(self):
        data = {"FSID": "dagger.FSID", "Exec": {"model": "dagger.Exec", "fields": {"stdout": {"resolver": False}}}}

        assert TypeBindingTable.from_dict(data).to_dict() == data

    @pytest.mark.parametrize(
        "data",
        [
            ["FSID"],
            {"FSID": 3},
            {"FSID": {"model": 3}},
            {"Box": {"fields": {"open": False}}},
        ],
    )
    def test_malformed_bindings(self, data):
        with pytest.raises(ConfigurationError):
            TypeBindingTable.from_dict(data)


class TestGeneratorConfig:
    """Test cases for configuration loading"""

    def test_from_dict(self):
        config = GeneratorConfig.from_dict(
            {
                "package_name": "boxes",
                "has_root": False,
                "bindings": {"FSID": "dagger.FSID"},
                "output": {"mode": "force"},
                "unknown_key": 1,
            }
        )

        assert config.package_name == "boxes"
        assert config.has_root is False
        assert config.output.mode == OutputMode.FORCE
        assert config.binding_table().bound_type("FSID") == "dagger.FSID"
        assert not hasattr(config, "unknown_key")

    def test_to_dict_round_trip(self):
        config = GeneratorConfig(package_name="boxes", bindings={"FSID": "dagger.FSID"})

        assert GeneratorConfig.from_dict(config.to_dict()).to_dict() == config.to_dict()

    def test_invalid_output_mode(self):
        with pytest.raises(ConfigurationError):
            GeneratorConfig.from_dict({"output": {"mode": "merge"}})

    @pytest.mark.parametrize("output", ["force", ["force"], None])
    def test_output_must_be_an_object(self, output):
        with pytest.raises(ConfigurationError):
            GeneratorConfig.from_dict({"output": output})

    def test_invalid_bindings_fail_early(self):
        with pytest.raises(ConfigurationError):
            GeneratorConfig.from_dict({"bindings": {"FSID": 3}})

    def test_each_config_builds_its_own_table(self):
        config = GeneratorConfig(bindings={"FSID": "dagger.FSID"})

        assert config.binding_table() is not config.binding_table()


if __name__ == "__main__":
    pytest.main([__file__])
