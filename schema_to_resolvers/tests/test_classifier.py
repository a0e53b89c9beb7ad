#!/usr/bin/env python3

import json
from pathlib import Path

import pytest

from schema_to_resolvers.pipeline.analyzer import NOT_IMPLEMENTED, SchemaClassifier, TypeReferenceIndex
from schema_to_resolvers.pipeline.bindings import TypeBindingTable
from schema_to_resolvers.pipeline.schema import Argument, Field, SchemaObject, SchemaParser, TypeReference

SCHEMAS = Path(__file__).parent / "test_data" / "schemas"


def _int():
    return TypeReference.named("Int")


def _field(name, *arg_names, reserved=False):
    return Field(
        name=name,
        arguments=tuple(Argument(name=a, type=_int()) for a in arg_names),
        type=TypeReference.named("Boolean"),
        reserved=reserved,
    )


def _classify(objects, bindings=None):
    table = TypeBindingTable.from_dict(bindings or {})
    index = TypeReferenceIndex(table, known_types={o.name for o in objects})
    return SchemaClassifier(table, index).classify(objects), index


@pytest.fixture
def filesystem_schema():
    with open(SCHEMAS / "filesystem.schema.json") as f:
        return SchemaParser().parse(json.load(f))


@pytest.fixture
def filesystem_bindings():
    with open(SCHEMAS / "filesystem_config.json") as f:
        return json.load(f)["bindings"]


class TestSchemaClassifier:
    """Test cases for root object and resolver selection"""

    def test_box_gets_one_resolver(self):
        box = SchemaObject(name="Box", fields=(_field("open", "code"),))
        result, _ = _classify([box])

        assert [o.name for o in result.objects] == ["Box"]
        assert all(o.root for o in result.objects)
        assert len(result.resolvers) == 1
        resolver = result.resolvers[0]
        assert resolver.object is box
        assert resolver.field.name == "open"
        assert resolver.implementation == NOT_IMPLEMENTED
        assert resolver.method_has_context

    def test_object_without_arguments_is_skipped(self):
        label = SchemaObject(name="Label", fields=(_field("text"),))
        result, index = _classify([label])

        assert result.objects == []
        assert result.resolvers == []
        assert len(index) == 0

    def test_zero_argument_fields_never_get_resolvers(self):
        box = SchemaObject(name="Box", fields=(_field("color"), _field("open", "code"), _field("size")))
        result, _ = _classify([box])

        assert [r.field.name for r in result.resolvers] == ["open"]

    def test_builtin_and_reserved_objects_are_skipped(self):
        builtin = SchemaObject(name="Query", fields=(_field("box", "id"),), builtin=True)
        reserved = SchemaObject(name="__Type", fields=(_field("fields", "includeDeprecated"),), reserved=True)
        result, _ = _classify([builtin, reserved])

        assert result.objects == []
        assert result.resolvers == []

    def test_reserved_field_does_not_make_object_a_root(self):
        obj = SchemaObject(name="Box", fields=(_field("__internal", "x", reserved=True), _field("color")))
        result, _ = _classify([obj])

        assert result.objects == []

    def test_reserved_field_is_not_stubbed_on_root(self):
        obj = SchemaObject(name="Box", fields=(_field("__internal", "x", reserved=True), _field("open", "code")))
        result, _ = _classify([obj])

        assert [r.field.name for r in result.resolvers] == ["open"]

    def test_override_takes_precedence_over_arguments(self):
        widget = SchemaObject(
            name="Widget",
            fields=(Field(name="build", arguments=(Argument(name="n", type=_int()),), type=TypeReference.named("Widget")),),
        )
        result, _ = _classify([widget], {"Widget": {"model": "ext.Widget", "fields": {"build": {"resolver": False}}}})

        assert result.objects == []
        assert result.resolvers == []

    def test_override_keeps_other_fields(self):
        obj = SchemaObject(name="Widget", fields=(_field("build", "n"), _field("paint", "color")))
        result, _ = _classify([obj], {"Widget": {"model": "ext.Widget", "fields": {"build": {"resolver": False}}}})

        assert [r.field.name for r in result.resolvers] == ["paint"]

    def test_declaration_order_is_preserved(self):
        objects = [
            SchemaObject(name="Zeta", fields=(_field("b", "x"), _field("a", "x"))),
            SchemaObject(name="Alpha", fields=(_field("z", "x"),)),
        ]
        result, _ = _classify(objects)

        assert [o.name for o in result.objects] == ["Zeta", "Alpha"]
        assert [(r.object.name, r.field.name) for r in result.resolvers] == [("Zeta", "b"), ("Zeta", "a"), ("Alpha", "z")]

    def test_repeated_runs_are_identical(self, filesystem_schema, filesystem_bindings):
        first, _ = _classify(list(filesystem_schema.objects), filesystem_bindings)
        second, _ = _classify(list(filesystem_schema.objects), filesystem_bindings)

        assert first == second

    def test_filesystem_schema(self, filesystem_schema, filesystem_bindings):
        result, index = _classify(list(filesystem_schema.objects), filesystem_bindings)

        assert [o.name for o in result.objects] == ["Filesystem", "Alpine"]
        assert [(r.object.name, r.field.name) for r in result.resolvers] == [
            ("Filesystem", "file"),
            ("Filesystem", "withSecret"),
            ("Alpine", "build"),
        ]
        assert result.resolvers[1].comment == "Mount a secret into the filesystem."
        assert "Filesystem" in index
        assert "SecretID!" in index
        assert "[String!]!" in index

    def test_object_reference_is_registered_as_pointer(self):
        box = SchemaObject(name="Box", fields=(_field("open", "code"),))
        result, index = _classify([box])

        reference = result.objects[0].reference
        assert reference.is_pointer
        assert reference in index
        assert index.resolve_pointed_to_short_name(reference) == "Box"


if __name__ == "__main__":
    pytest.main([__file__])
