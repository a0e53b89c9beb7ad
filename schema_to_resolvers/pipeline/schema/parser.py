"""
Schema document parser.

Turns the JSON schema description produced by the upstream schema source
into schema nodes. The document is assumed to be a well-formed schema;
only its shape is checked.
"""

from __future__ import annotations

import re
from typing import Any

from ..errors import ConfigurationError
from .nodes import Argument, Field, Schema, SchemaObject, TypeReference

_NAME_PATTERN = re.compile(r"^[_A-Za-z][_0-9A-Za-z]*$")


def parse_type_reference(text: str) -> TypeReference:
    """
    Parse a GraphQL-style type reference.

    ``Int`` is nullable and parses to an optional (pointer-to) reference,
    ``Int!`` to the plain type, ``[Int!]`` to an optional list of ints.

    Raises:
        ConfigurationError: If the text is not a type reference
    """
    text = text.strip()
    if text.endswith("!"):
        return _parse_non_null(text[:-1].strip(), text)
    return TypeReference.optional(_parse_non_null(text, text))


def _parse_non_null(text: str, original: str) -> TypeReference:
    if text.startswith("[") and text.endswith("]"):
        return TypeReference.list_of(parse_type_reference(text[1:-1]))
    if not _NAME_PATTERN.match(text):
        raise ConfigurationError(f"Invalid type reference: {original!r}")
    return TypeReference.named(text)


class SchemaParser:
    """Parses a schema document into schema nodes."""

    # Type kinds that carry fields worth classifying
    OBJECT_KIND = "OBJECT"

    def parse(self, document: dict[str, Any]) -> Schema:
        """
        Parse a schema document.

        Args:
            document: The decoded JSON document, with a ``types`` list

        Returns:
            Schema with its objects in declaration order

        Raises:
            ConfigurationError: If the document is not shaped like a schema
        """
        if not isinstance(document, dict) or not isinstance(document.get("types"), list):
            raise ConfigurationError("Schema document must be an object with a 'types' list")

        objects = []
        type_names = set()
        for index, type_def in enumerate(document["types"]):
            path = f"types[{index}]"
            name = self._require_name(type_def, path)
            type_names.add(name)

            if type_def.get("kind", self.OBJECT_KIND) != self.OBJECT_KIND:
                continue
            objects.append(self._parse_object(type_def, name, path))

        return Schema(objects=tuple(objects), type_names=frozenset(type_names))

    def _parse_object(self, type_def: dict[str, Any], name: str, path: str) -> SchemaObject:
        fields = tuple(self._parse_field(f, f"{path}.fields[{i}]") for i, f in enumerate(type_def.get("fields") or []))
        return SchemaObject(
            name=name,
            fields=fields,
            builtin=bool(type_def.get("builtin", False)),
            reserved=bool(type_def.get("reserved", name.startswith("__"))),
            description=type_def.get("description") or "",
        )

    def _parse_field(self, field_def: dict[str, Any], path: str) -> Field:
        name = self._require_name(field_def, path)
        arguments = tuple(self._parse_argument(a, f"{path}.args[{i}]") for i, a in enumerate(field_def.get("args") or []))
        return Field(
            name=name,
            arguments=arguments,
            type=self._parse_type(field_def, path),
            reserved=bool(field_def.get("reserved", name.startswith("__"))),
            description=field_def.get("description") or "",
        )

    def _parse_argument(self, arg_def: dict[str, Any], path: str) -> Argument:
        return Argument(
            name=self._require_name(arg_def, path),
            type=self._parse_type(arg_def, path),
            description=arg_def.get("description") or "",
        )

    def _parse_type(self, definition: dict[str, Any], path: str) -> TypeReference:
        type_text = definition.get("type")
        if not isinstance(type_text, str):
            raise ConfigurationError(f"{path}: missing 'type'")
        return parse_type_reference(type_text)

    def _require_name(self, definition: Any, path: str) -> str:
        if not isinstance(definition, dict):
            raise ConfigurationError(f"{path}: expected an object, got {type(definition).__name__}")
        name = definition.get("name")
        if not isinstance(name, str) or not _NAME_PATTERN.match(name):
            raise ConfigurationError(f"{path}: invalid or missing name {name!r}")
        return name
