"""
Type binding table.

Maps schema type names to already-existing Python types, with optional
per-field overrides that switch off resolver generation for fields the
bound type already satisfies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .errors import ConfigurationError


@dataclass(frozen=True)
class FieldOverride:
    """Per-field override on a bound type."""

    # False: the bound type answers this field natively, no stub is generated
    resolver: bool = True


@dataclass(frozen=True)
class TypeBindingEntry:
    """Binding of one schema type name."""

    # Fully-qualified target type, e.g. "myapp.models.Widget" (None = not bound)
    model: str | None = None
    fields: Mapping[str, FieldOverride] = field(default_factory=dict)


class TypeBindingTable:
    """Read-only lookup table of type bindings.

    Build a fresh table for every generation run; it is never mutated after
    construction.
    """

    def __init__(self, entries: Mapping[str, TypeBindingEntry] | None = None):
        self._entries: dict[str, TypeBindingEntry] = dict(entries or {})

    def __contains__(self, type_name: str) -> bool:
        return type_name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, type_name: str) -> TypeBindingEntry | None:
        """Return the binding entry for a schema type, or None when it is not bound."""
        return self._entries.get(type_name)

    def bound_type(self, type_name: str) -> str | None:
        """Return the fully-qualified target type bound to a schema type, if any."""
        entry = self._entries.get(type_name)
        if entry is None:
            return None
        return entry.model

    def field_needs_resolver(self, type_name: str, field_name: str) -> bool:
        """Whether a field still gets resolver treatment.

        Only an explicit ``resolver: false`` override switches it off.
        """
        entry = self._entries.get(type_name)
        if entry is None:
            return True
        override = entry.fields.get(field_name)
        if override is None:
            return True
        return override.resolver

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> TypeBindingTable:
        """Create a table from its configuration form.

        Each value is either a fully-qualified type name, or a mapping with an
        optional ``model`` and optional ``fields`` overrides::

            {
                "FSID": "dagger.FSID",
                "Filesystem": {
                    "model": "dagger.Filesystem",
                    "fields": {"exec": {"resolver": false}},
                },
            }
        """
        if not isinstance(d, Mapping):
            raise ConfigurationError(f"Type bindings must be a mapping, got {type(d).__name__}")

        entries: dict[str, TypeBindingEntry] = {}
        for type_name, value in d.items():
            if isinstance(value, str):
                entries[type_name] = TypeBindingEntry(model=value)
                continue
            if not isinstance(value, Mapping):
                raise ConfigurationError(f"Invalid binding for {type_name!r}: expected a type name or a mapping")

            model = value.get("model")
            if model is not None and not isinstance(model, str):
                raise ConfigurationError(f"Invalid model for {type_name!r}: {model!r}")

            fields: dict[str, FieldOverride] = {}
            for field_name, override in (value.get("fields") or {}).items():
                if not isinstance(override, Mapping):
                    raise ConfigurationError(f"Invalid field override {type_name}.{field_name}: {override!r}")
                fields[field_name] = FieldOverride(resolver=bool(override.get("resolver", True)))

            entries[type_name] = TypeBindingEntry(model=model, fields=fields)
        return TypeBindingTable(entries)

    def to_dict(self) -> dict[str, Any]:
        """Convert the table back to its configuration form."""
        result: dict[str, Any] = {}
        for type_name, entry in self._entries.items():
            if not entry.fields and entry.model is not None:
                result[type_name] = entry.model
                continue
            value: dict[str, Any] = {"fields": {name: {"resolver": o.resolver} for name, o in entry.fields.items()}}
            if entry.model is not None:
                value["model"] = entry.model
            result[type_name] = value
        return result
