"""
Schema node definitions.

These nodes describe the schema handed over by the upstream schema source:
objects, their fields, field arguments and type references. They are
immutable and rebuilt on every generation run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Wrapper(Enum):
    """Wrapping applied by a type reference."""

    NONE = "none"  # The named type itself
    OPTIONAL = "optional"  # Pointer-to / nullable: T | None
    LIST = "list"  # list[T]


@dataclass(frozen=True)
class TypeReference:
    """A schema type name, possibly wrapped.

    The string form is GraphQL notation: ``Box`` is an optional (pointer-to)
    reference, ``Box!`` the plain type, ``[Box!]!`` a list.
    """

    name: str = ""  # Named type, only set when wrapper is NONE
    wrapper: Wrapper = Wrapper.NONE
    of_type: TypeReference | None = None

    @staticmethod
    def named(name: str) -> TypeReference:
        return TypeReference(name=name)

    @staticmethod
    def optional(of_type: TypeReference) -> TypeReference:
        return TypeReference(wrapper=Wrapper.OPTIONAL, of_type=of_type)

    @staticmethod
    def list_of(of_type: TypeReference) -> TypeReference:
        return TypeReference(wrapper=Wrapper.LIST, of_type=of_type)

    @property
    def is_pointer(self) -> bool:
        return self.wrapper == Wrapper.OPTIONAL

    @property
    def named_type(self) -> str:
        """Name of the innermost named type."""
        ref: TypeReference | None = self
        while ref is not None and ref.wrapper != Wrapper.NONE:
            ref = ref.of_type
        return ref.name if ref is not None else ""

    def _bare(self) -> str:
        if self.wrapper == Wrapper.LIST:
            return f"[{self.of_type}]"
        return self.name

    def __str__(self) -> str:
        if self.wrapper == Wrapper.OPTIONAL:
            return self.of_type._bare() if self.of_type is not None else ""
        return f"{self._bare()}!"


@dataclass(frozen=True)
class Argument:
    """A field argument."""

    name: str = ""
    type: TypeReference = field(default_factory=TypeReference)
    description: str = ""


@dataclass(frozen=True)
class Field:
    """A field on a schema object."""

    name: str = ""
    arguments: tuple[Argument, ...] = ()
    type: TypeReference = field(default_factory=TypeReference)
    # Framework-internal field (e.g. __typename)
    reserved: bool = False
    description: str = ""

    @property
    def has_arguments(self) -> bool:
        return len(self.arguments) > 0


@dataclass(frozen=True)
class SchemaObject:
    """An object type and its fields, in declaration order."""

    name: str = ""
    fields: tuple[Field, ...] = ()
    # Provided by the framework's own schema
    builtin: bool = False
    # Framework-internal (e.g. __Schema); never generated
    reserved: bool = False
    description: str = ""

    @property
    def reference(self) -> TypeReference:
        """Pointer-to reference of this object, as used for the parent value of a resolver."""
        return TypeReference.optional(TypeReference.named(self.name))


@dataclass(frozen=True)
class Schema:
    """Root of a parsed schema."""

    objects: tuple[SchemaObject, ...] = ()
    # Names of every declared type, objects included
    type_names: frozenset[str] = frozenset()

    def get_object(self, name: str) -> SchemaObject | None:
        for obj in self.objects:
            if obj.name == name:
                return obj
        return None
