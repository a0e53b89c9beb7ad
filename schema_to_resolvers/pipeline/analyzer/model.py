"""
Emission model.

The classification results (root objects and resolver stubs) together
with the type index, aggregated into one immutable value handed to the
emission pass. The builder also fixes every Python name the emitted
module declares, so distinct schema names never collapse into one.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from ...utils import NameScope, python_identifier, resolver_class_name
from ..schema.nodes import Argument, Field, SchemaObject, TypeReference
from .type_index import TypeReferenceIndex

# Body of every generated resolver
NOT_IMPLEMENTED = 'raise NotImplementedError("not implemented")'

# Parameters every resolver method declares before the field arguments
METHOD_PARAMETERS = ("self", "ctx", "obj")

# Attribute holding the root resolver on each object class
ROOT_ATTRIBUTE = "_root"


@dataclass(frozen=True)
class GeneratedObject:
    """A schema object selected for scaffold generation."""

    object: SchemaObject
    # Pointer-to reference of the object, registered in the type index
    reference: TypeReference
    root: bool = True
    # Python names, assigned by StubModelBuilder
    class_name: str = ""
    accessor_name: str = ""

    @property
    def name(self) -> str:
        return self.object.name


@dataclass(frozen=True)
class Resolver:
    """One resolver stub, for a field that needs custom logic."""

    object: SchemaObject
    field: Field
    comment: str = ""
    implementation: str = NOT_IMPLEMENTED
    method_has_context: bool = True
    # Python names, assigned by StubModelBuilder
    method_name: str = ""
    argument_names: tuple[str, ...] = ()

    @property
    def parameters(self) -> list[tuple[str, Argument]]:
        """(Python name, argument) pairs in declaration order."""
        return list(zip(self.argument_names, self.field.arguments))


@dataclass(frozen=True)
class EmissionModel:
    """Everything the emission pass renders."""

    objects: tuple[GeneratedObject, ...]
    resolvers: tuple[Resolver, ...]
    type_index: TypeReferenceIndex
    package_name: str = "main"
    resolver_type: str = "Resolver"
    has_root: bool = True
    # Short name of the context parameter type
    context_type: str = "Any"
    generation_comment: str = ""
    root_attribute: str = ROOT_ATTRIBUTE

    def resolvers_for(self, obj: GeneratedObject | SchemaObject) -> list[Resolver]:
        """Resolvers of one object, in field declaration order."""
        name = obj.name
        return [r for r in self.resolvers if r.object.name == name]


class StubModelBuilder:
    """Aggregates classification output into an EmissionModel.

    Names are handed out per namespace: classes share the module namespace
    with imports, accessors share the root class, methods share their
    object class, arguments share one signature. A name already taken in
    its namespace gets a numeric suffix.
    """

    def __init__(
        self,
        package_name: str = "main",
        resolver_type: str = "Resolver",
        has_root: bool = True,
        context_type: str = "typing.Any",
        generation_comment: str = "",
    ):
        self.package_name = package_name
        self.resolver_type = resolver_type
        self.has_root = has_root
        self.context_type = context_type
        self.generation_comment = generation_comment

    def build(
        self,
        objects: list[GeneratedObject],
        resolvers: list[Resolver],
        type_index: TypeReferenceIndex,
    ) -> EmissionModel:
        context_type = type_index.import_python_name(self.context_type)
        return EmissionModel(
            objects=tuple(self._name_objects(objects, type_index.module_scope)),
            resolvers=tuple(self._name_resolvers(resolvers)),
            type_index=type_index,
            package_name=self.package_name,
            resolver_type=self.resolver_type,
            has_root=self.has_root,
            context_type=context_type,
            generation_comment=self.generation_comment,
        )

    def _name_objects(self, objects: list[GeneratedObject], module_scope: NameScope) -> list[GeneratedObject]:
        module_scope.reserve(self.resolver_type)
        accessors = NameScope()
        return [
            replace(
                obj,
                class_name=module_scope.claim(resolver_class_name(obj.name)),
                accessor_name=accessors.claim(python_identifier(obj.name)),
            )
            for obj in objects
        ]

    def _name_resolvers(self, resolvers: list[Resolver]) -> list[Resolver]:
        class_scopes: dict[str, NameScope] = {}
        named = []
        for resolver in resolvers:
            methods = class_scopes.get(resolver.object.name)
            if methods is None:
                methods = NameScope(("__init__", ROOT_ATTRIBUTE) if self.has_root else ())
                class_scopes[resolver.object.name] = methods
            signature = NameScope(METHOD_PARAMETERS)
            named.append(
                replace(
                    resolver,
                    method_name=methods.claim(python_identifier(resolver.field.name)),
                    argument_names=tuple(signature.claim(python_identifier(a.name)) for a in resolver.field.arguments),
                )
            )
        return named
