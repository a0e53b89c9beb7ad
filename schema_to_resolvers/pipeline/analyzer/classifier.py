"""
Schema classifier.

Decides which schema objects need generated resolver scaffolding and which
of their fields need a resolver stub. A field needs a stub when it takes
arguments, is not reserved, and is not switched off by a binding override;
an object is generated when at least one of its fields needs a stub.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from ..bindings import TypeBindingTable
from ..schema.nodes import Field, SchemaObject
from .model import NOT_IMPLEMENTED, GeneratedObject, Resolver
from .type_index import TypeReferenceIndex

logger = logging.getLogger(__name__)


@dataclass
class Classification:
    """Output of the classifier, in schema declaration order."""

    objects: list[GeneratedObject] = field(default_factory=list)
    resolvers: list[Resolver] = field(default_factory=list)


class SchemaClassifier:
    """Selects root objects and resolver stubs."""

    def __init__(self, bindings: TypeBindingTable, type_index: TypeReferenceIndex):
        self.bindings = bindings
        self.type_index = type_index

    def needs_resolver(self, obj: SchemaObject, field: Field) -> bool:
        """Whether a field gets a resolver stub."""
        if field.reserved or not field.has_arguments:
            return False
        return self.bindings.field_needs_resolver(obj.name, field.name)

    def has_resolvers(self, obj: SchemaObject) -> bool:
        """Whether any field of the object needs a resolver stub."""
        return any(self.needs_resolver(obj, f) for f in obj.fields)

    def classify(self, objects: Iterable[SchemaObject]) -> Classification:
        """
        Classify schema objects.

        Args:
            objects: Schema objects in declaration order

        Returns:
            The generated objects and the resolver stubs
        """
        result = Classification()

        for obj in objects:
            if obj.builtin or obj.reserved:
                logger.debug("Skipping %s: builtin or reserved", obj.name)
                continue

            # First pass: does anything on this object need custom logic?
            if not self.has_resolvers(obj):
                logger.debug("Skipping %s: no field needs a resolver", obj.name)
                continue

            generated = GeneratedObject(object=obj, reference=obj.reference, root=True)
            result.objects.append(generated)
            self.type_index.register(generated.reference)

            # Second pass: one stub per resolver-worthy field
            first = len(result.resolvers)
            for f in obj.fields:
                if not self.needs_resolver(obj, f):
                    continue
                result.resolvers.append(
                    Resolver(
                        object=obj,
                        field=f,
                        comment=f.description,
                        implementation=NOT_IMPLEMENTED,
                        method_has_context=True,
                    )
                )
                for arg in f.arguments:
                    self.type_index.register(arg.type)
                self.type_index.register(f.type)

            logger.debug("Generating %s with %d resolver(s)", obj.name, len(result.resolvers) - first)

        return result
