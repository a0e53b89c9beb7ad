"""
Type reference index.

Collects every type reference touched while classifying the schema and
resolves each one to the short name used in the generated code. Bound
types are imported (aliased when two imports share a name); schema scalars
map to Python builtins; anything unknown falls back to a placeholder.
"""

from __future__ import annotations

import collections
import logging
import sys
from collections.abc import Iterable

from ...utils import NameScope
from ..bindings import TypeBindingTable
from ..schema.nodes import TypeReference, Wrapper

logger = logging.getLogger(__name__)

# Used for references that cannot be resolved; keeps generation total
EMPTY_STRUCT_PLACEHOLDER = "object"

# Returned when asking for the pointed-to type of a non-pointer reference
NO_POINTED_TO_TYPE = ""

SCALAR_TYPES = {
    "Int": "int",
    "Float": "float",
    "String": "str",
    "Boolean": "bool",
    "ID": "str",
}


class ImportRegistry:
    """Tracks the imports needed by the generated module.

    Every imported name is unique in the module namespace: a name that is
    already taken gets a numeric suffix (``Widget_1``).
    """

    def __init__(self, reserved_names: Iterable[str] = ()):
        self._imports: dict[tuple[str, str], str] = {}
        # Module namespace, shared with the generated class names
        self.scope = NameScope(reserved_names)
        self._future: set[str] = {"annotations"}

    def reserve(self, name: str) -> None:
        """Mark a name as declared by the generated module itself."""
        self.scope.reserve(name)

    def import_name(self, qualified_name: str) -> str:
        """
        Record an import for a fully-qualified name.

        Args:
            qualified_name: e.g. "myapp.models.Widget"; a bare name such as
                "int" needs no import

        Returns:
            The name to use in the generated code
        """
        module, _, name = qualified_name.rpartition(".")
        if not module or module == "builtins":
            return name
        key = (module, name)
        if key in self._imports:
            return self._imports[key]

        alias = self.scope.claim(name)
        self._imports[key] = alias
        return alias

    def lines(self) -> list[str]:
        """Assemble import statements: __future__, standard library, third party, local."""
        import_groups: dict[str, set[str]] = collections.defaultdict(set)
        for (module, name), alias in self._imports.items():
            import_groups[module].add(name if alias == name else f"{name} as {alias}")

        stdlib_groups = {m: n for m, n in import_groups.items() if m.split(".")[0] in sys.stdlib_module_names}
        local_groups = {m: n for m, n in import_groups.items() if m.startswith(".")}
        third_party_groups = {m: n for m, n in import_groups.items() if m not in stdlib_groups and m not in local_groups}

        assembled = [f"from __future__ import {', '.join(sorted(self._future))}"]
        for group in (stdlib_groups, third_party_groups, local_groups):
            if not group:
                continue
            assembled.append("")
            for module in sorted(group):
                assembled.append(f"from {module} import {', '.join(sorted(group[module]))}")
        return assembled


class TypeReferenceIndex:
    """Registry of type references and their resolved short names."""

    def __init__(
        self,
        bindings: TypeBindingTable,
        known_types: Iterable[str] = (),
        models_module: str = "",
        reserved_names: Iterable[str] = (),
    ):
        """
        Initialize the index.

        Args:
            bindings: Binding table consulted before the schema-derived name
            known_types: Names of every type declared by the schema
            models_module: Module the unbound schema types are imported from
                ("" leaves them as bare names)
            reserved_names: Names declared by the generated module itself
        """
        self.bindings = bindings
        self.known_types = frozenset(known_types)
        self.models_module = models_module
        self.imports = ImportRegistry(reserved_names)
        self._refs: dict[str, TypeReference] = {}
        self._short_names: dict[str, str] = {}

        # Unbound schema types are emitted bare and must not be shadowed by an import
        if not models_module:
            for name in self.known_types:
                if name not in SCALAR_TYPES and not bindings.bound_type(name):
                    self.imports.reserve(name)

    @property
    def module_scope(self) -> NameScope:
        """Names taken in the generated module namespace."""
        return self.imports.scope

    def __contains__(self, ref: TypeReference | str) -> bool:
        return str(ref) in self._refs

    def __len__(self) -> int:
        return len(self._refs)

    def references(self) -> list[TypeReference]:
        """Registered references, in registration order."""
        return list(self._refs.values())

    def register(self, ref: TypeReference) -> None:
        """Record a type reference the first time it is seen."""
        key = str(ref)
        if key in self._refs:
            return
        self._refs[key] = ref
        self._short_names[key] = self._resolve(ref)

    def resolve_short_name(self, ref: TypeReference | str | None) -> str:
        """
        Return the name to use for a type reference in generated code.

        Args:
            ref: A reference, or the string key of a registered one

        Returns:
            The resolved short name, or the empty-structure placeholder when
            the reference is missing or unknown
        """
        resolved = self._lookup(ref)
        if resolved is None:
            return EMPTY_STRUCT_PLACEHOLDER
        return self._short_names[str(resolved)]

    def resolve_pointed_to_short_name(self, ref: TypeReference | str | None) -> str:
        """Resolve the type behind one level of pointer/optional wrapping.

        Returns NO_POINTED_TO_TYPE when the reference is not a pointer.
        """
        resolved = self._lookup(ref)
        if resolved is None or not resolved.is_pointer:
            return NO_POINTED_TO_TYPE
        if resolved.of_type is None:
            return EMPTY_STRUCT_PLACEHOLDER
        return self.resolve_short_name(resolved.of_type)

    def import_python_name(self, qualified_name: str) -> str:
        """Import a Python name that is not a schema type (e.g. the context type)."""
        return self.imports.import_name(qualified_name)

    def import_lines(self) -> list[str]:
        return self.imports.lines()

    def _lookup(self, ref: TypeReference | str | None) -> TypeReference | None:
        if ref is None:
            logger.warning("Missing type reference, using %r", EMPTY_STRUCT_PLACEHOLDER)
            return None
        if isinstance(ref, str):
            found = self._refs.get(ref)
            if found is None:
                logger.warning("Type reference %r was never registered, using %r", ref, EMPTY_STRUCT_PLACEHOLDER)
            return found
        self.register(ref)
        return ref

    def _resolve(self, ref: TypeReference) -> str:
        if ref.wrapper == Wrapper.NONE:
            return self._resolve_named(ref.name)
        inner = self._resolve(ref.of_type) if ref.of_type is not None else EMPTY_STRUCT_PLACEHOLDER
        if ref.wrapper == Wrapper.OPTIONAL:
            return f"{inner} | None"
        return f"list[{inner}]"

    def _resolve_named(self, name: str) -> str:
        bound = self.bindings.bound_type(name)
        if bound:
            return self.imports.import_name(bound)

        if name in SCALAR_TYPES:
            return SCALAR_TYPES[name]

        if name in self.known_types:
            if self.models_module:
                return self.imports.import_name(f"{self.models_module}.{name}")
            return name

        logger.warning("No binding for schema type %r, using %r", name, EMPTY_STRUCT_PLACEHOLDER)
        return EMPTY_STRUCT_PLACEHOLDER
