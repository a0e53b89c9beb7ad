"""
Naming helpers for the resolver stub generator.
"""

import keyword
import re
from collections.abc import Iterable

# Regex pattern to split text into words, handling camelCase boundaries
_WORD_PATTERN = re.compile(r"[a-z]+|[A-Z]+(?![a-z])|[A-Z][a-z]*|[0-9]+")


def _normalize_separators(text: str) -> str:
    """Normalize separators (underscores, hyphens) to spaces."""
    return text.replace("_", " ").replace("-", " ")


def _split_into_words(text: str) -> list[str]:
    """Split text into words, handling camelCase boundaries."""
    return _WORD_PATTERN.findall(text)


def _capitalize_and_join(words: list[str]) -> str:
    """Capitalize each word and join them together."""
    return "".join(word.capitalize() for word in words if word)


def snake_to_pascal_case(text: str) -> str:
    """Convert snake_case, camelCase, or space-separated text to PascalCase.

    Examples:
        "first_name" -> "FirstName"
        "FIRST_NAME" -> "FirstName"
        "actionTemplate" -> "ActionTemplate"
        "first 3 rows" -> "First3Rows"

    Args:
        text: The text to convert

    Returns:
        PascalCase string
    """
    if not text:
        return ""
    normalized = _normalize_separators(text)
    words = _split_into_words(normalized)
    return _capitalize_and_join(words)


def to_snake_case(text: str) -> str:
    """Convert camelCase or PascalCase schema names to snake_case.

    Examples:
        "withExec" -> "with_exec"
        "dockerBuild" -> "docker_build"
        "exitcode" -> "exitcode"
        "HTTPPort" -> "http_port"
    """
    if not text:
        return ""
    words = _split_into_words(_normalize_separators(text))
    return "_".join(word.lower() for word in words)


def python_identifier(name: str) -> str:
    """Make a schema name usable as a Python identifier (method or argument name)."""
    ident = to_snake_case(name) or "_"
    if ident[0].isdigit():
        ident = f"_{ident}"
    if keyword.iskeyword(ident) or ident in ("self", "ctx", "obj"):
        ident = f"{ident}_"
    return ident


def resolver_class_name(object_name: str) -> str:
    """Name of the generated resolver class for a schema object ("Box" -> "BoxResolver")."""
    name = f"{snake_to_pascal_case(object_name)}Resolver"
    if name[0].isdigit():
        name = f"_{name}"
    return name


class NameScope:
    """Hands out names that are unique within one namespace.

    A name that is already taken gets a numeric suffix (``with_exec_1``).
    """

    def __init__(self, reserved: Iterable[str] = ()):
        self._used: set[str] = set(reserved)

    def __contains__(self, name: str) -> bool:
        return name in self._used

    def reserve(self, name: str) -> None:
        """Mark a name as taken without handing it out."""
        self._used.add(name)

    def claim(self, name: str) -> str:
        """Return ``name``, or the first free suffixed variant, and mark it taken."""
        candidate = name
        ctr = 0
        while candidate in self._used:
            ctr += 1
            candidate = f"{name}_{ctr}"
        self._used.add(candidate)
        return candidate
