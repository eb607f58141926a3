"""
Maven property resolution.

Substitutes ``${name}`` placeholders against a flat property table. Values
are resolved transitively (``a -> ${b} -> c``); a property that is revisited
while it is still being resolved is a cycle and its placeholder is left in
place. Resolution never raises: the worst case is a string that still
contains ``${``, which callers treat as "version could not be determined".
"""

import re
from typing import Dict, Optional, Set

# ${name}, name may not contain a closing brace
PROPERTY_REF_PATTERN = re.compile(r"\$\{([^}]+)\}")

UNCONSTRAINED_VERSION = "latest"


def resolve_placeholders(value: str, properties: Dict[str, str]) -> str:
    """Resolve every ``${name}`` reference in a string.

    Args:
        value: Raw string, possibly containing placeholders.
        properties: Property table to resolve against.

    Returns:
        The string with every resolvable placeholder substituted. Unknown
        names and cyclic references are left as literal placeholder text.
    """
    return _resolve(value, properties, set())


def _resolve(value: str, properties: Dict[str, str], resolving: Set[str]) -> str:
    if "${" not in value:
        return value

    def substitute(match: "re.Match[str]") -> str:
        name = match.group(1)
        if name in resolving or name not in properties:
            return match.group(0)

        resolving.add(name)
        try:
            return _resolve(properties[name], properties, resolving)
        finally:
            # Sibling placeholders must not inherit this branch's marker
            resolving.discard(name)

    return PROPERTY_REF_PATTERN.sub(substitute, value)


def resolve_version(version: Optional[str], properties: Dict[str, str]) -> str:
    """Resolve a dependency version; an empty version means ``latest``."""
    if not version:
        return UNCONSTRAINED_VERSION
    return resolve_placeholders(version, properties)


def has_unresolved_placeholder(value: str) -> bool:
    return PROPERTY_REF_PATTERN.search(value) is not None
