"""
Maven profile activation.

Static resolution has no running JVM, operating system, system properties
or working directory, so profiles are evaluated against one fixed reference
environment:

- JDK conditions match the reference JDK by exact value, by prefix
  (``1.8`` matches ``1.8.0_292``) or by version range (``[1.8,11)``).
- OS conditions compare name, family, arch and version case-insensitively;
  every declared field must match.
- Any condition may be negated with a leading ``!``.
- Property and file conditions can never be satisfied.

When no profile is explicitly active, the ``activeByDefault`` profiles are
used instead.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from packaging.version import InvalidVersion, Version

from pomdeps.models import Activation, ActivationOS, Profile

logger = logging.getLogger(__name__)

# One bracketed range inside a JDK condition, e.g. "[1.8,11)" or "[9]"
VERSION_RANGE_PATTERN = re.compile(r"([\[(])\s*([^,\[\]()]*?)\s*(?:,\s*([^,\[\]()]*?)\s*)?([\])])")

DEFAULT_REFERENCE_JDK = "11.0.8"
DEFAULT_REFERENCE_OS = {
    "name": "linux",
    "family": "unix",
    "arch": "amd64",
    "version": "5.10.0-26-cloud-amd64",
}


@dataclass
class ReferenceEnvironment:
    """The fixed JDK and OS that profile conditions are checked against."""
    jdk: str = DEFAULT_REFERENCE_JDK
    os: ActivationOS = field(default_factory=lambda: ActivationOS(**DEFAULT_REFERENCE_OS))

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]]) -> "ReferenceEnvironment":
        """Build from the ``maven.reference_environment`` config section."""
        config = config or {}
        os_config = {**DEFAULT_REFERENCE_OS, **(config.get("os") or {})}
        return cls(
            jdk=str(config.get("jdk") or DEFAULT_REFERENCE_JDK),
            os=ActivationOS(
                name=str(os_config["name"] or ""),
                family=str(os_config["family"] or ""),
                arch=str(os_config["arch"] or ""),
                version=str(os_config["version"] or ""),
            ),
        )


def _split_negation(condition: str):
    condition = condition.strip()
    if condition.startswith("!"):
        return True, condition[1:].strip()
    return False, condition


def _parse_version(value: str) -> Optional[Version]:
    try:
        return Version(value.replace("_", "."))
    except InvalidVersion:
        return None


def _in_range(version: Version, match: "re.Match[str]") -> bool:
    opening, lower, upper, closing = match.groups()

    # "[1.8]" pins a single version
    if upper is None:
        pinned = _parse_version(lower) if lower else None
        return pinned is not None and version == pinned

    if lower:
        bound = _parse_version(lower)
        if bound is None:
            return False
        if version < bound or (opening == "(" and version == bound):
            return False
    if upper:
        bound = _parse_version(upper)
        if bound is None:
            return False
        if version > bound or (closing == ")" and version == bound):
            return False
    return True


def matches_jdk(condition: str, reference_jdk: str) -> bool:
    """Check a ``<jdk>`` activation condition against the reference JDK."""
    negated, value = _split_negation(condition)
    if not value:
        return False

    if value[0] in "[(":
        ranges = list(VERSION_RANGE_PATTERN.finditer(value))
        version = _parse_version(reference_jdk)
        matched = bool(ranges) and version is not None and any(
            _in_range(version, r) for r in ranges
        )
    else:
        matched = reference_jdk == value or reference_jdk.startswith(value)

    return matched != negated


def matches_value(condition: str, reference: str) -> bool:
    """Case-insensitive equality with optional ``!`` negation."""
    negated, value = _split_negation(condition)
    matched = value.lower() == reference.lower()
    return matched != negated


class ProfileEvaluator:
    """Decides which profiles of a descriptor are active."""

    def __init__(self, reference: Optional[ReferenceEnvironment] = None):
        self.reference = reference or ReferenceEnvironment()

    def is_explicitly_active(self, activation: Activation) -> bool:
        """
        Check the explicit (non-default) activation conditions.

        An activation block that only carries ``activeByDefault`` or nothing
        at all is not explicitly active.
        """
        if activation.property.name or activation.property.value:
            return False
        if activation.file.exists or activation.file.missing:
            return False

        results = []
        if activation.jdk:
            results.append(matches_jdk(activation.jdk, self.reference.jdk))

        ref_os = self.reference.os
        for condition, reference in (
            (activation.os.name, ref_os.name),
            (activation.os.family, ref_os.family),
            (activation.os.arch, ref_os.arch),
            (activation.os.version, ref_os.version),
        ):
            if condition:
                results.append(matches_value(condition, reference))

        return bool(results) and all(results)

    def active_profiles(self, profiles: List[Profile]) -> List[Profile]:
        """Return the active profiles in declaration order."""
        active = [p for p in profiles if self.is_explicitly_active(p.activation)]
        if not active:
            active = [p for p in profiles if p.activation.active_by_default]
            source = "activeByDefault"
        else:
            source = "activation conditions"

        for profile in active:
            logger.debug(f"Profile '{profile.id}' active via {source}")
        return active
