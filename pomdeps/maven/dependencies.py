"""
Dependency and BOM extraction.

Walks every dependency-bearing section of a descriptor in a fixed order and
emits normalized ``DependencyRecord``s:

1. each active profile's ``<dependencies>``, in profile order
2. the top-level ``<dependencies>``
3. the top-level ``<dependencyManagement>`` (BOM imports only)
4. each active profile's ``<dependencyManagement>`` (BOM imports only)
5. every build plugin's ``<dependencies>``, always with scope ``build``

Ordinary dependencyManagement entries only constrain versions of
dependencies declared elsewhere; they are not applied and not emitted.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from pomdeps.maven.properties import resolve_version
from pomdeps.models import (
    DEFAULT_DEPENDENCY_TYPE,
    DependencyRecord,
    MAVEN_ECOSYSTEM,
    Profile,
    ProjectDescriptor,
    RawDependency,
    SCOPE_BUILD,
    SCOPE_DEV,
    SCOPE_IMPORT,
    SCOPE_PROD,
    SCOPE_SYSTEM,
)

logger = logging.getLogger(__name__)

MAVEN_SCOPE_MAP = {
    "test": SCOPE_DEV,
    "provided": SCOPE_PROD,
    "runtime": SCOPE_PROD,
    "system": SCOPE_SYSTEM,
    "import": SCOPE_IMPORT,
    "compile": SCOPE_PROD,
    "": SCOPE_PROD,
}


def map_maven_scope(maven_scope: Optional[str]) -> str:
    """Map a Maven scope to an output scope; unknown scopes are ``prod``."""
    return MAVEN_SCOPE_MAP.get(maven_scope or "", SCOPE_PROD)


def dependency_metadata(dep: RawDependency) -> Dict[str, Any]:
    """Collect the non-default attributes of a dependency."""
    metadata: Dict[str, Any] = {}
    if dep.type and dep.type != DEFAULT_DEPENDENCY_TYPE:
        metadata["type"] = dep.type
    if dep.classifier:
        metadata["classifier"] = dep.classifier
    if dep.optional:
        metadata["optional"] = True
    if dep.exclusions:
        metadata["exclusions"] = [ex.coordinate for ex in dep.exclusions]
    return metadata


class DependencyExtractor:
    """Turns raw descriptor sections into dependency records.

    Args:
        properties: Fully merged property table used for version resolution.
        source_file: Optional descriptor path recorded on every record.
    """

    def __init__(self, properties: Dict[str, str], source_file: Optional[str] = None):
        self.properties = properties
        self.source_file = source_file

    def extract(
        self,
        descriptor: ProjectDescriptor,
        active_profiles: List[Profile],
    ) -> List[DependencyRecord]:
        """Extract records from every section, in the fixed section order."""
        records: List[DependencyRecord] = []

        for profile in active_profiles:
            records.extend(self.from_dependencies(profile.dependencies))

        records.extend(self.from_dependencies(descriptor.dependencies))
        records.extend(self.from_dependency_management(descriptor.dependency_management))

        for profile in active_profiles:
            records.extend(self.from_dependency_management(profile.dependency_management))

        for plugin in descriptor.plugins:
            records.extend(self.from_dependencies(plugin.dependencies, scope=SCOPE_BUILD))

        return records

    def from_dependencies(
        self,
        dependencies: Iterable[RawDependency],
        scope: Optional[str] = None,
    ) -> List[DependencyRecord]:
        """Convert a plain dependency list; ``scope`` overrides the mapped scope."""
        records = []
        for dep in dependencies:
            if not self._has_coordinates(dep):
                continue
            records.append(self._to_record(dep, scope or map_maven_scope(dep.scope)))
        return records

    def from_dependency_management(self, dependencies: Iterable[RawDependency]) -> List[DependencyRecord]:
        """Convert dependencyManagement entries, keeping BOM imports only."""
        records = []
        for dep in dependencies:
            if not self._has_coordinates(dep):
                continue
            if not dep.is_bom_import():
                continue
            records.append(self._to_record(dep, SCOPE_IMPORT))
        return records

    def _has_coordinates(self, dep: RawDependency) -> bool:
        if dep.group_id and dep.artifact_id:
            return True
        logger.debug(f"Skipping dependency without coordinates: '{dep.group_id}:{dep.artifact_id}'")
        return False

    def _to_record(self, dep: RawDependency, scope: str) -> DependencyRecord:
        return DependencyRecord(
            type=MAVEN_ECOSYSTEM,
            name=f"{dep.group_id}:{dep.artifact_id}",
            version=resolve_version(dep.version, self.properties),
            scope=scope,
            direct=True,
            source_file=self.source_file,
            metadata=dependency_metadata(dep),
        )
