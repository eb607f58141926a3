"""
Data models for Maven descriptor resolution.

Plain data structures describing a parsed ``pom.xml`` and the dependency
records produced from it. No parsing or resolution behavior lives here.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


# Output scopes shared with every ecosystem extractor
SCOPE_PROD = "prod"
SCOPE_DEV = "dev"
SCOPE_BUILD = "build"
SCOPE_SYSTEM = "system"
SCOPE_IMPORT = "import"
SCOPE_OPTIONAL = "optional"
SCOPE_PEER = "peer"

MAVEN_ECOSYSTEM = "maven"
DEFAULT_DEPENDENCY_TYPE = "jar"


@dataclass
class Exclusion:
    """A ``<exclusion>`` entry; either part may be the ``*`` wildcard."""
    group_id: str
    artifact_id: str

    @property
    def coordinate(self) -> str:
        return f"{self.group_id}:{self.artifact_id}"


@dataclass
class RawDependency:
    """A ``<dependency>`` element exactly as declared.

    Attributes:
        group_id: Maven groupId, empty string when missing.
        artifact_id: Maven artifactId, empty string when missing.
        version: Declared version, may contain ``${...}`` placeholders or be empty.
        scope: Declared scope, empty string when not given.
        type: Declared packaging type, empty string when not given (Maven treats it as ``jar``).
        classifier: Optional classifier (e.g. ``sources``).
        optional: Whether ``<optional>true</optional>`` was declared.
        exclusions: Declared exclusions, wildcards preserved.
    """
    group_id: str = ""
    artifact_id: str = ""
    version: str = ""
    scope: str = ""
    type: str = ""
    classifier: str = ""
    optional: bool = False
    exclusions: List[Exclusion] = field(default_factory=list)

    def is_bom_import(self) -> bool:
        """Check whether this is a BOM import (``scope=import`` and ``type=pom``)."""
        return self.scope == "import" and self.type == "pom"


@dataclass
class Plugin:
    """A ``<build><plugins><plugin>`` element with its own dependency list."""
    group_id: str = ""
    artifact_id: str = ""
    version: str = ""
    dependencies: List[RawDependency] = field(default_factory=list)


@dataclass
class ParentReference:
    """The ``<parent>`` element of a descriptor."""
    group_id: str = ""
    artifact_id: str = ""
    version: str = ""
    relative_path: str = ""


@dataclass
class ActivationOS:
    name: str = ""
    family: str = ""
    arch: str = ""
    version: str = ""

    def is_empty(self) -> bool:
        return not (self.name or self.family or self.arch or self.version)


@dataclass
class ActivationProperty:
    name: str = ""
    value: str = ""


@dataclass
class ActivationFile:
    exists: str = ""
    missing: str = ""


@dataclass
class Activation:
    """Parsed ``<activation>`` conditions of a profile."""
    active_by_default: bool = False
    jdk: str = ""
    os: ActivationOS = field(default_factory=ActivationOS)
    property: ActivationProperty = field(default_factory=ActivationProperty)
    file: ActivationFile = field(default_factory=ActivationFile)


@dataclass
class Profile:
    """A ``<profile>`` element.

    Profile properties are recorded for completeness but are not merged into
    the property table.
    """
    id: str = ""
    activation: Activation = field(default_factory=Activation)
    dependencies: List[RawDependency] = field(default_factory=list)
    dependency_management: List[RawDependency] = field(default_factory=list)
    properties: Dict[str, str] = field(default_factory=dict)


@dataclass
class ProjectDescriptor:
    """Central parse result for a single ``pom.xml``.

    Attributes:
        group_id: Declared groupId (not inherited from the parent).
        artifact_id: Declared artifactId.
        version: Declared version (not inherited from the parent).
        packaging: Packaging type, ``jar`` when not declared.
        parent: Parent reference, ``None`` when the descriptor has no parent.
        properties: Top-level ``<properties>`` in declaration order.
        profiles: ``<profiles>`` in declaration order.
        dependency_management: ``<dependencyManagement>`` entries.
        dependencies: Direct ``<dependencies>``.
        plugins: ``<build><plugins>`` entries.
    """
    group_id: str = ""
    artifact_id: str = ""
    version: str = ""
    packaging: str = DEFAULT_DEPENDENCY_TYPE
    parent: Optional[ParentReference] = None
    properties: Dict[str, str] = field(default_factory=dict)
    profiles: List[Profile] = field(default_factory=list)
    dependency_management: List[RawDependency] = field(default_factory=list)
    dependencies: List[RawDependency] = field(default_factory=list)
    plugins: List[Plugin] = field(default_factory=list)

    @property
    def effective_group_id(self) -> str:
        """Declared groupId, falling back to the parent reference groupId."""
        if self.group_id:
            return self.group_id
        return self.parent.group_id if self.parent else ""

    @property
    def effective_version(self) -> str:
        """Declared version, falling back to the parent reference version."""
        if self.version:
            return self.version
        return self.parent.version if self.parent else ""


@dataclass
class DependencyRecord:
    """Normalized dependency record, shared by every ecosystem extractor."""
    type: str
    name: str
    version: str
    scope: str = ""
    direct: bool = True
    source_file: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert record to dictionary for JSON serialization."""
        result: Dict[str, Any] = {
            "type": self.type,
            "name": self.name,
            "version": self.version,
            "scope": self.scope,
            "direct": self.direct,
        }
        if self.source_file:
            result["source_file"] = self.source_file
        if self.metadata:
            result["metadata"] = self.metadata
        return result

    def to_list(self) -> List[str]:
        """Compact array form: ``[type, name, version, scope(, source_file)]``."""
        values = [self.type, self.name, self.version]
        if self.scope or self.source_file:
            values.append(self.scope)
        if self.source_file:
            values.append(self.source_file)
        return values
