"""
Maven descriptor resolution entry point.

Sequences the resolution steps for one ``pom.xml``:

1. ancestor properties (parent chain, when a reader and directory are given)
2. local ``<properties>`` (override ancestors)
3. project coordinates ``project.*`` / ``pom.*`` (override everything)
4. profile activation
5. dependency extraction in the fixed section order

Every call builds its own property table and cycle-detection state, so one
resolver can be shared between threads as long as its reader can.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from pomdeps.interfaces.file_reader import FileReader
from pomdeps.maven.dependencies import DependencyExtractor
from pomdeps.maven.parent_chain import (
    DEFAULT_DESCRIPTOR_FILENAME,
    DEFAULT_MAX_PARENT_DEPTH,
    ParentChainLoader,
)
from pomdeps.maven.pom_parser import parse_pom
from pomdeps.maven.profiles import ProfileEvaluator, ReferenceEnvironment
from pomdeps.maven.properties import has_unresolved_placeholder
from pomdeps.models import DependencyRecord, ProjectDescriptor
from pomdeps.utils.exceptions import PomParseError, ResolutionWarning, WarningStage


@dataclass
class ResolutionResult:
    """Dependency records plus the warnings raised while producing them."""
    dependencies: List[DependencyRecord] = field(default_factory=list)
    warnings: List[ResolutionWarning] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "dependencies": [d.to_dict() for d in self.dependencies],
            "warnings": [w.to_dict() for w in self.warnings],
        }


def add_project_coordinates(properties: Dict[str, str], descriptor: ProjectDescriptor) -> None:
    """Add ``project.*`` and ``pom.*`` properties for declared coordinates."""
    for key, value in (
        ("groupId", descriptor.group_id),
        ("artifactId", descriptor.artifact_id),
        ("version", descriptor.version),
    ):
        if value:
            properties[f"project.{key}"] = value
            properties[f"pom.{key}"] = value


class MavenResolver:
    """Resolves a ``pom.xml`` into dependency records.

    Args:
        reader: File reader used for the parent chain; without one, ancestors
            are ignored.
        reference: Reference JDK / OS for profile activation.
        descriptor_filename: Default descriptor file name for parent lookups.
        max_parent_depth: Maximum number of ancestors to load.
    """

    def __init__(
        self,
        reader: Optional[FileReader] = None,
        reference: Optional[ReferenceEnvironment] = None,
        descriptor_filename: str = DEFAULT_DESCRIPTOR_FILENAME,
        max_parent_depth: int = DEFAULT_MAX_PARENT_DEPTH,
    ):
        self.reader = reader
        self.profile_evaluator = ProfileEvaluator(reference)
        self.descriptor_filename = descriptor_filename
        self.max_parent_depth = max_parent_depth
        self.logger = logging.getLogger(self.__class__.__name__)

    def resolve(
        self,
        content: Union[str, bytes],
        pom_dir: Optional[str] = None,
        source_file: Optional[str] = None,
    ) -> List[DependencyRecord]:
        """
        Resolve one descriptor.

        Args:
            content: Descriptor text
            pom_dir: Directory containing the descriptor, enables parent lookups
            source_file: Optional path recorded on every record

        Returns:
            List[DependencyRecord]: Records in deterministic order; empty when
            the descriptor is malformed
        """
        return self.resolve_with_diagnostics(content, pom_dir, source_file).dependencies

    def resolve_with_diagnostics(
        self,
        content: Union[str, bytes],
        pom_dir: Optional[str] = None,
        source_file: Optional[str] = None,
    ) -> ResolutionResult:
        """Resolve one descriptor, also reporting degraded steps as warnings."""
        result = ResolutionResult()

        try:
            descriptor = parse_pom(content, path=source_file)
        except PomParseError as e:
            self.logger.debug(f"Malformed descriptor, no dependencies extracted: {e}")
            result.warnings.append(ResolutionWarning(
                stage=WarningStage.PARSE,
                message="Malformed descriptor, no dependencies extracted",
                path=source_file,
                details={"error": str(e)},
            ))
            return result

        properties = self.build_properties(descriptor, pom_dir, result.warnings)
        active_profiles = self.profile_evaluator.active_profiles(descriptor.profiles)

        extractor = DependencyExtractor(properties, source_file=source_file)
        result.dependencies = extractor.extract(descriptor, active_profiles)

        for record in result.dependencies:
            if has_unresolved_placeholder(record.version):
                result.warnings.append(ResolutionWarning(
                    stage=WarningStage.PROPERTIES,
                    message="Unresolved property in version",
                    path=source_file,
                    details={"name": record.name, "version": record.version},
                ))

        self.logger.debug(
            f"Resolved {len(result.dependencies)} dependencies "
            f"({len(active_profiles)} active profiles, {len(properties)} properties)"
        )
        return result

    def build_properties(
        self,
        descriptor: ProjectDescriptor,
        pom_dir: Optional[str] = None,
        warnings: Optional[List[ResolutionWarning]] = None,
    ) -> Dict[str, str]:
        """Build the merged property table: ancestors, then local, then coordinates."""
        properties: Dict[str, str] = {}

        if self.reader is not None and pom_dir:
            loader = ParentChainLoader(
                self.reader,
                descriptor_filename=self.descriptor_filename,
                max_depth=self.max_parent_depth,
            )
            properties.update(loader.load(descriptor, pom_dir, warnings))

        properties.update(descriptor.properties)
        add_project_coordinates(properties, descriptor)
        return properties

    def project_info(self, content: Union[str, bytes]) -> Optional[ProjectDescriptor]:
        """Parse a descriptor for its coordinates; ``None`` when malformed."""
        try:
            return parse_pom(content)
        except PomParseError:
            return None


def parse_pom_xml(
    content: Union[str, bytes],
    pom_dir: Optional[str] = None,
    reader: Optional[FileReader] = None,
) -> List[DependencyRecord]:
    """Resolve a descriptor with default settings."""
    return MavenResolver(reader=reader).resolve(content, pom_dir=pom_dir)
