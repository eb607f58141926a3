"""
Maven extractor.

Adapts ``MavenResolver`` to the extractor contract: finds the project's
``pom.xml`` and resolves it against the local filesystem, so parent
descriptors reachable through ``relativePath`` are honoured.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

from pomdeps.core.file_readers import LocalFileReader
from pomdeps.extractors.base import BaseExtractor
from pomdeps.maven.parent_chain import DEFAULT_DESCRIPTOR_FILENAME, DEFAULT_MAX_PARENT_DEPTH
from pomdeps.maven.profiles import ReferenceEnvironment
from pomdeps.maven.resolver import MavenResolver
from pomdeps.models import DependencyRecord, MAVEN_ECOSYSTEM


class MavenExtractor(BaseExtractor):
    """Extracts Maven dependencies from the ``pom.xml`` of a project."""

    def __init__(self, project_path: str = ".", descriptor_filename: str = DEFAULT_DESCRIPTOR_FILENAME):
        super().__init__(project_path)
        self.descriptor_filename = descriptor_filename
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def ecosystem_name(self) -> Optional[str]:
        return MAVEN_ECOSYSTEM

    @property
    def supported_files(self) -> List[str]:
        return [self.descriptor_filename]

    def can_extract(self) -> bool:
        return bool(self.get_dependency_files())

    def build_resolver(self, config: Optional[Dict] = None) -> MavenResolver:
        """Create a resolver from the ``maven`` config section."""
        maven_config = (config or {}).get("maven", {}) or {}
        reader = LocalFileReader() if maven_config.get("resolve_parents", True) else None
        return MavenResolver(
            reader=reader,
            reference=ReferenceEnvironment.from_config(maven_config.get("reference_environment")),
            descriptor_filename=maven_config.get("descriptor_filename", DEFAULT_DESCRIPTOR_FILENAME),
            max_parent_depth=maven_config.get("max_parent_depth", DEFAULT_MAX_PARENT_DEPTH),
        )

    def extract_dependencies(self, config: Optional[Dict] = None) -> List[DependencyRecord]:
        resolver = self.build_resolver(config)

        records: List[DependencyRecord] = []
        for pom_path in self.get_dependency_files():
            records.extend(self.extract_file(pom_path, resolver))
        return records

    def extract_file(self, pom_path: Path, resolver: MavenResolver) -> List[DependencyRecord]:
        """Resolve a single descriptor file."""
        try:
            content = pom_path.read_bytes()
        except OSError as e:
            self.logger.warning(f"Could not read {pom_path}: {e}")
            return []

        result = resolver.resolve_with_diagnostics(
            content,
            pom_dir=str(pom_path.parent.resolve()),
            source_file=str(pom_path),
        )
        for warning in result.warnings:
            self.logger.warning(f"{pom_path}: {warning.message} {warning.details or ''}".rstrip())
        return result.dependencies
