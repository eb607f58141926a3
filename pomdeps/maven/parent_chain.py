"""
Parent POM chain loading.

Walks ``<parent>`` references upward through a ``FileReader`` and collects
the properties every ancestor contributes. Farther ancestors are merged
first so nearer ones override them; the descriptor's own declarations are
merged on top by the resolver.
"""

import logging
import os
from typing import Dict, List, Optional, Tuple

from pomdeps.interfaces.file_reader import FileReader
from pomdeps.maven.pom_parser import parse_pom
from pomdeps.models import ProjectDescriptor
from pomdeps.utils.exceptions import (
    DescriptorNotFoundError,
    PomParseError,
    ResolutionWarning,
    WarningStage,
)

DEFAULT_DESCRIPTOR_FILENAME = "pom.xml"
DEFAULT_MAX_PARENT_DEPTH = 10


class ParentChainLoader:
    """Loads inherited properties from the ancestors of a descriptor.

    A missing, unreadable or malformed ancestor ends the chain at that point;
    what was collected from nearer ancestors is kept. This is never an error.
    """

    def __init__(
        self,
        reader: FileReader,
        descriptor_filename: str = DEFAULT_DESCRIPTOR_FILENAME,
        max_depth: int = DEFAULT_MAX_PARENT_DEPTH,
    ):
        self.reader = reader
        self.descriptor_filename = descriptor_filename
        self.descriptor_extension = os.path.splitext(descriptor_filename)[1]
        self.max_depth = max_depth
        self.logger = logging.getLogger(self.__class__.__name__)

    def resolve_parent_path(self, pom_dir: str, relative_path: str = "") -> str:
        """Determine the parent descriptor path for a descriptor in ``pom_dir``.

        No relative path means ``../pom.xml``; a relative path that does not
        end in the descriptor extension names a directory.
        """
        if not relative_path:
            relative_path = os.path.join(os.pardir, self.descriptor_filename)
        elif not relative_path.endswith(self.descriptor_extension):
            relative_path = os.path.join(relative_path, self.descriptor_filename)
        return os.path.normpath(os.path.join(pom_dir, relative_path))

    def load(
        self,
        descriptor: ProjectDescriptor,
        pom_dir: str,
        warnings: Optional[List[ResolutionWarning]] = None,
    ) -> Dict[str, str]:
        """
        Collect the properties contributed by every reachable ancestor.

        Args:
            descriptor: The descriptor whose ancestors should be loaded
            pom_dir: Directory containing that descriptor
            warnings: Optional list that receives a warning when the chain is truncated

        Returns:
            Property table built from the ancestors only
        """
        chain = self._collect_chain(descriptor, pom_dir, warnings)

        properties: Dict[str, str] = {}
        for child, parent in reversed(chain):
            properties.update(parent.properties)

            group_id = parent.effective_group_id
            if group_id:
                properties["parent.groupId"] = group_id
            if parent.artifact_id:
                properties["parent.artifactId"] = parent.artifact_id

            version = parent.effective_version
            if version:
                properties["parent.version"] = version
                if not child.version:
                    properties["project.version"] = version
                    properties["pom.version"] = version

        return properties

    def _collect_chain(
        self,
        descriptor: ProjectDescriptor,
        pom_dir: str,
        warnings: Optional[List[ResolutionWarning]],
    ) -> List[Tuple[ProjectDescriptor, ProjectDescriptor]]:
        """Walk upward, returning ``(child, parent)`` pairs nearest first."""
        chain: List[Tuple[ProjectDescriptor, ProjectDescriptor]] = []
        current, current_dir = descriptor, pom_dir

        while current.parent is not None:
            if len(chain) >= self.max_depth:
                self._warn(
                    warnings,
                    f"Parent chain deeper than {self.max_depth} levels, truncated",
                    None,
                )
                break

            parent_path = self.resolve_parent_path(current_dir, current.parent.relative_path)
            try:
                content = self.reader.read_file(parent_path)
            except (DescriptorNotFoundError, OSError) as e:
                self._warn(warnings, "Parent descriptor could not be read", parent_path, e)
                break

            try:
                parent = parse_pom(content, path=parent_path)
            except PomParseError as e:
                self._warn(warnings, "Parent descriptor is malformed", parent_path, e)
                break

            self.logger.debug(f"Loaded parent descriptor {parent_path} at depth {len(chain) + 1}")
            chain.append((current, parent))
            current, current_dir = parent, os.path.dirname(parent_path)

        return chain

    def _warn(
        self,
        warnings: Optional[List[ResolutionWarning]],
        message: str,
        path: Optional[str],
        error: Optional[Exception] = None,
    ) -> None:
        self.logger.debug(f"{message}: {path}" if path else message)
        if warnings is not None:
            details = {"error": str(error)} if error else {}
            warnings.append(ResolutionWarning(
                stage=WarningStage.PARENT_CHAIN,
                message=message,
                path=path,
                details=details,
            ))
