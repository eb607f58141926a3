"""
Base extractor interface for multi-ecosystem dependency extraction.

Defines the contract that all ecosystem-specific extractors must implement.
Every extractor returns the same ``DependencyRecord`` shape so results from
different ecosystems can be concatenated without adaptation.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional

from pomdeps.models import DependencyRecord


class BaseExtractor(ABC):
    """
    Abstract base class for ecosystem-specific dependency extractors.

    Each extractor is responsible for:
    1. Detecting if the project uses its ecosystem
    2. Extracting dependencies from ecosystem-specific files
    3. Returning results as normalized dependency records
    """

    def __init__(self, project_path: str = "."):
        """
        Initialize the extractor.

        Args:
            project_path: Path to the project directory to scan
        """
        self.project_path = Path(project_path)

    @property
    def ecosystem_name(self) -> Optional[str]:
        """Return the name of the ecosystem this extractor handles."""
        return None

    @property
    def supported_files(self) -> List[str]:
        """
        Return list of file patterns this extractor can handle.

        Entries may be exact file names or glob patterns relative to the
        project path.
        """
        return []

    @abstractmethod
    def can_extract(self) -> bool:
        """
        Check if this extractor can handle the current project.

        Returns:
            True if the project contains files this extractor understands
        """
        pass

    @abstractmethod
    def extract_dependencies(self, config: Optional[Dict] = None) -> List[DependencyRecord]:
        """
        Extract dependencies from the project.

        Args:
            config: Configuration dictionary

        Returns:
            Dependency records in the extractor's deterministic order
        """
        pass

    def get_dependency_files(self) -> List[Path]:
        """
        Get list of dependency files found in the project.

        Returns:
            List of Path objects for found dependency files
        """
        found_files = []
        for pattern in self.supported_files:
            # Handle both exact filenames and glob patterns
            if "*" in pattern:
                found_files.extend(sorted(self.project_path.glob(pattern)))
            else:
                file_path = self.project_path / pattern
                if file_path.exists():
                    found_files.append(file_path)
        return found_files
