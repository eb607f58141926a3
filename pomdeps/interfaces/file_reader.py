"""
File reader interface for pomdeps.

Defines the single collaborator the resolution core needs from its
environment: reading the bytes of an ancestor descriptor. High-level modules
depend on this abstraction rather than on the filesystem, so archives and
in-memory fixtures can stand in for real files.
"""
from abc import ABC, abstractmethod


class FileReader(ABC):
    """Abstract interface for descriptor file access."""

    @abstractmethod
    def read_file(self, path: str) -> bytes:
        """
        Read a file's content.

        Args:
            path: Path of the file, as built by the parent chain loader

        Returns:
            bytes: Raw file content

        Raises:
            DescriptorNotFoundError: If the file does not exist or cannot be read
        """
        pass
