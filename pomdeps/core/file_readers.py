"""
File readers for pomdeps.

Concrete implementations of the ``FileReader`` collaborator: one backed by the
local filesystem and one backed by an in-memory mapping.
"""
import os
from typing import Dict, Optional, Union

from pomdeps.interfaces.file_reader import FileReader
from pomdeps.utils.exceptions import DescriptorNotFoundError


class LocalFileReader(FileReader):
    """Reads descriptors from the local filesystem.

    Relative paths are resolved against ``base_path`` when one is given.
    """

    def __init__(self, base_path: Optional[str] = None):
        self.base_path = base_path

    def read_file(self, path: str) -> bytes:
        full_path = path
        if self.base_path and not os.path.isabs(path):
            full_path = os.path.join(self.base_path, path)

        try:
            with open(full_path, "rb") as f:
                return f.read()
        except OSError as e:
            raise DescriptorNotFoundError(full_path, original_exception=e) from e


class InMemoryFileReader(FileReader):
    """Serves descriptors from a ``path -> content`` mapping."""

    def __init__(self, files: Optional[Dict[str, Union[str, bytes]]] = None):
        self.files: Dict[str, bytes] = {}
        for path, content in (files or {}).items():
            self.add_file(path, content)

    def add_file(self, path: str, content: Union[str, bytes]) -> None:
        """Add or replace a file."""
        if isinstance(content, str):
            content = content.encode("utf-8")
        self.files[os.path.normpath(path)] = content

    def read_file(self, path: str) -> bytes:
        try:
            return self.files[os.path.normpath(path)]
        except KeyError:
            raise DescriptorNotFoundError(path) from None
