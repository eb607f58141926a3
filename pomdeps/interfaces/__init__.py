"""Abstract collaborator interfaces."""

from .file_reader import FileReader

__all__ = ["FileReader"]
