"""
pomdeps - Maven descriptor dependency resolution.

Resolves ``pom.xml`` build descriptors into normalized dependency records:
property placeholders, parent chains, profile activation and BOM imports.

Usage:
    from pomdeps import MavenResolver, LocalFileReader

    resolver = MavenResolver(reader=LocalFileReader())
    records = resolver.resolve(content, pom_dir="/path/to/project")
"""

from .core.file_readers import InMemoryFileReader, LocalFileReader
from .interfaces.file_reader import FileReader
from .maven.resolver import MavenResolver, ResolutionResult, parse_pom_xml
from .models import DependencyRecord

__all__ = [
    "MavenResolver",
    "ResolutionResult",
    "parse_pom_xml",
    "DependencyRecord",
    "FileReader",
    "LocalFileReader",
    "InMemoryFileReader",
]

__version__ = "1.0.0"
