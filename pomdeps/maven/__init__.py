"""
Maven build-descriptor resolution.

Resolves ``pom.xml`` files into dependency records: property placeholders,
parent chains, profile activation and BOM imports.
"""

from .dependencies import DependencyExtractor, map_maven_scope
from .parent_chain import ParentChainLoader
from .pom_parser import parse_pom
from .profiles import ProfileEvaluator, ReferenceEnvironment
from .properties import resolve_placeholders, resolve_version
from .resolver import MavenResolver, ResolutionResult, parse_pom_xml

__all__ = [
    "MavenResolver",
    "ResolutionResult",
    "parse_pom_xml",
    "parse_pom",
    "ParentChainLoader",
    "ProfileEvaluator",
    "ReferenceEnvironment",
    "DependencyExtractor",
    "map_maven_scope",
    "resolve_placeholders",
    "resolve_version",
]
