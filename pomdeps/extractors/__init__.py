"""
Extractors package for dependency extraction.

This package provides the extractor contract shared by every ecosystem and
the Maven implementation of it.
"""

from .base import BaseExtractor
from .maven import MavenExtractor

__all__ = ["BaseExtractor", "MavenExtractor"]
