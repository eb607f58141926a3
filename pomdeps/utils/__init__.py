"""
Utility modules for pomdeps.

This package contains shared exception and warning types used throughout
the pomdeps codebase.
"""

from pomdeps.utils.exceptions import (
    ConfigurationError,
    DescriptorNotFoundError,
    PomDepsError,
    PomParseError,
    ResolutionWarning,
    WarningStage,
)

__all__ = [
    "PomDepsError",
    "PomParseError",
    "DescriptorNotFoundError",
    "ConfigurationError",
    "ResolutionWarning",
    "WarningStage",
]
