"""
Exception handling for descriptor resolution.

This module provides the exception classes raised while reading and parsing
Maven descriptors, and the warning records that describe degraded (but not
failed) resolutions.

Each exception includes:
- Clear error message
- Descriptor path context
- Suggested user action
- Original exception preserved for debugging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class PomDepsError(Exception):
    """
    Base exception for all pomdeps errors.

    This is the parent class for every exception raised by the package and
    should be used for generic errors that don't fit other specific categories.
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
        suggested_action: Optional[str] = None,
    ):
        """
        Initialize PomDepsError.

        Args:
            message: Human-readable error message
            path: Descriptor or config path involved in the failure
            original_exception: The original exception that was caught
            suggested_action: Suggested action for the user to resolve the issue
        """
        self.message = message
        self.path = path
        self.original_exception = original_exception
        self.suggested_action = suggested_action

        error_parts = [message]

        if path:
            error_parts.append(f"Path: {path}")

        if suggested_action:
            error_parts.append(f"Action: {suggested_action}")

        if original_exception:
            error_parts.append(f"Original error: {str(original_exception)}")

        super().__init__(" | ".join(error_parts))


class PomParseError(PomDepsError):
    """
    Raised when descriptor content is not well-formed XML or has no
    ``<project>`` root element.
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(
            message=message,
            path=path,
            original_exception=original_exception,
            suggested_action="Check that the file is a well-formed pom.xml",
        )


class DescriptorNotFoundError(PomDepsError):
    """
    Raised by file readers when a descriptor cannot be read.

    This typically indicates:
    - A parent relativePath pointing outside the checked-out tree
    - A parent that only exists in a remote repository
    - Insufficient permissions
    """

    def __init__(
        self,
        path: str,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(
            message="Descriptor not found",
            path=path,
            original_exception=original_exception,
            suggested_action="Verify the parent relativePath or check out the parent project",
        )


class ConfigurationError(PomDepsError):
    """Raised when a configuration file is missing or invalid."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(
            message=message,
            path=path,
            original_exception=original_exception,
            suggested_action="Fix the configuration file or pass a different --config",
        )


class WarningStage(Enum):
    """Resolution stage that produced a warning."""
    PARSE = "parse"
    PARENT_CHAIN = "parent_chain"
    PROPERTIES = "properties"


@dataclass
class ResolutionWarning:
    """A degraded-but-successful resolution step."""
    stage: WarningStage
    message: str
    path: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert warning to dictionary for JSON serialization."""
        return {
            "stage": self.stage.value,
            "message": self.message,
            "path": self.path,
            "details": self.details,
        }
