"""
Custom exception hierarchy for SBOM visualizer.
"""

import json
from typing import Any


class SBOMVisualizerError(Exception):
    """Base exception for all SBOM visualizer errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        """Initialize with message and optional context.

        Args:
            message: Error message
            context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """String representation with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (Context: {context_str})"
        return self.message


# SBOM input exceptions
class SBOMError(SBOMVisualizerError):
    """Base exception for SBOM input operations."""

    pass


class SBOMParseError(SBOMError):
    """SBOM file could not be read or decoded."""

    pass


class SBOMValidationError(SBOMError):
    """SBOM document failed the schema check."""

    def __init__(
        self,
        message: str,
        errors: list[str] | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context)
        self.errors = errors or []


# Generation boundary exceptions
class GenerationError(SBOMVisualizerError):
    """Upstream SBOM generation failed."""

    pass


# Export exceptions
class ExportError(SBOMVisualizerError):
    """Error occurred while writing or saving an exported document."""

    pass


def wrap_external_error(
    error: Exception, context: dict[str, Any] | None = None
) -> SBOMVisualizerError:
    """Wrap external exceptions in our custom exception hierarchy.

    Args:
        error: External exception to wrap
        context: Additional context information

    Returns:
        Appropriate SBOMVisualizerError subclass
    """
    error_message = str(error)
    error_context = context or {}
    error_context["original_error"] = type(error).__name__

    if isinstance(error, json.JSONDecodeError):
        return SBOMParseError(f"Invalid JSON: {error_message}", error_context)

    elif isinstance(error, FileNotFoundError):
        return SBOMParseError(f"File not found: {error_message}", error_context)

    elif isinstance(error, PermissionError):
        return SBOMVisualizerError(f"Permission denied: {error_message}", error_context)

    elif isinstance(error, UnicodeDecodeError):
        return SBOMParseError(f"Cannot decode file as UTF-8: {error_message}", error_context)

    elif isinstance(error, IsADirectoryError | NotADirectoryError):
        return SBOMParseError(f"Cannot read input: {error_message}", error_context)

    elif isinstance(error, OSError):
        return SBOMVisualizerError(f"I/O error: {error_message}", error_context)

    elif isinstance(error, ValueError | TypeError):
        return SBOMVisualizerError(f"Data validation error: {error_message}", error_context)

    else:
        return SBOMVisualizerError(f"Unexpected error: {error_message}", error_context)


def create_error_context(**kwargs) -> dict[str, Any]:
    """Create error context dictionary, dropping empty values.

    Args:
        **kwargs: Context key-value pairs

    Returns:
        Context dictionary
    """
    context = {}

    for key, value in kwargs.items():
        if value is not None:
            context[key] = value

    return context
