"""
Shared module for core functionality.

Contains core models, exceptions, caching and logging shared across the
visualizer.
"""

from .caching import ResultCache, compute_cache_key
from .exceptions import (
    ExportError,
    GenerationError,
    SBOMError,
    SBOMParseError,
    SBOMValidationError,
    SBOMVisualizerError,
    create_error_context,
    wrap_external_error,
)
from .logging import get_logger, resolve_log_level, setup_logging
from .models import (
    ComponentModel,
    ComponentStatistics,
    ComponentType,
    ExportOptions,
    FilterState,
    GenerationOptions,
    GenerationResult,
    LayoutConfig,
    RiskLevel,
    TreeEdge,
    TreeNode,
    ValidationResult,
    VulnerabilityModel,
)

__all__ = [
    # Core models
    "ComponentModel",
    "ComponentStatistics",
    "ComponentType",
    "ExportOptions",
    "FilterState",
    "GenerationOptions",
    "GenerationResult",
    "LayoutConfig",
    "RiskLevel",
    "TreeEdge",
    "TreeNode",
    "ValidationResult",
    "VulnerabilityModel",
    # Core exceptions
    "SBOMVisualizerError",
    "SBOMError",
    "SBOMParseError",
    "SBOMValidationError",
    "GenerationError",
    "ExportError",
    "wrap_external_error",
    "create_error_context",
    # Utils
    "ResultCache",
    "compute_cache_key",
    "resolve_log_level",
    "setup_logging",
    "get_logger",
]
