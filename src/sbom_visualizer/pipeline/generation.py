"""
Boundary with upstream SBOM generators.

Generators turn raw project files into component lists. They live outside
this package; this module only fixes the contract: a generator returns a
GenerationResult, and the visualization pipeline runs only on success.
"""

import logging
from collections.abc import Callable, Mapping
from datetime import datetime, timezone

from ..shared.exceptions import GenerationError, create_error_context
from ..shared.models import ComponentModel, GenerationOptions, GenerationResult

logger = logging.getLogger(__name__)

Generator = Callable[[Mapping[str, bytes], GenerationOptions], GenerationResult]


def generation_success(
    components: list[ComponentModel],
    options: GenerationOptions,
    warnings: list[str] | None = None,
) -> GenerationResult:
    """Build a successful result with the standard metadata block."""
    return GenerationResult(
        success=True,
        components=components,
        warnings=warnings or [],
        metadata={
            "generatedAt": datetime.now(timezone.utc).isoformat(),
            "projectType": options.project_type,
            "totalComponents": len(components),
        },
    )


def generation_failure(message: str) -> GenerationResult:
    """Build a failed result carrying a human-readable message."""
    return GenerationResult(success=False, error=message)


def run_generator(
    generator: Generator, files: Mapping[str, bytes], options: GenerationOptions
) -> list[ComponentModel]:
    """Invoke a generator and unwrap its result.

    Args:
        generator: Upstream generator
        files: Project files keyed by relative path
        options: Generation options

    Returns:
        Generated components

    Raises:
        GenerationError: If the generator reports failure
    """
    result = generator(files, options)
    for warning in result.warnings:
        logger.warning(f"Generator warning: {warning}")

    if not result.success:
        raise GenerationError(
            result.error or "SBOM generation failed",
            create_error_context(project_type=options.project_type or None),
        )

    logger.info(f"Generator produced {len(result.components)} components")
    return result.components
