"""
Entry points for rendering and exporting SBOM dependency trees.
"""

import json
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from ..pipeline.sbom.parsing import parse_component_list, validate_sbom_document
from ..shared.exceptions import SBOMValidationError, create_error_context, wrap_external_error
from ..shared.models import (
    ComponentModel,
    ExportOptions,
    FilterState,
    LayoutConfig,
    ValidationResult,
)
from .core.unified_visualizer import UnifiedVisualizer


def render_dependency_tree(
    components: Sequence[ComponentModel],
    options: ExportOptions | None = None,
    filters: FilterState | None = None,
    root_id: str | None = None,
    config: LayoutConfig | None = None,
    max_nodes: int | None = None,
    generated_at: datetime | None = None,
) -> str:
    """Run build, layout and export over a canonical component list.

    Args:
        components: Canonical component list
        options: Export flags
        filters: Active filters; non-matching components are drawn dimmed
        root_id: Optional single designated root
        config: Layout geometry
        max_nodes: Optional cap on tree node instances
        generated_at: Timestamp for the metadata block (default: now)

    Returns:
        HTML document text

    Example:
        >>> from sbom_visualizer.visualization import render_dependency_tree
        >>> html = render_dependency_tree(components, ExportOptions(title="My app"))
    """
    visualizer = UnifiedVisualizer(config=config, max_nodes=max_nodes)
    return visualizer.render(
        components, options, filters=filters, root_id=root_id, generated_at=generated_at
    )


def create_tree_export(
    sbom_paths: Sequence[str | Path],
    output_path: str | Path,
    options: ExportOptions | None = None,
    filters: FilterState | None = None,
    root_id: str | None = None,
) -> Path:
    """Merge SBOM files and export their dependency tree as HTML.

    Args:
        sbom_paths: Input files, merged in order
        output_path: Output HTML file path
        options: Export flags
        filters: Active filters
        root_id: Optional single designated root

    Returns:
        Path to generated HTML file
    """
    visualizer = UnifiedVisualizer()
    return visualizer.create_export(
        [Path(p) for p in sbom_paths],
        Path(output_path),
        options,
        filters=filters,
        root_id=root_id,
    )


def validate_sbom_file(sbom_path: str | Path) -> ValidationResult:
    """Check that a file holds a usable component list.

    Never raises; read and decode failures are reported as errors.

    Args:
        sbom_path: CycloneDX or component-array JSON file

    Returns:
        ValidationResult
    """
    path = Path(sbom_path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        error = wrap_external_error(e, create_error_context(path=str(path)))
        return ValidationResult(False, [error.message])

    if isinstance(data, list):
        try:
            parse_component_list(data)
        except SBOMValidationError as e:
            return ValidationResult(False, e.errors)
        return ValidationResult(True)

    return validate_sbom_document(data)
