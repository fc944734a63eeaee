"""
Validation and statistics commands for SBOM visualizer CLI.
"""

import sys
from pathlib import Path

import click

from ...pipeline.sbom.filtering import filter_components
from ...shared.exceptions import SBOMVisualizerError
from ...visualization.core.unified_visualizer import UnifiedVisualizer
from ...visualization.exporter import calculate_statistics
from ...visualization.unified import validate_sbom_file
from ..utils import build_filter_state, get_output_manager_from_context


@click.command()
@click.argument(
    "sbom_paths", nargs=-1, required=True, type=click.Path(exists=True, path_type=Path)
)
@click.pass_context
def validate(ctx, sbom_paths):
    """Check that SBOM files hold usable component lists."""
    logger = ctx.obj["logger"]
    out = get_output_manager_from_context(ctx)

    failures = 0
    for sbom_path in sbom_paths:
        result = validate_sbom_file(sbom_path)
        out.validation_report(str(sbom_path), result)
        if not result.valid:
            failures += 1
            logger.debug(f"Validation errors for {sbom_path}: {result.errors}")

    if failures:
        sys.exit(1)


@click.command()
@click.argument(
    "sbom_paths", nargs=-1, required=True, type=click.Path(exists=True, path_type=Path)
)
@click.option("--search", help="Count only components whose name contains this text as visible")
@click.pass_context
def stats(ctx, sbom_paths, search):
    """Print component statistics for the merged SBOM files."""
    logger = ctx.obj["logger"]
    out = get_output_manager_from_context(ctx)

    try:
        components = UnifiedVisualizer().load_sources(sbom_paths)
    except SBOMVisualizerError as e:
        logger.error(f"Statistics failed: {e}")
        out.error(f"Statistics failed: {e}")
        sys.exit(1)

    filters = build_filter_state(search=search)
    visible_ids = None
    if filters is not None:
        visible_ids = {c.id for c in filter_components(components, filters)}

    out.statistics_table(calculate_statistics(components, visible_ids))
