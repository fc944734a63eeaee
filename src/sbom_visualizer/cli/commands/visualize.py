"""
Export command for SBOM visualizer CLI.
"""

import sys
import webbrowser
from pathlib import Path

import click

from ...shared.exceptions import SBOMVisualizerError
from ...shared.models import ComponentType, ExportOptions, RiskLevel
from ...visualization.core.unified_visualizer import UnifiedVisualizer
from ...visualization.exporter import default_filename, download_html, save_to_directory
from ..utils import build_filter_state, get_output_manager_from_context


@click.command()
@click.argument(
    "sbom_paths", nargs=-1, required=True, type=click.Path(exists=True, path_type=Path)
)
@click.option("--output-dir", "-o", default="out", help="Output directory for the export")
@click.option("--output-name", help="Custom output file name (default: dated file name)")
@click.option("--title", default=ExportOptions.title, help="Document title")
@click.option("--description", default=ExportOptions.description, help="Document subtitle")
@click.option("--no-metadata", is_flag=True, help="Omit the export timestamp")
@click.option("--no-legend", is_flag=True, help="Omit the color legend")
@click.option("--no-statistics", is_flag=True, help="Omit the statistics panel")
@click.option("--matrix", is_flag=True, help="Render an adjacency matrix instead of a tree")
@click.option("--root", "root_id", help="Component id to use as the single tree root")
@click.option(
    "--type",
    "types",
    multiple=True,
    type=click.Choice([t.value for t in ComponentType]),
    help="Highlight only components of this type (repeatable)",
)
@click.option(
    "--license", "licenses", multiple=True, help="Highlight only this license (repeatable)"
)
@click.option(
    "--risk",
    "risk_levels",
    multiple=True,
    type=click.Choice([r.value for r in RiskLevel]),
    help="Highlight only this risk level (repeatable)",
)
@click.option("--search", help="Highlight only components whose name contains this text")
@click.option("--open-browser", is_flag=True, help="Open the export in a browser after creation")
@click.pass_context
def export(
    ctx,
    sbom_paths,
    output_dir,
    output_name,
    title,
    description,
    no_metadata,
    no_legend,
    no_statistics,
    matrix,
    root_id,
    types,
    licenses,
    risk_levels,
    search,
    open_browser,
):
    """Merge SBOM files and export their dependency tree as standalone HTML."""
    logger = ctx.obj["logger"]
    out = get_output_manager_from_context(ctx)

    options = ExportOptions(
        title=title,
        description=description,
        include_metadata=not no_metadata,
        include_legend=not no_legend,
        include_statistics=not no_statistics,
        matrix_mode=matrix,
    )
    filters = build_filter_state(types, licenses, risk_levels, search)

    if output_name and not output_name.endswith(".html"):
        output_name += ".html"

    try:
        visualizer = UnifiedVisualizer()
        components = visualizer.load_sources(sbom_paths)

        visible_ids = None
        if filters is not None:
            visible_ids = {c.id for c in visualizer.component_filter.apply(components, filters)}
            out.status(f"{len(visible_ids)} of {len(components)} components match the filters")

        forest = visualizer.hierarchical_engine.build_forest(components, root_id=root_id)
        visualizer.layout_engine.layout(forest)

        html_path = download_html(
            forest,
            components,
            options,
            save_action=save_to_directory(Path(output_dir), output_name or default_filename()),
            visible_ids=visible_ids,
            config=visualizer.config,
        )

        out.success(f"Dependency tree exported: {html_path}")

        if open_browser and html_path is not None:
            webbrowser.open(f"file://{html_path.absolute()}")
            out.info("Opened export in browser")

        logger.info(f"Export created for {len(sbom_paths)} SBOM file(s) at {html_path}")

    except SBOMVisualizerError as e:
        logger.error(f"Export failed: {e}")
        out.error(f"Export failed: {e}")
        sys.exit(1)
