"""
Merge command for SBOM visualizer CLI.
"""

import json
import sys
from pathlib import Path

import click

from ...pipeline.sbom.merging import merge_sboms
from ...pipeline.sbom.parsing import load_component_list, write_component_list
from ...shared.exceptions import SBOMVisualizerError
from ..utils import get_output_manager_from_context


@click.command()
@click.argument(
    "sbom_paths", nargs=-1, required=True, type=click.Path(exists=True, path_type=Path)
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the canonical list to this file (default: stdout)",
)
@click.pass_context
def merge(ctx, sbom_paths, output):
    """Merge SBOM files into one canonical component list."""
    logger = ctx.obj["logger"]
    out = get_output_manager_from_context(ctx)

    try:
        sources = [load_component_list(path) for path in sbom_paths]
        canonical = merge_sboms(sources)
        total_in = sum(len(source) for source in sources)

        if output:
            write_component_list(canonical, output)
            out.success(
                f"Merged {total_in} components from {len(sources)} file(s) "
                f"into {len(canonical)}: {output}"
            )
        else:
            click.echo(json.dumps([c.to_dict() for c in canonical], indent=2))

        logger.info(f"Merged {len(sbom_paths)} SBOM file(s) into {len(canonical)} components")

    except SBOMVisualizerError as e:
        logger.error(f"Merge failed: {e}")
        out.error(f"Merge failed: {e}")
        sys.exit(1)
