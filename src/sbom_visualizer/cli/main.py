"""
CLI interface for SBOM visualizer using Click.
"""

from pathlib import Path
from typing import Any

import click

from ..shared.logging import get_logger, resolve_log_level, setup_logging
from .commands.merge import merge
from .commands.validate import stats, validate
from .commands.visualize import export


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option("--quiet", "-q", is_flag=True, help="Enable quiet mode")
@click.option(
    "--log-file", type=click.Path(dir_okay=False, path_type=Path), help="Also log to this file"
)
@click.pass_context
def cli(ctx: Any, verbose: bool, quiet: bool, log_file: Path | None) -> None:
    """SBOM Visualizer - merge SBOMs and export dependency trees."""
    ctx.ensure_object(dict)

    setup_logging(resolve_log_level(verbose, quiet), log_file=log_file)
    ctx.obj["logger"] = get_logger()


cli.add_command(merge)
cli.add_command(export)
cli.add_command(validate)
cli.add_command(stats)


def main():
    """Entry point for CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
