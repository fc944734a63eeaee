"""
Utilities shared by CLI commands.
"""

from typing import Any

import click

from ..shared.models import FilterState
from .output import CLIOutputManager, create_output_manager


def get_cli_flags(ctx: click.Context) -> dict[str, Any]:
    """Extract CLI flags from Click context, traversing parent contexts."""
    flags: dict[str, Any] = {}

    # Parents first so child params override
    chain = []
    current_ctx: click.Context | None = ctx
    while current_ctx:
        chain.append(current_ctx)
        current_ctx = current_ctx.parent
    for context in reversed(chain):
        if context.params:
            flags.update(context.params)

    return flags


def get_output_manager_from_context(ctx: click.Context) -> CLIOutputManager:
    """Create output manager from Click context flags."""
    flags = get_cli_flags(ctx)
    return create_output_manager(
        quiet=flags.get("quiet", False), verbose=flags.get("verbose", False)
    )


def build_filter_state(
    types: tuple[str, ...] = (),
    licenses: tuple[str, ...] = (),
    risk_levels: tuple[str, ...] = (),
    search: str | None = None,
) -> FilterState | None:
    """Build a FilterState from repeated CLI options, or None when nothing is set."""
    filters = FilterState(
        types=list(types),
        licenses=list(licenses),
        risk_levels=list(risk_levels),
        search_term=search or "",
    )
    return None if filters.is_empty else filters
