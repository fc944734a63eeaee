"""
Console output for CLI commands.

Command results go through CLIOutputManager so that the global --quiet and
--verbose flags are honored in one place. Log records are separate and go to
stderr through the logging setup.
"""

from enum import Enum

from rich.console import Console
from rich.table import Table

from ..shared.models import ComponentStatistics, ValidationResult


class OutputLevel(Enum):
    """Output verbosity levels."""

    QUIET = "quiet"  # errors and requested data only
    NORMAL = "normal"
    VERBOSE = "verbose"


STATISTICS_ROWS = (
    ("Total", "total"),
    ("Visible", "visible"),
    ("Applications", "applications"),
    ("Libraries", "libraries"),
    ("Dependencies", "dependencies"),
    ("High risk", "high_risk"),
    ("Medium risk", "medium_risk"),
    ("Low risk", "low_risk"),
)


class CLIOutputManager:
    """Prints command results, progress notes and errors."""

    def __init__(
        self,
        level: OutputLevel = OutputLevel.NORMAL,
        use_colors: bool = True,
        console: Console | None = None,
        error_console: Console | None = None,
    ):
        self.level = level
        self.console = console or Console(no_color=not use_colors)
        self.error_console = error_console or Console(stderr=True, no_color=not use_colors)

    @property
    def is_quiet(self) -> bool:
        return self.level == OutputLevel.QUIET

    def info(self, message: str) -> None:
        if not self.is_quiet:
            self.console.print(message)

    def status(self, message: str) -> None:
        """Print a progress note (details only shown in verbose mode)."""
        if self.level == OutputLevel.VERBOSE:
            self.console.print(f"[dim]{message}[/dim]")
        elif not self.is_quiet:
            self.console.print(message)

    def success(self, message: str) -> None:
        if not self.is_quiet:
            self.console.print(f"✓ {message}", style="green")

    def error(self, message: str) -> None:
        """Print an error; shown even in quiet mode."""
        self.error_console.print(f"✗ {message}", style="red bold", markup=False)

    def validation_report(self, source: str, result: ValidationResult) -> None:
        """Print the outcome of validating one SBOM file."""
        if result.valid:
            self.success(f"{source}: valid")
            return

        self.error(f"{source}: {len(result.errors)} problem(s)")
        for problem in result.errors:
            self.error_console.print(f"  - {problem}", markup=False, highlight=False)

    def statistics_table(self, stats: ComponentStatistics, title: str = "Components") -> None:
        """Print component statistics as a table, in every output mode."""
        table = Table(title=title)
        table.add_column("Metric")
        table.add_column("Count", justify="right")
        for label, attribute in STATISTICS_ROWS:
            table.add_row(label, str(getattr(stats, attribute)))
        self.console.print(table)


def create_output_manager(
    quiet: bool = False, verbose: bool = False, use_colors: bool = True
) -> CLIOutputManager:
    """Build an output manager from the global CLI flags."""
    if quiet:
        level = OutputLevel.QUIET
    elif verbose:
        level = OutputLevel.VERBOSE
    else:
        level = OutputLevel.NORMAL

    return CLIOutputManager(level=level, use_colors=use_colors)
