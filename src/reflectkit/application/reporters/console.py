"""Console reporter: Catalog + LoadReport → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from reflectkit.domain.model.catalog import Catalog
    from reflectkit.domain.model.load_report import LoadReport


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        show_types: Show the table of catalog entries.
        max_types: Max catalog entries to display. None = unlimited.
        width: Console width in columns.
    """

    show_types: bool = True
    max_types: int | None = None
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_types is not None and self.max_types < 0:
            raise ValueError(f"max_types must be >= 0, got {self.max_types}")
        if self.width < 20:
            raise ValueError(f"width must be >= 20, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, catalog: Catalog, load_report: LoadReport) -> str:
        """Format scan result as rich formatted string.

        Args:
            catalog: Catalog produced by the scan.
            load_report: Failures recorded during the scan.

        Returns:
            Formatted string with colors and tables.
        """
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self._config.width)

        self._render_header(console, catalog, load_report)

        if self._config.show_types and len(catalog):
            self._render_types(console, catalog)

        if load_report:
            self._render_failures(console, load_report)

        return output.getvalue()

    def _render_header(self, console: Console, catalog: Catalog, load_report: LoadReport) -> None:
        """Render header with summary."""
        console.print()
        console.rule("[bold]CATALOG[/bold]")
        console.print()
        console.print(f"[bold]Types:[/bold] {len(catalog)}  [bold]Failures:[/bold] {len(load_report)}")
        console.print()

    def _render_types(self, console: Console, catalog: Catalog) -> None:
        """Render catalog entries sorted by name."""
        table = Table(show_header=True, header_style="bold", box=None)
        table.add_column("Name", style="cyan")
        table.add_column("Origin", style="dim")

        names = sorted(catalog.names())
        limit = self._config.max_types
        for name in names if limit is None else names[:limit]:
            handle = catalog.lookup(name)
            origin = handle.origin if handle is not None and handle.origin else "-"
            table.add_row(escape(name), escape(origin))

        console.print(table)
        if limit is not None and len(names) > limit:
            console.print(f"[dim]... {len(names) - limit} more[/dim]")
        console.print()

    def _render_failures(self, console: Console, load_report: LoadReport) -> None:
        """Render per-entry failures in report order."""
        console.print(f"[bold red]LOAD FAILURES[/bold red] ({len(load_report)})")
        console.print()

        table = Table(show_header=True, header_style="bold", box=None)
        table.add_column("Path", style="yellow")
        table.add_column("Reason")
        for failure in load_report:
            table.add_row(escape(failure.path), escape(failure.reason))

        console.print(table)
        console.print()
