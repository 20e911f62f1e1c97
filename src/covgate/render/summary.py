from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from covgate.core.check import CheckResult


def _style_delta(delta: float) -> str:
    if delta > 0:
        return f"[green]{delta:+.2f}[/green]"
    if delta < 0:
        return f"[red]{delta:+.2f}[/red]"
    return f"{delta:+.2f}"


def render_delta_table(result: CheckResult, *, color: bool = True) -> str:
    """Render a Rich table listing every package's coverage change.

    Failing packages are marked ``FAIL``; the last row states the overall outcome.
    """
    table = Table(title="Coverage Delta", box=box.SIMPLE_HEAVY, header_style="bold", expand=True)

    table.add_column("Package", overflow="fold")
    table.add_column("Baseline", justify="right")
    table.add_column("Current", justify="right")
    table.add_column("Delta", justify="right")
    table.add_column("Threshold", justify="right")
    table.add_column("Status", justify="center")

    for entry in result.deltas:
        status = "[red]FAIL[/red]" if entry.failed else "[green]ok[/green]"
        table.add_row(
            escape(entry.package),
            f"{entry.baseline:.2f}%",
            f"{entry.current:.2f}%",
            _style_delta(entry.delta),
            f"{entry.threshold:+.2f}",
            status,
        )

    table.add_section()
    outcome = "[green]PASSED[/green]" if result.passed else f"[red]FAILED ({len(result.failures)})[/red]"
    table.add_row(f"[bold]{len(result.deltas)} packages[/bold]", "", "", "", "", f"[bold]{outcome}[/bold]")

    buf = StringIO()
    console = Console(file=buf, force_terminal=color, no_color=not color)
    console.print()
    console.print(table)
    console.print()
    return buf.getvalue().rstrip()


__all__ = ["render_delta_table"]
