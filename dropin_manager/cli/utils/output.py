# dropin_manager/cli/utils/output.py
"""Output formatting utilities"""

from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ...constants import EMOJI_ERROR, EMOJI_SKIPPED, EMOJI_SUCCESS
from ...models import OperationResult

console = Console()


def format_operation_result(name: str, operation: str, result: OperationResult) -> None:
    """Format and display a check/install/remove result"""
    if result.is_success:
        panel = Panel(
            f"[green]{EMOJI_SUCCESS}[/green] {result.message or 'Done'}",
            title=f"{operation.capitalize()}: {name}",
            border_style="green"
        )
    elif result.is_skipped:
        panel = Panel(
            f"[dim]{EMOJI_SKIPPED}[/dim] {result.message or 'Nothing to do'}",
            title=f"{operation.capitalize()}: {name}",
            border_style="blue"
        )
    else:
        panel = Panel(
            f"[red]{EMOJI_ERROR} {operation.capitalize()} failed "
            f"({result.error_code}):[/red] {result.message}",
            title=f"{operation.capitalize()} Error: {name}",
            border_style="red"
        )
    console.print(panel)


def format_status_table(statuses: List[Dict[str, Any]], title: Optional[str] = "Drop-ins") -> Table:
    """Create the status table for a list of manager snapshots"""
    table = Table(title=title, box=box.ROUNDED)
    table.add_column("Name", style="cyan")
    table.add_column("File")
    table.add_column("Version", style="green")
    table.add_column("Recorded")
    table.add_column("Installed", justify="center")
    table.add_column("Update", justify="center")
    table.add_column("Writable", justify="center")

    for status in statuses:
        table.add_row(
            status["name"],
            status["dest_path"],
            status["version"],
            status.get("recorded_version") or "-",
            _flag(status["installed"]),
            "[yellow]required[/yellow]" if status["update_required"] else "-",
            _flag(status["writable"]),
        )

    return table


def _flag(value: bool) -> str:
    return f"[green]{EMOJI_SUCCESS}[/green]" if value else f"[red]{EMOJI_ERROR}[/red]"


def print_error(message: str, error: Optional[Exception] = None) -> None:
    """Print error message"""
    if error:
        console.print(f"[red]Error:[/red] {message}: {str(error)}")
    else:
        console.print(f"[red]Error:[/red] {message}")


def print_warning(message: str) -> None:
    """Print warning message"""
    console.print(f"[yellow]Warning:[/yellow] {message}")
