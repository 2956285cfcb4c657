"""Console helpers shared by the CLI.

All user-facing output goes through one ``rich`` console.  The scaffolding
core never prints; only ``jsscaffold.cli`` calls into this module.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .models import ArchetypeId

console = Console()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


# ---------------------------------------------------------------------------
# Next steps
# ---------------------------------------------------------------------------


def next_steps(project_name: str, archetype: ArchetypeId) -> list[str]:
    """Shell commands to run after generating *project_name*."""
    steps = [f"cd {project_name}", "npm install"]
    if archetype in (ArchetypeId.NEXTJS, ArchetypeId.ELECTRON):
        steps.append("npm run dev")
    elif archetype is ArchetypeId.REACT_NATIVE:
        steps.append("npx react-native run-android")
        steps.append("# or npx react-native run-ios")
    else:
        steps.append("npm start")
    return steps


def print_next_steps(project_name: str, archetype: ArchetypeId) -> None:
    """Print the post-generation commands in a panel."""
    body = "\n".join(f"  {step}" for step in next_steps(project_name, archetype))
    console.print(Panel(body, title="Next steps", border_style="cyan", expand=False))
