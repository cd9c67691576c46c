"""Rich-based console output for the codeweave CLI.

The generation core never prints; everything user-facing goes through the
module-level ``console`` here.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.table import Table

from codeweave.models import CodeGenFile

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


def print_artifact_table(
    artifacts: Sequence[CodeGenFile], paths: Sequence[Path] | None = None
) -> None:
    """List generated artifacts with their producing generator.

    When *paths* is given it must be parallel to *artifacts*.
    """
    table = Table(title="Generated files", show_header=True, header_style="bold cyan")
    table.add_column("File", no_wrap=True)
    table.add_column("Generator", style="dim")
    if paths is not None:
        table.add_column("Path", style="dim")

    for index, artifact in enumerate(artifacts):
        generator = artifact.generator_name.rsplit(".", 1)[-1]
        if paths is not None:
            table.add_row(artifact.file_name, generator, str(paths[index]))
        else:
            table.add_row(artifact.file_name, generator)

    console.print(table)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
