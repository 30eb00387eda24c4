"""Post-run summary of the generated module tree.

Renders a Rich tree of the directories and files a run produced, with a
plain-text fallback when Rich is not installed.  No business logic
resides here.
"""

from __future__ import annotations

import sys
from pathlib import Path

from viper_scaffold.cli.console import console
from viper_scaffold.core.models import ScaffoldResult


def _entries(result: ScaffoldResult) -> list[tuple[str, str | None]]:
    """Return ``(directory name, file name or None)`` rows in layout order."""
    files_by_dir = {target.directory: target.path.name for target in result.layout.files}
    return [
        (directory.name, files_by_dir.get(directory))
        for directory in result.layout.directories
        if directory != result.layout.root
    ]


def _print_plain_summary(result: ScaffoldResult) -> None:
    print(f"\nCreated module {result.module}:", file=sys.stderr)
    print(f"{result.layout.root.name}/", file=sys.stderr)
    for directory, file_name in _entries(result):
        print(f"  {directory}/", file=sys.stderr)
        if file_name is not None:
            print(f"    {file_name}", file=sys.stderr)
    print(file=sys.stderr)


def render_summary(result: ScaffoldResult, *, cwd: Path | None = None) -> None:
    """Print the module tree of *result*."""
    try:
        from rich.markup import escape
        from rich.tree import Tree
    except ModuleNotFoundError:
        _print_plain_summary(result)
        return

    root = result.layout.root
    label = root
    if cwd is not None and root.is_relative_to(cwd):
        label = root.relative_to(cwd)

    tree = Tree(f"[bold]{escape(str(label))}/[/bold]", guide_style="dim")
    for directory, file_name in _entries(result):
        branch = tree.add(f"[cyan]{directory}/[/cyan]")
        if file_name is not None:
            branch.add(f"[green]{escape(file_name)}[/green]")

    console.print()
    console.print(tree)
    console.print(
        "\n[bold green]Module {module} generated[/bold green] ({count} files).",
        module=result.module,
        count=len(result),
    )
