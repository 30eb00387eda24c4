"""CLI application entry point for viper-scaffold.

This module is the **sole error boundary** for the entire application.
It catches :class:`~viper_scaffold.exceptions.ViperScaffoldError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  service and the infrastructure adapters.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from viper_scaffold.cli import exit_codes
from viper_scaffold.cli.console import console
from viper_scaffold.exceptions import MissingModuleNameError, ViperScaffoldError
from viper_scaffold.version import __version__

_USAGE_HINT = "Usage: viper-scaffold ModuleName (extra arguments are ignored)"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser.

    * ``viper-scaffold <ModuleName>`` — generate a module
    * ``viper-scaffold --version``
    """
    parser = argparse.ArgumentParser(
        prog="viper-scaffold",
        description="Generate the files of a VIPER module.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "module",
        nargs="?",
        default=None,
        help="Name of the module, used as prefix for every type and file.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_generate(module: str) -> int:
    """Generate *module* under the current working directory."""
    from viper_scaffold.cli.summary import render_summary
    from viper_scaffold.core.scaffold_service import ScaffoldService
    from viper_scaffold.infra.filesystem import LocalFileSystem
    from viper_scaffold.infra.git_identity import GitIdentityProvider

    service = ScaffoldService(GitIdentityProvider(), LocalFileSystem())
    cwd = Path.cwd()
    result = service.run(module, cwd)
    render_summary(result, cwd=cwd)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the viper-scaffold CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    MissingModuleNameError
        When no module name is given.  Nothing is created.
    """
    parser = _build_parser()
    args, extra = parser.parse_known_args(argv)

    # Trailing arguments are ignored; a dash-prefixed name is still a name.
    module = args.module or (extra[0] if extra else None)
    if not module:
        raise MissingModuleNameError(
            "You have to provide a module name as the first argument.",
            hint=_USAGE_HINT,
        )

    return _handle_generate(module)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Generation failures leave already written files in place; the error
    is reported and the process exits non-zero.
    """
    try:
        code = main()
        sys.exit(code)
    except ViperScaffoldError as exc:
        console.print("[bold red]Error:[/bold red] {message}", message=exc)
        if exc.hint:
            console.print("[yellow]Hint:[/yellow] {hint}", hint=exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            "  {kind}: {detail}",
            kind=type(exc).__name__,
            detail=exc,
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
