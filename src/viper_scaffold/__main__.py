"""Allow ``python -m viper_scaffold`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m viper_scaffold`` behaves identically to the
``viper-scaffold`` console script.
"""

from __future__ import annotations

from viper_scaffold.cli.app import cli

if __name__ == "__main__":
    cli()
