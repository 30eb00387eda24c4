"""Header and output constants used when rendering a module."""

from __future__ import annotations

PROJECT_NAME: str = "GitHubAPI"
"""Project name written into every file header."""

COMPANY_NAME: str = "DanCamarotto"
"""Copyright holder written into every file header."""

PLACEHOLDER_AUTHOR: str = "VIPERA"
"""Author used when the git identity cannot be read."""

FILE_EXTENSION: str = "swift"
"""Extension of every generated source file."""
