"""Core / service layer — template rendering and run orchestration.

Rules
-----
* No ``print()`` calls.
* No direct filesystem or subprocess access; I/O goes through protocols.
* No imports from ``cli`` or ``infra``.
* Rendering functions must be pure and deterministic.
"""

from viper_scaffold.core.layout import build_layout
from viper_scaffold.core.models import (
    FileTarget,
    HeaderInfo,
    OutputLayout,
    RenderedFile,
    Role,
    ScaffoldResult,
)
from viper_scaffold.core.protocols import FileSystemWriter, IdentityProvider
from viper_scaffold.core.scaffold_service import ScaffoldService
from viper_scaffold.core.templates import TEMPLATES, render_all

__all__: list[str] = [
    "FileSystemWriter",
    "FileTarget",
    "HeaderInfo",
    "IdentityProvider",
    "OutputLayout",
    "RenderedFile",
    "Role",
    "ScaffoldResult",
    "ScaffoldService",
    "TEMPLATES",
    "build_layout",
    "render_all",
]
