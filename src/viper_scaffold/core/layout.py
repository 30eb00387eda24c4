"""Output layout computation (pure)."""

from __future__ import annotations

from pathlib import Path

from viper_scaffold.core.models import FileTarget, OutputLayout, Role
from viper_scaffold.utils.constants import FILE_EXTENSION

# Roles that receive a generated file, in write order.
TEMPLATED_ROLES: tuple[Role, ...] = (
    Role.CONTRACT,
    Role.VIEW,
    Role.INTERACTOR,
    Role.PRESENTER,
    Role.ROUTER,
)


def file_name(module: str, role: Role, extension: str = FILE_EXTENSION) -> str:
    """Return ``<module><suffix>.<extension>`` for *role*."""
    return f"{module}{role.suffix}.{extension}"


def build_layout(
    module: str,
    base_dir: Path,
    extension: str = FILE_EXTENSION,
) -> OutputLayout:
    """Compute every path a run for *module* creates under *base_dir*.

    The module name is used verbatim as a path segment.
    """
    root = base_dir / module
    directories = (root, *(root / role.directory for role in Role))
    files = tuple(
        FileTarget(
            role=role,
            directory=root / role.directory,
            path=root / role.directory / file_name(module, role, extension),
        )
        for role in TEMPLATED_ROLES
    )
    return OutputLayout(root=root, directories=directories, files=files)
