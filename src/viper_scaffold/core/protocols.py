"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class IdentityProvider(Protocol):
    """Contract for author-name lookups.

    Any object that implements :meth:`author_name` satisfies this
    protocol structurally (no explicit inheritance required).
    """

    def author_name(self) -> str:
        """Return the name of the user generating the module.

        Raises
        ------
        IdentityLookupError
            When no usable name can be obtained.
        """
        ...  # pragma: no cover


class FileSystemWriter(Protocol):
    """Contract for the filesystem operations a scaffold run needs.

    Implementations must map all ``OSError`` failures to
    :class:`~viper_scaffold.exceptions.FilesystemError` subclasses.
    """

    def make_directory(self, path: Path) -> None:
        """Create *path* and any missing parents.

        Raises
        ------
        DirectoryCreationError
            When the directory cannot be created.
        """
        ...  # pragma: no cover

    def write_text(self, path: Path, content: str) -> None:
        """Write *content* to *path*, all or nothing.

        Raises
        ------
        FileWriteError
            When the file cannot be written.
        """
        ...  # pragma: no cover
