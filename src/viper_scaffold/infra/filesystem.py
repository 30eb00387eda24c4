"""Infrastructure: local filesystem writer.

Directories are created with their parents and tolerate already
existing directories.  Files are written to a temporary sibling and
moved into place with :func:`os.replace`, so a target is either fully
written or left untouched.  Existing files are overwritten.

Every ``OSError`` is re-raised as a
:class:`~viper_scaffold.exceptions.FilesystemError` subclass.
"""

from __future__ import annotations

import contextlib
import os
import tempfile
from pathlib import Path

from viper_scaffold.exceptions import DirectoryCreationError, FileWriteError

# mkstemp creates 0600 files.
_FILE_MODE = 0o644


class LocalFileSystem:
    """Concrete :class:`~viper_scaffold.core.protocols.FileSystemWriter`."""

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def make_directory(self, path: Path) -> None:
        """Create *path* and missing parents.

        Raises
        ------
        DirectoryCreationError
            When *path* (or a parent) cannot be created, including when
            a non-directory entry already occupies it.
        """
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise DirectoryCreationError(
                f"Could not create directory {path}: {exc.strerror or exc}",
                path=path,
            ) from exc

    def write_text(self, path: Path, content: str) -> None:
        """Atomically write *content* to *path*.

        Raises
        ------
        FileWriteError
            When the temporary file cannot be written, encoded or moved
            into place.  The temporary file is removed.
        """
        tmp_name: str | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
            )
            with os.fdopen(fd, "w", encoding=self._encoding) as handle:
                handle.write(content)
            os.chmod(tmp_name, _FILE_MODE)
            os.replace(tmp_name, path)
        except (OSError, UnicodeError) as exc:
            if tmp_name is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)
            reason = getattr(exc, "strerror", None) or exc
            raise FileWriteError(
                f"Could not write {path}: {reason}",
                path=path,
            ) from exc
