"""Custom exception hierarchy for viper-scaffold.

All exceptions that cross layer boundaries must inherit from
:class:`ViperScaffoldError`.  Raw ``OSError`` and ``subprocess`` failures
must NEVER propagate beyond the infrastructure layer — they must be
caught and re-raised as a typed subclass defined here.

Hierarchy
---------
ViperScaffoldError
├── MissingModuleNameError
├── IdentityLookupError
├── FilesystemError
│   ├── DirectoryCreationError
│   └── FileWriteError
└── EnvironmentError
"""

from __future__ import annotations

from pathlib import Path


class ViperScaffoldError(Exception):
    """Base exception for all viper-scaffold errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input -----------------------------------------------------------------

class MissingModuleNameError(ViperScaffoldError):
    """Raised when no module name was supplied."""


# --- Identity --------------------------------------------------------------

class IdentityLookupError(ViperScaffoldError):
    """Raised when the author name cannot be read from git.

    The scaffold service absorbs this error and substitutes a placeholder
    author, so it is never shown to the user.
    """


# --- Filesystem ------------------------------------------------------------

class FilesystemError(ViperScaffoldError):
    """Base class for failures while materialising the module tree."""

    def __init__(
        self,
        message: str,
        *,
        path: Path,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.path: Path = path
        """Filesystem path the failed operation targeted."""


class DirectoryCreationError(FilesystemError):
    """Raised when a directory of the module tree cannot be created."""


class FileWriteError(FilesystemError):
    """Raised when a generated source file cannot be written."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(ViperScaffoldError):
    """Raised when a required runtime dependency is not available."""
