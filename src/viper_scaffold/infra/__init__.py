"""Infrastructure layer — external system integration.

This layer wraps all interaction with git and the local filesystem.
Every raw ``OSError`` or ``subprocess`` exception must be caught here
and re-raised as a :class:`~viper_scaffold.exceptions.ViperScaffoldError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from viper_scaffold.infra.filesystem import LocalFileSystem
from viper_scaffold.infra.git_identity import GitIdentityProvider

__all__: list[str] = [
    "GitIdentityProvider",
    "LocalFileSystem",
]
