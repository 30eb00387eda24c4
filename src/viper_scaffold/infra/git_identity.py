"""Infrastructure: author name lookup through git.

Reads ``user.name`` from the global git configuration.  Every failure
(git missing, timeout, non-zero exit, empty output) is reported as
:class:`~viper_scaffold.exceptions.IdentityLookupError`; the core
service replaces it with a placeholder author.

Rules
-----
* No ``print()`` — callers handle user-facing output.
* No writes to the git configuration.
"""

from __future__ import annotations

import subprocess

from viper_scaffold.exceptions import IdentityLookupError


class GitIdentityProvider:
    """Concrete :class:`~viper_scaffold.core.protocols.IdentityProvider`.

    Usage::

        provider = GitIdentityProvider()
        name = provider.author_name()
    """

    _COMMAND: tuple[str, ...] = ("git", "config", "--global", "user.name")

    def __init__(self, *, timeout: float = 5.0) -> None:
        self._timeout = timeout

    def author_name(self) -> str:
        """Return the configured git user name.

        Raises
        ------
        IdentityLookupError
            When git cannot be run or has no user name configured.
        """
        try:
            completed = subprocess.run(
                self._COMMAND,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self._timeout,
                check=False,
            )
        except FileNotFoundError as exc:
            raise IdentityLookupError("git is not installed or not on PATH.") from exc
        except subprocess.TimeoutExpired as exc:
            raise IdentityLookupError("git config timed out.") from exc
        except OSError as exc:
            raise IdentityLookupError(f"Could not run git: {exc}") from exc

        if completed.returncode != 0:
            raise IdentityLookupError(
                f"git config exited with status {completed.returncode}.",
            )

        name = completed.stdout.strip()
        if not name:
            raise IdentityLookupError("git user.name is empty.")
        return name
