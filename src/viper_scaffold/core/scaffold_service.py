"""Core scaffold service — orchestrates a single generation run.

The service depends on an
:class:`~viper_scaffold.core.protocols.IdentityProvider` and a
:class:`~viper_scaffold.core.protocols.FileSystemWriter` injected at
construction time (dependency inversion), keeping the core free of any
subprocess or filesystem imports.

Pipeline
--------
1. Check the module name is present.
2. Build the header (author lookup with placeholder fallback).
3. Compute the layout and render every template in memory.
4. Create all directories, then write every file.

Failures in step 4 abort the run; earlier output is left on disk.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from pathlib import Path

from viper_scaffold.core.layout import build_layout
from viper_scaffold.core.models import HeaderInfo, ScaffoldResult
from viper_scaffold.core.protocols import FileSystemWriter, IdentityProvider
from viper_scaffold.core.templates import render_all
from viper_scaffold.exceptions import MissingModuleNameError, ViperScaffoldError
from viper_scaffold.utils.constants import (
    COMPANY_NAME,
    PLACEHOLDER_AUTHOR,
    PROJECT_NAME,
)

logger = logging.getLogger(__name__)


class ScaffoldService:
    """Generates a VIPER module tree.

    Parameters
    ----------
    identity:
        Any object satisfying the :class:`IdentityProvider` protocol.
    filesystem:
        Any object satisfying the :class:`FileSystemWriter` protocol.
    project, company:
        Header constants.
    clock:
        Returns the generation day.  Defaults to :meth:`date.today`.
    """

    def __init__(
        self,
        identity: IdentityProvider,
        filesystem: FileSystemWriter,
        *,
        project: str = PROJECT_NAME,
        company: str = COMPANY_NAME,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._identity: IdentityProvider = identity
        self._filesystem: FileSystemWriter = filesystem
        self._project = project
        self._company = company
        self._clock = clock

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def build_header(self) -> HeaderInfo:
        """Gather the header metadata for this run."""
        return HeaderInfo(
            author=self._author(),
            project=self._project,
            company=self._company,
            created=self._clock(),
        )

    def run(self, module: str, base_dir: Path) -> ScaffoldResult:
        """Generate module *module* under *base_dir*.

        Raises
        ------
        MissingModuleNameError
            If *module* is empty.  Nothing is created.
        DirectoryCreationError
            If a directory of the tree cannot be created.
        FileWriteError
            If a source file cannot be written.
        """
        if not module:
            raise MissingModuleNameError(
                "You have to provide a module name as the first argument.",
            )

        header = self.build_header()
        layout = build_layout(module, base_dir)
        rendered = render_all(layout, module, header)

        for directory in layout.directories:
            self._filesystem.make_directory(directory)
            logger.debug("Created directory %s", directory)

        written: list[Path] = []
        for item in rendered:
            self._filesystem.write_text(item.target.path, item.content)
            logger.debug("Wrote %s", item.target.path)
            written.append(item.target.path)

        return ScaffoldResult(module=module, layout=layout, written=tuple(written))

    # ------------------------------------------------------------------
    # Identity lookup (failures absorbed)
    # ------------------------------------------------------------------

    def _author(self) -> str:
        try:
            name = self._identity.author_name().strip()
        except ViperScaffoldError as exc:
            logger.debug("Author lookup failed, using placeholder: %s", exc)
            return PLACEHOLDER_AUTHOR
        except Exception as exc:  # noqa: BLE001
            logger.debug("Unexpected author lookup error: %s", exc)
            return PLACEHOLDER_AUTHOR
        return name or PLACEHOLDER_AUTHOR
