"""Domain models for viper-scaffold.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and simple formatting.  They carry zero I/O
and zero dependencies on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import date
from pathlib import Path


# ---------------------------------------------------------------------------
# Module roles
# ---------------------------------------------------------------------------

class Role(enum.Enum):
    """A layer of a VIPER module.

    The value is ``(directory name, file suffix)``.  Entity has a
    directory but no generated file.
    """

    CONTRACT = ("Contract", "Contract")
    VIEW = ("View", "ViewController")
    INTERACTOR = ("Interactor", "Interactor")
    PRESENTER = ("Presenter", "Presenter")
    ENTITY = ("Entity", "Entity")
    ROUTER = ("Router", "Router")

    @property
    def directory(self) -> str:
        return self.value[0]

    @property
    def suffix(self) -> str:
        return self.value[1]


# ---------------------------------------------------------------------------
# Header metadata
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class HeaderInfo:
    """Metadata substituted into every generated file header."""

    author: str
    """Name shown in the ``Created by`` line."""

    project: str
    """Project name shown below the file name."""

    company: str
    """Copyright holder."""

    created: date
    """Generation day."""

    @property
    def date_stamp(self) -> str:
        """Creation date formatted as ``DD/MM/YYYY``."""
        return f"{self.created.day:02d}/{self.created.month:02d}/{self.created.year}"

    @property
    def year(self) -> str:
        return str(self.created.year)


# ---------------------------------------------------------------------------
# Output layout
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FileTarget:
    """Where the source file of one role is written."""

    role: Role
    directory: Path
    path: Path


@dataclass(frozen=True, slots=True)
class OutputLayout:
    """Every directory and file a run produces, rooted at ``root``.

    ``directories`` is ordered so that each entry's parent precedes it.
    """

    root: Path
    directories: tuple[Path, ...]
    files: tuple[FileTarget, ...]


@dataclass(frozen=True, slots=True)
class RenderedFile:
    """A fully rendered source file, ready to be written."""

    target: FileTarget
    content: str


@dataclass(frozen=True, slots=True)
class ScaffoldResult:
    """Outcome of a successful scaffold run."""

    module: str
    layout: OutputLayout
    written: tuple[Path, ...]

    def __len__(self) -> int:
        return len(self.written)
