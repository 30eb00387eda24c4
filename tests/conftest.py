"""Shared pytest fixtures and configuration for the viper-scaffold test suite.

Guidelines
----------
* git must never be invoked — identity lookups are faked or mocked.
* Filesystem tests write only below ``tmp_path``.
* Core rendering tests must be pure — no side effects.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from viper_scaffold.core.models import HeaderInfo
from viper_scaffold.core.scaffold_service import ScaffoldService
from viper_scaffold.exceptions import IdentityLookupError
from viper_scaffold.infra.filesystem import LocalFileSystem

FIXED_DAY = date(2018, 10, 6)


class FakeIdentity:
    """Identity provider returning a fixed name, or failing on demand."""

    def __init__(self, name: str | None = "Jane Appleseed") -> None:
        self._name = name
        self.calls = 0

    def author_name(self) -> str:
        self.calls += 1
        if self._name is None:
            raise IdentityLookupError("no git identity")
        return self._name


class RecordingFileSystem:
    """In-memory FileSystemWriter that records every call in order."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Path]] = []
        self.files: dict[Path, str] = {}

    def make_directory(self, path: Path) -> None:
        self.calls.append(("mkdir", path))

    def write_text(self, path: Path, content: str) -> None:
        self.calls.append(("write", path))
        self.files[path] = content


@pytest.fixture()
def header() -> HeaderInfo:
    return HeaderInfo(
        author="Jane Appleseed",
        project="GitHubAPI",
        company="DanCamarotto",
        created=FIXED_DAY,
    )


@pytest.fixture()
def service() -> ScaffoldService:
    """Service writing to the real filesystem with a fixed author and day."""
    return ScaffoldService(FakeIdentity(), LocalFileSystem(), clock=lambda: FIXED_DAY)
