"""Smoke tests — verify CLI wiring, exception hierarchy and exit codes.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
* A full run from the CLI produces the module tree in the working
  directory, and a missing module name creates nothing.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from viper_scaffold import __version__
from viper_scaffold.cli import exit_codes
from viper_scaffold.cli.app import cli, main
from viper_scaffold.exceptions import (
    DirectoryCreationError,
    EnvironmentError,
    FilesystemError,
    FileWriteError,
    IdentityLookupError,
    MissingModuleNameError,
    ViperScaffoldError,
)

_AUTHOR = "viper_scaffold.infra.git_identity.GitIdentityProvider.author_name"


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            MissingModuleNameError,
            IdentityLookupError,
            FilesystemError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[ViperScaffoldError]
    ) -> None:
        assert issubclass(exc_class, ViperScaffoldError)

    def test_filesystem_errors(self) -> None:
        assert issubclass(DirectoryCreationError, FilesystemError)
        assert issubclass(FileWriteError, FilesystemError)

    def test_filesystem_error_keeps_path(self) -> None:
        err = FileWriteError("boom", path=Path("/x"), hint="check permissions")
        assert err.path == Path("/x")
        assert err.hint == "check permissions"

    def test_hint_defaults_to_none(self) -> None:
        assert ViperScaffoldError("boom").hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_values(self) -> None:
        assert exit_codes.SUCCESS == 0
        assert exit_codes.GENERAL_ERROR == 1
        assert exit_codes.UNEXPECTED_ERROR == 2
        assert exit_codes.KEYBOARD_INTERRUPT == 130


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

class TestCLI:
    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_no_args_raises_and_creates_nothing(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.chdir(tmp_path)
        with pytest.raises(MissingModuleNameError) as exc_info:
            main([])
        assert exc_info.value.hint is not None
        assert list(tmp_path.iterdir()) == []

    def test_cli_no_args_exits_non_zero(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("sys.argv", ["viper-scaffold"])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        assert "module name" in capsys.readouterr().err
        assert list(tmp_path.iterdir()) == []

    @patch(_AUTHOR, return_value="Jane Appleseed")
    def test_generates_in_cwd(
        self, _mock_author: object, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.chdir(tmp_path)
        code = main(["Login"])
        assert code == exit_codes.SUCCESS
        contract = tmp_path / "Login" / "Contract" / "LoginContract.swift"
        assert "Created by Jane Appleseed" in contract.read_text(encoding="utf-8")
        assert (tmp_path / "Login" / "Entity").is_dir()

    @patch(_AUTHOR, side_effect=IdentityLookupError("no git"))
    def test_placeholder_author_when_git_fails(
        self, _mock_author: object, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.chdir(tmp_path)
        main(["Login"])
        router = tmp_path / "Login" / "Router" / "LoginRouter.swift"
        assert "Created by VIPERA on" in router.read_text(encoding="utf-8")

    @patch(_AUTHOR, return_value="Jane Appleseed")
    def test_cli_reports_filesystem_error(
        self,
        _mock_author: object,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.chdir(tmp_path)
        (tmp_path / "Login").write_text("in the way", encoding="utf-8")
        monkeypatch.setattr("sys.argv", ["viper-scaffold", "Login"])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        assert "Could not create directory" in capsys.readouterr().err

    def test_cli_unexpected_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from viper_scaffold.cli import app as app_module

        def _boom(module: str) -> int:
            raise RuntimeError("kaput")

        monkeypatch.setattr(app_module, "_handle_generate", _boom)
        monkeypatch.setattr("sys.argv", ["viper-scaffold", "Login"])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.UNEXPECTED_ERROR


# ---------------------------------------------------------------------------
# Argument handling
# ---------------------------------------------------------------------------

@patch(_AUTHOR, return_value="Jane Appleseed")
class TestArguments:
    def test_trailing_arguments_are_ignored(
        self, _mock_author: object, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.chdir(tmp_path)
        assert main(["Login", "extra", "--flag"]) == exit_codes.SUCCESS
        assert [p.name for p in tmp_path.iterdir()] == ["Login"]

    def test_dash_prefixed_name(
        self, _mock_author: object, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.chdir(tmp_path)
        assert main(["-Foo"]) == exit_codes.SUCCESS
        assert (tmp_path / "-Foo" / "View" / "-FooViewController.swift").is_file()

    def test_name_after_double_dash(
        self, _mock_author: object, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.chdir(tmp_path)
        assert main(["--", "-Bar"]) == exit_codes.SUCCESS
        assert (tmp_path / "-Bar" / "Router" / "-BarRouter.swift").is_file()


# ---------------------------------------------------------------------------
# Markup in user input and error text
# ---------------------------------------------------------------------------

class TestMarkupSafety:
    @patch(_AUTHOR, return_value="Jane Appleseed")
    def test_bracketed_module_name_is_printed_verbatim(
        self,
        _mock_author: object,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("sys.argv", ["viper-scaffold", "Foo[bold]"])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.SUCCESS
        assert "Module Foo[bold] generated" in capsys.readouterr().err
        assert (tmp_path / "Foo[bold]" / "Contract" / "Foo[bold]Contract.swift").is_file()

    def test_error_with_closing_tag(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        from viper_scaffold.cli import app as app_module

        def _fail(module: str) -> int:
            raise FileWriteError(f"Could not write {module}", path=Path(module), hint="[/]")

        monkeypatch.setattr(app_module, "_handle_generate", _fail)
        monkeypatch.setattr("sys.argv", ["viper-scaffold", "Foo[/]"])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "Could not write Foo[/]" in err
        assert "Hint: [/]" in err

    def test_unexpected_error_with_closing_tag(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        from viper_scaffold.cli import app as app_module

        def _boom(module: str) -> int:
            raise RuntimeError("closing tag [/] has nothing to close")

        monkeypatch.setattr(app_module, "_handle_generate", _boom)
        monkeypatch.setattr("sys.argv", ["viper-scaffold", "Login"])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.UNEXPECTED_ERROR
        assert "RuntimeError: closing tag [/] has nothing to close" in capsys.readouterr().err
