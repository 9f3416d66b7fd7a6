"""Module entry stories ensuring `python -m` mirrors the CLI."""

from __future__ import annotations

import runpy
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

import lib_cli_exit_tools
import pytest

from confviz import __init__conf__, entry
from confviz.adapters import cli as cli_mod


@pytest.mark.os_agnostic
def test_module_entry_executes_cli_and_shows_help(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """python -m invocation with no args shows help and exits 0."""
    monkeypatch.setattr(sys, "argv", ["confviz"], raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("confviz.__main__", run_name="__main__")

    captured = capsys.readouterr()
    assert exc.value.code == 0
    assert "Usage:" in captured.out
    assert __init__conf__.shell_command in captured.out


@pytest.mark.os_agnostic
def test_module_entry_reports_missing_source(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
    tmp_path: Path,
) -> None:
    missing = tmp_path / "missing.toml"
    monkeypatch.setattr(sys, "argv", ["confviz", "visualize", str(missing)], raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("confviz.__main__", run_name="__main__")

    plain_err = strip_ansi(capsys.readouterr().err)
    assert exc.value.code == cli_mod.ExitCode.FILE_NOT_FOUND
    assert "not found" in plain_err


@pytest.mark.os_agnostic
def test_module_entry_cli_exports_all_registered_commands() -> None:
    expected_commands = {"cli_config", "cli_info", "cli_visualize"}
    exported = {name for name in dir(cli_mod) if name.startswith("cli_")}
    assert expected_commands.issubset(exported)


@pytest.mark.os_agnostic
def test_module_entry_subprocess_help() -> None:
    """Verify `python -m confviz --help` works via subprocess."""
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "confviz", "--help"],
        capture_output=True,
        timeout=30,
        check=False,
        # rich-click prints Unicode that cp1252 cannot decode on Windows
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert "Usage:" in result.stdout
    assert __init__conf__.shell_command in result.stdout


@pytest.mark.os_agnostic
def test_module_entry_subprocess_version() -> None:
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "confviz", "--version"],
        capture_output=True,
        timeout=30,
        check=False,
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert __init__conf__.version in result.stdout


@pytest.mark.os_agnostic
def test_entry_main_invokes_cli_with_help(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """entry.main() wires production services and invokes the CLI."""
    monkeypatch.setattr(sys, "argv", ["confviz", "--help"])

    exit_code = entry.main()

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Usage:" in captured.out


@pytest.mark.os_agnostic
def test_entry_main_renders_definitions(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(sys, "argv", ["confviz", "visualize", "--simple", "-D", "App:Mode=fast"])

    exit_code = entry.main()

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "+ App\n  + Mode = fast * [CommandLineProvider]\n" in captured.out
