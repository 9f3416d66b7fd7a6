"""Printing rendered reports through a Rich console."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from confviz.adapters.config.display import display_report


def _capture_console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, force_terminal=False, width=200, soft_wrap=True), buffer


@pytest.mark.os_agnostic
def test_report_is_printed_verbatim() -> None:
    console, buffer = _capture_console()
    report = "Configuration Structure:\n+ App\n  + Name = shop * [appsettings.json]\n"

    display_report(report, console=console)

    assert buffer.getvalue() == report


@pytest.mark.os_agnostic
def test_square_brackets_are_not_treated_as_markup() -> None:
    console, buffer = _capture_console()

    display_report("* [bold]appsettings.json[/bold]\n", console=console)

    assert buffer.getvalue() == "* [bold]appsettings.json[/bold]\n"


@pytest.mark.os_agnostic
def test_emoji_codes_are_left_alone() -> None:
    console, buffer = _capture_console()

    display_report("+ Mode = :smile:\n", console=console)

    assert buffer.getvalue() == "+ Mode = :smile:\n"


@pytest.mark.os_agnostic
def test_default_console_writes_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    display_report("+ Mode = fast\n")

    assert "+ Mode = fast" in capsys.readouterr().out
