"""Regression tests for the optional Rich dependency.

Bootstrap commands and CSS output must keep working when Rich is not
importable; only the presentation of diagnostics degrades to plain text.
"""

from __future__ import annotations

import pytest

from dynit.cli import exit_codes
from dynit.cli.app import main
from dynit.cli.console import console, strip_markup


def test_help_works_without_rich(hide_rich: None) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich(hide_rich: None) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_css_commands_work_without_rich(
    hide_rich: None, capsys: pytest.CaptureFixture[str]
) -> None:
    assert main(["up", "tablet"]) == exit_codes.SUCCESS
    assert capsys.readouterr().out == "@media (min-width: 768px)\n"


def test_console_falls_back_to_plain_stderr(
    hide_rich: None, capsys: pytest.CaptureFixture[str]
) -> None:
    console.print("[yellow]Hint:[/yellow] try again")
    assert capsys.readouterr().err == "Hint: try again\n"


def test_strip_markup_leaves_css_alone() -> None:
    assert strip_markup("[bold red]Error:[/bold red] @media (min-width: 1px)") == (
        "Error: @media (min-width: 1px)"
    )
