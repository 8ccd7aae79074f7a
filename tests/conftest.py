"""Shared pytest fixtures and configuration for the css-dynit test suite.

Guidelines
----------
* Core tests are pure function calls — no mocking, no side effects.
* CLI tests drive ``main(argv)`` directly and read output via ``capsys``.
* Rich is hidden through ``sys.modules`` to exercise the plain fallbacks.
"""

from __future__ import annotations

import sys

import pytest


@pytest.fixture
def hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make every ``rich`` import fail with ``ModuleNotFoundError``."""
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)
