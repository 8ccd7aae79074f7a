"""CLI console helpers with optional Rich support.

Rich is imported lazily so that ``--help``, ``--version`` and the plain
CSS commands keep working when it is not installed.  Everything printed
here goes to stderr; generated CSS is written to stdout by the commands
themselves.
"""

from __future__ import annotations

import re
import sys
from typing import Any

_MARKUP_RE = re.compile(r"\[/?(?:bold|dim|red|green|yellow|cyan)(?: \w+)*\]")


def strip_markup(text: str) -> str:
	"""Remove the Rich style tags used by this CLI from *text*."""
	return _MARKUP_RE.sub("", text)


def load_rich_table_class() -> type[Any] | None:
	"""Return ``rich.table.Table`` or ``None`` when Rich is unavailable."""
	try:
		from rich.table import Table
	except ModuleNotFoundError:
		return None
	return Table


def get_rich_console() -> Any | None:
	"""Create a Rich console targeting stderr, or ``None`` without Rich."""
	try:
		from rich.console import Console
	except ModuleNotFoundError:
		return None
	return Console(stderr=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		rich_console = get_rich_console()
		if rich_console is None:
			plain = [strip_markup(obj) if isinstance(obj, str) else obj for obj in objects]
			print(*plain, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()
