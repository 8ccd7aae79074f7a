"""Process exit codes returned by ``css-dynit``.

argparse itself exits with ``2`` on a usage error, which shares the
value of :data:`UNEXPECTED_ERROR`; both mean the command produced no CSS.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The requested CSS was written to stdout."""

GENERAL_ERROR: int = 1
"""A :class:`~dynit.exceptions.DynitError` was rendered on stderr."""

UNEXPECTED_ERROR: int = 2
"""Any other exception reached the error boundary."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""
