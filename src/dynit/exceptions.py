"""Custom exception hierarchy for css-dynit.

The core formatters are total over real numbers and raise nothing by
default.  Errors only appear when a caller opts into ``strict`` checking
or hands a breakpoint name that cannot be resolved.  Every such error
inherits from :class:`DynitError` so the CLI error boundary can render a
clean message without a stack trace.

Hierarchy
---------
DynitError
└── InvalidInputError
    └── UnknownBreakpointError
"""

from __future__ import annotations


class DynitError(Exception):
    """Base exception for all css-dynit errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input validation ------------------------------------------------------

class InvalidInputError(DynitError):
    """Raised in strict mode when a numeric input is rejected."""


class UnknownBreakpointError(InvalidInputError):
    """Raised when a breakpoint name is neither known nor numeric."""
