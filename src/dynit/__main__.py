"""Allow ``python -m dynit`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m dynit`` behaves identically to the ``css-dynit``
console script.
"""

from __future__ import annotations

from dynit.cli.app import cli

if __name__ == "__main__":
    cli()
