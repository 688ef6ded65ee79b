"""Allow ``python -m define_cli`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m define_cli`` behaves identically to the ``define``
console script.
"""

from __future__ import annotations

from define_cli.cli.app import cli

if __name__ == "__main__":
    cli()
