"""Allow ``python -m lambdava`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m lambdava`` behaves identically to the ``lambdava`` console
script.
"""

from __future__ import annotations

from lambdava.cli.app import cli

if __name__ == "__main__":
    cli()
