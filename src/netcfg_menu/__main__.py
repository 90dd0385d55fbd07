"""Allow ``python -m netcfg_menu`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m netcfg_menu`` behaves identically to the ``netcfg-menu``
console script.
"""

from __future__ import annotations

from netcfg_menu.cli.app import cli

if __name__ == "__main__":
    cli()
