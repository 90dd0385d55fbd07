"""Line-based input for the interactive menu.

Each read consumes exactly one line from stdin and strips surrounding
whitespace.  End of input reads as an empty string, which the menu and
the service treat like any other empty answer.
"""

from __future__ import annotations

import sys

from netcfg_menu.cli.console import console


def read_line(prompt: str | None = None) -> str:
    """Print *prompt* (if any) on stdout, then read one trimmed line."""
    if prompt is not None:
        console.print(prompt)
    return sys.stdin.readline().strip()
