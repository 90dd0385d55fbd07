"""``netcfg-menu doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether this host can run the menu operations at all.

This module lives in the CLI layer — it may import from ``infra``
and it renders via Rich.  It only collects and displays diagnostic
data.
"""

from __future__ import annotations

import platform
import sys

from netcfg_menu.cli import exit_codes
from netcfg_menu.cli.console import err_console
from netcfg_menu.infra.tool_detector import ToolStatus, detect_tools, is_windows
from netcfg_menu.utils.constants import REQUIRED_TOOLS
from netcfg_menu.version import __version__

_STATUS_STYLES: dict[str, str] = {
    "OK": "green",
    "WARN": "yellow",
    "FAIL": "red",
}


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    return "Python", version, "OK" if ok else "FAIL"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, "OK" if is_windows() else "WARN"


def _tool_check(status: ToolStatus) -> tuple[str, str, str]:
    if status.found:
        return status.name, str(status.path) if status.path else "found", "OK"
    return status.name, "not found", "WARN"


def _netcfg_version_check() -> tuple[str, str, str]:
    return "netcfg-menu", __version__, "OK"


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nnetcfg-menu doctor", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<40} {'Status':<8}", file=sys.stderr)
    print("-" * 64, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<40} {status:<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` unless a check reports ``FAIL``, in
        which case :data:`exit_codes.GENERAL_ERROR`.  Missing tools and
        a non-Windows host are warnings only.
    """
    checks = [
        _netcfg_version_check(),
        _python_version_check(),
        _os_check(),
        *(_tool_check(status) for status in detect_tools(REQUIRED_TOOLS)),
    ]
    has_failure = any(status == "FAIL" for _, _, status in checks)

    rich_available = True
    try:
        from rich.table import Table
        from rich.text import Text
    except ModuleNotFoundError:
        rich_available = False

    if rich_available:
        table = Table(
            title="netcfg-menu doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)

        for label, value, status in checks:
            table.add_row(label, value, Text(status, style=_STATUS_STYLES[status]))

        err_console.print()
        err_console.print(table)
        err_console.print()
    else:
        _print_plain_doctor_table(checks)

    if not is_windows():
        err_console.print(
            "ipconfig and netsh are Windows tools; the menu operations "
            "will fail on this system.",
            style="yellow",
        )

    if has_failure:
        err_console.print("Some checks failed.", style="bold red")
        return exit_codes.GENERAL_ERROR

    err_console.print("All checks passed.", style="bold green")
    return exit_codes.SUCCESS
