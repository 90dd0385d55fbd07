"""CLI application entry point and command routing for netcfg-menu.

This module is the **sole error boundary** for the entire application.
It catches :class:`~netcfg_menu.exceptions.NetcfgError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, renders
user-facing messages on stderr, and returns well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the menu,
  the core service and the infrastructure layer.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from netcfg_menu.cli import exit_codes
from netcfg_menu.cli.console import configure_logging, err_console
from netcfg_menu.exceptions import CommandFailedError, NetcfgError
from netcfg_menu.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``netcfg-menu``          — interactive menu (reads stdin)
    * ``netcfg-menu doctor``   — environment diagnostics
    * ``netcfg-menu --version``
    """
    parser = argparse.ArgumentParser(
        prog="netcfg-menu",
        description="View and change Windows network interface addressing.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log the external commands being run to stderr.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default=None,
        choices=["doctor"],
        help="Omit to start the interactive menu, or 'doctor' to run diagnostics.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_menu() -> int:
    """Wire the subprocess runner into the service and run the menu once."""
    from netcfg_menu.cli.menu import run_menu
    from netcfg_menu.core.network_service import NetworkConfigService
    from netcfg_menu.infra.subprocess_runner import SubprocessCommandRunner

    service = NetworkConfigService(SubprocessCommandRunner())
    return run_menu(service)


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from netcfg_menu.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the netcfg-menu CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command == "doctor":
        return _handle_doctor()

    return _handle_menu()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _render_error(exc: NetcfgError) -> None:
    if isinstance(exc, CommandFailedError):
        err_console.print(str(exc), style="bold red")
        err_console.print(f"Standard Error: {exc.stderr}")
    else:
        err_console.print(f"Error: {exc}", style="bold red")
    if exc.hint:
        err_console.print(f"Hint: {exc.hint}", style="yellow")


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except NetcfgError as exc:
        _render_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        err_console.print("\nAborted by user.", style="yellow")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        err_console.print(
            "Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}",
            style="bold red",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
