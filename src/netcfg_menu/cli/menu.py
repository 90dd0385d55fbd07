"""Interactive menu: one choice, one operation, then exit.

This module is responsible for:

* Printing the fixed four-line menu.
* Reading the choice and any follow-up answers line by line.
* Rendering success messages for the chosen operation.

Failures are raised, not printed — the error boundary in
:mod:`netcfg_menu.cli.app` renders them and picks the exit code.
"""

from __future__ import annotations

from collections.abc import Callable

from netcfg_menu.cli import exit_codes
from netcfg_menu.cli.console import console, err_console
from netcfg_menu.cli.prompts import read_line
from netcfg_menu.core.models import DhcpOutcome
from netcfg_menu.core.network_service import NetworkConfigService
from netcfg_menu.utils.constants import INVALID_CHOICE_MESSAGE, MENU_LINES


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------

def _list_addresses(service: NetworkConfigService) -> None:
    console.print("Listing all current IP addresses:")
    console.out(service.list_addresses())


def _enable_dhcp(service: NetworkConfigService) -> None:
    interface_name = read_line("Enter the interface name:")
    outcome = service.enable_dhcp(interface_name)
    if outcome is DhcpOutcome.ALREADY_ENABLED:
        console.print(f"DHCP was already enabled on interface: {interface_name}")
    else:
        console.print(
            f"Successfully enabled DHCP on interface: {interface_name}",
            style="green",
        )


def _set_static_ip(service: NetworkConfigService) -> None:
    interface_name = read_line("Enter the interface name:")
    ip_address = read_line("Enter the IP address:")
    subnet_mask = read_line("Enter the subnet mask:")
    gateway = read_line("Enter the gateway:")

    service.set_static_ip(interface_name, ip_address, subnet_mask, gateway)
    console.print(
        f"Successfully set static IP address on interface: {interface_name}",
        style="green",
    )


_OPERATIONS: dict[str, Callable[[NetworkConfigService], None]] = {
    "1": _list_addresses,
    "2": _enable_dhcp,
    "3": _set_static_ip,
}


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_menu(service: NetworkConfigService) -> int:
    """Show the menu, run the selected operation once, and return an exit code.

    An unknown choice is reported on stderr and still returns
    :data:`exit_codes.SUCCESS`.

    Raises
    ------
    NetcfgError
        Any failure of the selected operation, unchanged.
    """
    for line in MENU_LINES:
        console.print(line)

    choice = read_line()
    operation = _OPERATIONS.get(choice)
    if operation is None:
        err_console.print(INVALID_CHOICE_MESSAGE, style="red")
        return exit_codes.SUCCESS

    operation(service)
    return exit_codes.SUCCESS
