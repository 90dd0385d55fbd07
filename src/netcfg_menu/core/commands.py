"""Argument templates for the Windows network tools.

Pure functions: each returns the exact argument vector handed to the
runner.  Values are passed as separate arguments, never through a shell.
"""

from __future__ import annotations

from netcfg_menu.core.models import StaticAddress
from netcfg_menu.utils.constants import IPCONFIG, NETSH

_SET_ADDRESS: tuple[str, ...] = (NETSH, "interface", "ip", "set", "address")


def list_addresses_command() -> tuple[str, ...]:
    """``ipconfig /all``"""
    return (IPCONFIG, "/all")


def enable_dhcp_command(interface_name: str) -> tuple[str, ...]:
    """``netsh interface ip set address <name> dhcp``"""
    return (*_SET_ADDRESS, interface_name, "dhcp")


def set_static_ip_command(address: StaticAddress) -> tuple[str, ...]:
    """``netsh interface ip set address <name> static <ip> <mask> <gateway>``"""
    return (
        *_SET_ADDRESS,
        address.interface_name,
        "static",
        address.ip_address,
        address.subnet_mask,
        address.gateway,
    )
