"""Fixed names and text shared across layers."""

from __future__ import annotations

IPCONFIG: str = "ipconfig"
"""Windows tool that reports IP configuration."""

NETSH: str = "netsh"
"""Windows tool that modifies interface addressing."""

REQUIRED_TOOLS: tuple[str, ...] = (IPCONFIG, NETSH)

DHCP_ALREADY_ENABLED_MARKER: str = "DHCP is already enabled"
"""Substring ``netsh`` prints when the interface is already on DHCP.

Matched verbatim; localised Windows builds print a different phrase.
"""

MENU_LINES: tuple[str, ...] = (
    "Choose an option:",
    "1. List all IP addresses",
    "2. Enable DHCP on an interface",
    "3. Set a static IP address on an interface",
)

INVALID_CHOICE_MESSAGE: str = "Invalid choice. Please select 1, 2, or 3."
