"""Domain models for netcfg-menu.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and live only for
the single menu interaction that produced them.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# External command result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandResult:
    """Fully captured outcome of one external process invocation."""

    args: tuple[str, ...]
    """Argument vector the process was started with."""

    returncode: int
    """Process exit status.  ``0`` means success."""

    stdout: bytes
    """Raw captured standard output."""

    stderr: bytes
    """Raw captured standard error."""

    @property
    def success(self) -> bool:
        return self.returncode == 0

    @property
    def stdout_text(self) -> str:
        """Standard output decoded as UTF-8, replacing invalid bytes."""
        return self.stdout.decode("utf-8", errors="replace")

    @property
    def stderr_text(self) -> str:
        """Standard error decoded as UTF-8, replacing invalid bytes."""
        return self.stderr.decode("utf-8", errors="replace")


# ---------------------------------------------------------------------------
# Operation inputs and outcomes
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class StaticAddress:
    """Parameters for assigning a fixed address to one interface."""

    interface_name: str
    ip_address: str
    subnet_mask: str
    gateway: str

    def fields(self) -> tuple[str, str, str, str]:
        return (self.interface_name, self.ip_address, self.subnet_mask, self.gateway)


class DhcpOutcome(enum.Enum):
    """Which branch a successful DHCP switch took."""

    ENABLED = "enabled"
    ALREADY_ENABLED = "already_enabled"
