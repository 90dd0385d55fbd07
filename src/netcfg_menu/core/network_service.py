"""Core network configuration service.

This is the central service class consumed by the CLI layer.  It
depends on a :class:`~netcfg_menu.core.protocols.CommandRunner` injected
at construction time, keeping the core free of any process handling.

Guarantees
----------
* No ``print()`` — the CLI layer renders every message.
* Input is validated before any command is run.
* Only :class:`~netcfg_menu.exceptions.NetcfgError` subclasses escape.
"""

from __future__ import annotations

from collections.abc import Sequence

from netcfg_menu.core.commands import (
    enable_dhcp_command,
    list_addresses_command,
    set_static_ip_command,
)
from netcfg_menu.core.models import CommandResult, DhcpOutcome, StaticAddress
from netcfg_menu.core.protocols import CommandRunner
from netcfg_menu.exceptions import (
    CommandFailedError,
    CommandLaunchError,
    InvalidInputError,
    NetcfgError,
)
from netcfg_menu.utils.constants import DHCP_ALREADY_ENABLED_MARKER


class NetworkConfigService:
    """Stateless service behind the three menu operations.

    Parameters
    ----------
    runner:
        Any object satisfying the :class:`CommandRunner` protocol.
    """

    def __init__(self, runner: CommandRunner) -> None:
        self._runner: CommandRunner = runner

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def list_addresses(self) -> str:
        """Return the full ``ipconfig /all`` report, verbatim.

        Raises
        ------
        CommandFailedError
            If ``ipconfig`` exits with a non-zero status.
        CommandLaunchError
            If ``ipconfig`` cannot be started.
        """
        result = self._run(list_addresses_command())
        if not result.success:
            raise CommandFailedError(
                "Failed to retrieve IP addresses.",
                stderr=result.stderr_text,
                returncode=result.returncode,
            )
        return result.stdout_text

    def enable_dhcp(self, interface_name: str) -> DhcpOutcome:
        """Switch *interface_name* to DHCP addressing.

        Returns :attr:`DhcpOutcome.ALREADY_ENABLED` when ``netsh`` reports
        that nothing had to change.

        Raises
        ------
        InvalidInputError
            If *interface_name* is empty or whitespace.
        CommandFailedError
            If ``netsh`` exits with a non-zero status.
        CommandLaunchError
            If ``netsh`` cannot be started.
        """
        name = interface_name.strip()
        if not name:
            raise InvalidInputError("Interface name cannot be empty")

        result = self._run(enable_dhcp_command(name))
        if not result.success:
            raise CommandFailedError(
                f"Failed to enable DHCP on interface: {name}",
                stderr=result.stderr_text,
                returncode=result.returncode,
            )
        if DHCP_ALREADY_ENABLED_MARKER in result.stdout_text:
            return DhcpOutcome.ALREADY_ENABLED
        return DhcpOutcome.ENABLED

    def set_static_ip(
        self,
        interface_name: str,
        ip_address: str,
        subnet_mask: str,
        gateway: str,
    ) -> None:
        """Assign a fixed address, mask and gateway to *interface_name*.

        Raises
        ------
        InvalidInputError
            If any of the four values is empty or whitespace.
        CommandFailedError
            If ``netsh`` exits with a non-zero status.
        CommandLaunchError
            If ``netsh`` cannot be started.
        """
        address = StaticAddress(
            interface_name=interface_name.strip(),
            ip_address=ip_address.strip(),
            subnet_mask=subnet_mask.strip(),
            gateway=gateway.strip(),
        )
        if not all(address.fields()):
            raise InvalidInputError("All parameters must be provided")

        result = self._run(set_static_ip_command(address))
        if not result.success:
            raise CommandFailedError(
                f"Failed to set static IP address on interface: {address.interface_name}",
                stderr=result.stderr_text,
                returncode=result.returncode,
            )

    # ------------------------------------------------------------------
    # Runner delegation (safe boundary)
    # ------------------------------------------------------------------

    def _run(self, args: Sequence[str]) -> CommandResult:
        """Call the runner and ensure only our exceptions escape."""
        try:
            return self._runner.run(args)
        except NetcfgError:
            raise
        except Exception as exc:
            raise CommandLaunchError(
                f"Unexpected error running {args[0]}: {exc}",
            ) from exc
