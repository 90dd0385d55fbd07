"""Core / service layer — validation, command templates, output checks.

Rules
-----
* No ``print()`` calls.
* No process spawning; the runner is injected.
* No imports from ``cli`` or ``infra``.
"""

from netcfg_menu.core.models import CommandResult, DhcpOutcome, StaticAddress
from netcfg_menu.core.network_service import NetworkConfigService
from netcfg_menu.core.protocols import CommandRunner

__all__: list[str] = [
    "CommandResult",
    "CommandRunner",
    "DhcpOutcome",
    "NetworkConfigService",
    "StaticAddress",
]
