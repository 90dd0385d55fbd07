"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — so tests can drive the service without spawning
processes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from netcfg_menu.core.models import CommandResult


class CommandRunner(Protocol):
    """Contract for external command execution backends.

    Any object that implements :meth:`run` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def run(self, args: Sequence[str]) -> CommandResult:
        """Run *args* to completion and return the captured result.

        A non-zero exit status is **not** an error at this level; it is
        reported through :attr:`CommandResult.returncode`.

        Raises
        ------
        CommandLaunchError
            When the process cannot be started at all.
        """
        ...  # pragma: no cover
