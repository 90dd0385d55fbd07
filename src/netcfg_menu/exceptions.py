"""Custom exception hierarchy for netcfg-menu.

All exceptions that cross layer boundaries must inherit from
:class:`NetcfgError`.  Raw ``OSError`` from process creation must never
propagate beyond the infrastructure layer — it is caught there and
re-raised as :class:`CommandLaunchError`.

Hierarchy
---------
NetcfgError
├── InvalidInputError
├── CommandFailedError
├── CommandLaunchError
└── MissingDependencyError
"""

from __future__ import annotations


class NetcfgError(Exception):
    """Base exception for all netcfg-menu errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    and choose the exit code.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input validation ------------------------------------------------------

class InvalidInputError(NetcfgError):
    """Raised when a required field is empty; no command has been run."""


# --- External commands -----------------------------------------------------

class CommandFailedError(NetcfgError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(
        self,
        message: str,
        *,
        stderr: str = "",
        returncode: int | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.stderr: str = stderr
        """Captured standard-error text of the failed command, verbatim."""
        self.returncode: int | None = returncode


class CommandLaunchError(NetcfgError):
    """Raised when an external command cannot be started at all."""


# --- Environment -----------------------------------------------------------

class MissingDependencyError(NetcfgError):
    """Raised when an optional runtime dependency is not installed."""
