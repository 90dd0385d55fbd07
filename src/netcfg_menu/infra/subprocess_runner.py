"""``subprocess`` backed implementation of :class:`~netcfg_menu.core.protocols.CommandRunner`.

This module is the **only** place in the codebase that spawns
processes.  ``OSError`` raised while starting a process is caught here
and re-raised as :class:`~netcfg_menu.exceptions.CommandLaunchError`.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence

from netcfg_menu.core.models import CommandResult
from netcfg_menu.exceptions import CommandLaunchError

logger = logging.getLogger(__name__)


class SubprocessCommandRunner:
    """Concrete :class:`CommandRunner` that blocks until the process exits.

    Both output streams are captured in full as bytes.  A non-zero exit
    status is returned, not raised.
    """

    def run(self, args: Sequence[str]) -> CommandResult:
        """Run *args* without a shell and return the captured result.

        Raises
        ------
        CommandLaunchError
            When the executable is missing or cannot be started.
        """
        argv = tuple(args)
        logger.debug("running %s", argv)

        try:
            completed = subprocess.run(
                argv,
                capture_output=True,
                check=False,
            )
        except FileNotFoundError as exc:
            logger.debug("%s not found on PATH", argv[0])
            raise CommandLaunchError(
                str(exc),
                hint="ipconfig and netsh ship with Windows. Run 'netcfg-menu doctor' to check.",
            ) from exc
        except OSError as exc:
            logger.debug("could not start %s: %s", argv[0], exc)
            raise CommandLaunchError(
                str(exc),
            ) from exc

        logger.debug("%s exited with status %d", argv[0], completed.returncode)
        return CommandResult(
            args=argv,
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )
