"""Infrastructure: locating the Windows network tools.

Used by the ``doctor`` command to report whether ``ipconfig`` and
``netsh`` are reachable before the user touches the menu.

Rules
-----
* Detection via :func:`shutil.which` only — no subprocess.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ToolStatus:
    """Result of a ``PATH`` probe for one executable.

    Attributes
    ----------
    name : str
        Executable name that was looked up.
    found : bool
        Whether the executable was located on PATH.
    path : Path | None
        Absolute path to the executable, or ``None``.
    """

    name: str
    found: bool
    path: Path | None


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_tool(name: str) -> ToolStatus:
    """Probe ``PATH`` for *name*.

    Returns a :class:`ToolStatus` whether or not the tool is present —
    the caller decides whether to abort or merely warn.
    """
    result = shutil.which(name)
    if result is None:
        return ToolStatus(name=name, found=False, path=None)
    return ToolStatus(name=name, found=True, path=Path(result).resolve())


def detect_tools(names: tuple[str, ...]) -> tuple[ToolStatus, ...]:
    return tuple(detect_tool(name) for name in names)


def is_windows() -> bool:
    """``ipconfig /all`` and ``netsh interface ip`` exist only on Windows."""
    return platform.system().lower() == "windows"
