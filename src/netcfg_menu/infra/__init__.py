"""Infrastructure layer — external system integration.

This layer wraps all interaction with the operating system: process
creation and executable lookup.  Every raw ``OSError`` must be caught
here and re-raised as a :class:`~netcfg_menu.exceptions.NetcfgError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from netcfg_menu.infra.subprocess_runner import SubprocessCommandRunner
from netcfg_menu.infra.tool_detector import ToolStatus, detect_tool, detect_tools, is_windows

__all__: list[str] = [
    "SubprocessCommandRunner",
    "ToolStatus",
    "detect_tool",
    "detect_tools",
    "is_windows",
]
