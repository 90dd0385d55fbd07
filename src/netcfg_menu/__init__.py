"""netcfg-menu — text-menu network interface configuration for Windows.

Wraps ``ipconfig`` and ``netsh`` behind a small interactive menu.
"""

from netcfg_menu.version import __version__

__all__: list[str] = ["__version__"]
