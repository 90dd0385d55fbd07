"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so that
bootstrap paths (``--help``, ``--version``) and the menu itself keep
working when Rich is not installed.

Two proxies are exported: :data:`console` writes to stdout (menu,
prompts, results) and :data:`err_console` writes to stderr (failures,
diagnostics).
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

from netcfg_menu.exceptions import MissingDependencyError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``MissingDependencyError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise MissingDependencyError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console instance targeting stderr or stdout."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with plain-text fallback.

	Markup is never interpreted: interface names and tool output are
	user data and may contain square brackets.
	"""

	def __init__(self, *, stderr: bool) -> None:
		self._stderr = stderr

	def _stream(self) -> TextIO:
		return sys.stderr if self._stderr else sys.stdout

	def print(self, *objects: object, style: str | None = None) -> None:
		"""Render with Rich when available, else plain print."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except MissingDependencyError:
			print(*objects, file=self._stream(), flush=True)
			return
		rich_console.print(
			*objects,
			style=style,
			markup=False,
			highlight=False,
			emoji=False,
			soft_wrap=True,
		)

	def out(self, text: str) -> None:
		"""Write *text* without styling, highlighting or wrapping."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except MissingDependencyError:
			print(text, file=self._stream(), flush=True)
			return
		rich_console.out(text, highlight=False)


console = _ConsoleProxy(stderr=False)
err_console = _ConsoleProxy(stderr=True)


def configure_logging(verbose: bool) -> None:
	"""Send DEBUG records to stderr when *verbose*; otherwise leave logging alone."""
	if not verbose:
		return
	try:
		from rich.logging import RichHandler
	except ModuleNotFoundError:
		logging.basicConfig(
			level=logging.DEBUG,
			stream=sys.stderr,
			format="%(levelname)s %(name)s: %(message)s",
		)
		return
	logging.basicConfig(
		level=logging.DEBUG,
		format="%(message)s",
		handlers=[RichHandler(console=get_rich_console(stderr=True), show_path=False)],
	)
