"""Shared pytest fixtures and configuration for the netcfg-menu test suite.

Guidelines
----------
* No real ``ipconfig`` / ``netsh`` invocation in any test.
* Process execution is mocked at the runner protocol boundary, or at
  ``subprocess.run`` for the runner's own tests.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import io
import sys
from collections.abc import Callable

import pytest


@pytest.fixture
def feed_stdin(monkeypatch: pytest.MonkeyPatch) -> Callable[..., None]:
    """Replace stdin with the given lines, one answer per line."""

    def _feed(*lines: str) -> None:
        text = "".join(f"{line}\n" for line in lines)
        monkeypatch.setattr(sys, "stdin", io.StringIO(text))

    return _feed
