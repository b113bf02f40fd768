"""CLI console helpers with optional Rich support.

Rich is imported lazily so that ``--help`` and ``--version`` keep
working when it is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from lambdava.exceptions import DependencyMissingError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``DependencyMissingError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise DependencyMissingError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = False) -> Any:
	"""Create a Rich console targeting stdout (or stderr).

	Emoji codes are left as typed and long lines are never wrapped, so
	command output matches its input text.
	"""
	console_class = _load_rich_console_class()
	return console_class(
		stderr=stderr,
		highlight=False,
		emoji=False,
		soft_wrap=True,
	)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool = False) -> None:
		self._stderr = stderr

	def print(self, *objects: object, markup: bool = True) -> None:
		"""Render with Rich when available, else plain print.

		Pass ``markup=False`` for user-supplied text so square brackets
		are printed verbatim.
		"""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except DependencyMissingError:
			print(*objects, file=sys.stderr if self._stderr else sys.stdout)
			return
		rich_console.print(*objects, markup=markup)


console = _ConsoleProxy()
"""Command output."""

err_console = _ConsoleProxy(stderr=True)
"""Diagnostics and error messages."""
