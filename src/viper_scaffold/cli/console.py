"""CLI console helpers with optional Rich support.

Rich is imported lazily so that ``--help``, ``--version`` and plain
generation keep working when it is not installed.

Messages are a markup *template* plus plain *values*.  Values (module
names, paths, exception text) are escaped with :func:`rich.markup.escape`
before substitution, so they are never parsed as markup.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from viper_scaffold.exceptions import EnvironmentError

# Only the style tags used by this package's own templates.
_STYLE_TAG = re.compile(r"\[/?(?:bold|dim|red|green|yellow|cyan| )+\]")


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


def strip_markup(template: str) -> str:
	"""Remove this package's style tags such as ``[bold red]`` from *template*."""
	return _STYLE_TAG.sub("", template)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, template: object = "", /, **values: object) -> None:
		"""Render *template* with *values* substituted.

		With Rich, values are markup-escaped; without it, the template's
		style tags are stripped and values are printed verbatim.
		"""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			if isinstance(template, str):
				template = strip_markup(template).format(**values)
			print(template, file=sys.stderr)
			return

		if isinstance(template, str):
			from rich.markup import escape

			template = template.format(
				**{key: escape(str(value)) for key, value in values.items()},
			)
		rich_console.print(template)


console = _ConsoleProxy()
