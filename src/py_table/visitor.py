"""
Traversal protocol for tables.

A Table calls ``visit_row`` for each of its row views, a row view calls
``visit_cell`` for each member, and a cell calls ``visit_cell_value`` with its
value and the display width of its column. Renderers implement the three
methods; the table never renders anything itself.
"""

from __future__ import annotations
from typing import Any, Protocol


class TableVisitor(Protocol):
	"""Protocol for objects that walk a Table."""

	def visit_row(self, row, status: Any) -> None:
		"""Called once per row view, in row order."""
		...

	def visit_cell(self, cell, status: Any) -> None:
		"""Called once per cell of a row, left to right."""
		...

	def visit_cell_value(self, value: str | None, width: int, status: Any) -> None:
		"""Called with a cell's value and the width of its column."""
		...


class Visitor:
	"""Base visitor that descends from rows to cells to values.

	Subclasses usually override ``visit_cell_value`` and extend ``visit_row``
	to emit whatever surrounds a row.
	"""

	def visit_row(self, row, status):
		row.accept(self, status)

	def visit_cell(self, cell, status):
		cell.accept(self, status)

	def visit_cell_value(self, value, width, status):
		pass
