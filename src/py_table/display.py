"""Repr logic for Table."""

from __future__ import annotations
from typing import List

from .visitor import Visitor


# How many data rows to show at each end before inserting "..."
MAX_HEAD_ROWS = 5


class _ReprVisitor(Visitor):
	"""Collects one pipe-delimited line per visited row, padded to column width."""

	def __init__(self, width_func):
		self._width_func = width_func
		self._current: List[str] = []
		self.lines: List[str] = []

	def visit_row(self, row, status):
		self._current = []
		row.accept(self, status)
		self.lines.append("| " + " | ".join(self._current) + " |")

	def visit_cell_value(self, value, width, status):
		text = "" if value is None else str(value)
		self._current.append(text + " " * (width - self._width_func(text)))


def _preview_rows(rows, max_preview: int = MAX_HEAD_ROWS):
	"""Header row plus a symmetric preview of the data rows (None marks the gap)."""
	header, data = rows[:1], rows[1:]
	if len(data) > max_preview * 2:
		return header + data[:max_preview] + [None] + data[-max_preview:]
	return header + data


def _footer(tbl) -> str:
	num_cols = len(tbl.headers())
	num_rows = max(len(tbl.raw()) - 1, 0)
	footer = f"# {num_rows}×{num_cols} table"
	if tbl.file:
		footer += f" <{tbl.file}>"
	return footer


def _repr_table(tbl) -> str:
	"""Pretty repr for a Table, built by walking it with a visitor."""
	rows = tbl.cells_rows()
	if not rows:
		return "# 0×0 table"

	visitor = _ReprVisitor(tbl._width_func)
	for row in _preview_rows(rows):
		if row is None:
			visitor.lines.append("...")
		else:
			visitor.visit_row(row, None)

	lines = visitor.lines
	lines.append("")
	lines.append(_footer(tbl))
	return "\n".join(lines)
