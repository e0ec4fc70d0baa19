from __future__ import annotations

from .cell import UNKNOWN_LINE
from .errors import PyTableIndexError


class Cells:
	"""Row or column of cells.

	A thin view over Cell objects owned by the table's cell matrix. Views never
	copy or modify their members.
	"""
	__slots__ = ('_table', '_cells', '_record')

	def __init__(self, table, cells):
		self._table = table
		self._cells = tuple(cells)
		self._record = None

	def __len__(self):
		return len(self._cells)

	def __iter__(self):
		return iter(self._cells)

	def __getitem__(self, n):
		try:
			return self._cells[n]
		except IndexError:
			raise PyTableIndexError(
				f"Cell index {n} out of range for {len(self._cells)} cells"
			) from None

	def value(self, n):
		return self[n].value

	@property
	def line(self):
		"""Source line of the first member (the row's line for row views)."""
		if not self._cells:
			return UNKNOWN_LINE
		return self._cells[0].line

	def at_lines(self, lines) -> bool:
		lines = set(lines)
		return not lines or self.line in lines

	def to_record(self):
		"""Keyed record of this row, built by the owning table once per view."""
		if self._record is None:
			self._record = self._table._to_record(self)
		return self._record

	def index(self):
		"""Position of this view among the table's rows, or None."""
		return self._table.index(self)

	def width(self) -> int:
		"""Widest member value; absent values count as 0."""
		measure = self._table._width_func
		return max(
			(measure(str(cell.value)) if cell.value is not None else 0 for cell in self._cells),
			default=0,
		)

	def accept(self, visitor, status):
		for cell in self._cells:
			visitor.visit_cell(cell, status)

	def to_sexp(self):
		return ('row',) + tuple(cell.to_sexp() for cell in self._cells)

	def __repr__(self):
		values = ', '.join(repr(cell.value) for cell in self._cells)
		return f"Cells(line {self.line}: {values})"
