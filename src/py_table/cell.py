from __future__ import annotations


# Line number used when the parser did not report one for a row
UNKNOWN_LINE = -1


class Cell:
	"""A single positioned value of a Table."""
	__slots__ = ('_value', '_table', '_row', '_col', '_line', '_col_width')

	def __init__(self, value, table, row, col, line=UNKNOWN_LINE):
		self._value = value
		self._table = table
		self._row = row
		self._col = col
		self._line = line
		self._col_width = None

	@property
	def value(self):
		return self._value

	@property
	def line(self):
		return self._line

	@property
	def row(self):
		return self._row

	@property
	def col(self):
		return self._col

	def accept(self, visitor, status):
		visitor.visit_cell_value(self._value, self.col_width(), status)

	def col_width(self) -> int:
		"""Display width of this cell's column, looked up once."""
		if self._col_width is None:
			self._col_width = self._table._col_width(self._col)
		return self._col_width

	def to_sexp(self):
		return ('cell', self._value)

	def __repr__(self):
		return f"Cell({self._row}, {self._col}: {self._value!r})"
