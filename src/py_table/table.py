import logging
import warnings
from copy import deepcopy

from .cell import Cell, UNKNOWN_LINE
from .cells import Cells
from .visitor import TableVisitor
from .width import display_width
from .errors import ShapeError, UnknownColumnError, HeaderNotFoundError, PyTableTypeError


logger = logging.getLogger(__name__)


def _identity(value):
	return value


def _pairs(mapping):
	"""Accept a dict or an iterable of (key, value) pairs, preserving order."""
	if hasattr(mapping, 'items'):
		return list(mapping.items())
	return [tuple(pair) for pair in mapping]


def _replace_arguments(cell, arguments):
	"""Apply (placeholder, value) pairs to one cell, in order.

	A None or False value blanks the cell. Once blank, later pairs leave it
	blank, so a blanking pair discards substitutions made by the pairs before it.
	"""
	for name, value in arguments:
		if cell is None:
			break
		cell = None if value is None or value is False else cell.replace(name, str(value))
	return cell


class Record(dict):
	"""Header-keyed row of a Table.

	A non-string key is looked up by its str() form, so ``record[1]`` finds
	the header ``'1'``. Any other key that is not a header gives None instead
	of raising. ``[]``, ``get()`` and ``in`` all resolve keys the same way.
	"""

	def _alias(self, key):
		"""Header named by str(key) for a non-string key, or None."""
		if key is None or isinstance(key, str):
			return None
		alias = str(key)
		return alias if dict.__contains__(self, alias) else None

	def __missing__(self, key):
		alias = self._alias(key)
		return None if alias is None else dict.__getitem__(self, alias)

	def get(self, key, default=None):
		if dict.__contains__(self, key):
			return dict.__getitem__(self, key)
		alias = self._alias(key)
		return default if alias is None else dict.__getitem__(self, alias)

	def __contains__(self, key):
		return dict.__contains__(self, key) or self._alias(key) is not None


class Table:
	"""
	Data of a table parsed from a plain-text grid:

		| a | b |
		| c | d |

	becomes ``Table([['a', 'b'], ['c', 'd']])``. The first row holds the
	headers. Cells, row/column views and records are derived lazily from the
	raw matrix and cached for the life of the table.

	Parameters
	----------
	raw : sequence of sequences of str or None
		The rows. All rows must have the same length.
	lines : sequence of int, optional
		Source line of each row, as reported by the parser.
	file : str, optional
		Source file the table was parsed from.
	width_func : callable, optional
		``str -> int`` display width used for column alignment.
	"""

	def __init__(self, raw, lines=None, file=None, width_func=None):
		self._raw = _checked_matrix(raw)
		self._lines = _checked_lines(lines, len(self._raw))
		self.file = file
		self._width_func = width_func or display_width
		self._conversions = {}
		self._invalidate()

	def _invalidate(self):
		self._matrix = None
		self._row_views = None
		self._column_views = None
		self._records = None

	# ------------------------------------------------------------
	# Raw data
	# ------------------------------------------------------------

	def raw(self):
		"""All rows, headers included, e.g. ``[['a', 'b'], ['c', 'd']]``."""
		return [list(row) for row in self._raw]

	def rows(self):
		"""Same as raw(), without the header row."""
		return [list(row) for row in self._raw[1:]]

	def headers(self):
		return list(self._raw[0]) if self._raw else []

	@property
	def lines(self):
		return list(self._lines)

	# ------------------------------------------------------------
	# Records and column conversion
	# ------------------------------------------------------------

	def records(self):
		"""
		Convert the data rows to a list of Records keyed by header. A table
		built from:

			| a | b | sum |
			| 2 | 3 | 5   |
			| 7 | 9 | 16  |

		gives ``[{'a': '2', 'b': '3', 'sum': '5'}, {'a': '7', 'b': '9', 'sum': '16'}]``.

		Use map_column() to change how values of a column are converted. The
		result is computed once; later calls return the same list.
		"""
		if self._records is None:
			self._records = [row.to_record() for row in self.cells_rows()[1:]]
		return self._records

	def map_column(self, column_name, conversion, strict=True):
		"""
		Change how records() converts values of the column ``column_name``.

		If ``strict`` is True, the column must exist in the header row or
		UnknownColumnError is raised. With ``strict=False`` the conversion is
		registered even when no such header exists.
		"""
		if not callable(conversion):
			raise PyTableTypeError(
				f"Conversion for column '{column_name}' must be callable, "
				f"got {type(conversion).__name__}"
			)
		if column_name not in self.headers():
			if strict:
				raise UnknownColumnError(f'The column named "{column_name}" does not exist')
			logger.debug("Registering conversion for absent column %r", column_name)
		self._conversions[column_name] = conversion
		self._forget_records()
		return self

	def _conversion_for(self, column_name):
		return self._conversions.get(column_name, _identity)

	def _forget_records(self):
		self._records = None
		if self._row_views is not None:
			logger.debug("Dropping cached records of %d rows", len(self._row_views))
			for row in self._row_views:
				row._record = None

	def _to_record(self, cells):
		record = Record()
		for column_index, column_name in enumerate(self.headers()):
			record[column_name] = self._conversion_for(column_name)(cells.value(column_index))
		return record

	# ------------------------------------------------------------
	# Header renaming
	# ------------------------------------------------------------

	def map_headers(self, mappings):
		"""Return a copy of this table with headers renamed (old -> new).

		Conversions registered with map_column() follow the renamed headers.
		"""
		table = Table(
			deepcopy(self._raw),
			lines=self._lines,
			file=self.file,
			width_func=self._width_func,
		)
		table._conversions = dict(self._conversions)
		return table.rename_headers(mappings)

	def rename_headers(self, mappings):
		"""
		Rename headers in place (old -> new), returning self for chaining.

		Pairs are applied in order, each renaming the first header currently
		equal to the old name. If any old name is missing, HeaderNotFoundError
		is raised and no header is renamed.

		Cells and views handed out before the rename keep the old values and
		the column widths they had before it.
		"""
		pairs = _pairs(mappings)
		if not pairs:
			return self

		# Simulate renames on a copy so a failure leaves the table untouched
		simulated = self.headers()
		for old, new in pairs:
			try:
				idx = simulated.index(old)
			except ValueError:
				raise HeaderNotFoundError(f"Header '{old}' not found in table") from None
			simulated[idx] = new

		for new in dict.fromkeys(new for _, new in pairs):
			if simulated.count(new) > 1:
				warnings.warn(
					f"Header '{new}' appears more than once after renaming; "
					"records keep the rightmost column"
				)

		self._raw[0][:] = simulated
		for old, new in pairs:
			if old in self._conversions:
				self._conversions[new] = self._conversions.pop(old)
			logger.debug("Renamed header %r to %r", old, new)

		self._resolve_widths()
		self._invalidate()
		return self

	# ------------------------------------------------------------
	# Placeholder substitution and line lookup
	# ------------------------------------------------------------

	def arguments_replaced(self, arguments):
		"""
		Return a new table with placeholders replaced in every cell.

		``arguments`` maps placeholder text to its replacement. A None or
		False replacement blanks the cell instead.
		"""
		pairs = _pairs(arguments)
		replaced = [[_replace_arguments(cell, pairs) for cell in row] for row in self._raw]
		return Table(replaced, lines=self._lines, file=self.file, width_func=self._width_func)

	def at_lines(self, lines) -> bool:
		"""True if ``lines`` is empty or contains the source line of any row."""
		lines = set(lines)
		if not lines:
			return True
		return any(row.line in lines for row in self.cells_rows())

	# ------------------------------------------------------------
	# Traversal
	# ------------------------------------------------------------

	def accept(self, visitor: TableVisitor, status):
		for row in self.cells_rows():
			visitor.visit_row(row, status)
		return None

	def index(self, cells):
		"""Position of the row view ``cells`` in this table, or None."""
		for position, row in enumerate(self.cells_rows()):
			if row is cells:
				return position
		return None

	def cells_rows(self):
		"""One Cells view per row, headers included."""
		if self._row_views is None:
			self._row_views = [Cells(self, cell_row) for cell_row in self._cell_matrix()]
		return self._row_views

	def cols(self):
		"""One Cells view per column."""
		if self._column_views is None:
			self._column_views = [Cells(self, cell_col) for cell_col in zip(*self._cell_matrix())]
		return self._column_views

	def _col_width(self, col):
		return self.cols()[col].width()

	def _resolve_widths(self):
		"""Pin column widths on cells already built, before the caches go."""
		if self._matrix is None:
			return
		for cell_row in self._matrix:
			for cell in cell_row:
				cell.col_width()

	def _cell_matrix(self):
		if self._matrix is None:
			matrix = []
			for row, (raw_row, line) in enumerate(zip(self._raw, self._lines)):
				matrix.append([
					Cell(raw_cell, self, row, col, line)
					for col, raw_cell in enumerate(raw_row)
				])
			self._matrix = matrix
		return self._matrix

	def __iter__(self):
		return iter(self.cells_rows())

	def to_sexp(self):
		return ('table',) + tuple(row.to_sexp() for row in self.cells_rows())

	def __repr__(self):
		from .display import _repr_table
		return _repr_table(self)


def _checked_matrix(raw):
	"""Copy ``raw`` into a list of lists, rejecting ragged rows."""
	if isinstance(raw, (str, bytes)) or not hasattr(raw, '__iter__'):
		raise PyTableTypeError(f"Table rows must be a sequence of rows, got {type(raw).__name__}")
	matrix = []
	for row in raw:
		if isinstance(row, (str, bytes)) or not hasattr(row, '__iter__'):
			raise PyTableTypeError(f"Table row must be a sequence of cells, got {type(row).__name__}")
		matrix.append(list(row))

	if matrix:
		expected = len(matrix[0])
		for row_idx, row in enumerate(matrix):
			if len(row) != expected:
				raise ShapeError(
					f"Table is not rectangular: row {row_idx} has {len(row)} cells, "
					f"expected {expected}"
				)
	return matrix


def _checked_lines(lines, num_rows):
	if lines is None:
		return [UNKNOWN_LINE] * num_rows
	lines = list(lines)
	if len(lines) != num_rows:
		raise ShapeError(f"Got {len(lines)} line numbers for {num_rows} rows")
	return lines
