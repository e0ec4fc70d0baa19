class PyTableError(Exception):
	"""Base exception for py-table library."""
	pass


class PyTableKeyError(PyTableError, KeyError):
	"""Raised when a column/header is missing."""
	pass


class PyTableTypeError(PyTableError, TypeError):
	"""Raised for invalid types in API calls."""
	pass


class PyTableValueError(PyTableError, ValueError):
	"""Raised for invalid values or mismatched lengths."""
	pass


class PyTableIndexError(PyTableError, IndexError):
	"""Raised for out-of-range member access on a row or column view."""
	pass


class ShapeError(PyTableValueError):
	"""Raised when the rows of a raw matrix are not all the same length."""
	pass


class UnknownColumnError(PyTableKeyError):
	"""Raised by a strict column conversion for a header that does not exist."""
	pass


class HeaderNotFoundError(PyTableKeyError):
	"""Raised when renaming a header that is not in the header row."""
	pass
