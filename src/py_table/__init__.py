"""
py-table: tables parsed from plain-text grids

    | a | b |
    | 1 | 2 |

Main classes:
    - Table: the raw matrix plus per-column conversions, header renaming,
      placeholder substitution and line lookup
    - Cells: row or column view over a table's cells
    - Cell: one positioned value
    - Record: header-keyed row returned by Table.records()
    - Visitor / TableVisitor: traversal protocol for renderers

Zero external dependencies - pure Python stdlib only.
"""

from .cell import Cell, UNKNOWN_LINE
from .cells import Cells
from .table import Table, Record
from .visitor import TableVisitor, Visitor
from .width import display_width
from .errors import (
	PyTableError,
	PyTableKeyError,
	PyTableValueError,
	PyTableTypeError,
	PyTableIndexError,
	ShapeError,
	UnknownColumnError,
	HeaderNotFoundError,
)

__version__ = "0.1.0"
__all__ = [
	"Table",
	"Cells",
	"Cell",
	"Record",
	"TableVisitor",
	"Visitor",
	"display_width",
	"UNKNOWN_LINE",
	"PyTableError",
	"PyTableKeyError",
	"PyTableValueError",
	"PyTableTypeError",
	"PyTableIndexError",
	"ShapeError",
	"UnknownColumnError",
	"HeaderNotFoundError",
]
