"""Display width of cell text, counting wide characters as two columns."""

from __future__ import annotations
import unicodedata


# East Asian width classes rendered as two terminal columns
WIDE_EAST_ASIAN = ('W', 'F')


def char_width(ch: str) -> int:
	"""Width of a single character: 0 for combining marks, 2 for wide, else 1."""
	if unicodedata.combining(ch):
		return 0
	if unicodedata.east_asian_width(ch) in WIDE_EAST_ASIAN:
		return 2
	return 1


def display_width(text) -> int:
	"""Number of columns `text` occupies when rendered; None is 0."""
	if text is None:
		return 0
	if not isinstance(text, str):
		text = str(text)
	return sum(char_width(ch) for ch in text)
