"""Records and per-column conversion"""
import pytest
from py_table import Table, Record
from py_table.errors import UnknownColumnError, PyTableTypeError


@pytest.fixture
def table():
	return Table([['a', 'b'], ['1', '2'], ['3', '4']])


class TestRecords:
	"""records() with the default identity conversion"""

	def test_records(self, table):
		assert table.records() == [{'a': '1', 'b': '2'}, {'a': '3', 'b': '4'}]

	def test_records_are_record_instances(self, table):
		assert all(isinstance(r, Record) for r in table.records())

	def test_header_only_table_has_no_records(self):
		assert Table([['a', 'b']]).records() == []

	def test_empty_table_has_no_records(self):
		assert Table([]).records() == []

	def test_records_memoized(self, table):
		assert table.records() is table.records()

	def test_row_view_record(self, table):
		row = table.cells_rows()[2]
		assert row.to_record() == {'a': '3', 'b': '4'}
		assert row.to_record() is row.to_record()

	def test_key_order_follows_headers(self):
		t = Table([['z', 'a', 'm'], ['1', '2', '3']])
		assert list(t.records()[0]) == ['z', 'a', 'm']

	def test_duplicate_header_keeps_rightmost(self):
		t = Table([['a', 'a'], ['1', '2']])
		assert t.records() == [{'a': '2'}]


class TestRecordLookup:
	"""Lookups by keys that are not headers never raise"""

	def test_missing_key_returns_none(self, table):
		assert table.records()[0]['missing'] is None

	def test_case_is_significant(self, table):
		record = table.records()[0]
		assert record['A'] is None
		assert 'A' not in record

	def test_similar_headers_stay_distinct(self):
		t = Table([['a-b', 'a b'], ['1', '2']])
		record = t.records()[0]
		assert record['a-b'] == '1'
		assert record['a b'] == '2'
		assert record['a_b'] is None

	def test_non_string_key(self):
		t = Table([['1', '2'], ['x', 'y']])
		record = t.records()[0]
		assert record[1] == 'x'
		assert record.get(2) == 'y'
		assert 1 in record

	def test_get_and_in_agree_with_getitem(self):
		t = Table([['Unit Price'], ['9.99']])
		record = t.records()[0]
		assert record.get('Unit Price') == '9.99'
		assert record.get('unit_price') is None
		assert record.get('unit_price', 'n/a') == 'n/a'
		assert record['unit_price'] is None
		assert 'Unit Price' in record
		assert 'unit_price' not in record

	def test_none_key(self, table):
		record = table.records()[0]
		assert record[None] is None
		assert None not in record

	def test_lookup_does_not_add_keys(self):
		t = Table([['1'], ['x']])
		record = t.records()[0]
		_ = record[1]
		_ = record['missing']
		assert list(record) == ['1']


class TestMapColumn:
	"""map_column() conversion registration"""

	def test_conversion_applied(self, table):
		table.map_column('a', int)
		assert table.records()[0] == {'a': 1, 'b': '2'}
		assert table.records()[1] == {'a': 3, 'b': '4'}

	def test_strict_unknown_column(self, table):
		with pytest.raises(UnknownColumnError, match='The column named "z" does not exist'):
			table.map_column('z', int)

	def test_strict_is_default(self, table):
		with pytest.raises(UnknownColumnError):
			table.map_column('z', int, True)

	def test_non_strict_unknown_column(self, table):
		table.map_column('z', int, strict=False)
		assert table.records()[0] == {'a': '1', 'b': '2'}

	def test_returns_self(self, table):
		assert table.map_column('a', int) is table

	def test_conversion_must_be_callable(self, table):
		with pytest.raises(PyTableTypeError):
			table.map_column('a', 'int')

	def test_conversion_sees_blank_cells(self):
		t = Table([['a'], [None]])
		t.map_column('a', lambda v: 'blank' if v is None else v)
		assert t.records() == [{'a': 'blank'}]

	def test_registration_invalidates_records(self, table):
		before = table.records()
		row = table.cells_rows()[1]
		assert row.to_record() == {'a': '1', 'b': '2'}
		table.map_column('b', int)
		assert table.records() is not before
		assert table.records()[0] == {'a': '1', 'b': 2}
		assert row.to_record() == {'a': '1', 'b': 2}

	def test_later_registration_wins(self, table):
		table.map_column('a', int)
		table.map_column('a', float)
		assert table.records()[0]['a'] == 1.0


class TestConversionCalls:
	"""Conversions run exactly once per cell"""

	def test_repeated_records_do_not_reconvert(self, table):
		calls = []

		def counting(value):
			calls.append(value)
			return int(value)

		table.map_column('a', counting)
		first = table.records()
		second = table.records()
		assert first == second
		assert calls == ['1', '3']

	def test_row_views_share_record_cache(self, table):
		calls = []
		table.map_column('b', lambda v: calls.append(v) or v)
		for row in table.cells_rows()[1:]:
			row.to_record()
		table.records()
		assert calls == ['2', '4']
