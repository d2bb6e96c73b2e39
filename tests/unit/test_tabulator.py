"""Unit tests for the two-pass tabulator pipeline."""

import pytest

from row_spreader.config import Config
from row_spreader.errors import JsonLineError, SchemaNotCompiledError
from row_spreader.paths.base import ITERATOR, Key
from row_spreader.paths.combine import CombineMode
from row_spreader.tabulator import Table, Tabulator, tabulate_documents


def k(name):
    return Key(name=name)


class TestScenarios:
    """End-to-end conversions of small documents."""

    def test_scalar_and_array(self):
        """Test one scalar field and one scalar array, union mode."""
        table = tabulate_documents([{"a": 1, "b": [2, 3]}])

        assert table.columns == ["a", "b.$"]
        assert table.rows == [["1", "2"], ["1", "3"]]

    def test_scalar_and_array_flattened(self):
        """Test flatten mode drops the iterator from the column name."""
        table = tabulate_documents([{"a": 1, "b": [2, 3]}], flatten=True)

        assert table.columns == ["a", "b"]
        assert table.rows == [["1", "2"], ["1", "3"]]

    def test_intersect_keeps_common_fields(self):
        """Test intersect seeds from the first document, then narrows."""
        # Header is the true intersection; both columns appear only in union mode
        # (DESIGN.md decision 2).
        documents = [{"a": 1}, {"a": 1, "b": 2}]

        table = tabulate_documents(documents, combine_mode=CombineMode.INTERSECT)

        assert table.columns == ["a"]
        assert table.rows == [["1"], ["1"]]

    def test_union_keeps_all_fields(self):
        """Test union mode renders fields missing from a document as blanks."""
        table = tabulate_documents([{"a": 1}, {"a": 1, "b": 2}])

        assert table.columns == ["a", "b"]
        assert table.rows == [["1", ""], ["1", "2"]]

    def test_intersect_ignores_empty_document(self):
        """Test a document without content neither erases the header nor emits rows."""
        documents = [{"a": 1, "b": 2}, {}, {"a": 3, "c": 4}]

        table = tabulate_documents(documents, combine_mode=CombineMode.INTERSECT)

        assert table.columns == ["a"]
        assert table.rows == [["1"], ["3"]]

    def test_nested_array_times_array(self):
        """Test two arrays in different branches give every combination."""
        table = tabulate_documents([{"x": {"y": [1, 2]}, "z": [10, 20]}])

        assert table.columns == ["x.y.$", "z.$"]
        assert table.rows == [["1", "10"], ["2", "10"], ["1", "20"], ["2", "20"]]


class TestRowCounts:
    """Row multiplication properties."""

    def test_no_arrays_gives_one_row(self):
        """Test a document without arrays gives exactly one row."""
        documents = [{"a": 1, "b": {"c": "x"}}, {"d": True}]

        table = tabulate_documents(documents)

        assert table.columns == ["a", "b.c", "d"]
        assert table.rows == [["1", "x", ""], ["", "", "true"]]

    def test_one_array_gives_n_rows(self):
        """Test an array of length n gives n rows with other fields constant."""
        table = tabulate_documents([{"id": 7, "tags": ["p", "q", "r"], "name": "seven"}])

        assert len(table.rows) == 3
        id_col = table.columns.index("id")
        name_col = table.columns.index("name")
        tag_col = table.columns.index("tags.$")
        assert {row[id_col] for row in table.rows} == {"7"}
        assert {row[name_col] for row in table.rows} == {"seven"}
        assert [row[tag_col] for row in table.rows] == ["p", "q", "r"]

    def test_two_arrays_give_m_times_n_rows(self):
        """Test the Cartesian law for independent arrays."""
        table = tabulate_documents([{"p": [1, 2], "q": [3, 4, 5], "c": 0}])

        assert len(table.rows) == 6
        assert len({tuple(row) for row in table.rows}) == 6

    def test_array_of_objects(self):
        """Test each object of an array becomes its own row."""
        document = {"id": 1, "items": [{"sku": "a", "qty": 2}, {"sku": "b"}]}

        table = tabulate_documents([document])

        assert table.columns == ["id", "items.$.sku", "items.$.qty"]
        assert table.rows == [["1", "a", "2"], ["1", "b", ""]]

    def test_document_without_content_gives_no_rows(self):
        """Test a document with nothing extractable yields zero rows."""
        table = tabulate_documents([{"a": 1}, {"b": None}, {"a": 2}])

        assert table.columns == ["a"]
        assert table.rows == [["1"], ["2"]]

    def test_empty_array_drops_out(self):
        """Test an empty array does not suppress the rest of the row."""
        table = tabulate_documents([{"a": 1, "b": [2]}, {"a": 3, "b": []}])

        assert table.rows == [["1", "2"], ["3", ""]]

    def test_shape_mismatch_renders_blank(self):
        """Test a scalar where the header expects an array renders blank, not an error."""
        tabulator = Tabulator().compile([(k("a"),), (k("b"), ITERATOR)])

        assert tabulator.rows({"a": 3, "b": 4}) == [["3", ""]]
        assert tabulator.rows({"a": 3, "b": {"c": 4}}) == [["3", ""]]
        assert tabulator.rows({"a": [3], "b": [5]}) == [["", "5"]]


class TestTabulator:
    """Tests for the Tabulator object itself."""

    def test_columns_before_compile(self):
        """Test asking for columns before compiling fails."""
        with pytest.raises(SchemaNotCompiledError):
            _ = Tabulator().columns

    def test_rows_before_compile(self):
        """Test asking for rows before compiling fails."""
        with pytest.raises(SchemaNotCompiledError):
            Tabulator().rows({"a": 1})

    def test_compile_from_precomputed_header(self):
        """Test a caller-supplied header skips discovery."""
        tabulator = Tabulator().compile([(k("b"),), (k("a"), ITERATOR), (k("b"),)])

        assert tabulator.is_compiled
        assert tabulator.columns == ["b", "a.$"]
        assert tabulator.rows({"a": [1, 2], "b": "x", "c": "ignored"}) == [["x", "1"], ["x", "2"]]

    def test_build_header(self):
        """Test header discovery across documents."""
        header = Tabulator().build_header([{"a": 1}, {"b": [1]}])

        assert header == [(k("a"),), (k("b"), ITERATOR)]

    def test_workers_preserve_order(self):
        """Test a thread pool produces the same rows as inline processing."""
        documents = [{"n": n, "v": list(range(n % 4))} for n in range(50)]

        sequential = Tabulator().tabulate(documents)
        threaded = Tabulator(workers=4).tabulate(documents)

        assert threaded == sequential

    def test_from_config(self):
        """Test building a tabulator from settings."""
        config = Config(flatten=True, combine_mode="intersect", workers=3)

        tabulator = Tabulator.from_config(config)

        assert tabulator.flatten is True
        assert tabulator.combine_mode == CombineMode.INTERSECT
        assert tabulator.workers == 3

    def test_tabulate_returns_table(self):
        """Test the result model."""
        table = Tabulator().tabulate(iter([{"a": "x"}]))

        assert table == Table(columns=["a"], rows=[["x"]])


class TestFiles:
    """Tests for converting NDJSON files."""

    def test_convert_file(self, tmp_path):
        """Test the header line followed by one line per row."""
        source = tmp_path / "input.jsonl"
        source.write_text('{"a":1,"b":[2,3]}\n{"a":4}\n')
        target = tmp_path / "output.csv"

        count = Tabulator().convert_file(source, target)

        assert count == 3
        assert target.read_text() == "a;b.$\n1;2\n1;3\n4;\n"

    def test_convert_file_custom_separator(self, tmp_path):
        """Test writing with another separator."""
        source = tmp_path / "input.jsonl"
        source.write_text('{"a":1,"b":"x,y"}\n')
        target = tmp_path / "output.csv"

        Tabulator().convert_file(source, target, separator=",")

        assert target.read_text() == 'a,b\n1,"x,y"\n'

    def test_convert_file_malformed_line(self, tmp_path):
        """Test an unparseable line aborts the conversion."""
        source = tmp_path / "input.jsonl"
        source.write_text('{"a":1}\n{"a":\n')
        target = tmp_path / "output.csv"

        with pytest.raises(JsonLineError) as exc_info:
            Tabulator().convert_file(source, target)

        assert exc_info.value.line_number == 2
        assert str(source) in str(exc_info.value)
