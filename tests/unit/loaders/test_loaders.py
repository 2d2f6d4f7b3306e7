"""
Unit tests for the CSV and JSON row sources.
"""

import pytest

from field_profiler.core.exceptions import DataLoadError, UnsupportedFormatError
from field_profiler.loaders import CSVLoader, JSONLoader, LoaderFactory, load_rows
from field_profiler.loaders.csv_loader import detect_delimiter
from field_profiler.profiler.values import classify_value


@pytest.fixture
def write_file(tmp_path):
    """Write text to a file in the test directory and return its path."""
    def _write(name, content):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write


class TestCSVLoader:

    def test_cells_are_text(self, write_file):
        path = write_file("data.csv", "id,name,amount\n1,Ann,007\n2,,3.5\n")
        rows = CSVLoader(path).load_rows()

        assert rows == [
            {"id": "1", "name": "Ann", "amount": "007"},
            {"id": "2", "name": "", "amount": "3.5"},
        ]

    def test_delimiter_detection(self, write_file):
        path = write_file("data.csv", "a;b\n1;2\n3;4\n")

        assert detect_delimiter(path) == ";"
        assert CSVLoader(path).load_rows() == [{"a": "1", "b": "2"}, {"a": "3", "b": "4"}]

    def test_explicit_delimiter(self, write_file):
        path = write_file("data.tsv", "a\tb\n1\t2\n")
        assert CSVLoader(path, delimiter="\t").load_rows() == [{"a": "1", "b": "2"}]

    def test_null_tokens(self, write_file):
        path = write_file("data.csv", "x\nNA\n1\n")
        rows = CSVLoader(path, null_values=["NA"]).load_rows()

        assert rows == [{"x": None}, {"x": "1"}]

    def test_empty_file(self, write_file):
        assert CSVLoader(write_file("empty.csv", "")).load_rows() == []

    def test_header_only(self, write_file):
        assert CSVLoader(write_file("header.csv", "a,b\n")).load_rows() == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(DataLoadError, match="Data file not found"):
            CSVLoader(str(tmp_path / "missing.csv")).load_rows()

    def test_metadata(self, write_file):
        metadata = CSVLoader(write_file("data.csv", "a\n1\n")).get_metadata()

        assert metadata["file_size_bytes"] == 4
        assert not metadata["is_empty"]


class TestJSONLoader:

    def test_array_of_records(self, write_file):
        path = write_file("data.json", '[{"a": 1, "b": "x"}, {"a": null, "b": "y"}]')
        rows = JSONLoader(path).load_rows()

        assert len(rows) == 2
        assert rows[0]["b"] == "x"
        assert classify_value(rows[0]["a"]).text == "1"
        assert rows[1]["a"] is None

    def test_json_lines(self, write_file):
        path = write_file("data.jsonl", '{"a": "2024-01-01"}\n{"a": "2024-01-02"}\n')
        rows = JSONLoader(path).load_rows()

        assert rows == [{"a": "2024-01-01"}, {"a": "2024-01-02"}]

    def test_invalid_json(self, write_file):
        with pytest.raises(DataLoadError, match="JSON parsing error"):
            JSONLoader(write_file("bad.json", "{not json")).load_rows()


class TestLoaderFactory:

    @pytest.mark.parametrize("name,expected", [
        ("data.csv", "csv"),
        ("data.TSV", "csv"),
        ("data.json", "json"),
        ("data.jsonl", "json"),
    ])
    def test_detect_format(self, name, expected):
        assert LoaderFactory.detect_format(name) == expected

    def test_unsupported_extension(self):
        with pytest.raises(UnsupportedFormatError) as exc_info:
            LoaderFactory.detect_format("table.qvd")

        assert exc_info.value.details["format"] == "qvd"
        assert "Supported: csv, json" in exc_info.value.message

    def test_explicit_format_overrides_extension(self, write_file):
        path = write_file("data.txt", '[{"a": "x"}]')
        assert isinstance(LoaderFactory.create_loader(path, "json"), JSONLoader)

    def test_unknown_explicit_format(self, write_file):
        path = write_file("data.csv", "a\n1\n")
        with pytest.raises(UnsupportedFormatError):
            LoaderFactory.create_loader(path, "parquet")

    def test_load_rows(self, write_file):
        path = write_file("data.csv", "a\n1\n2\n")
        assert load_rows(path) == [{"a": "1"}, {"a": "2"}]
