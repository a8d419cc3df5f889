"""Unit tests for CSV to JSON conversion"""

import json
import logging
import pytest
from toolhub.domain.csv_convert import convert_csv_to_json, csv_to_records


def test_rows_keyed_by_header():
    records, skipped = csv_to_records("name,age\nAlice,30\nBob,25")

    assert records == [{"name": "Alice", "age": "30"}, {"name": "Bob", "age": "25"}]
    assert skipped == []


def test_quoted_fields_keep_commas_and_unescape_quotes():
    records, _ = csv_to_records('name,quote\n"Smith, J","He said ""hi"""')

    assert records == [{"name": "Smith, J", "quote": 'He said "hi"'}]


def test_crlf_line_endings():
    records, _ = csv_to_records("a,b\r\n1,2\r\n3,4\r\n")

    assert records == [{"a": "1", "b": "2"}, {"a": "3", "b": "4"}]


def test_fields_are_trimmed():
    records, _ = csv_to_records("  name , city \n Ann ,  Paris  ")

    assert records == [{"name": "Ann", "city": "Paris"}]


def test_blank_lines_are_skipped():
    records, skipped = csv_to_records("a,b\n\n1,2\n   \n3,4\n\n")

    assert records == [{"a": "1", "b": "2"}, {"a": "3", "b": "4"}]
    assert skipped == []


def test_column_mismatch_row_is_dropped(caplog):
    with caplog.at_level(logging.WARNING, logger="toolhub.domain.csv_convert"):
        records, skipped = csv_to_records("a,b\n1,2\n1,2,3\n4,5\n6")

    assert records == [{"a": "1", "b": "2"}, {"a": "4", "b": "5"}]
    assert skipped == [3, 5]
    assert "Skipping line 3 due to column mismatch: expected 2, got 3" in caplog.text
    assert "Skipping line 5 due to column mismatch: expected 2, got 1" in caplog.text


def test_multiline_quoted_field_keeps_line_numbers():
    records, skipped = csv_to_records('a,b\n"line1\nline2",x\n1,2,3')

    assert records == [{"a": "line1\nline2", "b": "x"}]
    assert skipped == [4]


@pytest.mark.parametrize("csv_text", ["", "   \n  ", "a,b", "a,b\n\n"])
def test_no_data_rows(csv_text):
    result = convert_csv_to_json(csv_text)

    assert result.records == []
    assert result.json_text == "[]"


def test_json_text_is_indented():
    result = convert_csv_to_json("a\n1")

    assert result.json_text == '[\n  {\n    "a": "1"\n  }\n]'
    assert json.loads(result.json_text) == result.records


def test_non_ascii_values_are_kept():
    result = convert_csv_to_json("city\nZürich")

    assert "Zürich" in result.json_text
