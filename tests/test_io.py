"""Tests for record loading."""

import json

import pandas as pd
import pytest

from src.utils.io import load_records

CSP_ROW = {
    "id": "p1",
    "kind": "csp",
    "variables": {"A": [1, 2], "B": [1, 2]},
    "constraints": [{"type": "not_equal", "scope": ["A", "B"]}],
}


def test_load_json_object_and_array(tmp_path):
    single = tmp_path / "one.json"
    single.write_text(json.dumps(CSP_ROW))
    many = tmp_path / "many.json"
    many.write_text(json.dumps([CSP_ROW, {"id": "p2"}, "not a record"]))

    assert load_records(str(single)) == [CSP_ROW]
    assert [r["id"] for r in load_records(str(many))] == ["p1", "p2"]


def test_json_file_holding_lines_falls_back(tmp_path):
    path = tmp_path / "lines.json"
    path.write_text(json.dumps(CSP_ROW) + "\n" + json.dumps({"id": "p2"}) + "\n")
    assert [r["id"] for r in load_records(str(path))] == ["p1", "p2"]


def test_jsonl_skips_blank_and_broken_lines(tmp_path):
    path = tmp_path / "records.jsonl"
    path.write_text(json.dumps(CSP_ROW) + "\n\n{broken\n")
    assert load_records(str(path)) == [CSP_ROW]


def test_csv_decodes_nested_json_columns(tmp_path):
    path = tmp_path / "records.csv"
    row = {key: json.dumps(value) if isinstance(value, (dict, list)) else value for key, value in CSP_ROW.items()}
    pd.DataFrame([row]).to_csv(path, index=False)

    [record] = load_records(str(path))
    assert record == CSP_ROW


def test_parquet_decodes_nested_json_columns(tmp_path):
    pytest.importorskip("pyarrow")
    path = tmp_path / "records.parquet"
    row = {key: json.dumps(value) if isinstance(value, (dict, list)) else value for key, value in CSP_ROW.items()}
    pd.DataFrame([row]).to_parquet(path)

    [record] = load_records(str(path))
    assert record == CSP_ROW


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_records(str(tmp_path / "absent.json"))
