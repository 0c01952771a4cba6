"""I/O helpers: read problem records from json, jsonl, parquet and csv files."""

import json
import os
from typing import Any, Dict, List

import pandas as pd

# Columns whose csv/parquet cells may hold nested JSON.
_NESTED_FIELDS = ("variables", "constraints", "edges", "goals", "initial")


def _decode_nested(record: Dict[str, Any]) -> Dict[str, Any]:
    for key in _NESTED_FIELDS:
        value = record.get(key)
        if isinstance(value, str) and value.strip()[:1] in ("{", "[", '"'):
            try:
                record[key] = json.loads(value)
            except json.JSONDecodeError:
                continue
        elif hasattr(value, "tolist"):
            record[key] = value.tolist()
    return record


def _read_json_lines(file_path: str) -> List[Dict[str, Any]]:
    data = []
    with open(file_path, "r", encoding="utf-8") as f:
        for line in f:
            if not line.strip():
                continue
            try:
                obj = json.loads(line)
            except json.JSONDecodeError:
                continue
            if isinstance(obj, dict):
                data.append(obj)
    return data


def load_records(file_path: str) -> List[Dict[str, Any]]:
    """
    Read problem records from a file.
    Handles .json (object or array), .jsonl, .parquet and .csv.
    Returns a list of raw record dictionaries.
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")

    # Tabular files (binary parquet or csv)
    if file_path.endswith((".parquet", ".csv")):
        if file_path.endswith(".parquet"):
            df = pd.read_parquet(file_path)
        else:
            df = pd.read_csv(file_path, dtype=str, keep_default_na=False)
        records = df.to_dict(orient="records")
        return [_decode_nested(r) for r in records]

    if file_path.endswith(".json"):
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except json.JSONDecodeError:
            # Some sources use ".json" but actually store JSONL.
            return _read_json_lines(file_path)
        if isinstance(payload, list):
            return [p for p in payload if isinstance(p, dict)]
        if isinstance(payload, dict):
            return [payload]
        return []

    return _read_json_lines(file_path)
