"""Loader → engine conversion.

Turns plain Python data (records, column dicts, DataFrames, CSV files) into
the column and row definitions the grid loads.
"""

from __future__ import annotations

import csv
import math
import re

from collections.abc import Mapping
from datetime import date, datetime
from pathlib import Path
from typing import Any

from .log import debug, warn
from .models import ColumnDefinition, DataType


_INTEGER_TEXT_RE = re.compile(r"^[+-]?\d+$")
_DOUBLE_TEXT_RE = re.compile(r"^[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?$")
_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# Sample size for type inference
_SAMPLE_ROWS = 100


def _serialize_value(value: Any) -> Any:
    """Convert a single value to a plain Python value the engine can coerce.

    Handles:
    - datetime.datetime / pandas Timestamp → ISO date string
    - datetime.date → ISO date string
    - numpy scalars → Python native types
    - NaN/NaT → None
    """
    if value is None:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    # pandas NaT compares unequal to itself
    if type(value).__name__ == "NaTType":
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if hasattr(value, "item") and callable(value.item):
        try:
            return _serialize_value(value.item())
        except (TypeError, ValueError):
            return value
    return value


def _serialize_row(row: Mapping[str, Any]) -> dict[str, Any]:
    return {str(k): _serialize_value(v) for k, v in row.items()}


def normalize_rows(data: Any) -> tuple[list[str], list[dict[str, Any]]]:
    """Convert various data formats to column names and records.

    Handles:
    - pandas DataFrame (duck typed: ``to_dict`` and ``columns``)
    - list of dicts: [{'a': 1}, {'a': 2}]
    - dict of lists: {'a': [1, 2], 'b': [3, 4]}
    - single dict: {'a': 1, 'b': 2}

    Returns
    -------
    tuple[list[str], list[dict[str, Any]]]
        Column names in order and one dict per row.
    """
    records: list[dict[str, Any]] = []
    columns: list[str] = []

    try:
        if hasattr(data, "to_dict") and hasattr(data, "columns"):
            records = data.to_dict(orient="records")
            columns = [str(col) for col in data.columns]
        elif isinstance(data, dict):
            first_value = next(iter(data.values()), None)
            columns = [str(col) for col in data]
            if isinstance(first_value, (list, tuple)):
                num_rows = len(first_value)
                records = [{col: data[col][i] for col in data} for i in range(num_rows)]
            else:
                records = [data]
        elif data is not None:
            records = list(data)
            if records and isinstance(records[0], dict):
                columns = [str(col) for col in records[0]]
    except (ValueError, TypeError, IndexError) as e:
        warn(f"Failed to convert data: {e}")
        return [], []

    if records and not isinstance(records[0], dict):
        warn(f"Unsupported row type {type(records[0]).__name__}; expected dict rows")
        return [], []

    # Columns first seen in later rows go after the first row's columns
    seen = set(columns)
    for record in records:
        for key in record:
            if str(key) not in seen:
                seen.add(str(key))
                columns.append(str(key))

    debug(f"Normalized {len(records)} rows with {len(columns)} columns")
    return columns, [_serialize_row(record) for record in records]


def _infer_from_text(values: list[str]) -> DataType:
    if all(v.lower() in ("true", "false") for v in values):
        return DataType.BOOLEAN
    if all(_INTEGER_TEXT_RE.match(v) for v in values):
        # Leading zeros mean an identifier (zip code, account number), not a number
        if any(len(v.lstrip("+-")) > 1 and v.lstrip("+-").startswith("0") for v in values):
            return DataType.STRING
        return DataType.INTEGER
    if all(_DOUBLE_TEXT_RE.match(v) for v in values):
        return DataType.DOUBLE
    if all(_ISO_DATE_RE.match(v) for v in values):
        return DataType.DATE
    return DataType.STRING


def infer_datatype(values: list[Any], parse_strings: bool = False) -> DataType:
    """Guess a column datatype from sample values (None values ignored).

    Parameters
    ----------
    values : list[Any]
        Sample of the column's values.
    parse_strings : bool
        Also recognize numbers, booleans and ISO dates written as text,
        as found in CSV files.
    """
    present = [v for v in values if v is not None and v != ""]
    if not present:
        return DataType.STRING

    first = present[0]
    if isinstance(first, bool):
        return DataType.BOOLEAN
    if isinstance(first, int):
        if all(isinstance(v, int) and not isinstance(v, bool) for v in present):
            return DataType.INTEGER
        return DataType.DOUBLE
    if isinstance(first, float):
        return DataType.DOUBLE
    if isinstance(first, str):
        if parse_strings and all(isinstance(v, str) for v in present):
            return _infer_from_text([v.strip() for v in present])
        if _ISO_DATE_RE.match(first) and all(
            isinstance(v, str) and _ISO_DATE_RE.match(v) for v in present
        ):
            return DataType.DATE
    return DataType.STRING


def infer_column_definitions(
    columns: list[str],
    rows: list[dict[str, Any]],
    column_types: Mapping[str, str] | None = None,
    parse_strings: bool = False,
) -> list[ColumnDefinition]:
    """Build column definitions, inferring datatypes not given explicitly.

    Explicit ``column_types`` entries are type descriptors such as
    ``"double(€,2)"`` and are passed through untouched.
    """
    column_types = dict(column_types or {})
    unknown = set(column_types) - set(columns)
    if unknown:
        warn(f"Column types given for unknown columns: {', '.join(sorted(unknown))}")

    sample = rows[:_SAMPLE_ROWS]
    definitions = []
    for name in columns:
        datatype = column_types.get(name)
        if datatype is None:
            datatype = infer_datatype([row.get(name) for row in sample], parse_strings).value
        definitions.append(ColumnDefinition(name=name, datatype=datatype))
    return definitions


def read_csv(path: str | Path, delimiter: str = ",") -> tuple[list[str], list[dict[str, Any]]]:
    """Read a CSV file with a header line into column names and records."""
    with Path(path).open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f, delimiter=delimiter)
        records = [dict(row) for row in reader]
        columns = list(reader.fieldnames or [])
    debug(f"Read {len(records)} rows from {path}")
    return columns, records
