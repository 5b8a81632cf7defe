from __future__ import annotations

import json
from pathlib import Path

import jsonschema
import pytest

from gstr1.logging.error_log import ErrorLogBuffer, ErrorRecord
from gstr1.models.invoice import ErrorRow
from gstr1.services.orchestrator import FILE_LEVEL_SHEET

"""Error log JSON schema contract (gstr1/contracts/error_log_schema.json)."""

SCHEMA_PATH = Path(__file__).resolve().parents[2] / "gstr1" / "contracts" / "error_log_schema.json"


@pytest.fixture(scope="module")
def schema() -> dict:
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


def test_error_log_schema_valid_example(schema):
    record = {
        "timestamp": "2025-02-03T10:12:33Z",
        "file": "sales.xlsx",
        "sheet": "B2B Sales",
        "row": 4,
        "error_type": "ROW_VALIDATION",
        "message": "gstin - Invalid GSTIN format",
    }
    jsonschema.validate(record, schema)


def test_error_log_schema_rejects_extra_key(schema):
    record = {
        "timestamp": "2025-02-03T10:12:33Z",
        "file": "sales.xlsx",
        "sheet": "B2B Sales",
        "row": 4,
        "error_type": "ROW_VALIDATION",
        "message": "gstin - Invalid GSTIN format",
        "extra": "not allowed",
    }
    with pytest.raises(jsonschema.exceptions.ValidationError):
        jsonschema.validate(record, schema)


def test_error_log_schema_rejects_lowercase_error_type(schema):
    record = ErrorRecord.create("a.xlsx", "Sales", 2, "row_validation", "x")
    with pytest.raises(jsonschema.exceptions.ValidationError):
        jsonschema.validate(json.loads(record.to_json_line()), schema)


def test_file_level_record_uses_unknown_row(schema):
    record = ErrorRecord.create("broken.xlsx", FILE_LEVEL_SHEET, -1, "CORRUPT_FILE", "invalid or corrupted .xlsx file")
    data = json.loads(record.to_json_line())
    jsonschema.validate(data, schema)
    assert data["row"] == -1
    assert data["sheet"] == "<FILE_LEVEL>"


def test_flushed_records_match_schema(schema, tmp_path: Path):
    buf = ErrorLogBuffer(tmp_path)
    buf.append_rows(
        "sales.xlsx",
        "B2B Sales",
        [
            ErrorRow(5, {"gstin": "BAD"}, ["gstin - Invalid GSTIN format", "rate - Required"], "sales.xlsx"),
            ErrorRow(6, {}, ["Duplicate Invoice Number: INV-1 already exists."], "sales.xlsx"),
        ],
    )
    path = buf.flush()
    assert path is not None
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    for line in lines:
        jsonschema.validate(json.loads(line), schema)
    assert json.loads(lines[0])["message"] == "gstin - Invalid GSTIN format; rate - Required"
    assert json.loads(lines[1])["error_type"] == "DUPLICATE_DOCUMENT"
