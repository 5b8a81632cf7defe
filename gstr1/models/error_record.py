from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

from .invoice import ErrorRow

"""One line of the JSON Lines error log.

Field set and formats are fixed by gstr1/contracts/error_log_schema.json:
no extra keys, ``row`` is the 1-based source row or -1 when the whole
document failed, ``error_type`` is UPPER_SNAKE.
"""

__all__ = [
    "ErrorRecord",
    "ROW_VALIDATION",
    "DUPLICATE_DOCUMENT",
    "FILE_LEVEL_ROW",
    "FILE_LEVEL_SHEET",
]

ROW_VALIDATION = "ROW_VALIDATION"
DUPLICATE_DOCUMENT = "DUPLICATE_DOCUMENT"
FILE_LEVEL_ROW = -1
FILE_LEVEL_SHEET = "<FILE_LEVEL>"


def _utc_now() -> str:
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


@dataclass(frozen=True)
class ErrorRecord:
    timestamp: str
    file: str
    sheet: str
    row: int
    error_type: str
    message: str

    @classmethod
    def create(cls, file: str, sheet: str, row: int, error_type: str, message: str) -> ErrorRecord:
        """Record stamped with the current UTC time (``...Z``)."""
        return cls(_utc_now(), file, sheet, row, error_type, message)

    @classmethod
    def for_row(cls, file: str, sheet: str, error: ErrorRow) -> ErrorRecord:
        """Rejected row; all of its messages joined with ``"; "``."""
        duplicate = any(m.startswith("Duplicate ") for m in error.messages)
        return cls.create(
            file,
            sheet,
            error.row_number,
            DUPLICATE_DOCUMENT if duplicate else ROW_VALIDATION,
            "; ".join(error.messages),
        )

    @classmethod
    def for_file(cls, file: str, error_type: str, message: str) -> ErrorRecord:
        return cls.create(file, FILE_LEVEL_SHEET, FILE_LEVEL_ROW, error_type, message)

    def to_json_line(self) -> str:
        return json.dumps(asdict(self), ensure_ascii=False)
