from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime
from pathlib import Path

from ..models.error_record import ErrorRecord
from ..models.invoice import ErrorRow

"""Buffered JSON Lines error log.

Rejected rows and failed documents of one run are collected in memory and
written at the end of the batch to ``logs/errors-YYYYMMDD-HHMMSS.log``
(UTC stamp of the first flush). No file is created for a clean run.
"""

__all__ = [
    "ErrorRecord",
    "ErrorLogBuffer",
]

DEFAULT_LOGS_DIR = Path("logs")
STAMP_FORMAT = "%Y%m%d-%H%M%S"


class ErrorLogBuffer:
    """Not thread-safe; documents are processed strictly in sequence."""

    def __init__(self, logs_dir: Path | None = None) -> None:
        self.logs_dir = logs_dir or DEFAULT_LOGS_DIR
        self._pending: list[ErrorRecord] = []
        self._path: Path | None = None

    @property
    def file_path(self) -> Path:
        """Log file of this run; the name is fixed on first access."""
        if self._path is None:
            stamp = datetime.now(UTC).strftime(STAMP_FORMAT)
            self._path = self.logs_dir / f"errors-{stamp}.log"
        return self._path

    @property
    def records(self) -> list[ErrorRecord]:
        return list(self._pending)

    def append(self, record: ErrorRecord) -> None:
        self._pending.append(record)

    def append_rows(self, file: str, sheet: str, rows: Iterable[ErrorRow]) -> None:
        self._pending.extend(ErrorRecord.for_row(file, sheet, row) for row in rows)

    def __len__(self) -> int:
        return len(self._pending)

    def flush(self) -> Path | None:
        """Append pending records to the log file; None when nothing was pending."""
        if not self._pending:
            return None
        path = self.file_path
        path.parent.mkdir(parents=True, exist_ok=True)
        lines = "".join(record.to_json_line() + "\n" for record in self._pending)
        with path.open("a", encoding="utf-8") as fh:
            fh.write(lines)
        self._pending.clear()
        return path
