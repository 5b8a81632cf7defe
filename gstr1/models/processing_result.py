from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Union

from .invoice import ErrorRow, Invoice, Note

"""Processing result models for the GSTR-1 return builder.

A ProcessingResult is what a pipeline entry point hands back to its caller:
``{aggregates, errors, summary}`` plus per-file statistics. It stays mutable
because the error remediation loop promotes and discards rows in place.
"""

__all__ = [
    "Aggregate",
    "FileStat",
    "ValidationSummary",
    "ProcessingResult",
]

Aggregate = Union[Invoice, Note]


@dataclass(frozen=True)
class FileStat:
    """Per-file processing statistics."""
    file_name: str
    status: str  # success/failed
    rows: int  # Data rows read from the document
    valid_rows: int
    error_rows: int
    elapsed_seconds: float
    sheet: str | None = None  # Sheet actually used (None for csv/json or missing sheet)
    header_confident: bool = True
    error: str | None = None  # Failure reason for failed files


@dataclass
class ValidationSummary:
    """Row counters: total = valid + error."""
    total: int = 0
    valid: int = 0
    error: int = 0

    def merge(self, other: ValidationSummary) -> None:
        self.total += other.total
        self.valid += other.valid
        self.error += other.error


@dataclass
class ProcessingResult:
    """Aggregates, rejected rows and counters for one document or batch."""
    kind: str  # "B2B" or "CDNR"
    aggregates: list[Aggregate] = field(default_factory=list)
    errors: list[ErrorRow] = field(default_factory=list)
    summary: ValidationSummary = field(default_factory=ValidationSummary)
    file_stats: list[FileStat] = field(default_factory=list)
    start_time: datetime = field(default_factory=lambda: datetime.now(UTC))
    end_time: datetime | None = None
    # Populated when a previously exported return is imported
    source_gstin: str | None = None
    source_filing_period: str | None = None

    @property
    def success_files(self) -> int:
        return sum(1 for s in self.file_stats if s.status == "success")

    @property
    def failed_files(self) -> int:
        return sum(1 for s in self.file_stats if s.status == "failed")

    @property
    def elapsed_seconds(self) -> float:
        if self.end_time is None:
            return 0.0
        return (self.end_time - self.start_time).total_seconds()

    def merge(self, other: ProcessingResult) -> None:
        """Fold another document's result into this batch result."""
        self.aggregates.extend(other.aggregates)
        self.errors.extend(other.errors)
        self.summary.merge(other.summary)
        self.file_stats.extend(other.file_stats)
        if other.source_gstin and not self.source_gstin:
            self.source_gstin = other.source_gstin
            self.source_filing_period = other.source_filing_period
