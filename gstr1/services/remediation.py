from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..config.loader import ImportConfig, default_config
from ..models.invoice import ErrorRow, Invoice, InvoiceRow, Note
from ..models.processing_result import ProcessingResult
from .kinds import DocumentKind
from .normalize import normalize_row
from .validation import RowValidator

"""Error remediation: fix rejected rows after the fact.

Every rejected row starts as REJECTED. ``promote`` re-runs the normalizer and
validator over caller-edited data; on success a new single-line aggregate is
appended to the result (never folded into an existing document with the same
key). ``discard`` drops the row. A promoted row cannot go back.
"""

__all__ = [
    "RemediationError",
    "RowState",
    "RemediationEntry",
    "RemediationLoop",
]

logger = logging.getLogger(__name__)


class RemediationError(Exception):
    pass


class RowState(Enum):
    REJECTED = "rejected"
    PROMOTED = "promoted"


@dataclass
class RemediationEntry:
    error: ErrorRow
    state: RowState = RowState.REJECTED


class RemediationLoop:
    """Tracks the rejected rows of one ProcessingResult and edits it in place."""

    def __init__(
        self,
        result: ProcessingResult,
        kind: DocumentKind,
        config: ImportConfig | None = None,
    ) -> None:
        self.result = result
        self.kind = kind
        self.config = config or default_config()
        self._validator = RowValidator(kind, self.config.rate_slabs, self.config.split_half_rate)
        self.entries: list[RemediationEntry] = [RemediationEntry(e) for e in result.errors]

    @property
    def pending(self) -> list[RemediationEntry]:
        return [e for e in self.entries if e.state is RowState.REJECTED]

    def _entry(self, index: int) -> RemediationEntry:
        try:
            entry = self.entries[index]
        except IndexError:
            raise RemediationError(f"no rejected row at index {index}") from None
        if entry.state is RowState.PROMOTED:
            raise RemediationError(f"row {entry.error.row_number} was already promoted")
        return entry

    def promote(self, index: int, edited: Mapping[str, Any]) -> list[str]:
        """Re-validate edited data; returns [] on success, else the new messages."""
        entry = self._entry(index)
        cleaned = normalize_row(edited, self.kind, self.config.rate_slabs, self.config.split_half_rate)
        outcome = self._validator.validate(cleaned)
        if not outcome.ok:
            return outcome.messages

        record = outcome.record
        aggregate = Invoice.from_row(record) if isinstance(record, InvoiceRow) else Note.from_row(record)
        self.result.aggregates.append(aggregate)
        entry.state = RowState.PROMOTED
        if entry.error in self.result.errors:
            self.result.errors.remove(entry.error)
        self.result.summary.valid += 1
        self.result.summary.error -= 1
        logger.info("promoted row %d as %s %s", entry.error.row_number, self.kind.name, record.document_number)
        return []

    def discard(self, index: int) -> None:
        """Drop a rejected row. Later entries move down one index."""
        entry = self._entry(index)
        self.entries.pop(index)
        if entry.error in self.result.errors:
            self.result.errors.remove(entry.error)
        self.result.summary.error -= 1
        self.result.summary.total -= 1
