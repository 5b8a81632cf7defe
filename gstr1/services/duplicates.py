from __future__ import annotations

from ..models.invoice import Invoice, InvoiceRow, Note, NoteRow

"""Cross-document duplicate detection.

The tracker is an explicit accumulator: the caller creates it and passes the
same instance to every document call that should share duplicate scope
(one per batch, or one per file). Nothing is kept at module level.
"""

__all__ = [
    "DuplicateTracker",
]


class DuplicateTracker:
    """Upper-cased document numbers seen so far, with their owning document.

    The counterparty GSTIN is not part of the key: a document number may
    appear only once per supplier and period. Further lines of the owning
    document (same source and the exact same natural key) are continuation
    lines and are accepted.

    Not thread-safe.
    """

    def __init__(self) -> None:
        self._owners: dict[str, tuple[str, tuple[str, str]]] = {}

    @staticmethod
    def key(document_number: str) -> str:
        return document_number.strip().upper()

    def register(self, record: InvoiceRow | NoteRow | Invoice | Note, source: str) -> bool:
        """Claim the record's document number. False means duplicate.

        Imported aggregates register the same way as validated rows.
        """
        key = self.key(record.document_number)
        owner = (source, record.natural_key)
        existing = self._owners.get(key)
        if existing is None:
            self._owners[key] = owner
            return True
        return existing == owner

    def __contains__(self, document_number: object) -> bool:
        return isinstance(document_number, str) and self.key(document_number) in self._owners

    def __len__(self) -> int:
        return len(self._owners)

    def reset(self) -> None:
        self._owners.clear()
