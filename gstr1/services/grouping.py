from __future__ import annotations

from collections.abc import Iterable

from ..models.invoice import Invoice, InvoiceRow, Note, NoteRow
from ..models.processing_result import Aggregate

"""Folding validated line rows into invoice / note aggregates.

One aggregate per natural key (gstin, document number), in first-seen order.
The first line seeds the aggregate and its declared value; every later line
is appended and added to the running totals. What happens to the declared
value on later lines depends on the value mode:

- ``incremental``: the later line's total (taxable + taxes) is added to the
  declared value, the first row's declared value being taken as the first
  line's share
- ``recompute``: the declared value is always the sum of the line totals
"""

__all__ = [
    "VALUE_MODES",
    "Grouper",
    "group_rows",
]

VALUE_MODES = ("incremental", "recompute")


class Grouper:
    def __init__(self, value_mode: str = "incremental") -> None:
        if value_mode not in VALUE_MODES:
            raise ValueError(f"unknown invoice value mode: {value_mode!r}")
        self.value_mode = value_mode
        self._by_key: dict[tuple[str, str], Aggregate] = {}

    def add(self, row: InvoiceRow | NoteRow) -> Aggregate:
        aggregate = self._by_key.get(row.natural_key)
        if aggregate is None:
            aggregate = Invoice.from_row(row) if isinstance(row, InvoiceRow) else Note.from_row(row)
            if self.value_mode == "recompute":
                aggregate.declared_value = aggregate.line_totals
            self._by_key[row.natural_key] = aggregate
            return aggregate

        item = row.to_line_item()
        aggregate.add_line(item)
        if self.value_mode == "recompute":
            aggregate.declared_value = aggregate.line_totals
        else:
            aggregate.declared_value += item.line_total
        return aggregate

    @property
    def aggregates(self) -> list[Aggregate]:
        return list(self._by_key.values())


def group_rows(rows: Iterable[InvoiceRow | NoteRow], value_mode: str = "incremental") -> list[Aggregate]:
    grouper = Grouper(value_mode)
    for row in rows:
        grouper.add(row)
    return grouper.aggregates
