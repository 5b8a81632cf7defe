from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Literal

"""Invoice / note domain models for the GSTR-1 return builder.

Typed rows (InvoiceRow, NoteRow) are what the row validator produces for a
single spreadsheet line. Aggregates (Invoice, Note) are what the grouper
folds those lines into: one aggregate per natural key, holding an ordered
list of LineItems plus denormalised running totals.

Invariant: an aggregate's totals equal the sum of the corresponding
LineItem fields at all times. Use ``add_line`` / ``recompute_totals`` rather
than touching the totals directly.
"""

__all__ = [
    "LineItem",
    "InvoiceRow",
    "NoteRow",
    "Invoice",
    "Note",
    "ErrorRow",
]

YesNo = Literal["Y", "N"]


@dataclass(frozen=True)
class LineItem:
    """One classified good/service line within an invoice or note."""
    rate: float
    taxable_value: float
    igst_amount: float = 0.0
    cgst_amount: float = 0.0
    sgst_amount: float = 0.0
    cess_amount: float = 0.0
    hsn_code: str | None = None
    description: str | None = None
    quantity: float | None = None
    unit: str | None = None

    @property
    def tax_amount(self) -> float:
        return self.igst_amount + self.cgst_amount + self.sgst_amount + self.cess_amount

    @property
    def line_total(self) -> float:
        """Taxable value plus every tax category of this line."""
        return self.taxable_value + self.tax_amount


@dataclass(frozen=True)
class InvoiceRow:
    """Validated B2B line (one spreadsheet row)."""
    gstin: str
    invoice_number: str
    invoice_date: str
    invoice_value: float
    place_of_supply: str
    rate: float
    taxable_value: float
    reverse_charge: YesNo = "N"
    igst_amount: float = 0.0
    cgst_amount: float = 0.0
    sgst_amount: float = 0.0
    cess_amount: float = 0.0
    receiver_name: str | None = None
    hsn_code: str | None = None
    description: str | None = None
    quantity: float | None = None
    unit: str | None = None

    @property
    def document_number(self) -> str:
        return self.invoice_number

    @property
    def natural_key(self) -> tuple[str, str]:
        return (self.gstin, self.invoice_number)

    def to_line_item(self) -> LineItem:
        return LineItem(
            rate=self.rate,
            taxable_value=self.taxable_value,
            igst_amount=self.igst_amount,
            cgst_amount=self.cgst_amount,
            sgst_amount=self.sgst_amount,
            cess_amount=self.cess_amount,
            hsn_code=self.hsn_code,
            description=self.description,
            quantity=self.quantity,
            unit=self.unit,
        )


@dataclass(frozen=True)
class NoteRow:
    """Validated CDNR line (one spreadsheet row)."""
    gstin: str
    note_type: Literal["C", "D"]
    note_number: str
    note_date: str
    original_invoice_number: str
    original_invoice_date: str
    place_of_supply: str
    note_value: float
    rate: float
    taxable_value: float
    igst_amount: float = 0.0
    cgst_amount: float = 0.0
    sgst_amount: float = 0.0
    cess_amount: float = 0.0
    pre_gst: YesNo = "N"
    reverse_charge: YesNo = "N"
    receiver_name: str | None = None
    hsn_code: str | None = None
    description: str | None = None
    quantity: float | None = None
    unit: str | None = None

    @property
    def document_number(self) -> str:
        return self.note_number

    @property
    def natural_key(self) -> tuple[str, str]:
        return (self.gstin, self.note_number)

    def to_line_item(self) -> LineItem:
        return LineItem(
            rate=self.rate,
            taxable_value=self.taxable_value,
            igst_amount=self.igst_amount,
            cgst_amount=self.cgst_amount,
            sgst_amount=self.sgst_amount,
            cess_amount=self.cess_amount,
            hsn_code=self.hsn_code,
            description=self.description,
            quantity=self.quantity,
            unit=self.unit,
        )


@dataclass
class _Aggregate:
    """Shared running-total behaviour of Invoice and Note."""
    items: list[LineItem] = field(default_factory=list)
    total_taxable_value: float = 0.0
    total_igst: float = 0.0
    total_cgst: float = 0.0
    total_sgst: float = 0.0
    total_cess: float = 0.0
    total_tax_amount: float = 0.0

    def add_line(self, item: LineItem) -> None:
        """Append a line and increment every running total by its fields."""
        self.items.append(item)
        self.total_taxable_value += item.taxable_value
        self.total_igst += item.igst_amount
        self.total_cgst += item.cgst_amount
        self.total_sgst += item.sgst_amount
        self.total_cess += item.cess_amount
        self.total_tax_amount = self.total_igst + self.total_cgst + self.total_sgst + self.total_cess

    def recompute_totals(self) -> None:
        self.total_taxable_value = sum(i.taxable_value for i in self.items)
        self.total_igst = sum(i.igst_amount for i in self.items)
        self.total_cgst = sum(i.cgst_amount for i in self.items)
        self.total_sgst = sum(i.sgst_amount for i in self.items)
        self.total_cess = sum(i.cess_amount for i in self.items)
        self.total_tax_amount = self.total_igst + self.total_cgst + self.total_sgst + self.total_cess

    @property
    def line_totals(self) -> float:
        return sum(i.line_total for i in self.items)


@dataclass
class Invoice(_Aggregate):
    """B2B invoice aggregate keyed by (gstin, invoice_number)."""
    gstin: str = ""
    invoice_number: str = ""
    invoice_date: str = ""
    invoice_value: float = 0.0
    place_of_supply: str = ""
    reverse_charge: YesNo = "N"
    receiver_name: str | None = None
    id: str = field(default_factory=lambda: f"inv_{uuid.uuid4().hex[:12]}")

    @property
    def document_number(self) -> str:
        return self.invoice_number

    @property
    def declared_value(self) -> float:
        return self.invoice_value

    @declared_value.setter
    def declared_value(self, value: float) -> None:
        self.invoice_value = value

    @property
    def natural_key(self) -> tuple[str, str]:
        return (self.gstin, self.invoice_number)

    @classmethod
    def from_row(cls, row: InvoiceRow) -> Invoice:
        """Seed a new aggregate from its first validated line."""
        invoice = cls(
            gstin=row.gstin,
            invoice_number=row.invoice_number,
            invoice_date=row.invoice_date,
            invoice_value=row.invoice_value,
            place_of_supply=row.place_of_supply,
            reverse_charge=row.reverse_charge,
            receiver_name=row.receiver_name,
        )
        invoice.add_line(row.to_line_item())
        return invoice


@dataclass
class Note(_Aggregate):
    """CDNR credit/debit note aggregate keyed by (gstin, note_number)."""
    gstin: str = ""
    note_type: Literal["C", "D"] = "C"
    note_number: str = ""
    note_date: str = ""
    original_invoice_number: str = ""
    original_invoice_date: str = ""
    note_value: float = 0.0
    place_of_supply: str = ""
    pre_gst: YesNo = "N"
    reverse_charge: YesNo = "N"
    receiver_name: str | None = None
    id: str = field(default_factory=lambda: f"cdnr_{uuid.uuid4().hex[:12]}")

    @property
    def document_number(self) -> str:
        return self.note_number

    @property
    def declared_value(self) -> float:
        return self.note_value

    @declared_value.setter
    def declared_value(self, value: float) -> None:
        self.note_value = value

    @property
    def natural_key(self) -> tuple[str, str]:
        return (self.gstin, self.note_number)

    @classmethod
    def from_row(cls, row: NoteRow) -> Note:
        note = cls(
            gstin=row.gstin,
            note_type=row.note_type,
            note_number=row.note_number,
            note_date=row.note_date,
            original_invoice_number=row.original_invoice_number,
            original_invoice_date=row.original_invoice_date,
            note_value=row.note_value,
            place_of_supply=row.place_of_supply,
            pre_gst=row.pre_gst,
            reverse_charge=row.reverse_charge,
            receiver_name=row.receiver_name,
        )
        note.add_line(row.to_line_item())
        return note


@dataclass(frozen=True)
class ErrorRow:
    """A rejected row: its source position, the raw mapped data and messages.

    Field messages have the form ``<field> - <reason>``. Duplicate documents
    are reported with the same shape so they flow through the same
    remediation path.
    """
    row_number: int
    raw_data: dict[str, object]
    messages: list[str]
    source: str = ""
