from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from ..excel.header import build_field_dictionary

"""Document kinds (B2B invoices, CDNR credit/debit notes).

Each kind bundles what the pipeline needs to treat its rows: the header
alias dictionary, sheet keywords, the row contract, and the field roles
(document number, declared value, dates) used by normalizer, tracker and
grouper.
"""

__all__ = [
    "KindName",
    "DocumentKind",
    "B2B",
    "CDNR",
    "KINDS",
    "get_kind",
    "sheet_keywords",
]

KindName = Literal["B2B", "CDNR"]

B2B_HEADER_ALIASES = {
    # Identity
    "billing gstin": "gstin",
    "gstin": "gstin",
    "gstin/uin of recipient": "gstin",
    "billing name": "receiver_name",
    "receiver name": "receiver_name",
    # Invoice
    "invoice no": "invoice_number",
    "invoice number": "invoice_number",
    "invoice date": "invoice_date",
    # Value
    "total transaction value": "invoice_value",
    "total value": "invoice_value",
    "invoice value": "invoice_value",
    # State
    "place of supply state": "place_of_supply",
    "place of supply": "place_of_supply",
    "reverse charge": "reverse_charge",
    # Rate
    "applicable % of tax rate": "rate",
    "rate (%)": "rate",
    "rate": "rate",
    "cgst rate %": "cgst_rate",
    "cgst %": "cgst_rate",
    "cgst": "cgst_rate",
    "sgst rate %": "sgst_rate",
    "sgst %": "sgst_rate",
    "sgst": "sgst_rate",
    "igst rate %": "igst_rate",
    "igst %": "igst_rate",
    "igst": "igst_rate",
    "integrated tax rate %": "igst_rate",
    # Amounts
    "taxable value": "taxable_value",
    "igst amount": "igst_amount",
    "igst amt": "igst_amount",
    "integrated tax amount": "igst_amount",
    "cgst amount": "cgst_amount",
    "cgst amt": "cgst_amount",
    "central tax amount": "cgst_amount",
    "sgst amount": "sgst_amount",
    "sgst amt": "sgst_amount",
    "state/ut tax amount": "sgst_amount",
    "cess amount": "cess_amount",
    "cess amt": "cess_amount",
    # Item
    "hsn / sac code": "hsn_code",
    "hsn code": "hsn_code",
    "hsn": "hsn_code",
    "item description": "description",
    "description": "description",
    "quantity": "quantity",
    "qty": "quantity",
    "item unit uom": "unit",
    "unit": "unit",
    "uqc": "unit",
}

CDNR_HEADER_ALIASES = {
    "gstin/uin of recipient": "gstin",
    "gstin": "gstin",
    "receiver name": "receiver_name",
    "invoice/advance receipt number": "original_invoice_number",
    "original invoice number": "original_invoice_number",
    "invoice/advance receipt date": "original_invoice_date",
    "original invoice date": "original_invoice_date",
    "note/refund voucher number": "note_number",
    "note number": "note_number",
    "note/refund voucher date": "note_date",
    "note date": "note_date",
    "document type": "note_type",
    "note type": "note_type",
    "place of supply": "place_of_supply",
    "note/refund voucher value": "note_value",
    "note value": "note_value",
    "applicable % of tax rate": "rate",
    "rate (%)": "rate",
    "rate": "rate",
    "igst rate %": "igst_rate",
    "cgst rate %": "cgst_rate",
    "sgst rate %": "sgst_rate",
    "taxable value": "taxable_value",
    "cess amount": "cess_amount",
    "pre gst": "pre_gst",
    "integrated tax": "igst_amount",
    "igst amount": "igst_amount",
    "central tax": "cgst_amount",
    "cgst amount": "cgst_amount",
    "state/ut tax": "sgst_amount",
    "sgst amount": "sgst_amount",
    "reverse charge": "reverse_charge",
    "hsn code": "hsn_code",
    "item description": "description",
    "quantity": "quantity",
    "unit": "unit",
}

B2B_SHEET_PATTERNS = ("b2b", "gstr1", "invoice", "sales")
CDNR_SHEET_PATTERNS = ("cdnr", "credit", "debit", "note")


@dataclass(frozen=True)
class DocumentKind:
    name: KindName
    header_fields: dict[str, str]  # normalised alias -> canonical field
    sheet_patterns: tuple[str, ...]
    schema_file: str
    number_field: str
    value_field: str
    date_fields: tuple[str, ...]
    number_label: str  # used in duplicate messages
    split_half_rate: bool  # whether the half-rate slab is a valid line rate

    def duplicate_message(self, number: str) -> str:
        return f"Duplicate {self.number_label}: {number} already exists."


B2B = DocumentKind(
    name="B2B",
    header_fields=build_field_dictionary(B2B_HEADER_ALIASES),
    sheet_patterns=B2B_SHEET_PATTERNS,
    schema_file="b2b_row_schema.json",
    number_field="invoice_number",
    value_field="invoice_value",
    date_fields=("invoice_date",),
    number_label="Invoice Number",
    split_half_rate=True,
)

CDNR = DocumentKind(
    name="CDNR",
    header_fields=build_field_dictionary(CDNR_HEADER_ALIASES),
    sheet_patterns=CDNR_SHEET_PATTERNS,
    schema_file="cdnr_row_schema.json",
    number_field="note_number",
    value_field="note_value",
    date_fields=("note_date", "original_invoice_date"),
    number_label="Note Number",
    split_half_rate=False,
)

KINDS: dict[str, DocumentKind] = {"B2B": B2B, "CDNR": CDNR}


def get_kind(name: str) -> DocumentKind:
    try:
        return KINDS[name.upper()]
    except KeyError:
        raise ValueError(f"unknown document kind: {name!r} (expected B2B or CDNR)") from None


def sheet_keywords(
    kind: DocumentKind, overrides: dict[str, tuple[str, ...]] | None = None
) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """(target keywords, excluded keywords) for picking this kind's sheet.

    Excluded keywords are those of every other kind, so a "Credit Notes"
    sheet is never read as invoices.
    """
    overrides = overrides or {}

    def words(k: DocumentKind) -> tuple[str, ...]:
        return tuple(overrides.get(k.name) or k.sheet_patterns)

    excluded = tuple(p for other in KINDS.values() if other is not kind for p in words(other))
    return words(kind), excluded
