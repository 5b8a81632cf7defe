"""Workbook builders and sample identifiers shared by the test suites."""
from __future__ import annotations
from pathlib import Path
from typing import Any

import pandas as pd

GSTIN_A = "27AAPFU0939F1ZV"
GSTIN_B = "29AABCT1332L1ZT"
SUPPLIER_GSTIN = "27AAACR5055K1Z7"

B2B_HEADER = [
    "GSTIN/UIN of Recipient",
    "Receiver Name",
    "Invoice Number",
    "Invoice date",
    "Invoice Value",
    "Place Of Supply",
    "Rate",
    "Taxable Value",
    "IGST Amount",
    "CGST Amount",
    "SGST Amount",
    "HSN Code",
    "Quantity",
    "Unit",
]

CDNR_HEADER = [
    "GSTIN/UIN of Recipient",
    "Note/Refund Voucher Number",
    "Note/Refund Voucher date",
    "Document Type",
    "Invoice/Advance Receipt Number",
    "Invoice/Advance Receipt date",
    "Place Of Supply",
    "Note/Refund Voucher Value",
    "Rate",
    "Taxable Value",
    "Integrated Tax",
]


def make_excel(directory: Path, name: str, sheets: dict[str, list[list[Any]]]) -> Path:
    """Write a workbook with one sheet per entry; rows are written as-is (no header)."""
    p = directory / name
    with pd.ExcelWriter(p, engine="openpyxl") as writer:
        for sheet, rows in sheets.items():
            pd.DataFrame(rows).to_excel(writer, sheet_name=sheet, header=False, index=False)
    return p


def b2b_line(
    number: str = "INV-001",
    gstin: str = GSTIN_A,
    date: Any = "15/01/2025",
    value: Any = 11800,
    pos: Any = "27-Maharashtra",
    rate: Any = 18,
    taxable: Any = 10000,
    igst: Any = None,
    cgst: Any = 900,
    sgst: Any = 900,
    hsn: Any = "84713010",
    qty: Any = 2,
    unit: Any = "NOS",
) -> list[Any]:
    return [gstin, "Acme Traders", number, date, value, pos, rate, taxable, igst, cgst, sgst, hsn, qty, unit]


def cdnr_line(
    number: str = "CN-001",
    note_type: Any = "Credit Note",
    gstin: str = GSTIN_A,
    date: Any = "20/01/2025",
    original: str = "INV-001",
    original_date: Any = "15/01/2025",
    pos: Any = "27",
    value: Any = 1180,
    rate: Any = 18,
    taxable: Any = 1000,
    igst: Any = 180,
) -> list[Any]:
    return [gstin, number, date, note_type, original, original_date, pos, value, rate, taxable, igst]


def b2b_values(**overrides: Any) -> dict[str, Any]:
    """One mapped B2B row (canonical field -> raw cell value)."""
    values: dict[str, Any] = {
        "gstin": GSTIN_A,
        "invoice_number": "INV-001",
        "invoice_date": "15/01/2025",
        "invoice_value": 11800,
        "place_of_supply": "27-Maharashtra",
        "rate": 18,
        "taxable_value": 10000,
        "cgst_amount": 900,
        "sgst_amount": 900,
        "hsn_code": "84713010",
        "quantity": 2,
        "unit": "NOS",
    }
    values.update(overrides)
    return {k: v for k, v in values.items() if v is not None}


def cdnr_values(**overrides: Any) -> dict[str, Any]:
    values: dict[str, Any] = {
        "gstin": GSTIN_A,
        "note_number": "CN-001",
        "note_date": "20/01/2025",
        "note_type": "Credit Note",
        "original_invoice_number": "INV-001",
        "original_invoice_date": "15/01/2025",
        "place_of_supply": "27",
        "note_value": 1180,
        "rate": 18,
        "taxable_value": 1000,
        "igst_amount": 180,
    }
    values.update(overrides)
    return {k: v for k, v in values.items() if v is not None}
