from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from ..excel.reader import CorruptFileError
from ..models.invoice import Invoice, LineItem, Note

"""Import of a previously exported GSTR-1 JSON document.

Documents in the file become aggregates directly. Header detection and row
validation are skipped and the amounts are trusted as written. The file
carries no item classification, so items get an empty HSN code, zero
quantity and the "OTH" unit.
"""

__all__ = [
    "JSONParseResult",
    "parse_return_json",
]

IMPORTED_UNIT = "OTH"


@dataclass
class JSONParseResult:
    gstin: str
    filing_period: str
    invoices: list[Invoice] = field(default_factory=list)
    notes: list[Note] = field(default_factory=list)


def _receiver_label(ctin: str) -> str:
    # party names are not part of the return; show the PAN part and state code
    return f"{ctin[2:12]}... ({ctin[:2]})"


def _items(raw_items: list[dict[str, Any]]) -> list[LineItem]:
    items: list[LineItem] = []
    for raw in raw_items:
        det = raw.get("itm_det") or {}
        items.append(
            LineItem(
                rate=float(det.get("rt") or 0),
                taxable_value=float(det.get("txval") or 0),
                igst_amount=float(det.get("iamt") or 0),
                cgst_amount=float(det.get("camt") or 0),
                sgst_amount=float(det.get("samt") or 0),
                cess_amount=float(det.get("csamt") or 0),
                hsn_code="",
                description="",
                quantity=0.0,
                unit=IMPORTED_UNIT,
            )
        )
    return items


def _invoice(ctin: str, raw: dict[str, Any]) -> Invoice:
    invoice = Invoice(
        gstin=ctin,
        invoice_number=str(raw["inum"]),
        invoice_date=str(raw.get("idt", "")),
        invoice_value=float(raw.get("val") or 0),
        place_of_supply=str(raw.get("pos", "")),
        reverse_charge=raw.get("rchrg") or "N",
        receiver_name=_receiver_label(ctin),
        items=_items(raw.get("itms") or []),
    )
    invoice.recompute_totals()
    return invoice


def _note(ctin: str, raw: dict[str, Any]) -> Note:
    note = Note(
        gstin=ctin,
        note_type=raw.get("ntty") or raw.get("nty") or "C",
        note_number=str(raw["nt_num"]),
        note_date=str(raw.get("nt_dt", "")),
        original_invoice_number=str(raw.get("inum", "")),
        original_invoice_date=str(raw.get("idt", "")),
        note_value=float(raw.get("val") or 0),
        place_of_supply=str(raw.get("pos", "")),
        pre_gst=raw.get("p_gst") or "N",
        reverse_charge=raw.get("rchrg") or "N",
        receiver_name=_receiver_label(ctin),
        items=_items(raw.get("itms") or []),
    )
    note.recompute_totals()
    return note


def parse_return_json(text: str | bytes) -> JSONParseResult:
    """Parse the ``b2b`` and ``cdnr`` sections of a GSTR-1 JSON document.

    Raises:
        CorruptFileError: not JSON, or sections without the expected shape.
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise CorruptFileError(f"failed to parse JSON: {e}") from e
    if not isinstance(data, dict):
        raise CorruptFileError("failed to parse JSON: top level must be an object")

    result = JSONParseResult(gstin=str(data.get("gstin", "")), filing_period=str(data.get("fp", "")))
    try:
        for party in data.get("b2b") or []:
            ctin = str(party["ctin"])
            result.invoices.extend(_invoice(ctin, inv) for inv in party.get("inv") or [])
        for party in data.get("cdnr") or []:
            ctin = str(party["ctin"])
            result.notes.extend(_note(ctin, nt) for nt in party.get("nt") or [])
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise CorruptFileError(f"unexpected GSTR-1 JSON structure: {e}") from e
    return result
