from __future__ import annotations

import json
import re
from collections.abc import Callable, Iterable, Sequence
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path
from typing import Any

from ..models.invoice import Invoice, LineItem, Note
from ..reference.hsn import clean_code, get_hsn_description, is_service_code

"""GSTR-1 return document assembly.

Conventions of the receiving portal that are applied here:
- counterparty groups (``ctin``) sorted by GSTIN
- line item ``num`` is ``rate * 100 + 1`` (an 18% line is 1801)
- ``iamt`` / ``camt`` / ``samt`` only present when positive, ``csamt`` always
- money rounded half-up to 2 decimals, whole amounts written as integers
- ``hsn.hsn_b2b``: one entry per (HSN/SAC code, rate) over invoice lines,
  quantity forced to 0 for service codes
- ``doc_issue.doc_det``: one range per numbering series and document nature
"""

__all__ = [
    "DOC_NATURE_INVOICES",
    "DOC_NATURE_DEBIT_NOTES",
    "DOC_NATURE_CREDIT_NOTES",
    "RANGE_ORDERS",
    "round_half_up",
    "money",
    "item_number",
    "hsn_summary",
    "build_return_document",
    "default_filing_period",
    "return_file_name",
    "write_return_document",
]

DOC_NATURE_INVOICES = 1
DOC_NATURE_DEBIT_NOTES = 4
DOC_NATURE_CREDIT_NOTES = 5

RANGE_ORDERS = ("lexical", "natural")
DEFAULT_UQC = "OTH"
SERVICE_UQC = "NA"
MISSING_HSN = "NA"

_TRAILING_DIGITS = re.compile(r"\d+$")
_DIGIT_RUNS = re.compile(r"(\d+)")


def round_half_up(value: float, places: int = 2) -> Decimal:
    quantum = Decimal(1).scaleb(-places)
    return Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)


def money(value: float) -> int | float:
    """Rounded amount; integral results serialise without a fraction."""
    rounded = round_half_up(value)
    return int(rounded) if rounded == rounded.to_integral_value() else float(rounded)


def item_number(rate: float) -> int:
    return int(round_half_up(rate * 100, 0)) + 1


def _positive(key: str, value: float) -> dict[str, int | float]:
    return {key: money(value)} if value > 0 else {}


def _always(key: str, value: float) -> dict[str, int | float]:
    return {key: money(value)}


def _item_entry(item: LineItem) -> dict[str, Any]:
    return {
        "num": item_number(item.rate),
        "itm_det": {
            **_always("rt", item.rate),
            **_always("txval", item.taxable_value),
            **_positive("iamt", item.igst_amount),
            **_positive("camt", item.cgst_amount),
            **_positive("samt", item.sgst_amount),
            **_always("csamt", item.cess_amount),
        },
    }


def _invoice_entry(invoice: Invoice) -> dict[str, Any]:
    return {
        "inum": invoice.invoice_number,
        "idt": invoice.invoice_date,
        "val": money(invoice.invoice_value),
        "pos": invoice.place_of_supply,
        "rchrg": invoice.reverse_charge,
        "inv_typ": "R",
        "itms": [_item_entry(i) for i in invoice.items],
    }


def _note_entry(note: Note) -> dict[str, Any]:
    return {
        "ntty": note.note_type,
        "nt_num": note.note_number,
        "nt_dt": note.note_date,
        "inum": note.original_invoice_number,
        "idt": note.original_invoice_date,
        "p_gst": note.pre_gst,
        "val": money(note.note_value),
        "pos": note.place_of_supply,
        "rchrg": note.reverse_charge,
        "inv_typ": "R",
        "itms": [_item_entry(i) for i in note.items],
    }


def _by_counterparty(
    aggregates: Iterable[Invoice | Note],
    list_key: str,
    entry: Callable[[Any], dict[str, Any]],
) -> list[dict[str, Any]]:
    groups: dict[str, list[dict[str, Any]]] = {}
    for aggregate in aggregates:
        groups.setdefault(aggregate.gstin, []).append(entry(aggregate))
    return [{"ctin": ctin, list_key: groups[ctin]} for ctin in sorted(groups)]


def _uqc(item: LineItem, service: bool) -> str:
    if service:
        return SERVICE_UQC
    unit = (item.unit or "").strip()
    return unit[:3].upper() if unit else DEFAULT_UQC


def hsn_summary(invoices: Sequence[Invoice]) -> list[dict[str, Any]]:
    """``hsn_b2b`` entries: one per (code, rate) over all invoice lines."""
    buckets: dict[tuple[str, float], dict[str, Any]] = {}
    for invoice in invoices:
        for item in invoice.items:
            code = clean_code(item.hsn_code) or MISSING_HSN
            service = code != MISSING_HSN and is_service_code(code)
            bucket = buckets.get((code, item.rate))
            if bucket is None:
                bucket = buckets[(code, item.rate)] = {
                    "hsn_sc": code,
                    "desc": get_hsn_description(None if code == MISSING_HSN else code),
                    "uqc": _uqc(item, service),
                    "qty": 0.0,
                    "txval": 0.0,
                    "iamt": 0.0,
                    "camt": 0.0,
                    "samt": 0.0,
                    "csamt": 0.0,
                    "rt": item.rate,
                }
            if not service:
                bucket["qty"] += item.quantity or 0
            bucket["txval"] += item.taxable_value
            bucket["iamt"] += item.igst_amount
            bucket["camt"] += item.cgst_amount
            bucket["samt"] += item.sgst_amount
            bucket["csamt"] += item.cess_amount

    summary: list[dict[str, Any]] = []
    for num, bucket in enumerate(buckets.values(), start=1):
        summary.append(
            {
                "num": num,
                "hsn_sc": bucket["hsn_sc"],
                "desc": bucket["desc"],
                "uqc": bucket["uqc"],
                "qty": money(bucket["qty"]),
                **{k: money(bucket[k]) for k in ("txval", "iamt", "camt", "samt", "csamt")},
                "rt": money(bucket["rt"]),
            }
        )
    return summary


def _natural_key(number: str) -> list[Any]:
    return [int(part) if part.isdigit() else part for part in _DIGIT_RUNS.split(number)]


def _series_ranges(numbers: Iterable[str], order: str) -> list[dict[str, Any]]:
    series: dict[str, list[str]] = {}
    for number in numbers:
        series.setdefault(_TRAILING_DIGITS.sub("", number), []).append(number)

    docs: list[dict[str, Any]] = []
    for num, prefix in enumerate(sorted(series), start=1):
        members = series[prefix]
        ordered = sorted(members, key=_natural_key) if order == "natural" else sorted(members)
        docs.append(
            {
                "num": num,
                "from": ordered[0],
                "to": ordered[-1],
                "totnum": len(ordered),
                "cancel": 0,
                "net_issue": len(ordered),
            }
        )
    return docs


def _doc_issue(invoices: Sequence[Invoice], notes: Sequence[Note], order: str) -> list[dict[str, Any]]:
    natures = (
        (DOC_NATURE_INVOICES, [i.invoice_number for i in invoices]),
        (DOC_NATURE_DEBIT_NOTES, [n.note_number for n in notes if n.note_type == "D"]),
        (DOC_NATURE_CREDIT_NOTES, [n.note_number for n in notes if n.note_type == "C"]),
    )
    return [
        {"doc_num": doc_num, "docs": _series_ranges(numbers, order)}
        for doc_num, numbers in natures
        if numbers
    ]


def build_return_document(
    gstin: str,
    fp: str,
    invoices: Iterable[Invoice] = (),
    notes: Iterable[Note] = (),
    *,
    filing_type: str = "M",
    doc_range_order: str = "lexical",
    generated_on: date | None = None,
) -> dict[str, Any]:
    """Assemble the GSTR-1 JSON document (a plain dict ready for json.dumps).

    Sections without documents are left out entirely.
    """
    if doc_range_order not in RANGE_ORDERS:
        raise ValueError(f"unknown document range order: {doc_range_order!r}")
    invoices = list(invoices)
    notes = list(notes)

    document: dict[str, Any] = {
        "gstin": gstin.strip().upper(),
        "fp": fp,
        "gt": 0,
        "cur_gt": 0,
        "fil_typ": filing_type,
        "gen_dt": (generated_on or date.today()).strftime("%d-%m-%Y"),
    }
    if invoices:
        document["b2b"] = _by_counterparty(invoices, "inv", _invoice_entry)
    if notes:
        document["cdnr"] = _by_counterparty(notes, "nt", _note_entry)
    if invoices:
        document["hsn"] = {"hsn_b2b": hsn_summary(invoices)}
    doc_det = _doc_issue(invoices, notes, doc_range_order)
    if doc_det:
        document["doc_issue"] = {"doc_det": doc_det}
    return document


def default_filing_period(aggregates: Iterable[Invoice | Note]) -> str | None:
    """``MMYYYY`` taken from the first document date, if any."""
    for aggregate in aggregates:
        raw = aggregate.invoice_date if isinstance(aggregate, Invoice) else aggregate.note_date
        parts = raw.split("-")
        if len(parts) == 3 and all(p.isdigit() for p in parts):
            return f"{parts[1].zfill(2)}{parts[2]}"
    return None


def return_file_name(gstin: str, fp: str, kind: str) -> str:
    return f"GSTR1_{gstin.upper()}_{fp}_{kind}.json"


def write_return_document(document: dict[str, Any], path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(document, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return path
