from __future__ import annotations

import math
import re
from collections.abc import Mapping, Sequence
from datetime import UTC, date, datetime, timedelta
from typing import Any

from .kinds import DocumentKind

"""Row normalisation (cleaning and coercion) before validation.

Takes the raw cells of one row keyed by canonical field name and returns a
new dict of cleaned primitives. Empty cells are dropped so the validator
sees them as absent. Numeric parse failures become 0, unparseable dates are
passed through for the validator to reject. Nothing here raises for bad
cell content.
"""

__all__ = [
    "NUMERIC_FIELDS",
    "excel_date_to_string",
    "parse_number",
    "normalize_place_of_supply",
    "normalize_flag",
    "normalize_note_type",
    "snap_rate",
    "derive_rate",
    "normalize_row",
]

NUMERIC_FIELDS = frozenset(
    {
        "rate",
        "igst_rate",
        "cgst_rate",
        "sgst_rate",
        "invoice_value",
        "note_value",
        "taxable_value",
        "igst_amount",
        "cgst_amount",
        "sgst_amount",
        "cess_amount",
        "quantity",
    }
)
IDENTIFIER_FIELDS = frozenset({"gstin"})
FLAG_FIELDS = frozenset({"reverse_charge", "pre_gst"})
TAX_AMOUNT_FIELDS = ("igst_amount", "cgst_amount", "sgst_amount", "cess_amount")

EXCEL_EPOCH_OFFSET = 25569  # serial of 1970-01-01
_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

MONTHS = {
    "jan": "01",
    "feb": "02",
    "mar": "03",
    "apr": "04",
    "may": "05",
    "jun": "06",
    "jul": "07",
    "aug": "08",
    "sep": "09",
    "oct": "10",
    "nov": "11",
    "dec": "12",
}

_NUMBER_NOISE = re.compile(r"[₹$€£,\s%]")
_NUMBER_PREFIX = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_DATE_SEPARATORS = re.compile(r"[,/.]")
_LETTERS = re.compile(r"[a-zA-Z]")
_LEADING_INT = re.compile(r"^\s*[+-]?\d+")
_TWO_DIGITS = re.compile(r"^(\d{2})")


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return isinstance(value, str) and not value.strip()


def _text(value: Any) -> str:
    """Cell text; integral floats from spreadsheets lose their ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def parse_number(value: Any) -> float:
    """Parse a numeric cell. Currency symbols, %, commas and spaces are ignored;
    the leading numeric prefix is used and anything unparseable gives 0."""
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return 0.0 if isinstance(value, float) and math.isnan(value) else float(value)
    match = _NUMBER_PREFIX.match(_NUMBER_NOISE.sub("", str(value)))
    if not match:
        return 0.0
    number = float(match.group(0))
    return 0.0 if math.isnan(number) or math.isinf(number) else number


def _serial_to_string(serial: float) -> str:
    if serial <= 0:
        return ""
    days = math.floor(serial - EXCEL_EPOCH_OFFSET)
    try:
        day = _UNIX_EPOCH + timedelta(days=days)
    except OverflowError:
        return ""
    return day.strftime("%d-%m-%Y")


def _leading_int(token: str) -> int | None:
    match = _LEADING_INT.match(token)
    return int(match.group(0)) if match else None


def _string_to_date(text: str) -> str:
    text = _DATE_SEPARATORS.sub("-", text)
    parts = text.split("-")
    if len(parts) != 3:
        return text

    p1, p2, p3 = (p.strip() for p in parts)
    month_named = False
    if _LETTERS.search(p2):
        month = MONTHS.get(p2.lower()[:3])
        if month:
            p2, month_named = month, True
    elif _LETTERS.search(p1):
        # Nov-25-2025 -> day first
        month = MONTHS.get(p1.lower()[:3])
        if month:
            p1, p2, month_named = p2, month, True

    if len(p1) == 4:
        return f"{p3.zfill(2)}-{p2.zfill(2)}-{p1}"

    if len(p3) == 2 and p3.isdigit():
        p3 = ("19" if int(p3) > 50 else "20") + p3

    first = _leading_int(p1)
    if month_named or (first is not None and first > 12):
        return f"{p1.zfill(2)}-{p2.zfill(2)}-{p3}"
    # first token <= 12: month-day-year, swap into day-month-year
    return f"{p2.zfill(2)}-{p1.zfill(2)}-{p3}"


def excel_date_to_string(value: Any) -> str:
    """Render a date cell as ``DD-MM-YYYY``.

    Accepts native dates, spreadsheet serial numbers (UTC, whole days) and
    free-form strings. Unrecognised strings are returned unchanged.
    """
    if isinstance(value, (datetime, date)):
        return value.strftime("%d-%m-%Y")
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, (int, float)):
        if isinstance(value, float) and math.isnan(value):
            return ""
        return _serial_to_string(value)
    text = str(value).strip() if value is not None else ""
    if not text:
        return ""
    return _string_to_date(text)


def normalize_place_of_supply(value: Any) -> str:
    """"33-Tamil Nadu" -> "33"; "7" -> "07"."""
    text = _text(value)
    match = _TWO_DIGITS.match(text)
    return match.group(1) if match else text.zfill(2)[:2]


def normalize_flag(value: Any) -> str:
    return "Y" if _text(value).upper() in ("Y", "YES") else "N"


def normalize_note_type(value: Any) -> str:
    text = _text(value).upper()
    if "CREDIT" in text:
        return "C"
    if "DEBIT" in text:
        return "D"
    return text[:1]


def snap_rate(rate: float, slabs: Sequence[float]) -> float:
    """Nearest slab by absolute difference; ties go to the lower slab."""
    ordered = sorted(slabs)
    return min(ordered, key=lambda slab: abs(slab - rate))


def derive_rate(cleaned: Mapping[str, Any], slabs: Sequence[float]) -> float:
    """Reconstruct a missing rate from component rates or tax amounts.

    Order: IGST rate; doubled CGST/SGST half-rate; effective rate from the
    amounts (a CGST or SGST amount without its counterpart counts twice,
    the two halves always being equal).
    """
    igst_rate = cleaned.get("igst_rate") or 0
    cgst_rate = cleaned.get("cgst_rate") or 0
    sgst_rate = cleaned.get("sgst_rate") or 0

    derived = 0.0
    if igst_rate > 0:
        derived = igst_rate
    elif cgst_rate > 0:
        derived = cgst_rate * 2
    elif sgst_rate > 0:
        derived = sgst_rate * 2
    else:
        taxable = cleaned.get("taxable_value") or 0
        igst = cleaned.get("igst_amount") or 0
        cgst = cleaned.get("cgst_amount") or 0
        sgst = cleaned.get("sgst_amount") or 0
        if cgst and not sgst:
            sgst = cgst
        elif sgst and not cgst:
            cgst = sgst
        if taxable > 0 and (igst or cgst):
            derived = (igst + cgst + sgst) / taxable * 100
    return snap_rate(derived, slabs)


def normalize_row(
    values: Mapping[str, Any],
    kind: DocumentKind,
    rate_slabs: Sequence[float] = (0, 5, 12, 18, 28),
    split_half_rate: float = 9,
) -> dict[str, Any]:
    """Clean one row for ``kind``. Returns a new dict; ``values`` is untouched."""
    date_fields = set(kind.date_fields)
    cleaned: dict[str, Any] = {}
    for key, value in values.items():
        if _is_blank(value):
            continue
        if key in IDENTIFIER_FIELDS:
            cleaned[key] = _text(value).upper()
        elif key in date_fields:
            cleaned[key] = excel_date_to_string(value)
        elif key == "place_of_supply":
            cleaned[key] = normalize_place_of_supply(value)
        elif key in FLAG_FIELDS:
            cleaned[key] = normalize_flag(value)
        elif key == "note_type":
            cleaned[key] = normalize_note_type(value)
        elif key in NUMERIC_FIELDS:
            cleaned[key] = parse_number(value)
        else:
            cleaned[key] = _text(value)

    if not cleaned.get("rate"):
        slabs = sorted({*rate_slabs, split_half_rate}) if kind.split_half_rate else sorted(rate_slabs)
        cleaned["rate"] = derive_rate(cleaned, slabs)

    if kind.value_field not in cleaned and isinstance(cleaned.get("taxable_value"), float):
        cleaned[kind.value_field] = cleaned["taxable_value"] + sum(
            cleaned.get(name) or 0 for name in TAX_AMOUNT_FIELDS
        )
    return cleaned
