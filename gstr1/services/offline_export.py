from __future__ import annotations

import csv
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

from ..models.invoice import Invoice
from .assembler import hsn_summary, money, round_half_up

"""CSV export for the GST Offline Tool.

Two files per return, both with the tool's official column captions:

- ``GSTR1_<gstin>_<fp>_B2B.csv``: one row per invoice line, dates as
  ``dd-Mon-yyyy`` and place of supply as ``NN-State name``
- ``GSTR1_<gstin>_<fp>_HSN.csv``: the ``hsn_b2b`` summary plus a total
  value column (taxable value and every tax); amounts with two decimals
"""

__all__ = [
    "B2B_CSV_HEADERS",
    "HSN_CSV_HEADERS",
    "STATE_NAMES",
    "state_label",
    "to_offline_date",
    "b2b_csv_rows",
    "hsn_csv_rows",
    "write_offline_csv",
]

B2B_CSV_HEADERS = [
    "GSTIN/UIN of Recipient",
    "Receiver Name",
    "Invoice Number",
    "Invoice date",
    "Invoice Value",
    "Place Of Supply",
    "Reverse Charge",
    "Applicable % of Tax Rate",
    "Invoice Type",
    "E-Commerce GSTIN",
    "Rate",
    "Taxable Value",
    "Cess Amount",
]

HSN_CSV_HEADERS = [
    "HSN",
    "Description",
    "UQC",
    "Total Quantity",
    "Total Value",
    "Rate",
    "Taxable Value",
    "Integrated Tax Amount",
    "Central Tax Amount",
    "State/UT Tax Amount",
    "Cess Amount",
]

STATE_NAMES = {
    "01": "Jammu and Kashmir",
    "02": "Himachal Pradesh",
    "03": "Punjab",
    "04": "Chandigarh",
    "05": "Uttarakhand",
    "06": "Haryana",
    "07": "Delhi",
    "08": "Rajasthan",
    "09": "Uttar Pradesh",
    "10": "Bihar",
    "11": "Sikkim",
    "12": "Arunachal Pradesh",
    "13": "Nagaland",
    "14": "Manipur",
    "15": "Mizoram",
    "16": "Tripura",
    "17": "Meghalaya",
    "18": "Assam",
    "19": "West Bengal",
    "20": "Jharkhand",
    "21": "Odisha",
    "22": "Chhattisgarh",
    "23": "Madhya Pradesh",
    "24": "Gujarat",
    "25": "Daman and Diu",
    "26": "Dadra and Nagar Haveli",
    "27": "Maharashtra",
    "28": "Andhra Pradesh",
    "29": "Karnataka",
    "30": "Goa",
    "31": "Lakshadweep",
    "32": "Kerala",
    "33": "Tamil Nadu",
    "34": "Puducherry",
    "35": "Andaman and Nicobar Islands",
    "36": "Telangana",
    "37": "Andhra Pradesh (New)",
    "38": "Ladakh",
    "97": "Other Territory",
    "99": "Centre Jurisdiction",
}

MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def state_label(code: str) -> str:
    """``"7"`` -> ``"07-Delhi"``; unknown codes get ``Other``."""
    padded = code.strip().zfill(2)
    return f"{padded}-{STATE_NAMES.get(padded, 'Other')}"


def to_offline_date(value: str) -> str:
    """``DD-MM-YYYY`` -> ``DD-Mon-YYYY``; anything else is returned as-is."""
    parts = value.split("-")
    if len(parts) != 3 or not parts[1].isdigit():
        return value
    month = int(parts[1])
    if not 1 <= month <= 12:
        return value
    return f"{parts[0].zfill(2)}-{MONTH_ABBR[month - 1]}-{parts[2]}"


def _amount(value: float) -> str:
    return str(round_half_up(value))


def b2b_csv_rows(invoices: Iterable[Invoice]) -> list[list[Any]]:
    rows: list[list[Any]] = []
    for invoice in invoices:
        for item in invoice.items:
            rows.append(
                [
                    invoice.gstin,
                    invoice.receiver_name or "",
                    invoice.invoice_number,
                    to_offline_date(invoice.invoice_date),
                    money(invoice.invoice_value),
                    state_label(invoice.place_of_supply),
                    invoice.reverse_charge,
                    "",
                    "R",
                    "",
                    money(item.rate),
                    money(item.taxable_value),
                    money(item.cess_amount),
                ]
            )
    return rows


def hsn_csv_rows(invoices: Sequence[Invoice]) -> list[list[Any]]:
    rows: list[list[Any]] = []
    for entry in hsn_summary(invoices):
        taxes = [entry[k] for k in ("iamt", "camt", "samt", "csamt")]
        rows.append(
            [
                entry["hsn_sc"],
                entry["desc"],
                entry["uqc"],
                entry["qty"],
                _amount(entry["txval"] + sum(taxes)),
                entry["rt"],
                _amount(entry["txval"]),
                *(_amount(t) for t in taxes),
            ]
        )
    return rows


def _write(path: Path, header: list[str], rows: list[list[Any]]) -> None:
    with path.open("w", encoding="utf-8", newline="") as fh:
        writer = csv.writer(fh, lineterminator="\n")
        writer.writerow(header)
        writer.writerows(rows)


def write_offline_csv(invoices: Iterable[Invoice], directory: Path, gstin: str, fp: str) -> tuple[Path, Path]:
    """Write the B2B and HSN CSV files; returns their paths in that order."""
    invoices = list(invoices)
    directory.mkdir(parents=True, exist_ok=True)
    prefix = f"GSTR1_{gstin.upper()}_{fp}"
    b2b_path = directory / f"{prefix}_B2B.csv"
    hsn_path = directory / f"{prefix}_HSN.csv"
    _write(b2b_path, B2B_CSV_HEADERS, b2b_csv_rows(invoices))
    _write(hsn_path, HSN_CSV_HEADERS, hsn_csv_rows(invoices))
    return b2b_path, hsn_path
