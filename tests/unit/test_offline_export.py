from __future__ import annotations

import csv
from pathlib import Path

from gstr1.models.invoice import Invoice, LineItem
from gstr1.services.offline_export import (
    B2B_CSV_HEADERS,
    HSN_CSV_HEADERS,
    state_label,
    to_offline_date,
    write_offline_csv,
)
from tests.helpers import GSTIN_A, SUPPLIER_GSTIN


def _invoice() -> Invoice:
    inv = Invoice(
        gstin=GSTIN_A,
        invoice_number="INV-001",
        invoice_date="15-01-2025",
        invoice_value=11800,
        place_of_supply="27",
        receiver_name="Acme Traders",
    )
    inv.add_line(LineItem(rate=18, taxable_value=10000, cgst_amount=900, sgst_amount=900, hsn_code="84713010", quantity=2, unit="nos"))
    return inv


def _read(path: Path) -> list[list[str]]:
    with path.open(encoding="utf-8", newline="") as fh:
        return list(csv.reader(fh))


def test_offline_date_and_state_label():
    assert to_offline_date("15-01-2025") == "15-Jan-2025"
    assert to_offline_date("01-12-2024") == "01-Dec-2024"
    # unparseable or out-of-range months pass through
    assert to_offline_date("15-13-2025") == "15-13-2025"
    assert to_offline_date("2025/01/15") == "2025/01/15"
    assert state_label("27") == "27-Maharashtra"
    assert state_label("7") == "07-Delhi"
    assert state_label("96") == "96-Other"


def test_write_offline_csv_files(tmp_path: Path):
    b2b_path, hsn_path = write_offline_csv([_invoice()], tmp_path / "out", SUPPLIER_GSTIN.lower(), "012025")

    assert b2b_path.name == f"GSTR1_{SUPPLIER_GSTIN}_012025_B2B.csv"
    assert hsn_path.name == f"GSTR1_{SUPPLIER_GSTIN}_012025_HSN.csv"

    b2b = _read(b2b_path)
    assert b2b[0] == B2B_CSV_HEADERS
    assert b2b[1] == [
        GSTIN_A,
        "Acme Traders",
        "INV-001",
        "15-Jan-2025",
        "11800",
        "27-Maharashtra",
        "N",
        "",
        "R",
        "",
        "18",
        "10000",
        "0",
    ]
    assert len(b2b) == 2

    hsn = _read(hsn_path)
    assert hsn[0] == HSN_CSV_HEADERS
    row = hsn[1]
    assert row[0] == "84713010"
    assert row[2:] == ["NOS", "2", "11800.00", "18", "10000.00", "0.00", "900.00", "900.00", "0.00"]
    assert len(hsn) == 2


def test_one_b2b_row_per_line(tmp_path: Path):
    inv = _invoice()
    inv.add_line(LineItem(rate=5, taxable_value=200, igst_amount=10, hsn_code="998314"))
    b2b_path, hsn_path = write_offline_csv([inv], tmp_path, SUPPLIER_GSTIN, "012025")
    rows = _read(b2b_path)[1:]
    assert [r[10] for r in rows] == ["18", "5"]
    assert all(r[2] == "INV-001" for r in rows)
    assert len(_read(hsn_path)) == 3
