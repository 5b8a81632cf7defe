from __future__ import annotations

from gstr1.excel.header import (
    build_field_dictionary,
    build_header_map,
    detect_header_row,
    normalize_header,
)
from gstr1.services.kinds import B2B, CDNR


def test_normalize_header():
    assert normalize_header("  Rate (%) ") == "rate %"
    assert normalize_header("Invoice   No.*") == "invoice no"
    assert normalize_header(None) == ""


def test_field_dictionary_normalises_aliases():
    mapping = build_field_dictionary({"Rate (%)": "rate", "Invoice No.": "invoice_number"})
    assert mapping == {"rate %": "rate", "invoice no": "invoice_number"}


def test_header_found_below_metadata_rows():
    rows = [
        ["ACME Traders Pvt Ltd", None, None],
        ["Period: Jan 2025", None, None],
        ["GSTIN", "Invoice No", "Invoice Date", "Taxable Value"],
        ["27AAPFU0939F1ZV", "INV-1", "01-01-2025", 100],
    ]
    assert detect_header_row(rows, B2B.header_fields) == (2, True)


def test_best_scoring_row_wins_and_ties_go_to_earliest():
    rows = [
        ["gstin", "rate", "taxable value"],
        ["gstin", "rate", "taxable value", "invoice no"],
        ["gstin", "rate", "taxable value", "invoice no"],
    ]
    assert detect_header_row(rows, B2B.header_fields) == (1, True)


def test_fallback_when_threshold_not_met():
    rows = [["Report"], ["gstin", "rate"], ["x", "y"]]
    assert detect_header_row(rows, B2B.header_fields) == (0, False)


def test_rows_beyond_scan_window_ignored():
    rows = [["noise"]] * 5 + [["gstin", "rate", "taxable value"]]
    assert detect_header_row(rows, B2B.header_fields, scan_rows=5) == (0, False)
    assert detect_header_row(rows, B2B.header_fields, scan_rows=6) == (5, True)


def test_header_map_skips_unknown_columns():
    row = ["Note/Refund Voucher Number", "Remarks", "Document Type", "Integrated Tax"]
    assert build_header_map(row, CDNR.header_fields) == {
        0: "note_number",
        2: "note_type",
        3: "igst_amount",
    }
