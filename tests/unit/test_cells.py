from __future__ import annotations

from datetime import datetime

import pytest
from openpyxl.cell.rich_text import CellRichText, TextBlock
from openpyxl.cell.text import InlineFont

from gstr1.excel.cells import (
    EmptyCell,
    FormulaCell,
    HyperlinkCell,
    PlainCell,
    RichTextCell,
    cell_text,
    classify_cell,
    extract_value,
)


def test_plain_values():
    assert classify_cell(12.5) == PlainCell(12.5)
    when = datetime(2025, 1, 15)
    assert extract_value(classify_cell(when)) == when


def test_empty_values():
    assert classify_cell(None) == EmptyCell()
    assert classify_cell("") == EmptyCell()
    assert extract_value(EmptyCell()) is None


def test_formula_uses_cached_result():
    cell = classify_cell(11800, formula="=H4+I4")
    assert cell == FormulaCell("=H4+I4", 11800)
    assert extract_value(cell) == 11800
    # never calculated: no cached value
    assert extract_value(classify_cell(None, formula="=SUM(A1:A3)")) is None


def test_rich_text_is_concatenated():
    rich = CellRichText(["INV-", TextBlock(InlineFont(b=True), "001")])
    cell = classify_cell(rich)
    assert isinstance(cell, RichTextCell)
    assert extract_value(cell) == "INV-001"


def test_hyperlink_keeps_display_text():
    cell = classify_cell("INV-9", hyperlink="https://erp.example/inv/9")
    assert cell == HyperlinkCell("INV-9", "https://erp.example/inv/9")
    assert extract_value(cell) == "INV-9"


def test_unknown_objects_are_empty():
    assert classify_cell(object()) == EmptyCell()


def test_extract_value_rejects_foreign_types():
    with pytest.raises(TypeError):
        extract_value("not a cell")  # type: ignore[arg-type]


def test_cell_text():
    assert cell_text(None) == ""
    assert cell_text(8471.0) == "8471"
    assert cell_text("Rate") == "Rate"
