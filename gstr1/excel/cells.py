from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Union

from openpyxl.cell.rich_text import CellRichText, TextBlock

"""Spreadsheet cell representations.

A workbook cell can hold a plain value, a formula (with or without a cached
result), rich text made of formatted runs, or a hyperlink with display text.
``classify_cell`` turns the openpyxl pieces into exactly one variant and
``extract_value`` reduces each variant to the primitive the row normalizer
understands (str / int / float / bool / datetime / None).
"""

__all__ = [
    "PlainCell",
    "FormulaCell",
    "RichTextCell",
    "HyperlinkCell",
    "EmptyCell",
    "Cell",
    "classify_cell",
    "extract_value",
    "cell_text",
]

Primitive = Union[str, int, float, bool, datetime, date, None]


@dataclass(frozen=True)
class EmptyCell:
    pass


@dataclass(frozen=True)
class PlainCell:
    value: Primitive


@dataclass(frozen=True)
class FormulaCell:
    formula: str
    result: Primitive = None  # cached value; None when never calculated


@dataclass(frozen=True)
class RichTextCell:
    runs: tuple[str, ...]


@dataclass(frozen=True)
class HyperlinkCell:
    text: str
    target: str | None = None


Cell = Union[EmptyCell, PlainCell, FormulaCell, RichTextCell, HyperlinkCell]


def _rich_text_runs(value: CellRichText) -> tuple[str, ...]:
    return tuple(run.text if isinstance(run, TextBlock) else str(run) for run in value)


def classify_cell(value: Any, formula: Any = None, hyperlink: str | None = None) -> Cell:
    """Build the cell variant from a cached value and optional formula/link.

    ``value`` is what a data-only load returns, ``formula`` what a formula
    load returns for the same coordinate.
    """
    if isinstance(formula, str) and formula.startswith("="):
        result = value
        if isinstance(result, CellRichText):
            result = "".join(_rich_text_runs(result))
        return FormulaCell(formula=formula, result=result)
    if value is None or (isinstance(value, str) and value == ""):
        return EmptyCell()
    if isinstance(value, CellRichText):
        return RichTextCell(runs=_rich_text_runs(value))
    if hyperlink:
        return HyperlinkCell(text=str(value), target=hyperlink)
    if isinstance(value, (str, int, float, bool, datetime, date)):
        return PlainCell(value=value)
    # Unknown object types (images, error objects) carry no usable value
    return EmptyCell()


def extract_value(cell: Cell) -> Primitive:
    if isinstance(cell, PlainCell):
        return cell.value
    if isinstance(cell, FormulaCell):
        return cell.result
    if isinstance(cell, RichTextCell):
        return "".join(cell.runs)
    if isinstance(cell, HyperlinkCell):
        return cell.text
    if isinstance(cell, EmptyCell):
        return None
    raise TypeError(f"unknown cell variant: {type(cell).__name__}")


def cell_text(value: Any) -> str:
    """Text form used for header matching (None -> "")."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
