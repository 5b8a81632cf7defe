from __future__ import annotations

import asyncio
import csv
import io
import logging
import math
import zipfile
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pandas as pd
from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from ..models.row_data import RowData
from .cells import classify_cell, extract_value
from .header import HEADER_SCAN_ROWS, MIN_HEADER_MATCHES, build_header_map, detect_header_row

"""Document reading for spreadsheets and delimited text.

- ``read_document`` is the single suspension point per document (bytes only)
- ``.xlsx`` workbooks are parsed with openpyxl twice (cached values and
  formulas) so every cell becomes one of the tagged variants in ``cells``
- ``.csv`` is decoded as UTF-8 (BOM tolerated) and split with the csv module
- Either way the result is a header-less pandas DataFrame of primitives that
  ``normalize_sheet`` turns into RowData using the detected header row
"""

__all__ = [
    "ProcessingError",
    "DocumentReadError",
    "UnsupportedFileError",
    "CorruptFileError",
    "SUPPORTED_EXTENSIONS",
    "RawSheet",
    "SheetData",
    "read_document",
    "select_sheet",
    "parse_workbook",
    "parse_csv",
    "load_sheet",
    "normalize_sheet",
]

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".xlsx", ".csv", ".json")
CSV_SHEET_NAME = "Sheet1"


class ProcessingError(Exception):
    """Base class for file-level failures (fatal for one file only)."""


class DocumentReadError(ProcessingError):
    pass


class UnsupportedFileError(DocumentReadError):
    pass


class CorruptFileError(DocumentReadError):
    pass


@dataclass
class RawSheet:
    name: str
    frame: pd.DataFrame


@dataclass
class SheetData:
    sheet_name: str
    header_row: int  # 0-based index into the sheet grid
    header_confident: bool
    header_map: dict[int, str]
    rows: list[RowData] = field(default_factory=list)


async def read_document(path: Path) -> bytes:
    """Read one input document. This is the only awaited step per document."""
    if path.suffix.lower() not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFileError(
            f"unsupported file type '{path.suffix}': only .xlsx, .csv and .json are accepted"
        )
    try:
        return await asyncio.to_thread(path.read_bytes)
    except OSError as e:
        raise DocumentReadError(f"failed to read file {path.name}: {e}") from e


def select_sheet(
    sheet_names: Iterable[str],
    patterns: Iterable[str],
    exclude: Iterable[str] = (),
) -> str | None:
    """First sheet whose lower-cased name contains a target keyword and none
    of the excluded (other kind's) keywords."""
    targets = [p.lower() for p in patterns]
    excluded = [p.lower() for p in exclude]
    for name in sheet_names:
        lower = name.lower()
        if any(p in lower for p in targets) and not any(p in lower for p in excluded):
            return name
    return None


def parse_workbook(
    data: bytes,
    source: str,
    patterns: Iterable[str],
    exclude: Iterable[str] = (),
) -> RawSheet | None:
    """Load the matching worksheet of an .xlsx document.

    Returns None when no sheet matches (zero rows for this kind).
    """
    try:
        values_wb = load_workbook(io.BytesIO(data), data_only=True, rich_text=True)
        formulas_wb = load_workbook(io.BytesIO(data), data_only=False)
    except (
        zipfile.BadZipFile,
        InvalidFileException,
        # malformed part XML (ElementTree and lxml ParseError both subclass it)
        SyntaxError,
        KeyError,
        ValueError,
        TypeError,
        AttributeError,
        OSError,
    ) as e:
        raise CorruptFileError(f"invalid or corrupted .xlsx file {source}: {e}") from e

    name = select_sheet(values_wb.sheetnames, patterns, exclude)
    if name is None:
        logger.info("no matching sheet in %s (sheets=%s)", source, ", ".join(values_wb.sheetnames))
        return None

    values_ws = values_wb[name]
    formulas_ws = formulas_wb[name]
    grid: list[list[Any]] = []
    for row in values_ws.iter_rows():
        extracted: list[Any] = []
        for cell in row:
            link = getattr(cell, "hyperlink", None)
            formula = formulas_ws.cell(row=cell.row, column=cell.column).value
            variant = classify_cell(cell.value, formula=formula, hyperlink=link.target if link else None)
            extracted.append(extract_value(variant))
        grid.append(extracted)
    logger.debug("using sheet '%s' of %s (%d rows)", name, source, len(grid))
    return RawSheet(name=name, frame=_to_frame(grid))


def parse_csv(data: bytes, source: str) -> RawSheet:
    """Parse delimited text into a single sheet. Quoted fields may hold commas."""
    try:
        text = data.decode("utf-8-sig")
        grid = [[value.strip() for value in record] for record in csv.reader(io.StringIO(text))]
    except (UnicodeDecodeError, csv.Error) as e:
        raise CorruptFileError(f"invalid delimited text file {source}: {e}") from e
    return RawSheet(name=CSV_SHEET_NAME, frame=_to_frame(grid))


def load_sheet(
    data: bytes,
    path: Path,
    patterns: Iterable[str],
    exclude: Iterable[str] = (),
) -> RawSheet | None:
    ext = path.suffix.lower()
    if ext == ".csv":
        return parse_csv(data, path.name)
    if ext == ".xlsx":
        return parse_workbook(data, path.name, patterns, exclude)
    raise UnsupportedFileError(f"not a tabular document: {path.name}")


def _to_frame(grid: list[list[Any]]) -> pd.DataFrame:
    if not any(grid):
        return pd.DataFrame(dtype=object)
    # ragged rows are padded with None
    return pd.DataFrame(grid, dtype=object)


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return isinstance(value, str) and not value.strip()


def normalize_sheet(
    df: pd.DataFrame,
    sheet_name: str,
    mapping: Mapping[str, str],
    scan_rows: int = HEADER_SCAN_ROWS,
    min_matches: int = MIN_HEADER_MATCHES,
) -> SheetData:
    """Detect the header row and turn every later row into RowData.

    Steps:
    1. Score the first ``scan_rows`` rows against the field dictionary
    2. Build the column -> canonical field map from the winning row
    3. Rows after the header become RowData (1-based source row numbers);
       rows without any value in a mapped column are skipped
    """
    if df.empty:
        return SheetData(sheet_name=sheet_name, header_row=0, header_confident=False, header_map={})

    grid = [[None if _is_blank(v) else v for v in raw] for raw in df.itertuples(index=False, name=None)]
    header_row, confident = detect_header_row(grid, mapping, scan_rows, min_matches)
    if not confident:
        logger.warning(
            "could not detect header row in sheet '%s' (fewer than %d known columns); using first row",
            sheet_name,
            min_matches,
        )
    header_map = build_header_map(grid[header_row], mapping)

    rows: list[RowData] = []
    for offset, raw in enumerate(grid[header_row + 1 :], start=header_row + 1):
        values: dict[str, Any] = {}
        for col, name in header_map.items():
            # several columns may alias one field; the first filled one wins
            value = raw[col] if col < len(raw) else None
            if values.get(name) is None:
                values[name] = value
        if all(v is None for v in values.values()):
            continue
        raw_values = {i: v for i, v in enumerate(raw) if v is not None}
        rows.append(RowData(row_number=offset + 1, values=values, raw_values=raw_values))

    return SheetData(
        sheet_name=sheet_name,
        header_row=header_row,
        header_confident=confident,
        header_map=header_map,
        rows=rows,
    )
