from __future__ import annotations

from dataclasses import dataclass
from typing import Any

"""RowData model for the GSTR-1 return builder.

RowData represents a single data row after header resolution: the cells of
the source row keyed by canonical field name, still holding the raw cell
values (normalisation happens later, per document kind).
"""

__all__ = [
    "RowData",
]


@dataclass(frozen=True)
class RowData:
    """Logical representation of a single sheet row after header mapping.

    The row_number refers to the original 1-based row number in the sheet or
    delimited file, so error messages point at the row the user sees.
    """
    row_number: int  # 1-based source row number
    values: dict[str, Any]  # Canonical field name -> raw cell value
    raw_values: dict[int, Any] | None = None  # Column index -> raw cell value (debug)
