from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from typing import Any

from .cells import cell_text

"""Header row detection and column mapping.

Header texts are normalised aggressively (lower-case, ``* . ( )`` removed,
whitespace collapsed) and looked up in a per-kind field dictionary. The
dictionary keys get the same normalisation once, at construction.
"""

__all__ = [
    "HEADER_SCAN_ROWS",
    "MIN_HEADER_MATCHES",
    "normalize_header",
    "build_field_dictionary",
    "detect_header_row",
    "build_header_map",
]

logger = logging.getLogger(__name__)

HEADER_SCAN_ROWS = 20
MIN_HEADER_MATCHES = 3

_PUNCT = re.compile(r"[*.()]")
_SPACES = re.compile(r"\s+")


def normalize_header(text: Any) -> str:
    raw = cell_text(text)
    return _SPACES.sub(" ", _PUNCT.sub("", raw.lower())).strip()


def build_field_dictionary(aliases: Mapping[str, str]) -> dict[str, str]:
    """Normalise alias keys so e.g. "rate (%)" matches the cell "Rate (%)"."""
    return {normalize_header(alias): field for alias, field in aliases.items()}


def _score(row: Sequence[Any], mapping: Mapping[str, str]) -> int:
    return sum(1 for cell in row if normalize_header(cell) in mapping)


def detect_header_row(
    rows: Sequence[Sequence[Any]],
    mapping: Mapping[str, str],
    scan_rows: int = HEADER_SCAN_ROWS,
    min_matches: int = MIN_HEADER_MATCHES,
) -> tuple[int, bool]:
    """Return ``(row_index, confident)`` for the best header candidate.

    Only the first ``scan_rows`` rows are scored. The earliest row with the
    highest match count wins, provided it reaches ``min_matches``; otherwise
    row 0 is returned with ``confident=False``.
    """
    best_index = -1
    best_score = 0
    for index, row in enumerate(rows[:scan_rows]):
        score = _score(row, mapping)
        if score > best_score and score >= min_matches:
            best_index, best_score = index, score

    if best_index == -1:
        return 0, False
    logger.debug("header row %d matched %d known columns", best_index, best_score)
    return best_index, True


def build_header_map(row: Sequence[Any], mapping: Mapping[str, str]) -> dict[int, str]:
    """Column index -> canonical field name. Unknown columns are left out."""
    header_map: dict[int, str] = {}
    for index, cell in enumerate(row):
        canonical = mapping.get(normalize_header(cell))
        if canonical:
            header_map[index] = canonical
    return header_map
