from __future__ import annotations

import re
from typing import Any

from .hsn_tables import (
    HSN_CHAPTERS,
    HSN_HEADINGS,
    HSN_SUBHEADINGS,
    HSN_TARIFF,
    SAC_GROUPS,
    SAC_PREFIX,
    SAC_SERVICES,
    HSNEntry,
)

"""HSN / SAC code hierarchy resolver.

Lookups cascade from the most specific level to the least specific one:
8-digit tariff item -> 6-digit sub-heading -> 4-digit heading -> 2-digit
chapter for goods, 6-digit service -> 4-digit group for services (codes
starting with "99"). Input codes may carry separators or be numeric cells;
everything that is not a digit is stripped first.
"""

__all__ = [
    "DEFAULT_DESCRIPTION",
    "SERVICES_DESCRIPTION",
    "DEFAULT_SERVICE_RATE",
    "clean_code",
    "is_service_code",
    "get_hsn_description",
    "get_hsn_gst_rate",
    "get_hsn_hierarchy",
    "is_valid_hsn_code",
    "search_hsn_by_description",
]

DEFAULT_DESCRIPTION = "Goods/Services"
SERVICES_DESCRIPTION = "Services"
DEFAULT_SERVICE_RATE = 18

_NON_DIGIT = re.compile(r"[^0-9]")


def clean_code(code: Any) -> str:
    if code is None:
        return ""
    if isinstance(code, float) and code.is_integer():
        code = int(code)
    return _NON_DIGIT.sub("", str(code).strip())


def is_service_code(code: Any) -> bool:
    return clean_code(code).startswith(SAC_PREFIX)


def _chapter_key(digits: str) -> str:
    return digits[:2].zfill(2)


def _sac_lookup(digits: str) -> HSNEntry | None:
    if len(digits) >= 6 and digits[:6] in SAC_SERVICES:
        return SAC_SERVICES[digits[:6]]
    return SAC_GROUPS.get(digits[:4])


def _goods_lookup(digits: str) -> HSNEntry | None:
    for table, width in ((HSN_TARIFF, 8), (HSN_SUBHEADINGS, 6), (HSN_HEADINGS, 4)):
        # 8-digit tariff items only match exactly
        key = digits if width == 8 else digits[:width]
        if key in table:
            return table[key]
    return None


def _composite_description(digits: str) -> str:
    """Most specific fragment among whichever chapter/heading/sub-heading exist."""
    parts: list[str] = []
    chapter = HSN_CHAPTERS.get(_chapter_key(digits))
    if chapter:
        parts.append(chapter.description)
    if len(digits) >= 4 and digits[:4] in HSN_HEADINGS:
        parts.append(HSN_HEADINGS[digits[:4]].description)
    if len(digits) >= 6 and digits[:6] in HSN_SUBHEADINGS:
        parts.append(HSN_SUBHEADINGS[digits[:6]].description)
    return parts[-1] if parts else DEFAULT_DESCRIPTION


def get_hsn_description(code: Any) -> str:
    """Best available description for an HSN or SAC code."""
    digits = clean_code(code)
    if not digits:
        return DEFAULT_DESCRIPTION

    if digits.startswith(SAC_PREFIX):
        entry = _sac_lookup(digits)
        return entry.description if entry else SERVICES_DESCRIPTION

    entry = _goods_lookup(digits)
    if entry:
        return entry.description
    chapter = HSN_CHAPTERS.get(_chapter_key(digits))
    if chapter:
        return chapter.description
    return _composite_description(digits)


def get_hsn_gst_rate(code: Any) -> float | None:
    """Suggested GST rate for a code, or None when no level carries one."""
    digits = clean_code(code)
    if not digits:
        return None

    if digits.startswith(SAC_PREFIX):
        if len(digits) >= 6:
            service = SAC_SERVICES.get(digits[:6])
            if service and service.gst_rate is not None:
                return service.gst_rate
        group = SAC_GROUPS.get(digits[:4])
        if group and group.gst_rate is not None:
            return group.gst_rate
        return DEFAULT_SERVICE_RATE

    for table, key in (
        (HSN_TARIFF, digits),
        (HSN_SUBHEADINGS, digits[:6]),
        (HSN_HEADINGS, digits[:4]),
    ):
        entry = table.get(key)
        if entry and entry.gst_rate is not None:
            return entry.gst_rate
    return None


def get_hsn_hierarchy(code: Any) -> dict[str, Any]:
    """Per-level breakdown of a goods code (chapter with its section name,
    heading, sub-heading, tariff item) plus the suggested rate.
    Levels that are unknown are left out.
    """
    digits = clean_code(code)
    if not digits:
        return {}

    result: dict[str, Any] = {}
    chapter = HSN_CHAPTERS.get(_chapter_key(digits))
    if chapter:
        result["chapter"] = {
            "code": chapter.code,
            "description": chapter.description,
            "section": chapter.section_name,
        }
    for level, table, width in (
        ("heading", HSN_HEADINGS, 4),
        ("subheading", HSN_SUBHEADINGS, 6),
        ("tariff", HSN_TARIFF, 8),
    ):
        if len(digits) < width:
            continue
        key = digits if width == 8 else digits[:width]
        entry = table.get(key)
        if entry:
            result[level] = {"code": entry.code, "description": entry.description}
    result["gst_rate"] = get_hsn_gst_rate(digits)
    return result


def is_valid_hsn_code(code: Any) -> bool:
    """A code is valid when its top-level category is known.

    Deeper goods levels are never required; services need their group or
    service entry.
    """
    digits = clean_code(code)
    if len(digits) < 2:
        return False
    if digits.startswith(SAC_PREFIX):
        if len(digits) >= 6 and digits[:6] in SAC_SERVICES:
            return True
        return len(digits) >= 4 and digits[:4] in SAC_GROUPS
    return _chapter_key(digits) in HSN_CHAPTERS


def search_hsn_by_description(keyword: str, limit: int = 20) -> list[HSNEntry]:
    """Case-insensitive substring search over headings, then SAC services."""
    term = keyword.lower()
    results: list[HSNEntry] = []
    for table in (HSN_HEADINGS, SAC_SERVICES):
        for entry in table.values():
            if len(results) >= limit:
                return results
            if term in entry.description.lower():
                results.append(entry)
    return results
