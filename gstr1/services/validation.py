from __future__ import annotations

import copy
import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields
from functools import lru_cache
from pathlib import Path
from typing import Any, Union

from jsonschema import Draft7Validator

from ..models.invoice import InvoiceRow, NoteRow
from .kinds import DocumentKind

"""Row validation against the JSON Schema row contracts.

The contracts live in gstr1/contracts/*_row_schema.json. Two non-standard
keywords are understood here:

- ``errorMessage``: the reason text for a field, either one string or a map
  from jsonschema keyword (``minLength`` ...) to text
- ``splitHalfRate``: on ``rate``; when true the configured half-rate slab is
  added to the permitted rate values

Each failing field produces exactly one ``<field> - <reason>`` message, in
contract property order.
"""

__all__ = [
    "CONTRACTS_DIR",
    "RowValidator",
    "ValidationOutcome",
    "load_row_schema",
]

CONTRACTS_DIR = Path(__file__).resolve().parent.parent / "contracts"
REQUIRED_MESSAGE = "Required"

ValidRecord = Union[InvoiceRow, NoteRow]


@lru_cache(maxsize=None)
def _read_contract(schema_file: str) -> str:
    return (CONTRACTS_DIR / schema_file).read_text(encoding="utf-8")


def load_row_schema(
    kind: DocumentKind,
    rate_slabs: Sequence[float] = (0, 5, 12, 18, 28),
    split_half_rate: float = 9,
) -> dict[str, Any]:
    """Row contract for ``kind`` with the permitted rate values filled in."""
    schema = json.loads(_read_contract(kind.schema_file))
    rate = schema["properties"]["rate"]
    allowed = set(rate_slabs)
    if rate.pop("splitHalfRate", False):
        allowed.add(split_half_rate)
    rate["enum"] = sorted(allowed)
    rate["errorMessage"] = "Rate must be one of " + ", ".join(_fmt(r) for r in sorted(allowed))
    return schema


def _fmt(number: float) -> str:
    return str(int(number)) if float(number).is_integer() else str(number)


@dataclass(frozen=True)
class ValidationOutcome:
    """Either a typed record or the list of field messages."""
    record: ValidRecord | None
    messages: list[str]

    @property
    def ok(self) -> bool:
        return self.record is not None


class RowValidator:
    """Validates cleaned rows of one document kind. Stateless after init."""

    def __init__(
        self,
        kind: DocumentKind,
        rate_slabs: Sequence[float] = (0, 5, 12, 18, 28),
        split_half_rate: float = 9,
    ) -> None:
        self.kind = kind
        self.schema = load_row_schema(kind, rate_slabs, split_half_rate)
        Draft7Validator.check_schema(self.schema)
        self._validator = Draft7Validator(self.schema)
        self._properties: dict[str, Any] = self.schema["properties"]
        self._required: list[str] = list(self.schema.get("required", []))
        self._record_type = InvoiceRow if kind.name == "B2B" else NoteRow

    def _reason(self, field: str, keyword: str, default: str) -> str:
        custom = self._properties.get(field, {}).get("errorMessage")
        if isinstance(custom, str):
            return custom
        if isinstance(custom, dict):
            return custom.get(keyword, default)
        return default

    def messages(self, cleaned: Mapping[str, Any]) -> list[str]:
        per_field: dict[str, str] = {}
        for name in self._required:
            if name not in cleaned:
                per_field[name] = REQUIRED_MESSAGE

        instance = dict(cleaned)
        for error in self._validator.iter_errors(instance):
            if error.validator == "required" or not error.path:
                continue
            name = str(error.path[0])
            if name not in per_field:
                per_field[name] = self._reason(name, str(error.validator), error.message)

        order = list(self._properties)
        ordered = sorted(per_field, key=lambda n: order.index(n) if n in order else len(order))
        return [f"{name} - {per_field[name]}" for name in ordered]

    def _build(self, cleaned: Mapping[str, Any]) -> ValidRecord:
        data = dict(cleaned)
        for name, spec in self._properties.items():
            if name not in data and "default" in spec:
                data[name] = copy.deepcopy(spec["default"])
        values: dict[str, Any] = {}
        for f in fields(self._record_type):
            if f.name not in data:
                continue
            value = data[f.name]
            if self._properties.get(f.name, {}).get("type") == "number":
                value = float(value)
            values[f.name] = value
        return self._record_type(**values)

    def validate(self, cleaned: Mapping[str, Any]) -> ValidationOutcome:
        """Pure: never mutates ``cleaned``."""
        problems = self.messages(cleaned)
        if problems:
            return ValidationOutcome(None, problems)
        return ValidationOutcome(self._build(cleaned), [])
