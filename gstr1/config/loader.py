from __future__ import annotations

import json
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

"""Config loader for the GSTR-1 return builder.

Responsibilities:
- Load YAML config/gstr1.yml
- Validate keys and value types against contracts/config_schema.json
- Apply defaults for everything the file leaves out
- Apply GSTR1_GSTIN / GSTR1_FILING_PERIOD environment overrides
"""

SCHEMA_PATH = Path(__file__).resolve().parent.parent / "contracts" / "config_schema.json"
DEFAULT_CONFIG_PATH = Path("config/gstr1.yml")

ENV_GSTIN = "GSTR1_GSTIN"
ENV_FILING_PERIOD = "GSTR1_FILING_PERIOD"


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class ImportConfig:
    source_directory: str = "./data"
    output_directory: str = "./out"
    supplier_gstin: str | None = None
    filing_period: str | None = None  # MMYYYY
    return_type: str = "B2B"  # B2B | CDNR
    duplicate_scope: str = "batch"  # batch | file
    invoice_value_mode: str = "incremental"  # incremental | recompute
    doc_range_order: str = "lexical"  # lexical | natural
    filing_type: str = "M"
    rate_slabs: tuple[float, ...] = (0, 5, 12, 18, 28)
    split_half_rate: float = 9
    header_scan_rows: int = 20
    min_header_matches: int = 3
    sheet_keywords: dict[str, tuple[str, ...]] = field(default_factory=dict)


def default_config() -> ImportConfig:
    return ImportConfig()


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against JSON schema.

    Raises:
        ConfigError: If the schema file is missing or not valid JSON, or the
            config data fails schema validation (unknown keys, wrong types,
            values outside the allowed enums).
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def apply_env_overrides(cfg: ImportConfig) -> ImportConfig:
    """Environment (typically loaded from .env) wins over the YAML file."""
    gstin = os.getenv(ENV_GSTIN)
    period = os.getenv(ENV_FILING_PERIOD)
    changes: dict[str, Any] = {}
    if gstin:
        changes["supplier_gstin"] = gstin.strip().upper()
    if period:
        changes["filing_period"] = period.strip()
    return replace(cfg, **changes) if changes else cfg


def load_config(path: Path) -> ImportConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError("config validation failed: top level must be a mapping")

    _validate_config_schema(data)

    defaults = default_config()
    keywords = {
        kind.upper(): tuple(str(k).lower() for k in words)
        for kind, words in (data.get("sheet_keywords") or {}).items()
    }
    period = data.get("filing_period")
    return ImportConfig(
        source_directory=data.get("source_directory", defaults.source_directory),
        output_directory=data.get("output_directory", defaults.output_directory),
        supplier_gstin=(data.get("supplier_gstin") or "").upper() or None,
        filing_period=str(period) if period is not None else None,
        return_type=data.get("return_type", defaults.return_type),
        duplicate_scope=data.get("duplicate_scope", defaults.duplicate_scope),
        invoice_value_mode=data.get("invoice_value_mode", defaults.invoice_value_mode),
        doc_range_order=data.get("doc_range_order", defaults.doc_range_order),
        filing_type=data.get("filing_type", defaults.filing_type),
        rate_slabs=tuple(data.get("rate_slabs", defaults.rate_slabs)),
        split_half_rate=data.get("split_half_rate", defaults.split_half_rate),
        header_scan_rows=data.get("header_scan_rows", defaults.header_scan_rows),
        min_header_matches=data.get("min_header_matches", defaults.min_header_matches),
        sheet_keywords=keywords,
    )
