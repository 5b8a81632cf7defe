from __future__ import annotations
import pytest
from pathlib import Path
from gstr1.config.loader import ConfigError, ImportConfig, apply_env_overrides, default_config, load_config
from tests.helpers import SUPPLIER_GSTIN


def test_load_config_success(write_config: Path):
    cfg = load_config(write_config)
    assert cfg.source_directory == "./data"
    assert cfg.supplier_gstin == SUPPLIER_GSTIN
    assert cfg.filing_period == "012025"
    # defaults for everything left out
    assert cfg.invoice_value_mode == "incremental"
    assert cfg.doc_range_order == "lexical"
    assert cfg.rate_slabs == (0, 5, 12, 18, 28)


def test_load_config_missing_file(temp_workdir: Path):
    with pytest.raises(ConfigError, match="config file not found"):
        load_config(temp_workdir / "config" / "not_exists.yml")


def test_empty_file_gives_defaults(temp_workdir: Path):
    p = temp_workdir / "config" / "gstr1.yml"
    p.write_text("", encoding="utf-8")
    assert load_config(p) == default_config()


@pytest.mark.parametrize(
    "extra",
    [
        "extra_field: not_allowed",
        "duplicate_scope: global",
        "rate_slabs: []",
        "filing_period: 2025-01",
        "sheet_keywords:\n  B2CS: [small]",
    ],
)
def test_load_config_rejects_bad_values(write_config: Path, extra: str):
    write_config.write_text(write_config.read_text(encoding="utf-8") + extra + "\n", encoding="utf-8")
    with pytest.raises(ConfigError) as e:
        load_config(write_config)
    assert "config validation failed" in str(e.value)


def test_invalid_yaml(temp_workdir: Path):
    p = temp_workdir / "config" / "gstr1.yml"
    p.write_text("source_directory: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="invalid yaml"):
        load_config(p)


def test_sheet_keywords_lowercased(write_config: Path):
    write_config.write_text(
        write_config.read_text(encoding="utf-8") + "sheet_keywords:\n  CDNR: [Returns, CN]\n", encoding="utf-8"
    )
    cfg = load_config(write_config)
    assert cfg.sheet_keywords == {"CDNR": ("returns", "cn")}


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("GSTR1_GSTIN", " 27aaacr5055k1z7 ")
    monkeypatch.setenv("GSTR1_FILING_PERIOD", "022025")
    cfg = apply_env_overrides(ImportConfig(supplier_gstin="X", filing_period="012025"))
    assert cfg.supplier_gstin == SUPPLIER_GSTIN
    assert cfg.filing_period == "022025"


def test_env_overrides_absent():
    cfg = ImportConfig(filing_period="012025")
    assert apply_env_overrides(cfg) is cfg
