# Shared pytest fixtures
from __future__ import annotations
import tempfile
from pathlib import Path

import pytest

from gstr1.logging.init import reset_logging
from tests.helpers import (
    B2B_HEADER,
    CDNR_HEADER,
    GSTIN_B,
    SUPPLIER_GSTIN,
    b2b_line,
    make_excel,
)


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture(autouse=True)
def _clean_logging():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def _no_env_overrides(monkeypatch):
    monkeypatch.delenv("GSTR1_GSTIN", raising=False)
    monkeypatch.delenv("GSTR1_FILING_PERIOD", raising=False)


@pytest.fixture()
def sample_config_yaml() -> str:
    return f"""source_directory: ./data
output_directory: ./out
supplier_gstin: {SUPPLIER_GSTIN}
filing_period: "012025"
return_type: B2B
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "gstr1.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def b2b_workbook(temp_workdir: Path) -> Path:
    """Sales register: title row, blank row, header, three lines (two invoices)."""
    return make_excel(
        temp_workdir / "data",
        "sales.xlsx",
        {
            "B2B Sales": [
                ["Sales Register January 2025"] + [None] * (len(B2B_HEADER) - 1),
                [None] * len(B2B_HEADER),
                B2B_HEADER,
                b2b_line("INV-001"),
                b2b_line("INV-001", value=5900, taxable=5000, cgst=450, sgst=450, hsn="998314", qty=None, unit=None),
                b2b_line("INV-002", gstin=GSTIN_B, pos="29", rate=12, value=1120, taxable=1000, igst=120, cgst=None, sgst=None, hsn="8471"),
            ],
            "Credit Notes": [CDNR_HEADER],
        },
    )
