from __future__ import annotations
import json
from pathlib import Path

from gstr1.cli.__main__ import main as cli_main
from tests.helpers import SUPPLIER_GSTIN


def test_cli_no_files_writes_empty_return(write_config, temp_workdir: Path, capsys):
    code = cli_main([])
    out = capsys.readouterr().out
    assert code == 0
    assert "SUMMARY files=0/0 success=0 failed=0 rows=0 valid=0 errors=0 documents=0" in out
    written = json.loads((temp_workdir / "out" / f"GSTR1_{SUPPLIER_GSTIN}_012025_B2B.json").read_text())
    assert "b2b" not in written


def test_cli_directory_missing(write_config, temp_workdir: Path, capsys):
    text = write_config.read_text(encoding="utf-8").replace("./data", "./missing_dir")
    write_config.write_text(text, encoding="utf-8")
    code = cli_main([])
    assert code == 1
    assert "ERROR Directory not found:" in capsys.readouterr().out


def test_cli_bad_config(write_config, capsys):
    write_config.write_text("duplicate_scope: everywhere\n", encoding="utf-8")
    assert cli_main([]) == 1
    assert "ERROR config: config validation failed" in capsys.readouterr().out


def test_cli_explicit_config_missing(temp_workdir: Path, capsys):
    assert cli_main(["--config", "nope.yml"]) == 1
    assert "ERROR config: config file not found" in capsys.readouterr().out


def test_cli_without_gstin_is_fatal(temp_workdir: Path, capsys):
    # no config file at all: defaults apply, but nothing names the supplier
    assert cli_main([]) == 1
    assert "supplier GSTIN missing" in capsys.readouterr().out


def test_cli_env_file_supplies_gstin(temp_workdir: Path, capsys, monkeypatch):
    # registered so the values loaded from .env are removed again afterwards
    monkeypatch.setenv("GSTR1_GSTIN", "")
    monkeypatch.setenv("GSTR1_FILING_PERIOD", "")
    (temp_workdir / ".env").write_text(f"GSTR1_GSTIN={SUPPLIER_GSTIN}\nGSTR1_FILING_PERIOD=022025\n")
    assert cli_main([]) == 0
    assert (temp_workdir / "out" / f"GSTR1_{SUPPLIER_GSTIN}_022025_B2B.json").exists()


def test_cli_bad_period(write_config, capsys):
    assert cli_main(["--period", "2025-01"]) == 1
    assert "filing period missing or not MMYYYY" in capsys.readouterr().out


def test_cli_debug_mode(write_config, capsys):
    assert cli_main(["--debug"]) == 0
    assert "DEBUG debug mode enabled" in capsys.readouterr().out
