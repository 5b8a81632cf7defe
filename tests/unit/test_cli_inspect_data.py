from __future__ import annotations

from pathlib import Path

from gstr1.cli.__main__ import main as cli_main
from tests.helpers import CDNR_HEADER, make_excel


def test_cli_inspect_data_shows_header_and_rows(write_config, b2b_workbook: Path, capsys):
    code = cli_main(["--inspect-data"])
    out = capsys.readouterr().out
    assert code == 0
    assert "FILE: sales.xlsx" in out
    assert "SHEET: B2B Sales header_row=3 confident=True" in out
    assert "'invoice_number'" in out
    assert "row 4: {gstin: '27AAPFU0939F1ZV'" in out
    # nothing is written in inspect mode
    assert not Path("out").exists()


def test_cli_inspect_data_other_documents(write_config, temp_workdir: Path, capsys):
    data = temp_workdir / "data"
    make_excel(data, "notes_only.xlsx", {"Credit Notes": [CDNR_HEADER]})
    (data / "previous.json").write_text("{}", encoding="utf-8")
    (data / "z_broken.xlsx").write_bytes(b"garbage")

    assert cli_main(["--inspect-data"]) == 0
    out = capsys.readouterr().out
    assert "no B2B sheet" in out
    assert "previous return (no header detection)" in out
    assert "FILE: z_broken.xlsx" in out
    assert "read_error: invalid or corrupted .xlsx file" in out


def test_cli_inspect_data_without_documents(write_config, capsys):
    assert cli_main(["--inspect-data"]) == 0
    assert "inspect: no input documents" in capsys.readouterr().out
