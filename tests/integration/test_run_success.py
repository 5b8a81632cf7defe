from __future__ import annotations
import json
from pathlib import Path

from gstr1.cli.__main__ import main as cli_main
from tests.helpers import GSTIN_A, GSTIN_B, SUPPLIER_GSTIN

OUTPUT_NAME = f"GSTR1_{SUPPLIER_GSTIN}_012025_B2B.json"


def test_workbook_to_return_document(write_config, b2b_workbook: Path, temp_workdir: Path, capsys):
    code = cli_main([])
    out = capsys.readouterr().out
    assert code == 0, out
    assert "SUMMARY files=1/1 success=1 failed=0 rows=3 valid=3 errors=0 documents=2" in out

    doc = json.loads((temp_workdir / "out" / OUTPUT_NAME).read_text(encoding="utf-8"))
    assert doc["gstin"] == SUPPLIER_GSTIN and doc["fp"] == "012025"
    assert [g["ctin"] for g in doc["b2b"]] == [GSTIN_A, GSTIN_B]

    inv1 = doc["b2b"][0]["inv"][0]
    assert inv1["inum"] == "INV-001"
    assert inv1["idt"] == "15-01-2025"
    assert inv1["pos"] == "27"
    # first line's declared value plus the continuation line's total
    assert inv1["val"] == 11800 + 5900
    assert [i["num"] for i in inv1["itms"]] == [1801, 1801]

    inv2 = doc["b2b"][1]["inv"][0]
    assert inv2["itms"][0] == {"num": 1201, "itm_det": {"rt": 12, "txval": 1000, "iamt": 120, "csamt": 0}}

    hsn = {(h["hsn_sc"], h["rt"]): h for h in doc["hsn"]["hsn_b2b"]}
    assert hsn[("84713010", 18)]["desc"] == "Personal computers (laptops, notebooks)"
    assert hsn[("84713010", 18)]["qty"] == 2
    assert hsn[("998314", 18)]["qty"] == 0
    assert hsn[("998314", 18)]["uqc"] == "NA"
    assert hsn[("8471", 12)]["desc"] == "Automatic data processing machines and units thereof"

    docs = doc["doc_issue"]["doc_det"][0]
    assert docs["doc_num"] == 1
    assert docs["docs"][0]["from"] == "INV-001" and docs["docs"][0]["to"] == "INV-002"


def test_offline_csv_flag(write_config, b2b_workbook: Path, temp_workdir: Path, capsys):
    assert cli_main(["--offline-csv"]) == 0
    out = capsys.readouterr().out
    b2b_csv = temp_workdir / "out" / f"GSTR1_{SUPPLIER_GSTIN}_012025_B2B.csv"
    hsn_csv = temp_workdir / "out" / f"GSTR1_{SUPPLIER_GSTIN}_012025_HSN.csv"
    assert f"INFO wrote offline tool CSV out/{b2b_csv.name}" in out
    lines = b2b_csv.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("GSTIN/UIN of Recipient,Receiver Name,Invoice Number,Invoice date,")
    # one row per invoice line
    assert len(lines) == 4
    assert lines[1].startswith(f"{GSTIN_A},Acme Traders,INV-001,15-Jan-2025,17700,27-Maharashtra,N,")
    assert hsn_csv.read_text(encoding="utf-8").splitlines()[0].startswith("HSN,Description,UQC,Total Quantity,Total Value,")


def test_csv_with_metadata_rows(write_config, temp_workdir: Path, capsys):
    (temp_workdir / "data" / "register.csv").write_text(
        "Acme Traders Pvt Ltd,,,,,,\n"
        "\"GSTR-1 for January, 2025\",,,,,,\n"
        "GSTIN/UIN of Recipient,Invoice Number,Invoice date,Place Of Supply,Taxable Value,CGST Amount,SGST Amount\n"
        f"{GSTIN_A},A-1,05-Nov-2025,27-Maharashtra,\"10,000\",900,900\n"
        f"{GSTIN_A},A-1,05-Nov-2025,27-Maharashtra,500,45,45\n",
        encoding="utf-8",
    )
    assert cli_main([]) == 0
    doc = json.loads((temp_workdir / "out" / OUTPUT_NAME).read_text(encoding="utf-8"))
    (inv,) = doc["b2b"][0]["inv"]
    assert inv["idt"] == "05-11-2025"
    assert len(inv["itms"]) == 2
    # rate derived from the amounts, value derived from taxable + taxes
    assert inv["itms"][0]["itm_det"]["rt"] == 18
    assert inv["val"] == 11800 + 590


def test_cdnr_run(write_config, temp_workdir: Path, capsys):
    from tests.helpers import CDNR_HEADER, cdnr_line, make_excel

    make_excel(
        temp_workdir / "data",
        "notes.xlsx",
        {"Credit Notes": [["Notes register"], CDNR_HEADER, cdnr_line(), cdnr_line("DN-7", "Debit Note", value=590, taxable=500, igst=90)]},
    )
    assert cli_main(["--type", "cdnr", "--offline-csv"]) == 0
    assert "WARN offline tool CSV export covers B2B only; skipped for CDNR" in capsys.readouterr().out
    assert not list((temp_workdir / "out").glob("*.csv"))
    doc = json.loads((temp_workdir / "out" / f"GSTR1_{SUPPLIER_GSTIN}_012025_CDNR.json").read_text(encoding="utf-8"))
    notes = doc["cdnr"][0]["nt"]
    assert [(n["ntty"], n["nt_num"]) for n in notes] == [("C", "CN-001"), ("D", "DN-7")]
    assert (notes[0]["inum"], notes[0]["idt"], notes[0]["p_gst"]) == ("INV-001", "15-01-2025", "N")
    assert "hsn" not in doc
    assert [d["doc_num"] for d in doc["doc_issue"]["doc_det"]] == [4, 5]


def test_previous_return_import(temp_workdir: Path, capsys):
    previous = {
        "gstin": SUPPLIER_GSTIN,
        "fp": "122024",
        "b2b": [{"ctin": GSTIN_B, "inv": [{"inum": "OLD-1", "idt": "02-12-2024", "val": 118, "pos": "29",
                                            "itms": [{"num": 1801, "itm_det": {"rt": 18, "txval": 100, "iamt": 18, "csamt": 0}}]}]}],
    }
    (temp_workdir / "data" / "previous.json").write_text(json.dumps(previous), encoding="utf-8")
    # gstin and period both come from the imported document
    assert cli_main([]) == 0
    doc = json.loads((temp_workdir / "out" / f"GSTR1_{SUPPLIER_GSTIN}_122024_B2B.json").read_text(encoding="utf-8"))
    assert doc["b2b"][0]["inv"][0]["inum"] == "OLD-1"
    assert doc["hsn"]["hsn_b2b"][0]["hsn_sc"] == "NA"
