from __future__ import annotations

import json

import pytest

from gstr1.excel.reader import CorruptFileError
from gstr1.services.json_import import parse_return_json
from tests.helpers import GSTIN_A, SUPPLIER_GSTIN

PREVIOUS_RETURN = {
    "gstin": SUPPLIER_GSTIN,
    "fp": "122024",
    "b2b": [
        {
            "ctin": GSTIN_A,
            "inv": [
                {
                    "inum": "INV-9",
                    "idt": "10-12-2024",
                    "val": 2360,
                    "pos": "27",
                    "rchrg": "N",
                    "inv_typ": "R",
                    "itms": [
                        {"num": 1801, "itm_det": {"rt": 18, "txval": 1000, "camt": 90, "samt": 90, "csamt": 0}},
                        {"num": 1801, "itm_det": {"rt": 18, "txval": 1000, "camt": 90, "samt": 90, "csamt": 0}},
                    ],
                }
            ],
        }
    ],
    "cdnr": [
        {
            "ctin": GSTIN_A,
            "nt": [
                {"ntty": "D", "nt_num": "DN-3", "nt_dt": "12-12-2024", "val": 118, "pos": "27",
                 "itms": [{"num": 1801, "itm_det": {"rt": 18, "txval": 100, "iamt": 18, "csamt": 0}}]}
            ],
        }
    ],
}


def test_parse_previous_return():
    result = parse_return_json(json.dumps(PREVIOUS_RETURN))
    assert result.gstin == SUPPLIER_GSTIN
    assert result.filing_period == "122024"

    (inv,) = result.invoices
    assert inv.invoice_number == "INV-9"
    assert inv.invoice_value == 2360
    assert inv.total_taxable_value == 2000
    assert inv.total_cgst == 180
    assert inv.receiver_name == "AAPFU0939F... (27)"
    item = inv.items[0]
    assert item.hsn_code == "" and item.quantity == 0 and item.unit == "OTH"

    (note,) = result.notes
    assert note.note_type == "D"
    assert note.total_igst == 18
    assert note.reverse_charge == "N"


def test_bytes_input_and_missing_sections():
    result = parse_return_json(b'{"gstin": "X", "fp": "012025"}')
    assert result.invoices == [] and result.notes == []


@pytest.mark.parametrize(
    "payload",
    ["{not json", "[1, 2]", json.dumps({"b2b": [{"inv": []}]}), json.dumps({"b2b": [{"ctin": "X", "inv": [{"val": 1}]}]})],
)
def test_corrupt_documents(payload):
    with pytest.raises(CorruptFileError):
        parse_return_json(payload)
