from __future__ import annotations

import pytest

from gstr1.models.row_data import RowData
from gstr1.services.duplicates import DuplicateTracker
from gstr1.services.kinds import B2B
from gstr1.services.orchestrator import process_rows
from gstr1.services.remediation import RemediationError, RemediationLoop, RowState
from tests.helpers import b2b_values


def _result():
    rows = [
        RowData(4, b2b_values(invoice_number="INV-1")),
        RowData(5, b2b_values(invoice_number="INV-2", gstin="BAD")),
        RowData(6, b2b_values(invoice_number="INV-3", invoice_date="99-99-2025")),
    ]
    return process_rows(rows, B2B, DuplicateTracker(), "sales.xlsx")


def test_promote_fixed_row_appends_new_aggregate():
    result = _result()
    loop = RemediationLoop(result, B2B)
    assert len(loop.pending) == 2

    edited = dict(result.errors[0].raw_data, gstin="27AAPFU0939F1ZV")
    assert loop.promote(0, edited) == []

    assert [a.invoice_number for a in result.aggregates] == ["INV-1", "INV-2"]
    assert loop.entries[0].state is RowState.PROMOTED
    assert len(result.errors) == 1
    assert (result.summary.total, result.summary.valid, result.summary.error) == (3, 2, 1)


def test_promote_never_folds_into_existing_document():
    result = _result()
    loop = RemediationLoop(result, B2B)
    # same key as the already accepted INV-1
    assert loop.promote(0, b2b_values(invoice_number="INV-1")) == []
    assert [a.invoice_number for a in result.aggregates] == ["INV-1", "INV-1"]
    assert all(len(a.items) == 1 for a in result.aggregates)


def test_promote_still_invalid_returns_messages():
    result = _result()
    loop = RemediationLoop(result, B2B)
    messages = loop.promote(1, result.errors[1].raw_data)
    assert messages == ["invoice_date - Date must be in DD-MM-YYYY format"]
    assert loop.entries[1].state is RowState.REJECTED
    assert result.summary.error == 2


def test_promoted_row_cannot_be_acted_on_again():
    result = _result()
    loop = RemediationLoop(result, B2B)
    loop.promote(0, b2b_values(invoice_number="INV-2"))
    with pytest.raises(RemediationError, match="already promoted"):
        loop.promote(0, b2b_values(invoice_number="INV-2"))
    with pytest.raises(RemediationError):
        loop.discard(0)


def test_discard_shifts_later_entries():
    result = _result()
    loop = RemediationLoop(result, B2B)
    second = loop.entries[1].error
    loop.discard(0)
    assert loop.entries[0].error is second
    assert (result.summary.total, result.summary.valid, result.summary.error) == (2, 1, 1)
    with pytest.raises(RemediationError, match="no rejected row"):
        loop.discard(5)
