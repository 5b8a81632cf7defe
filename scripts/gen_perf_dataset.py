#!/usr/bin/env python3
"""Synthetic invoice workbook generator for performance testing.

Generates B2B sales registers shaped like the ones the builder reads:
- Row 1: Title row (company name / period, ignored by header detection)
- Row 2: Blank row
- Row 3: Header row with common column captions
- Row 4+: Invoice lines; every invoice gets one to ``--max-lines`` lines

Each line carries an HSN code, a rate slab and intra-state (CGST/SGST) or
inter-state (IGST) tax amounts consistent with its taxable value.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd

HEADERS = [
    "GSTIN/UIN of Recipient",
    "Receiver Name",
    "Invoice Number",
    "Invoice date",
    "Invoice Value",
    "Place Of Supply",
    "Reverse Charge",
    "Rate",
    "Taxable Value",
    "IGST Amount",
    "CGST Amount",
    "SGST Amount",
    "Cess Amount",
    "HSN Code",
    "Item Description",
    "Quantity",
    "Unit",
]

# (hsn, description, unit)
ITEMS = [
    ("84713010", "Laptop", "NOS"),
    ("85171300", "Smartphone", "NOS"),
    ("94036000", "Wooden furniture", "NOS"),
    ("30049099", "Medicaments", "BOX"),
    ("10063020", "Basmati rice", "KGS"),
    ("61091000", "Cotton T-shirts", "PCS"),
    ("998314", "IT consulting services", "NA"),
    ("996511", "Road transport of goods", "NA"),
]
RATES = [0, 5, 12, 18, 28]
STATES = ["27", "29", "33", "07", "24", "09"]
PAN_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def _gstin(rng: np.random.Generator, state: str) -> str:
    letters = "".join(rng.choice(list(PAN_LETTERS), 5))
    digits = f"{rng.integers(0, 10_000):04d}"
    return f"{state}{letters}{digits}{rng.choice(list(PAN_LETTERS))}1Z{rng.integers(0, 10)}"


def generate_invoice_lines(
    invoices: int,
    max_lines: int = 3,
    supplier_state: str = "27",
    seed: int = 42,
) -> pd.DataFrame:
    """Generate synthetic invoice lines.

    Args:
        invoices: Number of distinct invoices
        max_lines: Upper bound of lines per invoice
        supplier_state: State code of the supplier (decides CGST/SGST vs IGST)
        seed: Random seed for reproducible data

    Returns:
        DataFrame with one row per line, columns as in HEADERS
    """
    rng = np.random.default_rng(seed)
    customers = [_gstin(rng, state) for state in rng.choice(STATES, max(1, invoices // 4))]
    dates = pd.date_range("2025-01-01", "2025-01-31", freq="D")

    records: list[list[Any]] = []
    for n in range(1, invoices + 1):
        ctin = customers[rng.integers(0, len(customers))]
        inter_state = ctin[:2] != supplier_state
        number = f"INV-{n:05d}"
        day = dates[rng.integers(0, len(dates))].strftime("%d/%m/%Y")
        lines = int(rng.integers(1, max_lines + 1))

        rows: list[list[Any]] = []
        for _ in range(lines):
            hsn, desc, unit = ITEMS[rng.integers(0, len(ITEMS))]
            rate = RATES[rng.integers(0, len(RATES))]
            taxable = round(float(rng.uniform(100, 100_000)), 2)
            tax = round(taxable * rate / 100, 2)
            igst = tax if inter_state else 0.0
            half = 0.0 if inter_state else round(tax / 2, 2)
            qty = None if unit == "NA" else int(rng.integers(1, 50))
            rows.append(
                [ctin, f"Customer {ctin[2:7]}", number, day, None, ctin[:2], "N",
                 rate, taxable, igst, half, half, 0.0, hsn, desc, qty, unit]
            )
        # each line declares its own share of the invoice value
        for r in rows:
            r[4] = round(r[8] + r[9] + r[10] + r[11], 2)
        records.extend(rows)

    return pd.DataFrame(records, columns=HEADERS)


def create_invoice_workbook(
    output_path: Path,
    invoices: int,
    max_lines: int = 3,
    sheet: str = "B2B Sales",
    title: str = "Sales Register January 2025",
    seed: int = 42,
) -> int:
    """Write the workbook; returns the number of line rows written."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    df = generate_invoice_lines(invoices, max_lines, seed=seed)

    sheet_data: list[list[Any]] = [[title] + [None] * (len(HEADERS) - 1), [None] * len(HEADERS), list(HEADERS)]
    sheet_data.extend(df.astype(object).where(df.notna(), None).values.tolist())

    with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
        pd.DataFrame(sheet_data).to_excel(writer, sheet_name=sheet, header=False, index=False)

    print(f"Created workbook: {output_path}")
    print(f"  Sheet: {sheet}")
    print(f"  Invoices: {invoices:,}  Lines: {len(df):,}")
    return len(df)


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Generate synthetic B2B invoice workbooks for performance testing",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s data/sales.xlsx
  %(prog)s data/large.xlsx --invoices 20000 --max-lines 5 --seed 7
        """,
    )
    parser.add_argument("output", type=Path, help="Output .xlsx path")
    parser.add_argument("--invoices", type=int, default=5_000, help="Number of invoices (default: 5,000)")
    parser.add_argument("--max-lines", type=int, default=3, help="Max lines per invoice (default: 3)")
    parser.add_argument("--sheet", default="B2B Sales", help="Sheet name (default: 'B2B Sales')")
    parser.add_argument("--title", default="Sales Register January 2025", help="Title row text")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    parser.add_argument("--dry-run", action="store_true", help="Show the plan without writing")
    args = parser.parse_args()

    if args.invoices <= 0:
        print("Error: --invoices must be positive", file=sys.stderr)
        return 1
    if args.max_lines <= 0:
        print("Error: --max-lines must be positive", file=sys.stderr)
        return 1

    print("Dataset generation plan:")
    print(f"  Output file: {args.output}")
    print(f"  Invoices: {args.invoices:,} (1-{args.max_lines} lines each)")
    print(f"  Random seed: {args.seed}")
    if args.dry_run:
        print("\n[DRY RUN] Would generate the workbook but not create it.")
        return 0

    try:
        create_invoice_workbook(args.output, args.invoices, args.max_lines, args.sheet, args.title, args.seed)
    except OSError as e:
        print(f"\nError generating dataset: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
