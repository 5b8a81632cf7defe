from __future__ import annotations

import argparse
import asyncio
import re
import sys
from pathlib import Path

from dotenv import load_dotenv

from gstr1.config.loader import (
    DEFAULT_CONFIG_PATH,
    ConfigError,
    ImportConfig,
    apply_env_overrides,
    default_config,
    load_config,
)
from gstr1.excel.reader import DocumentReadError, load_sheet, normalize_sheet, read_document
from gstr1.logging.error_log import ErrorLogBuffer
from gstr1.logging.init import enable_debug, log_summary, setup_logging
from gstr1.models.invoice import Invoice, Note
from gstr1.services.assembler import (
    build_return_document,
    default_filing_period,
    return_file_name,
    write_return_document,
)
from gstr1.services.kinds import DocumentKind, get_kind, sheet_keywords
from gstr1.services.offline_export import write_offline_csv
from gstr1.services.orchestrator import ProcessingError, process_batch, scan_input_files
from gstr1.services.progress import ProgressTracker
from gstr1.services.summary import render_summary_line

"""CLI entrypoint.

Flow:
- Load .env, then config/gstr1.yml (or --config), then environment overrides
- Collect input documents (positional files, else scan source_directory)
- Run the batch for the selected document kind
- Write the GSTR-1 JSON (plus GST Offline Tool CSVs with --offline-csv),
  flush the error log, print the SUMMARY line

Exit codes: 0 everything processed, 2 failed files or rejected rows,
1 fatal (bad config, missing directory, no GSTIN / filing period).
"""

EXIT_SUCCESS_ALL = 0
EXIT_PARTIAL_FAILURE = 2
EXIT_FATAL = 1

_PERIOD = re.compile(r"^(0[1-9]|1[0-2])\d{4}$")


def _load_env_file(path: Path, override: bool = True) -> None:
    """Load .env; its values win over variables already in the environment."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="gstr1", description="Invoice spreadsheets -> GSTR-1 return JSON")
    p.add_argument("files", nargs="*", type=Path, help="Input documents (.xlsx/.csv/.json); default: scan source_directory")
    p.add_argument("--type", dest="kind", type=str.upper, choices=["B2B", "CDNR"], help="Document kind to build")
    p.add_argument("--gstin", help="Supplier GSTIN")
    p.add_argument("--period", help="Filing period (MMYYYY)")
    p.add_argument("--output", type=Path, help="Output directory (default: output_directory from config)")
    p.add_argument("--config", type=Path, help=f"Config file (default: {DEFAULT_CONFIG_PATH})")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect-data", action="store_true", help="Print detected headers & first rows then exit")
    p.add_argument("--offline-csv", action="store_true", help="Also write B2B and HSN CSV files for the GST Offline Tool")
    return p.parse_args(argv)


def _resolve_config(config_path: Path | None) -> ImportConfig:
    if config_path is not None:
        return load_config(config_path)
    if DEFAULT_CONFIG_PATH.exists():
        return load_config(DEFAULT_CONFIG_PATH)
    return default_config()


async def _inspect_data(files: list[Path], kind: DocumentKind, cfg: ImportConfig) -> int:
    if not files:
        print("inspect: no input documents")
        return EXIT_SUCCESS_ALL
    targets, excluded = sheet_keywords(kind, cfg.sheet_keywords)
    for f in files:
        print(f"FILE: {f.name}")
        if f.suffix.lower() == ".json":
            print("  previous return (no header detection)")
            continue
        try:
            raw = load_sheet(await read_document(f), f, targets, excluded)
        except DocumentReadError as e:
            print(f"  read_error: {e}")
            continue
        if raw is None:
            print(f"  no {kind.name} sheet")
            continue
        sd = normalize_sheet(raw.frame, raw.name, kind.header_fields, cfg.header_scan_rows, cfg.min_header_matches)
        print(
            f"  SHEET: {sd.sheet_name} header_row={sd.header_row + 1} "
            f"confident={sd.header_confident} columns={sorted(set(sd.header_map.values()))}"
        )
        for row in sd.rows[:3]:
            # dates and the like are shown via repr
            print(f"    row {row.row_number}: {{{', '.join(f'{k}: {v!r}' for k, v in row.values.items())}}}")
    return EXIT_SUCCESS_ALL


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # Only read sys.argv when called without arguments (tests pass [])
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"), override=True)

    try:
        cfg = apply_env_overrides(_resolve_config(args.config))
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    if args.debug:
        enable_debug(logger)
        logger.debug("debug mode enabled")

    kind = get_kind(args.kind or cfg.return_type)

    if args.files:
        files = list(args.files)
    else:
        directory = Path(cfg.source_directory)
        try:
            files = scan_input_files(directory)
        except ProcessingError as e:
            logger.error(str(e))
            return EXIT_FATAL
        logger.info(f"Processing files from: {directory}")

    if args.inspect_data:
        return asyncio.run(_inspect_data(files, kind, cfg))

    error_log = ErrorLogBuffer()
    with ProgressTracker(len(files)) as progress:
        result = asyncio.run(process_batch(files, kind, cfg, error_log=error_log, progress=progress))

    log_path = error_log.flush()
    if log_path is not None:
        logger.info(f"rejected rows and failed files written to {log_path}")

    gstin = args.gstin or cfg.supplier_gstin or result.source_gstin
    period = args.period or cfg.filing_period or result.source_filing_period or default_filing_period(result.aggregates)
    if not gstin:
        logger.error("supplier GSTIN missing: pass --gstin or set GSTR1_GSTIN")
        return EXIT_FATAL
    if not period or not _PERIOD.match(period):
        logger.error(f"filing period missing or not MMYYYY: {period!r}")
        return EXIT_FATAL

    invoices = [a for a in result.aggregates if isinstance(a, Invoice)]
    notes = [a for a in result.aggregates if isinstance(a, Note)]
    document = build_return_document(
        gstin,
        period,
        invoices,
        notes,
        filing_type=cfg.filing_type,
        doc_range_order=cfg.doc_range_order,
    )
    output_dir = args.output or Path(cfg.output_directory)
    out_path = write_return_document(document, output_dir / return_file_name(gstin, period, kind.name))
    logger.info(f"wrote {len(result.aggregates)} {kind.name} document(s) to {out_path}")
    if args.offline_csv:
        if kind.name == "B2B":
            for csv_path in write_offline_csv(invoices, output_dir, gstin, period):
                logger.info(f"wrote offline tool CSV {csv_path}")
        else:
            logger.warning(f"offline tool CSV export covers B2B only; skipped for {kind.name}")

    summary_line = render_summary_line(result, total_files=len(files))
    # log_summary adds the "SUMMARY " label
    log_summary(summary_line[len("SUMMARY ") :])

    if result.failed_files > 0 or result.summary.error > 0:
        return EXIT_PARTIAL_FAILURE
    return EXIT_SUCCESS_ALL


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
