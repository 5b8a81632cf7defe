from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Sequence
from datetime import UTC, datetime
from pathlib import Path

from ..config.loader import ImportConfig, default_config
from ..excel.reader import (
    CorruptFileError,
    ProcessingError,
    SUPPORTED_EXTENSIONS,
    UnsupportedFileError,
    load_sheet,
    normalize_sheet,
    read_document,
)
from ..logging.error_log import ErrorLogBuffer
from ..models.error_record import FILE_LEVEL_SHEET, ErrorRecord
from ..models.invoice import ErrorRow
from ..models.processing_result import FileStat, ProcessingResult
from ..models.row_data import RowData
from .duplicates import DuplicateTracker
from .grouping import Grouper
from .json_import import parse_return_json
from .kinds import DocumentKind, sheet_keywords
from .normalize import normalize_row
from .progress import ProgressTracker
from .validation import RowValidator

"""Orchestrator: runs the row pipeline over one document or a batch.

Per document: read (the only awaited step) -> locate sheet and header ->
normalise -> validate -> dedupe -> group. Rejected rows never stop a
document; a document that cannot be read or parsed is recorded as a failed
file and the batch moves on to the next one.
"""

__all__ = [
    "ProcessingError",
    "FILE_LEVEL_SHEET",
    "scan_input_files",
    "process_rows",
    "process_document",
    "process_batch",
]

logger = logging.getLogger(__name__)


def scan_input_files(directory: Path) -> list[Path]:
    """Scan directory for input documents (non-recursive).

    Args:
        directory: Directory holding .xlsx / .csv / .json documents

    Returns:
        Matching file paths, sorted by name

    Raises:
        ProcessingError: If directory doesn't exist or can't be read
    """
    if not directory.exists():
        raise ProcessingError(f"Directory not found: {directory}")

    if not directory.is_dir():
        raise ProcessingError(f"Path is not a directory: {directory}")

    try:
        return sorted(
            p for p in directory.iterdir() if p.is_file() and p.suffix.lower() in SUPPORTED_EXTENSIONS
        )
    except OSError as e:
        raise ProcessingError(f"Error reading directory {directory}: {e}") from e


def process_rows(
    rows: Iterable[RowData],
    kind: DocumentKind,
    tracker: DuplicateTracker,
    source: str,
    config: ImportConfig | None = None,
) -> ProcessingResult:
    """Run normalise -> validate -> dedupe -> group over one document's rows.

    Synchronous and free of I/O. ``tracker`` is updated in place so later
    documents see this document's numbers.
    """
    config = config or default_config()
    validator = RowValidator(kind, config.rate_slabs, config.split_half_rate)
    grouper = Grouper(config.invoice_value_mode)
    result = ProcessingResult(kind=kind.name)

    for row in rows:
        result.summary.total += 1
        cleaned = normalize_row(row.values, kind, config.rate_slabs, config.split_half_rate)
        outcome = validator.validate(cleaned)
        if not outcome.ok:
            result.errors.append(ErrorRow(row.row_number, dict(row.values), outcome.messages, source))
            result.summary.error += 1
            continue

        record = outcome.record
        if not tracker.register(record, source):
            message = kind.duplicate_message(record.document_number)
            result.errors.append(ErrorRow(row.row_number, dict(row.values), [message], source))
            result.summary.error += 1
            continue

        grouper.add(record)
        result.summary.valid += 1

    result.aggregates = grouper.aggregates
    result.end_time = datetime.now(UTC)
    logger.debug(
        "%s: rows=%d valid=%d errors=%d documents=%d",
        source,
        result.summary.total,
        result.summary.valid,
        result.summary.error,
        len(result.aggregates),
    )
    return result


def _import_previous_return(
    data: bytes, path: Path, kind: DocumentKind, tracker: DuplicateTracker
) -> ProcessingResult:
    """Imported documents count as one row each (numbered in file order) and
    claim their numbers in the tracker like spreadsheet lines do."""
    parsed = parse_return_json(data)
    documents = parsed.invoices if kind.name == "B2B" else parsed.notes
    result = ProcessingResult(
        kind=kind.name,
        source_gstin=parsed.gstin or None,
        source_filing_period=parsed.filing_period or None,
    )
    for position, document in enumerate(documents, start=1):
        result.summary.total += 1
        if not tracker.register(document, path.name):
            number = document.document_number
            raw = {"gstin": document.gstin, kind.number_field: number}
            result.errors.append(ErrorRow(position, raw, [kind.duplicate_message(number)], path.name))
            result.summary.error += 1
            continue
        result.aggregates.append(document)
        result.summary.valid += 1
    logger.info("imported %d %s document(s) from %s", len(result.aggregates), kind.name, path.name)
    return result


async def process_document(
    path: Path,
    kind: DocumentKind,
    tracker: DuplicateTracker,
    config: ImportConfig | None = None,
) -> ProcessingResult:
    """Read one document and run it through the pipeline.

    Raises:
        DocumentReadError: unsupported, unreadable or corrupt document
    """
    config = config or default_config()
    started = time.perf_counter()
    data = await read_document(path)

    if path.suffix.lower() == ".json":
        result = _import_previous_return(data, path, kind, tracker)
        sheet_name = None
        confident = True
    else:
        targets, excluded = sheet_keywords(kind, config.sheet_keywords)
        raw = load_sheet(data, path, targets, excluded)
        if raw is None:
            result = ProcessingResult(kind=kind.name)
            sheet_name = None
            confident = True
        else:
            sheet = normalize_sheet(
                raw.frame,
                raw.name,
                kind.header_fields,
                config.header_scan_rows,
                config.min_header_matches,
            )
            result = process_rows(sheet.rows, kind, tracker, path.name, config)
            sheet_name = sheet.sheet_name
            confident = sheet.header_confident

    result.file_stats.append(
        FileStat(
            file_name=path.name,
            status="success",
            rows=result.summary.total,
            valid_rows=result.summary.valid,
            error_rows=result.summary.error,
            elapsed_seconds=time.perf_counter() - started,
            sheet=sheet_name,
            header_confident=confident,
        )
    )
    result.end_time = datetime.now(UTC)
    return result


def _error_type(error: ProcessingError) -> str:
    if isinstance(error, UnsupportedFileError):
        return "UNSUPPORTED_FILE"
    if isinstance(error, CorruptFileError):
        return "CORRUPT_FILE"
    return "READ_ERROR"


async def process_batch(
    paths: Sequence[Path],
    kind: DocumentKind,
    config: ImportConfig | None = None,
    tracker: DuplicateTracker | None = None,
    error_log: ErrorLogBuffer | None = None,
    progress: ProgressTracker | None = None,
) -> ProcessingResult:
    """Process documents strictly one after another and merge the results.

    A failing document is logged, written to the error log and counted as a
    failed file; the remaining documents are still processed.
    """
    config = config or default_config()
    shared = tracker if tracker is not None else DuplicateTracker()
    batch = ProcessingResult(kind=kind.name)

    for path in paths:
        if progress is not None:
            progress.start_file(path)
        doc_tracker = DuplicateTracker() if config.duplicate_scope == "file" else shared
        started = time.perf_counter()
        try:
            result = await process_document(path, kind, doc_tracker, config)
        except ProcessingError as e:
            logger.error("file %s failed: %s", path.name, e)
            if error_log is not None:
                error_log.append(ErrorRecord.for_file(path.name, _error_type(e), str(e)))
            batch.file_stats.append(
                FileStat(
                    file_name=path.name,
                    status="failed",
                    rows=0,
                    valid_rows=0,
                    error_rows=0,
                    elapsed_seconds=time.perf_counter() - started,
                    error=str(e),
                )
            )
            if progress is not None:
                progress.finish_file(success=False)
            continue

        if error_log is not None and result.errors:
            stat = result.file_stats[-1]
            error_log.append_rows(path.name, stat.sheet or "", result.errors)
        batch.merge(result)
        if progress is not None:
            progress.finish_file(success=True)
            progress.show_counts(batch.summary)

    batch.end_time = datetime.now(UTC)
    return batch
