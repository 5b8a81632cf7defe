from __future__ import annotations

from ..models.processing_result import ProcessingResult

"""SUMMARY line rendering.

Format:
SUMMARY files={total}/{total} success={success} failed={failed} rows={rows}
valid={valid} errors={errors} documents={documents} elapsed_sec={elapsed}
"""

__all__ = [
    "render_summary_line",
    "format_seconds",
]


def format_seconds(seconds: float) -> str:
    """Integral values without a fraction, tiny values without an exponent."""
    if seconds == 0:
        return "0"
    if seconds == int(seconds):
        return str(int(seconds))
    if seconds < 0.01:
        return f"{seconds:.6f}".rstrip("0").rstrip(".")
    return f"{seconds:.3f}".rstrip("0").rstrip(".")


def render_summary_line(result: ProcessingResult, total_files: int | None = None) -> str:
    """Render the SUMMARY line for a finished batch.

    ``total_files`` defaults to the number of files with statistics.

    Examples:
        >>> from gstr1.models import ProcessingResult
        >>> render_summary_line(ProcessingResult(kind="B2B"))
        'SUMMARY files=0/0 success=0 failed=0 rows=0 valid=0 errors=0 documents=0 elapsed_sec=0'
    """
    total = len(result.file_stats) if total_files is None else total_files
    return (
        f"SUMMARY files={total}/{total} "
        f"success={result.success_files} "
        f"failed={result.failed_files} "
        f"rows={result.summary.total} "
        f"valid={result.summary.valid} "
        f"errors={result.summary.error} "
        f"documents={len(result.aggregates)} "
        f"elapsed_sec={format_seconds(result.elapsed_seconds)}"
    )
