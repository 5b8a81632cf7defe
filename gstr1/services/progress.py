from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from tqdm import tqdm

from ..models.processing_result import ValidationSummary

"""Document progress bar.

A single tqdm bar per batch, one step per document, with the running
valid/error row counts as postfix. Nothing is drawn unless stdout is a
terminal; redirected output only carries the labeled log lines.
"""

__all__ = [
    "ProgressTracker",
    "is_tty_enabled",
]

NAME_WIDTH = 24


def is_tty_enabled() -> bool:
    return sys.stdout.isatty()


def _short_name(path: Path) -> str:
    name = path.name
    return name if len(name) <= NAME_WIDTH else name[: NAME_WIDTH - 3] + "..."


class ProgressTracker:
    def __init__(self, total_files: int, *, description: str = "Reading documents") -> None:
        self.total_files = total_files
        self.description = description
        self.current_file = 0
        self.failed_files = 0
        self.enabled = is_tty_enabled()
        self.pbar: Any = (
            tqdm(total=total_files, desc=description, unit="doc", ncols=80, ascii=True, leave=True)
            if self.enabled
            else None
        )

    def start_file(self, file_path: Path) -> None:
        self.current_file += 1
        if self.pbar is not None:
            self.pbar.set_description(f"{self.description} ({_short_name(file_path)})")

    def finish_file(self, success: bool = True) -> None:
        self.failed_files += 0 if success else 1
        if self.pbar is None:
            return
        self.pbar.update(1)
        self.pbar.set_description(self.description)

    def show_counts(self, summary: ValidationSummary) -> None:
        """Running row counters next to the bar."""
        if self.pbar is not None:
            self.pbar.set_postfix(valid=summary.valid, errors=summary.error, refresh=False)

    def close(self) -> None:
        if self.pbar is not None:
            self.pbar.close()
        self.pbar = None

    def __enter__(self) -> ProgressTracker:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
