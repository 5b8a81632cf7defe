from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

from gstr1.models.processing_result import ValidationSummary
from gstr1.services.progress import ProgressTracker, is_tty_enabled


def test_is_tty_enabled_returns_stdout_isatty():
    with patch("sys.stdout.isatty", return_value=True):
        assert is_tty_enabled() is True
    with patch("sys.stdout.isatty", return_value=False):
        assert is_tty_enabled() is False


def test_tracker_disabled_without_tty():
    with patch("gstr1.services.progress.is_tty_enabled", return_value=False):
        tracker = ProgressTracker(2)
    assert tracker.pbar is None
    tracker.start_file(Path("a.xlsx"))
    tracker.finish_file(success=False)
    tracker.show_counts(ValidationSummary(total=1, valid=1))
    tracker.close()
    assert tracker.current_file == 1
    assert tracker.failed_files == 1


def test_tracker_drives_tqdm_on_tty():
    with patch("gstr1.services.progress.is_tty_enabled", return_value=True), patch(
        "gstr1.services.progress.tqdm"
    ) as mock_tqdm:
        with ProgressTracker(3, description="Reading") as tracker:
            tracker.start_file(Path("sales.xlsx"))
            tracker.finish_file()
            tracker.show_counts(ValidationSummary(total=4, valid=3, error=1))
        bar = mock_tqdm.return_value
    mock_tqdm.assert_called_once()
    assert mock_tqdm.call_args.kwargs["total"] == 3
    bar.set_description.assert_any_call("Reading (sales.xlsx)")
    bar.update.assert_called_once_with(1)
    bar.set_postfix.assert_called_once_with(valid=3, errors=1, refresh=False)
    bar.close.assert_called_once()


def test_long_file_names_are_shortened():
    with patch("gstr1.services.progress.is_tty_enabled", return_value=True), patch(
        "gstr1.services.progress.tqdm"
    ) as mock_tqdm:
        tracker = ProgressTracker(1)
        tracker.start_file(Path("a_very_long_sales_register_name_2025.xlsx"))
    label = mock_tqdm.return_value.set_description.call_args.args[0]
    assert label == "Reading documents (a_very_long_sales_reg...)"
