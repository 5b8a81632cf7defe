from __future__ import annotations

import logging
import sys

from tqdm import tqdm

"""Application logging: labeled stdout lines.

Every line starts with a label (DEBUG, INFO, WARN, ERROR or SUMMARY) so the
output can be grepped and the final SUMMARY line parsed. Module loggers
(``logging.getLogger(__name__)`` under ``gstr1.``) propagate into the single
handler installed on the ``gstr1`` logger. Lines go through ``tqdm.write``
so they never tear an active progress bar.

Rejected rows are not logged here; see gstr1.logging.error_log.
"""

__all__ = [
    "APP_LOGGER_NAME",
    "SUMMARY_LEVEL",
    "LabeledFormatter",
    "setup_logging",
    "enable_debug",
    "get_logger",
    "log_summary",
    "reset_logging",
]

APP_LOGGER_NAME = "gstr1"
SUMMARY_LEVEL = 25  # between INFO and WARNING

_logger: logging.Logger | None = None


class LabeledFormatter(logging.Formatter):
    LABELS = {
        logging.DEBUG: "DEBUG",
        logging.INFO: "INFO",
        SUMMARY_LEVEL: "SUMMARY",
        logging.WARNING: "WARN",
        logging.ERROR: "ERROR",
        logging.CRITICAL: "CRITICAL",
    }

    def format(self, record: logging.LogRecord) -> str:
        label = self.LABELS.get(record.levelno, record.levelname)
        return f"{label} {record.getMessage()}"


class _BarSafeHandler(logging.Handler):
    """Writes to the current sys.stdout via tqdm.write."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            tqdm.write(self.format(record), file=sys.stdout)
        except Exception:
            self.handleError(record)


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure the ``gstr1`` logger once and return it."""
    global _logger
    if _logger is not None:
        return _logger

    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")
    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    handler = _BarSafeHandler(level)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)
    # root handlers (pytest, embedding apps) must not print every line twice
    logger.propagate = False

    _logger = logger
    return logger


def enable_debug(logger: logging.Logger) -> None:
    logger.setLevel(logging.DEBUG)
    for handler in logger.handlers:
        handler.setLevel(logging.DEBUG)


def get_logger() -> logging.Logger:
    return _logger if _logger is not None else setup_logging()


def log_summary(message: str) -> None:
    get_logger().log(SUMMARY_LEVEL, message)


def reset_logging() -> None:
    """Forget the configured logger (tests call this between cases)."""
    global _logger
    _logger = None
