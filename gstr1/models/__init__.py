"""Domain models for the GSTR-1 return builder.

This package contains the domain model classes used throughout the
application: raw row data, validated rows, invoice/note aggregates, rejected
rows and processing results.
"""

from .error_record import ErrorRecord
from .invoice import ErrorRow, Invoice, InvoiceRow, LineItem, Note, NoteRow
from .processing_result import FileStat, ProcessingResult, ValidationSummary
from .row_data import RowData

__all__ = [
    # Row level
    "RowData",
    "InvoiceRow",
    "NoteRow",
    "ErrorRow",
    "ErrorRecord",
    # Aggregates
    "LineItem",
    "Invoice",
    "Note",
    # Results
    "FileStat",
    "ProcessingResult",
    "ValidationSummary",
]
