"""CSV export utilities."""

from fintrack.csv.exporter import LedgerCsvExporter, CSV_COLUMNS

__all__ = [
    "LedgerCsvExporter",
    "CSV_COLUMNS",
]
