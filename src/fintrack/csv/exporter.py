"""CSV export of a user's income and expense ledger."""

import csv
import io
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO

from fintrack.domain.models import EntryType
from fintrack.services.ledger_service import LedgerService
from fintrack.services.category_service import CategoryService

CSV_COLUMNS = [
    "date",
    "type",
    "category",
    "amount",
    "source",
    "description",
]


class LedgerCsvExporter:
    """
    CSV exporter for ledger entries.

    Rows are written newest first, income and expenses interleaved by date.
    """

    def __init__(self, ledger_service: LedgerService, category_service: CategoryService):
        self._ledger = ledger_service
        self._categories = category_service

    def write(self, out: TextIO, user_id: str, entry_type: Optional[EntryType] = None) -> int:
        """
        Write the user's entries to an open text stream.

        Returns the number of data rows written.
        """
        category_names = {
            c.category_id: c.name for c in self._categories.list_categories(user_id)
        }
        types = [entry_type] if entry_type else [EntryType.INCOME, EntryType.EXPENSE]

        entries = []
        for t in types:
            entries.extend(self._ledger.list_entries(user_id, t))
        entries.sort(key=lambda e: (e.date, e.created_at or datetime.min), reverse=True)

        writer = csv.DictWriter(out, fieldnames=CSV_COLUMNS)
        writer.writeheader()
        for entry in entries:
            writer.writerow({
                "date": entry.date.isoformat(),
                "type": entry.entry_type.value,
                "category": category_names.get(entry.category_id, "") if entry.category_id else "",
                "amount": str(entry.amount),
                "source": entry.source or "",
                "description": entry.description or "",
            })
        return len(entries)

    def export_text(self, user_id: str, entry_type: Optional[EntryType] = None) -> str:
        """Return the CSV document as a string."""
        buffer = io.StringIO()
        self.write(buffer, user_id, entry_type)
        return buffer.getvalue()

    def export_csv(self, path: str, user_id: str, entry_type: Optional[EntryType] = None) -> int:
        """Export the user's entries to a CSV file."""
        file_path = Path(path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        with open(file_path, "w", newline="", encoding="utf-8") as csvfile:
            return self.write(csvfile, user_id, entry_type)
