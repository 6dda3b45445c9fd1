import csv
from pathlib import Path

from app.extraction.base import BaseSpreadsheetReader, SheetData
from app.extraction.cells import header_names
from app.processor.exceptions import SpreadsheetReadError


class CsvReader(BaseSpreadsheetReader):
    """Reads a decision sheet exported as CSV."""

    def read(self, path: Path) -> SheetData:
        try:
            with path.open(newline="", encoding="utf-8-sig") as fh:
                raw_rows = [row for row in csv.reader(fh) if any(c.strip() for c in row)]
        except (OSError, UnicodeDecodeError, csv.Error) as exc:
            raise SpreadsheetReadError(f"CSV read failed for {path}: {exc}") from exc

        if not raw_rows:
            return SheetData()
        header = header_names(list(raw_rows[0]))
        rows = [
            {name: row[i] if i < len(row) else "" for i, name in enumerate(header)}
            for row in raw_rows[1:]
        ]
        return SheetData(header=header, rows=rows)
