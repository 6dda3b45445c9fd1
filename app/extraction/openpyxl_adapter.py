from pathlib import Path

import openpyxl

from app.extraction.base import BaseSpreadsheetReader, SheetData
from app.extraction.cells import cell_to_text, header_names
from app.processor.exceptions import SpreadsheetReadError


class OpenpyxlReader(BaseSpreadsheetReader):
    """Reads .xlsx/.xlsm workbooks with openpyxl; only the first sheet is used."""

    def read(self, path: Path) -> SheetData:
        try:
            workbook = openpyxl.load_workbook(path, read_only=True, data_only=True)
        except Exception as exc:
            raise SpreadsheetReadError(f"openpyxl could not open {path}: {exc}") from exc
        try:
            if not workbook.worksheets:
                return SheetData()
            raw_rows = [
                list(row)
                for row in workbook.worksheets[0].iter_rows(values_only=True)
                if any(cell_to_text(cell).strip() for cell in row)
            ]
        finally:
            workbook.close()

        if not raw_rows:
            return SheetData()
        header = header_names(raw_rows[0])
        rows = [
            {name: cell_to_text(row[i]) if i < len(row) else "" for i, name in enumerate(header)}
            for row in raw_rows[1:]
        ]
        return SheetData(header=header, rows=rows)
