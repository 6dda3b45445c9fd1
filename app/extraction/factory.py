from pathlib import Path

from app.config.settings import Settings
from app.extraction.base import BaseSpreadsheetReader
from app.extraction.csv_adapter import CsvReader
from app.extraction.openpyxl_adapter import OpenpyxlReader


class SpreadsheetReaderFactory:
    """Creates the spreadsheet reader from settings, or from the file suffix on 'auto'."""

    ADAPTERS: dict[str, type[BaseSpreadsheetReader]] = {
        "openpyxl": OpenpyxlReader,
        "csv": CsvReader,
    }

    SUFFIXES: dict[str, str] = {
        ".xlsx": "openpyxl",
        ".xlsm": "openpyxl",
        ".csv": "csv",
    }

    @classmethod
    def create(cls, settings: Settings, path: Path) -> BaseSpreadsheetReader:
        engine = settings.spreadsheet_engine.lower()
        if engine == "auto":
            suffix = path.suffix.lower()
            engine = cls.SUFFIXES.get(suffix, "")
            if not engine:
                raise ValueError(
                    f"Cannot pick a spreadsheet reader for '{suffix}' files. "
                    f"Supported: {list(cls.SUFFIXES)}"
                )
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown spreadsheet engine '{engine}'. Choose from: {['auto', *cls.ADAPTERS]}"
            )
        return adapter_cls()
