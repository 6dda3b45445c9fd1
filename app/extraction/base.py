from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class SheetData:
    """Header and data rows of the first sheet, all cells as text."""

    header: list[str] = field(default_factory=list)
    rows: list[dict[str, str]] = field(default_factory=list)


class BaseSpreadsheetReader(ABC):
    """Contract for all decision-spreadsheet adapters."""

    @abstractmethod
    def read(self, path: Path) -> SheetData:
        """Read the first sheet of a spreadsheet.

        The first non-empty row is the header. Fully blank rows are skipped and
        missing cells become empty strings.

        Raises:
            SpreadsheetReadError: if the file cannot be parsed.
        """
