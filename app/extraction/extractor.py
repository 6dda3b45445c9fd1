from collections.abc import Callable
from pathlib import Path

from app.extraction.base import BaseSpreadsheetReader
from app.ledger.csv_format import write_csv
from app.logging.logger import Log
from app.processor.exceptions import InputNotFoundError
from app.processor.models import (
    ACCOUNT_ID_COLUMN,
    DECISION_COLUMN,
    ENTITLEMENT_COLUMN,
    REVOKED_DECISION,
    USER_SSO_COLUMN,
    RevokedRecord,
)


def is_revoked(row: dict[str, str]) -> bool:
    """Exact, case-sensitive match on the trimmed Decision cell."""
    return row.get(DECISION_COLUMN, "").strip() == REVOKED_DECISION


class RecordExtractor:
    """Loads the decision sheet, keeps 'Revoked' rows and writes them to an audit CSV."""

    def __init__(
        self,
        reader_for: Callable[[Path], BaseSpreadsheetReader],
        revoked_csv: Path,
    ) -> None:
        self._reader_for = reader_for
        self._revoked_csv = revoked_csv

    def extract(self, path: Path) -> tuple[list[str], list[RevokedRecord]]:
        """Return the original header and the revoked records in sheet order.

        Raises:
            InputNotFoundError: if `path` does not exist.
            SpreadsheetReadError: if the file cannot be parsed.
        """
        if not path.is_file():
            raise InputNotFoundError(f"Input spreadsheet not found at: {path}")

        sheet = self._reader_for(path).read(path)
        if not sheet.rows:
            Log.warning(f"No data rows found in {path}")

        records = [
            RevokedRecord(
                user_sso=row.get(USER_SSO_COLUMN, "").strip(),
                account_id=row.get(ACCOUNT_ID_COLUMN, "").strip(),
                entitlement_description=row.get(ENTITLEMENT_COLUMN, "").strip(),
                decision=row.get(DECISION_COLUMN, "").strip(),
                values=tuple(row.get(name, "") for name in sheet.header),
            )
            for row in sheet.rows
            if is_revoked(row)
        ]

        write_csv(self._revoked_csv, sheet.header, (r.values for r in records))
        Log.info(
            f"Extracted {len(records)} revoked of {len(sheet.rows)} rows; "
            f"saved to {self._revoked_csv}"
        )
        return sheet.header, records
