from app.ledger.csv_format import append_csv_row, write_csv
from app.logging.logger import Log
from app.processor.layout import OutputLayout
from app.processor.models import AccessStatus, EvidenceArtifact, VerificationOutcome

LEDGER_HEADER = [
    "Username",
    "Account ID",
    "Project Key",
    "Access Permission",
    "Access Status",
    "Timestamp",
    "Screenshot File",
]


class LedgerNotOpenError(RuntimeError):
    """Raised when a row is appended before the ledgers were opened."""


class ResultLedger:
    """Two append-only CSV logs, one per access status.

    `open` truncates both files to their header; each `append` adds one row to
    the log matching the outcome's status and never touches earlier rows.
    """

    def __init__(self, layout: OutputLayout) -> None:
        self._layout = layout
        self._counts: dict[AccessStatus, int] = {}

    def open(self) -> None:
        for status in AccessStatus:
            write_csv(self._layout.ledger_path(status), LEDGER_HEADER, [])
            self._counts[status] = 0

    def append(self, outcome: VerificationOutcome, artifact: EvidenceArtifact) -> None:
        if not self._counts:
            raise LedgerNotOpenError("ResultLedger.open() must be called before append()")
        if artifact.outcome is not outcome:
            raise ValueError("Evidence artifact belongs to a different outcome")
        record = outcome.record
        append_csv_row(
            self._layout.ledger_path(outcome.status),
            [
                record.user_sso,
                record.account_id,
                record.project_key,
                record.access_permission,
                outcome.status.value,
                outcome.timestamp,
                artifact.image_path,
            ],
        )
        self._counts[outcome.status] += 1

    def count(self, status: AccessStatus) -> int:
        return self._counts.get(status, 0)

    def log_locations(self) -> None:
        for status in AccessStatus:
            Log.info(
                f"{self.count(status)} {status.value} row(s) in {self._layout.ledger_path(status)}"
            )
