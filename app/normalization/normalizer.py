"""Splits compound entitlement descriptions into project key and permission."""

from pathlib import Path

from app.ledger.csv_format import write_csv
from app.logging.logger import Log
from app.processor.models import NormalizedRecord, RevokedRecord

FORMATTED_HEADER = ["User SSO", "Account ID", "Project Key", "Access Permission", "Decision"]


def parse_entitlement(description: str) -> tuple[str, str]:
    """Parse 'P : PB-Admin' into ('PB', 'Admin').

    Anything that does not follow the '<type> : <project>-<permission>' shape
    yields ('', '') rather than an error.
    """
    _, colon, right = description.partition(":")
    right = right.strip()
    if not colon or not right:
        return "", ""
    project_key, dash, permission = right.partition("-")
    if not dash:
        return "", ""
    return project_key.strip(), permission.strip()


def normalize_record(record: RevokedRecord) -> NormalizedRecord:
    project_key, access_permission = parse_entitlement(record.entitlement_description)
    return NormalizedRecord(
        user_sso=record.user_sso.strip(),
        account_id=record.account_id.strip(),
        project_key=project_key,
        access_permission=access_permission,
        decision=record.decision.strip(),
    )


class EntitlementNormalizer:
    """Maps revoked records to normalized records and writes the formatted CSV."""

    def __init__(self, formatted_csv: Path) -> None:
        self._formatted_csv = formatted_csv

    def normalize(self, records: list[RevokedRecord]) -> list[NormalizedRecord]:
        normalized = [normalize_record(record) for record in records]
        malformed = sum(1 for r in normalized if not r.project_key)
        if malformed:
            Log.warning(f"{malformed} entitlement description(s) did not match 'X : KEY-Permission'")

        write_csv(
            self._formatted_csv,
            FORMATTED_HEADER,
            (
                [r.user_sso, r.account_id, r.project_key, r.access_permission, r.decision]
                for r in normalized
            ),
        )
        Log.info(f"Normalized {len(normalized)} records; saved to {self._formatted_csv}")
        return normalized
