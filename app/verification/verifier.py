from collections.abc import Callable
from datetime import datetime
from typing import Any

from app.authority.client_base import BasePermissionAuthority
from app.authority.exceptions import AuthorityError
from app.logging.logger import Log
from app.processor.models import NormalizedRecord, VerificationOutcome

DISPLAY_TIMESTAMP = "%Y-%m-%d %H:%M:%S"
SAFE_TIMESTAMP = "%Y-%m-%d_%H-%M-%S"


def has_granted_values(response: dict[str, Any]) -> bool:
    """True iff the body's 'values' is a non-empty list."""
    values = response.get("values")
    return isinstance(values, list) and len(values) > 0


class AccessVerifier:
    """Re-checks one revoked entitlement against the permission authority.

    Each record gets exactly one call. A failed call is recorded as an empty
    result (NO_ACCESS) with the error kept on the outcome; it is never retried.
    """

    def __init__(
        self,
        authority: BasePermissionAuthority,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._authority = authority
        self._clock = clock

    def verify(self, record: NormalizedRecord) -> VerificationOutcome:
        query_url = self._authority.build_query_url(record.project_key, record.user_sso)
        error: str | None = None
        try:
            response = self._authority.fetch_user_permissions(record.project_key, record.user_sso)
        except AuthorityError as exc:
            Log.warning(
                f"Permission query failed for {record.user_sso} in '{record.project_key}', "
                f"recording NO_ACCESS: {exc}"
            )
            response = {"values": []}
            error = str(exc)

        checked_at = self._clock()
        outcome = VerificationOutcome(
            record=record,
            has_access=has_granted_values(response),
            timestamp=checked_at.strftime(DISPLAY_TIMESTAMP),
            safe_timestamp=checked_at.strftime(SAFE_TIMESTAMP),
            query_url=query_url,
            raw_response=response,
            authority_error=error,
        )
        if outcome.has_access:
            Log.warning(
                f"{record.user_sso} still has access to '{record.project_key}' "
                f"despite a Revoked decision"
            )
        else:
            Log.info(f"{record.user_sso} / {record.project_key}: {outcome.status.value}")
        return outcome
