from app.processor.models import NormalizedRecord, VerificationOutcome


def make_record(
    user_sso: str = "jdoe",
    project_key: str = "PB",
    access_permission: str = "Admin",
) -> NormalizedRecord:
    return NormalizedRecord(
        user_sso=user_sso,
        account_id="123",
        project_key=project_key,
        access_permission=access_permission,
        decision="Revoked",
    )


def make_outcome(
    record: NormalizedRecord | None = None,
    values: list[object] | None = None,
    authority_error: str | None = None,
) -> VerificationOutcome:
    record = record or make_record()
    values = values or []
    return VerificationOutcome(
        record=record,
        has_access=len(values) > 0,
        timestamp="2025-03-04 10:11:12",
        safe_timestamp="2025-03-04_10-11-12",
        query_url=(
            f"http://bitbucket.example.com/rest/api/1.0/projects/{record.project_key}"
            f"/permissions/users?filter={record.user_sso}"
        ),
        raw_response={"values": values},
        authority_error=authority_error,
    )
