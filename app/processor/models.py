from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

REVOKED_DECISION = "Revoked"

DECISION_COLUMN = "Decision"
USER_SSO_COLUMN = "User SSO"
ACCOUNT_ID_COLUMN = "Account ID"
ENTITLEMENT_COLUMN = "Entitlement Description"


class AccessStatus(str, Enum):
    """Classification of a revoked entitlement after re-verification."""

    HAS_ACCESS = "HAS_ACCESS"
    NO_ACCESS = "NO_ACCESS"

    @classmethod
    def from_flag(cls, has_access: bool) -> "AccessStatus":
        return cls.HAS_ACCESS if has_access else cls.NO_ACCESS


@dataclass(frozen=True)
class RevokedRecord:
    """A spreadsheet row whose Decision cell is exactly 'Revoked'."""

    user_sso: str
    account_id: str
    entitlement_description: str
    decision: str
    values: tuple[str, ...] = ()


@dataclass(frozen=True)
class NormalizedRecord:
    """A revoked entitlement with the project key and permission split out."""

    user_sso: str
    account_id: str
    project_key: str
    access_permission: str
    decision: str


@dataclass(frozen=True)
class VerificationOutcome:
    """Result of one permission-authority query for a normalized record."""

    record: NormalizedRecord
    has_access: bool
    timestamp: str
    safe_timestamp: str
    query_url: str
    raw_response: dict[str, Any] = field(default_factory=dict)
    authority_error: str | None = None

    @property
    def status(self) -> AccessStatus:
        return AccessStatus.from_flag(self.has_access)


@dataclass(frozen=True)
class EvidenceArtifact:
    """HTML fact sheet and its screenshot for a single outcome."""

    outcome: VerificationOutcome
    html_path: Path
    image_path: Path
    viewport_height: int


@dataclass
class RunSummary:
    """Counts reported at the end of an audit run."""

    revoked: int = 0
    has_access: int = 0
    no_access: int = 0
    authority_errors: int = 0
    reports: list[Path] = field(default_factory=list)
