from abc import ABC, abstractmethod
from typing import Any


class BasePermissionAuthority(ABC):
    """Contract for permission-authority clients."""

    @abstractmethod
    def build_query_url(self, project_key: str, user_sso: str) -> str:
        """Return the full URL that lists a user's grants inside a project."""

    @abstractmethod
    def fetch_user_permissions(self, project_key: str, user_sso: str) -> dict[str, Any]:
        """Return the decoded JSON body for the permission query.

        Raises:
            AuthorityError: on any transport, status or decoding failure.
        """

    def close(self) -> None:
        """Release connections held by the client."""
