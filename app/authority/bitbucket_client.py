from typing import Any
from urllib.parse import quote

import httpx

from app.authority.client_base import BasePermissionAuthority
from app.authority.exceptions import AuthorityNetworkError, AuthorityResponseError

PERMISSIONS_PATH = "/rest/api/1.0/projects/{project_key}/permissions/users"


def authority_base_url(host: str, default_scheme: str = "http") -> str:
    """Prefix `host` with a scheme unless it already carries one."""
    host = host.strip().rstrip("/")
    if "://" in host:
        return host
    return f"{default_scheme}://{host}"


class BitbucketAuthorityClient(BasePermissionAuthority):
    """Queries Bitbucket Server project permissions with basic auth over httpx."""

    def __init__(
        self,
        *,
        base_url: str,
        username: str,
        password: str,
        timeout_seconds: int,
        verify_tls: bool = True,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url
        self._client = httpx.Client(
            auth=httpx.BasicAuth(username, password),
            timeout=timeout_seconds,
            verify=verify_tls,
            transport=transport,
        )

    def build_query_url(self, project_key: str, user_sso: str) -> str:
        path = PERMISSIONS_PATH.format(project_key=project_key)
        return f"{self._base_url}{path}?filter={quote(user_sso, safe='')}"

    def fetch_user_permissions(self, project_key: str, user_sso: str) -> dict[str, Any]:
        url = self.build_query_url(project_key, user_sso)
        try:
            response = self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise AuthorityResponseError(
                f"Bitbucket returned HTTP {exc.response.status_code} for {url}"
            ) from exc
        except httpx.InvalidURL as exc:
            raise AuthorityResponseError(
                f"Cannot build a valid request URL from {url!r}: {exc}"
            ) from exc
        except httpx.HTTPError as exc:
            raise AuthorityNetworkError(f"Bitbucket network error for {url}: {exc}") from exc

        try:
            body = response.json()
        except ValueError as exc:
            raise AuthorityResponseError(f"Bitbucket returned invalid JSON for {url}") from exc
        if not isinstance(body, dict):
            raise AuthorityResponseError(f"Bitbucket returned a non-object body for {url}")
        return body

    def close(self) -> None:
        self._client.close()
