class AuthorityError(Exception):
    """Raised when the permission authority cannot answer a query."""


class AuthorityNetworkError(AuthorityError):
    """Raised when the call fails due to network/infrastructure issues."""


class AuthorityResponseError(AuthorityError):
    """Raised when the authority answers with an error status or an unreadable body."""
