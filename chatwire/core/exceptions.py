"""
Exception classes for chatwire.

Every failure of a remote call surfaces as a RemoteOperationError so callers
of entity mutations only need to handle one family of errors.
"""
from typing import Optional


class ChatwireException(Exception):
    """Base exception for the chatwire library."""
    pass


class RemoteOperationError(ChatwireException):
    """
    Raised when a remote API call fails.

    Not retried or recovered by the library; callers own retry policy.
    """

    def __init__(
        self,
        detail: str,
        method: Optional[str] = None,
        path: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(detail)
        self.detail = detail
        self.method = method
        self.path = path
        self.status_code = status_code


class RemoteHTTPError(RemoteOperationError):
    """
    Raised when the API returns a non-2xx response.

    This occurs when:
    - Authentication fails (401/403)
    - The resource does not exist (404)
    - The payload is rejected by validation (400)
    """

    def __init__(self, status_code: int, detail: str, method: Optional[str] = None, path: Optional[str] = None):
        super().__init__(detail, method=method, path=path, status_code=status_code)


class RemoteNetworkError(RemoteOperationError):
    """
    Raised when the request never produced a response.

    This occurs when:
    - Connection timeout
    - DNS resolution failure
    - Connection reset or TLS errors
    """
    pass
