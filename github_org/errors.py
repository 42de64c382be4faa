"""Error taxonomy for the GitHub organization client."""
from __future__ import annotations

from typing import Optional


class GitHubOrgError(Exception):
    """Base error. Carries the HTTP status code when one caused it."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class InvalidInputError(GitHubOrgError, ValueError):
    """Caller-correctable input, e.g. a team that does not exist."""

    def __init__(self, message: str, status_code: Optional[int] = None, field: Optional[str] = None):
        self.field = field
        super().__init__(message, status_code)

    @classmethod
    def missing_field(cls, field: str) -> "InvalidInputError":
        return cls(f"Missing data element: {field}", field=field)


class OperationFailedError(GitHubOrgError, RuntimeError):
    """A mutating call was rejected by the API."""


class HttpStatusError(GitHubOrgError):
    """Raised by the transport for any response with status >= 400."""

    def __init__(self, method: str, url: str, status_code: int, body: str = ""):
        self.method = method
        self.url = url
        self.body = body
        super().__init__(f"{method} {url} -> HTTP {status_code}", status_code)

    @property
    def is_client_error(self) -> bool:
        return 400 <= (self.status_code or 0) < 500


class UnexpectedResponseError(GitHubOrgError):
    """The response body does not have the documented shape."""

    @classmethod
    def missing(cls, field: str) -> "UnexpectedResponseError":
        return cls(f"Response missing expected field: {field}")


class PaginationLimitError(UnexpectedResponseError):
    """The server kept advertising a next page past the configured cap."""


class ConfigurationError(GitHubOrgError):
    """Missing credentials or an unreadable configuration file."""
