"""
Authentication handling for the GitHub REST and GraphQL APIs.
Builds bearer-token request headers from a personal access token.
"""

import logging
from typing import Dict, Optional

from ..errors import ConfigurationError

logger = logging.getLogger(__name__)

JSON_ACCEPT = "application/json"


class GitHubAuthenticator:
    """Handles authentication headers for GitHub API requests."""

    def __init__(self, base_url: str):
        self.base_url = base_url

        # Credentials
        self.api_token: Optional[str] = None

        # Headers will be set after authentication setup
        self.headers: Optional[Dict[str, str]] = None

    def set_api_token(self, api_token: str):
        """Set the personal access token used as bearer credential."""
        self.api_token = api_token

    def setup_authentication(self) -> Dict[str, str]:
        """Build authentication headers from the configured token."""
        if not self.api_token:
            raise ConfigurationError("No authentication credentials available (GitHub token is empty)")

        self.headers = {
            "Authorization": f"Bearer {self.api_token}",
            "Content-Type": "application/json",
            "Accept": JSON_ACCEPT,
        }
        logger.debug("Using bearer token authentication for %s", self.base_url)
        return self.headers

    def get_headers(self) -> Dict[str, str]:
        """Get current authentication headers, building them on first use."""
        if self.headers is None:
            return self.setup_authentication()
        return self.headers


def redact_headers(headers: Dict[str, str]) -> Dict[str, str]:
    """Return a copy of headers with the Authorization value masked."""
    redacted = dict(headers)
    for key in list(redacted.keys()):
        if key.lower() == "authorization":
            redacted[key] = "***REDACTED***"
    return redacted
