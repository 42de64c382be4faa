"""
Authentication helpers for the GitHub organization client.
"""

from .authentication import GitHubAuthenticator, redact_headers
from .credential_provider import CredentialProvider, JsonCredentialProvider

__all__ = ["GitHubAuthenticator", "redact_headers", "CredentialProvider", "JsonCredentialProvider"]
