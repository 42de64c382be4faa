"""
GitHub organization client.
Team, member and repository management over the GitHub REST and GraphQL APIs,
plus linking teams to identity-provider groups.
"""
__version__ = "1.0.0"

from .api_client import ApiClient, ApiResponse
from .client import GitHubOrgClient
from .directory_sync import DirectoryGroup, TeamLinkResult, link_team_to_group
from .entrypoints import run_client_sync
from .errors import (
    ConfigurationError,
    GitHubOrgError,
    HttpStatusError,
    InvalidInputError,
    OperationFailedError,
    PaginationLimitError,
    UnexpectedResponseError,
)
from .models import LookupStatus, Team, TeamLookup
from .settings import ClientSettings, load_client_settings

__all__ = [
    "ApiClient",
    "ApiResponse",
    "ClientSettings",
    "ConfigurationError",
    "DirectoryGroup",
    "GitHubOrgClient",
    "GitHubOrgError",
    "HttpStatusError",
    "InvalidInputError",
    "LookupStatus",
    "OperationFailedError",
    "PaginationLimitError",
    "Team",
    "TeamLinkResult",
    "TeamLookup",
    "UnexpectedResponseError",
    "link_team_to_group",
    "load_client_settings",
    "run_client_sync",
]
