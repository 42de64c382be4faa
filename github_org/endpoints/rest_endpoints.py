"""
REST endpoint definitions for the GitHub API.
Paths are relative to the API base URL and formatted with str.format.
"""

from typing import Dict, Any


def get_rest_endpoints() -> Dict[str, Any]:
    """Get REST endpoints configuration."""
    return {
        # Teams
        "team": {
            "path": "orgs/{org}/teams/{slug}",
            "supports_pagination": False,
        },
        "teams": {
            "path": "orgs/{org}/teams",
            "supports_pagination": False,
        },
        "team_by_id": {
            "path": "teams/{team_id}",
            "supports_pagination": False,
        },

        # Team sync (identity-provider group mappings)
        "team_group_mappings": {
            "path": "orgs/{org}/teams/{slug}/team-sync/group-mappings",
            "supports_pagination": False,
        },

        # Organization collections
        "repos": {
            "path": "orgs/{org}/repos",
            "supports_pagination": True,
        },
        "members": {
            "path": "orgs/{org}/members",
            "supports_pagination": True,
        },

        # Actions
        "workflow_dispatch": {
            "path": "repos/{org}/{repo}/actions/workflows/{workflow}/dispatches",
            "supports_pagination": False,
        },
    }


def endpoint_path(name: str, **params: Any) -> str:
    """Format the path of a named endpoint."""
    return get_rest_endpoints()[name]["path"].format(**params)
