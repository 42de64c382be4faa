"""
Endpoint definitions for the GitHub API.
"""

from .rest_endpoints import endpoint_path, get_rest_endpoints
from .graphql_queries import EXTERNAL_IDENTITIES_PATH, EXTERNAL_IDENTITIES_QUERY

__all__ = ["endpoint_path", "get_rest_endpoints", "EXTERNAL_IDENTITIES_PATH", "EXTERNAL_IDENTITIES_QUERY"]
