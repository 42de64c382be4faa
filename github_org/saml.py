"""Resolve a GitHub login to its SAML name identifier.

The GraphQL API has no filter on external identities, so the resolver
walks the organization's identities page by page until it finds the login.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .endpoints import EXTERNAL_IDENTITIES_PATH, EXTERNAL_IDENTITIES_QUERY
from .errors import HttpStatusError, OperationFailedError, UnexpectedResponseError

logger = logging.getLogger(__name__)

PAGE_SIZE = 100


@dataclass(frozen=True)
class SamlIdentity:
    login: Optional[str]
    name_id: Optional[str]

    @classmethod
    def from_node(cls, node: Dict[str, Any]) -> "SamlIdentity":
        user = node.get("user") or {}
        saml = node.get("samlIdentity") or {}
        return cls(login=user.get("login"), name_id=saml.get("nameId"))


def _connection(data: Dict[str, Any]) -> Dict[str, Any]:
    current: Any = data
    walked: List[str] = []
    for key in EXTERNAL_IDENTITIES_PATH:
        walked.append(key)
        current = current.get(key) if isinstance(current, dict) else None
        if not isinstance(current, dict):
            raise UnexpectedResponseError.missing(".".join(walked))
    return current


def _parse_page(data: Dict[str, Any]) -> Tuple[List[SamlIdentity], Optional[str]]:
    """Return the page's identities and the cursor of the next page, if any."""
    connection = _connection(data)
    nodes = connection.get("nodes")
    if not isinstance(nodes, list):
        raise UnexpectedResponseError.missing("externalIdentities.nodes")
    page_info = connection.get("pageInfo") or {}
    next_cursor = page_info.get("endCursor") if page_info.get("hasNextPage") else None
    identities = [SamlIdentity.from_node(node) for node in nodes if isinstance(node, dict)]
    return identities, next_cursor


def find_identity(identities: Iterable[SamlIdentity], login: str) -> Optional[SamlIdentity]:
    for identity in identities:
        # Not linked to a GitHub account yet
        if identity.login is None:
            continue
        if identity.login == login:
            return identity
    return None


class SamlIdentityResolver:
    def __init__(self, api_client, organization: str):
        self.api_client = api_client
        self.organization = organization

    async def fetch_page(self, cursor: Optional[str] = None) -> Tuple[List[SamlIdentity], Optional[str]]:
        variables = {"login": self.organization, "first": PAGE_SIZE, "after": cursor}
        try:
            data = await self.api_client.graphql(EXTERNAL_IDENTITIES_QUERY, variables)
        except HttpStatusError as exc:
            if not exc.is_client_error:
                raise
            logger.warning("SAML identity lookup for %s failed: %s", self.organization, exc)
            raise OperationFailedError("Unable to get SAML ID", exc.status_code) from exc
        return _parse_page(data)

    async def resolve(self, login: str) -> Optional[str]:
        """
        Return the SAML name identifier linked to ``login``.

        Stops at the first match without fetching further pages. Returns
        None once the last page has been scanned without a match.
        """
        cursor: Optional[str] = None
        pages = 0
        while True:
            identities, next_cursor = await self.fetch_page(cursor)
            pages += 1
            match = find_identity(identities, login)
            if match is not None:
                logger.debug("Found SAML identity for %s on page %d", login, pages)
                return match.name_id
            if next_cursor is None:
                logger.debug("No SAML identity for %s after %d pages", login, pages)
                return None
            cursor = next_cursor
