"""Organization-scoped operations on teams, members, repositories and workflows."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .endpoints import endpoint_path, get_rest_endpoints
from .errors import HttpStatusError, InvalidInputError, OperationFailedError
from .models import Team, TeamLookup
from .pagination import DEFAULT_PER_PAGE, fetch_paginated
from .saml import SamlIdentityResolver

logger = logging.getLogger(__name__)


class GitHubOrgClient:
    """
    Facade over the GitHub API for a single organization.

    Read-only lookups turn client errors (4xx) into absence; mutating
    operations turn them into ``InvalidInputError`` or ``OperationFailedError``
    carrying the original status code.
    """

    def __init__(self, organization: str, api_client):
        self.organization = organization
        self.api_client = api_client
        self.saml_resolver = SamlIdentityResolver(api_client, organization)

    def _path(self, name: str, **params: Any) -> str:
        return endpoint_path(name, org=self.organization, **params)

    async def lookup_team(self, slug: str) -> TeamLookup:
        try:
            response = await self.api_client.get(self._path("team", slug=slug))
        except HttpStatusError as exc:
            if not exc.is_client_error:
                raise
            status = exc.status_code
            if status == 404:
                return TeamLookup.not_found(status)
            return TeamLookup.error(status)
        return TeamLookup.found(Team.from_response(response))

    async def get_team(self, slug: str) -> Optional[Team]:
        """Get a team by slug, or None when the API answers with a client error."""
        lookup = await self.lookup_team(slug)
        return lookup.team if lookup.is_found else None

    async def create_team(self, name: str, description: str) -> Team:
        payload = {"name": name, "description": description, "privacy": "closed"}
        try:
            response = await self.api_client.post(self._path("teams"), payload)
        except HttpStatusError as exc:
            if not exc.is_client_error:
                raise
            status = exc.status_code
            logger.warning("Creating team %s in %s failed with HTTP %s", name, self.organization, status)
            raise OperationFailedError("Unable to create team", status) from exc
        return Team.from_response(response)

    async def set_team_description(self, slug: str, description: str) -> Team:
        """
        Update a team's description.

        The team's numeric id is resolved first; the two requests are not
        atomic.

        Raises:
            InvalidInputError: The team does not exist
            OperationFailedError: The update was rejected
        """
        try:
            response = await self.api_client.get(self._path("team", slug=slug))
        except HttpStatusError as exc:
            if not exc.is_client_error:
                raise
            raise InvalidInputError("Team does not exist", exc.status_code) from exc

        team_id = Team.from_response(response).id

        try:
            response = await self.api_client.patch(
                endpoint_path("team_by_id", team_id=team_id), {"description": description}
            )
        except HttpStatusError as exc:
            if not exc.is_client_error:
                raise
            status = exc.status_code
            logger.warning("Updating description of team %s failed with HTTP %s", slug, status)
            raise OperationFailedError("Unable to update description", status) from exc
        return Team.from_response(response)

    async def sync_team_and_group(self, slug: str, group_id: str, display_name: str, description: str) -> bool:
        """Map a team to exactly one identity-provider group, replacing any earlier mapping."""
        payload = {
            "groups": [
                {
                    "group_id": group_id,
                    "group_name": display_name,
                    "group_description": description,
                }
            ]
        }
        try:
            await self.api_client.patch(self._path("team_group_mappings", slug=slug), payload)
        except HttpStatusError as exc:
            if not exc.is_client_error:
                raise
            status = exc.status_code
            logger.warning("Syncing team %s with group %s failed with HTTP %s", slug, group_id, status)
            raise OperationFailedError("Unable to sync team and group", status) from exc
        return True

    async def _paginate(self, name: str) -> List[Dict[str, Any]]:
        if not get_rest_endpoints()[name]["supports_pagination"]:
            raise ValueError(f"Endpoint {name} does not support pagination")
        per_page = getattr(self.api_client, "per_page", DEFAULT_PER_PAGE)
        max_pages = getattr(self.api_client, "max_pages", None)
        return await fetch_paginated(self.api_client, self._path(name), per_page=per_page, max_pages=max_pages)

    async def get_repos(self) -> List[Dict[str, Any]]:
        return await self._paginate("repos")

    async def get_members(self) -> List[Dict[str, Any]]:
        return await self._paginate("members")

    async def dispatch_workflow(
        self,
        repo: str,
        workflow: str,
        ref: str,
        inputs: Optional[Dict[str, Any]] = None,
    ) -> bool:
        """Trigger a workflow_dispatch run. Inputs with empty values are not sent."""
        payload: Dict[str, Any] = {"ref": ref}
        filtered = {key: value for key, value in (inputs or {}).items() if value}
        if filtered:
            payload["inputs"] = filtered
        try:
            await self.api_client.post(self._path("workflow_dispatch", repo=repo, workflow=workflow), payload)
        except HttpStatusError as exc:
            if not exc.is_client_error:
                raise
            status = exc.status_code
            logger.warning("Dispatching %s in %s failed with HTTP %s", workflow, repo, status)
            raise OperationFailedError("Unable to dispatch workflow", status) from exc
        return True

    async def get_saml_id(self, login: str) -> Optional[str]:
        return await self.saml_resolver.resolve(login)
