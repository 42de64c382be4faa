"""Link GitHub teams to identity-provider groups."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from .client import GitHubOrgClient
from .errors import InvalidInputError, OperationFailedError
from .models import LookupStatus, Team

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectoryGroup:
    group_id: str
    display_name: str
    description: str = ""


@dataclass(frozen=True)
class TeamLinkResult:
    team: Team
    created: bool
    linked: bool


async def link_team_to_group(client: GitHubOrgClient, slug: str, group: DirectoryGroup) -> TeamLinkResult:
    """
    Make sure a team exists and is mapped to ``group``.

    Only a team the API reports as missing (404) is created, from the
    group's display name and description. The created team must end up
    with ``slug``, otherwise the next run would not find it again.

    Raises:
        OperationFailedError: The team lookup was rejected (e.g. 403)
        InvalidInputError: The created team got a different slug
    """
    lookup = await client.lookup_team(slug)
    created = False
    if lookup.status is LookupStatus.ERROR:
        raise OperationFailedError(f"Unable to look up team {slug}", lookup.status_code)
    if lookup.status is LookupStatus.NOT_FOUND:
        team = await client.create_team(group.display_name, group.description)
        created = True
        logger.info("Created team %s for group %s", team.slug, group.group_id)
        if team.slug != slug:
            raise InvalidInputError(
                f"Team created from '{group.display_name}' got slug {team.slug}, expected {slug}"
            )
    else:
        team = lookup.team

    linked = await client.sync_team_and_group(team.slug, group.group_id, group.display_name, group.description)
    logger.info("Team %s linked to group %s", team.slug, group.group_id)
    return TeamLinkResult(team=team, created=created, linked=linked)
