"""Team record and the result of looking one up."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..errors import InvalidInputError, UnexpectedResponseError

REQUIRED_FIELDS = ("id", "name", "slug")


@dataclass(frozen=True)
class Team:
    """A GitHub team as returned by the REST API."""

    id: int
    name: str
    slug: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Team":
        """
        Build a team from a decoded JSON object.

        Fields are checked in a fixed order (id, name, slug) and the first
        absent or empty one is named in the raised error.

        Raises:
            InvalidInputError: A required field is missing or empty
        """
        for field in REQUIRED_FIELDS:
            if not data.get(field):
                raise InvalidInputError.missing_field(field)
        return cls(id=data["id"], name=data["name"], slug=data["slug"])

    @classmethod
    def from_response(cls, response) -> "Team":
        """Build a team from an API response carrying a JSON object body."""
        payload = response.json()
        if not isinstance(payload, dict):
            raise UnexpectedResponseError.missing("team object")
        return cls.from_dict(payload)


class LookupStatus(str, enum.Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    ERROR = "error"


@dataclass(frozen=True)
class TeamLookup:
    """Outcome of a read-only team lookup."""

    status: LookupStatus
    team: Optional[Team] = None
    status_code: Optional[int] = None

    @classmethod
    def found(cls, team: Team) -> "TeamLookup":
        return cls(LookupStatus.FOUND, team=team)

    @classmethod
    def not_found(cls, status_code: int = 404) -> "TeamLookup":
        return cls(LookupStatus.NOT_FOUND, status_code=status_code)

    @classmethod
    def error(cls, status_code: int) -> "TeamLookup":
        return cls(LookupStatus.ERROR, status_code=status_code)

    @property
    def is_found(self) -> bool:
        return self.status is LookupStatus.FOUND
