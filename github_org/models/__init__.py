"""
Domain records for the GitHub organization client.
"""

from .team import LookupStatus, Team, TeamLookup

__all__ = ["LookupStatus", "Team", "TeamLookup"]
