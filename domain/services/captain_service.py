"""
Captain selection domain service.

The captain is the highest-scoring member of a team; ties are broken
uniformly at random.
"""

import random

from domain.models.participant import Participant
from domain.models.team import Team


class CaptainService:
    """
    Pure domain service for picking and surfacing team captains.

    The random source is injected so tie-breaks are reproducible in tests.
    """

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    def get_captain(self, team: Team) -> Participant | None:
        """
        Pick the captain of a team.

        Args:
            team: Team to inspect

        Returns:
            One of the members tied at the maximum score, or None for an empty team
        """
        if team.is_empty():
            return None
        max_score = max(p.score for p in team)
        tops = [p for p in team if p.score == max_score]
        return tops[self.rng.randrange(len(tops))]

    def put_captain_first(self, team: Team) -> Team:
        """
        Return the team with its captain moved to index 0.

        Other members keep their relative order. A team whose captain already
        leads (or an empty team) is returned unchanged.
        """
        captain = self.get_captain(team)
        if captain is None:
            return team
        idx = team.get_ids().index(captain.id)
        if idx == 0:
            return team
        rest = [p for i, p in enumerate(team) if i != idx]
        return Team([captain, *rest])
