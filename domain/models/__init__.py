"""
Domain models - pure data structures representing business entities.
"""

from domain.models.participant import Participant, normalize_participant
from domain.models.team import Team, same_split, score_diff

__all__ = ["Participant", "Team", "normalize_participant", "same_split", "score_diff"]
