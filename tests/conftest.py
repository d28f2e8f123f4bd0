"""
Pytest fixtures for tests.

Provides seeded random sources and roster builders so tests can assert exact
outcomes without depending on global random state.
"""

import random

import pytest

from domain.models.participant import Participant
from domain.models.team import Team
from utils.assignment_history import AssignmentHistory


def make_roster(scores: list[int], prefix: str = "P") -> list[Participant]:
    """Participants P1..Pn with the given scores."""
    return [
        Participant(id=f"{prefix}{i}", name=f"Player{i}", score=score)
        for i, score in enumerate(scores, 1)
    ]


def team_of(roster: list[Participant], *ids: str) -> Team:
    """Team built from roster members with the given ids, in that order."""
    by_id = {p.id: p for p in roster}
    return Team(by_id[i] for i in ids)


@pytest.fixture
def rng():
    """Seeded random source for reproducible shuffles."""
    return random.Random(1234)


@pytest.fixture
def history():
    """Empty assignment history."""
    return AssignmentHistory()


@pytest.fixture
def sample_roster():
    """Ten participants with varied scores."""
    return make_roster([9, 8, 7, 7, 6, 5, 5, 4, 3, 2])


@pytest.fixture
def lopsided_roster():
    """Two strong and two weak participants: [10, 10, 1, 1]."""
    return make_roster([10, 10, 1, 1])
