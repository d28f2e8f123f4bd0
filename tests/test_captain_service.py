"""
Tests for captain selection.
"""

import random

from domain.models.participant import Participant
from domain.models.team import Team
from domain.services.captain_service import CaptainService
from tests.conftest import make_roster


class TestGetCaptain:
    """Tests for CaptainService.get_captain."""

    def test_empty_team_has_no_captain(self, rng):
        assert CaptainService(rng).get_captain(Team()) is None

    def test_single_top_scorer(self, rng):
        team = Team(make_roster([3, 8, 5]))
        assert CaptainService(rng).get_captain(team).id == "P2"

    def test_tie_break_stays_among_tied_members(self):
        team = Team(make_roster([4, 9, 2, 9, 9]))
        picked = set()
        for seed in range(40):
            captain = CaptainService(random.Random(seed)).get_captain(team)
            assert captain.score == 9
            picked.add(captain.id)
        assert picked <= {"P2", "P4", "P5"}
        assert len(picked) > 1


class TestPutCaptainFirst:
    """Tests for CaptainService.put_captain_first."""

    def test_captain_moves_to_front_preserving_order(self, rng):
        team = Team(make_roster([3, 1, 8, 5]))
        ordered = CaptainService(rng).put_captain_first(team)
        assert ordered.get_ids() == ["P3", "P1", "P2", "P4"]

    def test_returns_new_team(self, rng):
        team = Team(make_roster([3, 1, 8, 5]))
        ordered = CaptainService(rng).put_captain_first(team)
        assert ordered is not team
        assert team.get_ids() == ["P1", "P2", "P3", "P4"]

    def test_captain_already_first(self, rng):
        team = Team(make_roster([9, 1, 2]))
        assert CaptainService(rng).put_captain_first(team) is team

    def test_empty_team_unchanged(self, rng):
        team = Team()
        assert CaptainService(rng).put_captain_first(team) is team

    def test_tied_captain_leads(self):
        members = [
            Participant(id="a", name="A", score=2),
            Participant(id="b", name="B", score=7),
            Participant(id="c", name="C", score=7),
        ]
        for seed in range(20):
            ordered = CaptainService(random.Random(seed)).put_captain_first(Team(members))
            assert ordered[0].id in {"b", "c"}
            assert sorted(ordered.get_ids()) == ["a", "b", "c"]
