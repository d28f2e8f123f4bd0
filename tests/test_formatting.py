"""
Tests for team formatting helpers.
"""

from domain.models.team import Team
from tests.conftest import make_roster
from utils.formatting import (
    format_score_summary,
    format_teams_for_sharing,
    team_label,
)


def test_team_label_defaults():
    assert team_label(0) == "Team 1"
    assert team_label(1, ["", ""]) == "Team 2"
    assert team_label(5) == "Team 6"


def test_team_label_custom_name():
    assert team_label(1, ["Reds", "Blues"]) == "Blues"


def test_sharing_text_marks_captain():
    roster = make_roster([9, 3, 8, 2])
    teams = (Team([roster[0], roster[1]]), Team([roster[2], roster[3]]))

    text = format_teams_for_sharing(teams, ["Reds", ""])

    assert text == "Reds:\nPlayer1 (C)\nPlayer2\n\nTeam 2:\nPlayer3 (C)\nPlayer4"


def test_score_summary():
    roster = make_roster([9, 3, 8, 2])
    assert format_score_summary(Team(roster[:2]), Team(roster[2:])) == "12 vs 10 (diff 2)"
