"""
Text formatting for generated teams.
"""

from collections.abc import Sequence

from config import DEFAULT_TEAM_NAMES
from domain.models.team import Team

CAPTAIN_MARKER = " (C)"


def team_label(index: int, team_names: Sequence[str] | None = None) -> str:
    """Custom team name when set, otherwise the configured default."""
    if team_names and index < len(team_names) and team_names[index]:
        return team_names[index]
    if index < len(DEFAULT_TEAM_NAMES):
        return DEFAULT_TEAM_NAMES[index]
    return f"Team {index + 1}"


def format_team(team: Team, label: str) -> str:
    """
    Render one team as a header line followed by one member per line.

    The first member is the captain (teams are stored captain-first).
    """
    lines = [f"{label}:"]
    for i, participant in enumerate(team):
        lines.append(f"{participant.name}{CAPTAIN_MARKER if i == 0 else ''}")
    return "\n".join(lines)


def format_teams_for_sharing(
    teams: Sequence[Team],
    team_names: Sequence[str] | None = None,
) -> str:
    """Render both teams for pasting into a chat message."""
    return "\n\n".join(
        format_team(team, team_label(i, team_names)) for i, team in enumerate(teams)
    )


def format_score_summary(team_a: Team, team_b: Team) -> str:
    total_a, total_b = team_a.get_total_score(), team_b.get_total_score()
    return f"{total_a} vs {total_b} (diff {abs(total_a - total_b)})"
