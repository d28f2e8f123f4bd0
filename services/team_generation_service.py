"""
Team generation service: validates a selection, runs the shuffler and
orders each team captain-first.

TeamGenerationService keeps the per-session state the shuffler needs between
generations (locks, the displayed teams, assignment history) so nothing is
held in module globals.
"""

import logging
import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from config import BALANCER_SETTINGS, MIN_ROSTER_SIZE, REQUIRE_EVEN_ROSTER
from domain.models.participant import Participant
from domain.models.team import Team
from domain.services.captain_service import CaptainService
from services import error_codes
from services.result import Result
from shuffler import (
    BalancedShuffler,
    LockedOverCapacityError,
    PartitionStatus,
    dedupe_participants,
)
from utils.assignment_history import AssignmentHistory
from utils.debug_logging import debug_log
from utils.formatting import format_teams_for_sharing

logger = logging.getLogger("balanced_teams.services.team_generation")


@dataclass(frozen=True)
class GeneratedTeams:
    """Two finished teams, each with its captain first."""

    team_a: Team
    team_b: Team
    status: PartitionStatus
    score_diff: int
    fingerprint: str | None = None

    @property
    def teams(self) -> tuple[Team, Team]:
        return (self.team_a, self.team_b)

    @property
    def is_best_effort(self) -> bool:
        """True when the score gap may exceed the configured tolerance."""
        return self.status in (PartitionStatus.BEST_EFFORT, PartitionStatus.RANDOM_FALLBACK)


def generate_teams(
    roster: Sequence[Participant],
    locks: Iterable[str] = (),
    previous_teams: tuple[Team, Team] | None = None,
    *,
    history: AssignmentHistory | None = None,
    rng: random.Random | None = None,
    max_diff: int | None = None,
) -> Result[GeneratedTeams]:
    """
    Split a roster into two balanced teams.

    Args:
        roster: Participants selected for this generation
        locks: Ids that must stay on the side they had in previous_teams
        previous_teams: The (team_a, team_b) pair from the last generation
        history: Assignment history used to avoid repeating the last split
        rng: Random source (inject a seeded one for reproducible results)
        max_diff: Acceptable score gap (defaults to config)

    Returns:
        Result.ok(GeneratedTeams) on success
        Result.fail(error, code) when the roster is too small, locks exceed a
        side's capacity, no candidate split was found, or the split repeats
        a participant
    """
    unique = dedupe_participants(roster)
    if len(unique) < MIN_ROSTER_SIZE:
        return Result.fail(
            f"Need at least {MIN_ROSTER_SIZE} distinct participants, got {len(unique)}.",
            code=error_codes.INSUFFICIENT_PLAYERS,
        )

    rng = rng or random.Random()
    shuffler = BalancedShuffler(rng=rng, history=history, max_diff=max_diff)
    captains = CaptainService(rng)

    try:
        outcome = shuffler.shuffle_with_locks(unique, locks, previous_teams)
    except LockedOverCapacityError as e:
        return Result.fail(str(e), code=error_codes.LOCKED_OVER_CAPACITY)

    if not outcome.has_candidate:
        return Result.fail(
            "Could not find a new split for this group. Try again or change the selection.",
            code=error_codes.NO_CANDIDATE,
        )

    all_ids = outcome.team_a.get_ids() + outcome.team_b.get_ids()
    if len(set(all_ids)) != len(all_ids):
        logger.error(f"Generated teams share participants: {sorted(all_ids)}")
        return Result.fail(
            "A participant ended up on both teams. Please try again.",
            code=error_codes.DUPLICATE_ASSIGNMENT,
        )

    generated = GeneratedTeams(
        team_a=captains.put_captain_first(outcome.team_a),
        team_b=captains.put_captain_first(outcome.team_b),
        status=outcome.status,
        score_diff=outcome.score_diff,
        fingerprint=outcome.fingerprint,
    )
    logger.info(
        f"Generated teams ({generated.status.value}): "
        f"{generated.team_a.get_total_score()} vs {generated.team_b.get_total_score()}"
    )
    return Result.ok(generated)


class TeamGenerationService:
    """
    One team-generation session.

    This service layer class handles:
    - Selection validation (minimum size, even count)
    - Lock toggling for participants on the displayed teams
    - Generating new teams while avoiding the previous split
    - Team names and sharing text for the displayed teams
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        max_diff: int | None = None,
        min_roster_size: int | None = None,
        require_even: bool | None = None,
        session_id: str = "default",
    ):
        self.rng = rng or random.Random()
        self.max_diff = max_diff if max_diff is not None else BALANCER_SETTINGS["max_diff"]
        self.min_roster_size = min_roster_size if min_roster_size is not None else MIN_ROSTER_SIZE
        self.require_even = require_even if require_even is not None else REQUIRE_EVEN_ROSTER
        self.session_id = session_id
        self.history = AssignmentHistory()
        self.locked_ids: set[str] = set()
        self.teams: tuple[Team, Team] = (Team(), Team())
        self.team_names: list[str] = ["", ""]
        self.previous_roster_ids: list[str] = []
        self.is_new_roster = False

    def toggle_lock(self, participant_id: str) -> bool:
        """Flip the lock on a participant. Returns the new lock state."""
        if participant_id in self.locked_ids:
            self.locked_ids.discard(participant_id)
            return False
        self.locked_ids.add(participant_id)
        return True

    def is_locked(self, participant_id: str) -> bool:
        return participant_id in self.locked_ids

    def clear_locks(self) -> None:
        self.locked_ids.clear()

    def set_team_name(self, index: int, name: str) -> None:
        if index not in (0, 1):
            raise ValueError(f"Team index must be 0 or 1, got {index}")
        self.team_names[index] = name

    def validate_selection(self, selected: Sequence[Participant]) -> Result[None]:
        if len(selected) < self.min_roster_size:
            return Result.fail(
                f"Select at least {self.min_roster_size} participants.",
                code=error_codes.INSUFFICIENT_PLAYERS,
            )
        if self.require_even and len(selected) % 2 != 0:
            return Result.fail(
                "The number of selected participants must be even.",
                code=error_codes.ODD_PLAYER_COUNT,
            )
        return Result.ok()

    def generate_teams(self, selected: Sequence[Participant]) -> Result[GeneratedTeams]:
        """
        Generate new teams for the selected participants.

        On failure the displayed teams are left exactly as they were.
        """
        validation = self.validate_selection(selected)
        if not validation:
            return validation

        result = generate_teams(
            selected,
            self.locked_ids,
            self.teams,
            history=self.history,
            rng=self.rng,
            max_diff=self.max_diff,
        )
        debug_log(
            "team_generation_service.py:generate_teams",
            "generation finished",
            {
                "selected": [p.id for p in selected],
                "locked": sorted(self.locked_ids),
                "success": result.success,
                "error_code": result.error_code,
                "status": result.value.status.value if result.success else None,
            },
            session_id=self.session_id,
        )
        if not result:
            logger.warning(f"Team generation failed ({result.error_code}): {result.error}")
            return result

        generated = result.value
        roster_ids = sorted(p.id for p in selected)
        self.is_new_roster = roster_ids != self.previous_roster_ids
        if self.is_new_roster:
            self.previous_roster_ids = roster_ids
        self.teams = generated.teams
        return result

    def share_text(self) -> Result[str]:
        """Text for sharing the displayed teams."""
        if all(team.is_empty() for team in self.teams):
            return Result.fail("There are no teams to share.", code=error_codes.NO_TEAMS)
        return Result.ok(format_teams_for_sharing(self.teams, self.team_names))
