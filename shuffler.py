"""
Balanced team shuffling algorithm.
"""

import itertools
import logging
import math
import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

from config import BALANCER_SETTINGS
from domain.models.participant import Participant
from domain.models.team import Team, same_split, score_diff
from utils.assignment_history import AssignmentHistory, roster_fingerprint

logger = logging.getLogger("balanced_teams.shuffler")

T = TypeVar("T")


def shuffle_participants(items: Sequence[T], rng: random.Random) -> list[T]:
    """
    Fisher-Yates shuffle into a new list.

    Walks from the last index down to 1, swapping each slot with a uniformly
    chosen index at or before it. The input sequence is left untouched.
    """
    arr = list(items)
    for i in range(len(arr) - 1, 0, -1):
        j = rng.randrange(i + 1)
        arr[i], arr[j] = arr[j], arr[i]
    return arr


class LockedOverCapacityError(ValueError):
    """More participants are locked to a side than that side has slots."""

    def __init__(self, side: str, locked: int, capacity: int):
        self.side = side
        self.locked = locked
        self.capacity = capacity
        super().__init__(
            f"Team {side} has {locked} locked participants but only {capacity} slots. "
            "Unlock some participants and try again."
        )


class PartitionStatus(str, Enum):
    """How a split was obtained."""

    WITHIN_TOLERANCE = "within_tolerance"
    BEST_EFFORT = "best_effort"  # random search exhausted, gap above tolerance
    RANDOM_FALLBACK = "random_fallback"  # no exhaustive candidate, plain shuffle
    LOCKED_FILL = "locked_fill"
    NO_CANDIDATE = "no_candidate"  # every attempt repeated the previous split


@dataclass
class PartitionResult:
    """Outcome of a shuffle."""

    team_a: Team
    team_b: Team
    status: PartitionStatus
    score_diff: int | None  # None when no candidate was found
    fingerprint: str | None = None

    @property
    def has_candidate(self) -> bool:
        return self.status != PartitionStatus.NO_CANDIDATE


def dedupe_participants(participants: Iterable[Participant]) -> list[Participant]:
    """Drop repeated ids, keeping the first occurrence."""
    seen: set[str] = set()
    unique = []
    for p in participants:
        if p.id in seen:
            continue
        seen.add(p.id)
        unique.append(p)
    return unique


class BalancedShuffler:
    """
    Implements balanced team shuffling.

    Splits a pool into two halves whose total scores are within ``max_diff``
    when possible, honors locked participants, and avoids handing out the
    same split as last time for the same pool.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        history: AssignmentHistory | None = None,
        max_diff: int | None = None,
        exhaustive_max_players: int | None = None,
        random_search_attempts: int | None = None,
    ):
        """
        Initialize the shuffler.

        Args:
            rng: Random source for shuffles and picks (default: fresh random.Random)
            history: Previous splits per roster fingerprint (default: empty history)
            max_diff: Acceptable score gap between teams (default 5)
            exhaustive_max_players: Largest pool enumerated exhaustively (default 14)
            random_search_attempts: Cap on randomized attempts for larger pools (default 10000)
        """
        settings = BALANCER_SETTINGS
        self.rng = rng or random.Random()
        self.history = history if history is not None else AssignmentHistory()
        self.max_diff = max_diff if max_diff is not None else settings["max_diff"]
        self.exhaustive_max_players = (
            exhaustive_max_players
            if exhaustive_max_players is not None
            else settings["exhaustive_max_players"]
        )
        self.random_search_attempts = (
            random_search_attempts
            if random_search_attempts is not None
            else settings["random_search_attempts"]
        )

    def _is_previous(self, team_a: Team, team_b: Team, previous: tuple[Team, Team] | None) -> bool:
        return previous is not None and same_split(team_a, team_b, previous[0], previous[1])

    def partition(
        self,
        participants: Sequence[Participant],
        fingerprint: str | None = None,
        previous: tuple[Team, Team] | None = None,
    ) -> PartitionResult:
        """
        Split participants into two balanced teams.

        Pools up to ``exhaustive_max_players`` are enumerated; larger pools are
        sampled at random with early exit.

        Args:
            participants: Pool to split, already deduplicated by id
            fingerprint: History key (default: derived from participant ids)
            previous: Split to avoid (default: the history entry for the fingerprint)

        Returns:
            PartitionResult with teams of size ceil(N/2) and floor(N/2)
        """
        if fingerprint is None:
            fingerprint = roster_fingerprint(participants)
        if previous is None:
            previous = self.history.get(fingerprint)

        if len(participants) > self.exhaustive_max_players:
            logger.info(f"Random search over {len(participants)} participants")
            return self._random_partition(participants, fingerprint, previous)

        logger.info(f"Exhaustive search over {len(participants)} participants")
        return self._exhaustive_partition(participants, fingerprint, previous)

    def _random_partition(
        self,
        participants: Sequence[Participant],
        fingerprint: str,
        previous: tuple[Team, Team] | None,
    ) -> PartitionResult:
        half = math.ceil(len(participants) / 2)
        best: tuple[Team, Team] | None = None
        best_diff: int | None = None
        attempts = 0
        rejected = 0

        for attempts in range(1, self.random_search_attempts + 1):
            arr = shuffle_participants(participants, self.rng)
            team_a, team_b = Team(arr[:half]), Team(arr[half:])
            if self._is_previous(team_a, team_b, previous):
                rejected += 1
                continue

            diff = score_diff(team_a, team_b)
            if best_diff is None or diff < best_diff:
                best = (team_a, team_b)
                best_diff = diff
                # Early termination: perfect split or anything within tolerance
                if diff == 0 or diff <= self.max_diff:
                    break

        logger.debug(
            f"Random search: {attempts} attempts, {rejected} repeats rejected, best diff {best_diff}"
        )

        if best is None:
            logger.warning(
                f"Random search found no candidate after {attempts} attempts "
                f"(every split repeated the previous one)"
            )
            return PartitionResult(
                Team(), Team(), PartitionStatus.NO_CANDIDATE, None, fingerprint
            )

        self.history.record(fingerprint, best[0], best[1])
        status = (
            PartitionStatus.WITHIN_TOLERANCE
            if best_diff <= self.max_diff
            else PartitionStatus.BEST_EFFORT
        )
        return PartitionResult(best[0], best[1], status, best_diff, fingerprint)

    def _exhaustive_partition(
        self,
        participants: Sequence[Participant],
        fingerprint: str,
        previous: tuple[Team, Team] | None,
    ) -> PartitionResult:
        n = len(participants)
        half = math.ceil(n / 2)
        options: list[tuple[Team, Team, int]] = []
        min_diff: int | None = None

        # Only one side is enumerated; the other is the complement
        for team_a_indices in itertools.combinations(range(n), half):
            chosen = set(team_a_indices)
            team_a = Team(participants[i] for i in team_a_indices)
            team_b = Team(p for i, p in enumerate(participants) if i not in chosen)
            if self._is_previous(team_a, team_b, previous):
                continue

            diff = score_diff(team_a, team_b)
            if diff <= self.max_diff:
                options.append((team_a, team_b, diff))
            if min_diff is None or diff < min_diff:
                min_diff = diff

        logger.debug(
            f"Exhaustive search: {len(options)} splits within {self.max_diff}, min diff {min_diff}"
        )

        if options:
            # Any split within tolerance is equally eligible, not just the closest
            team_a, team_b, diff = options[self.rng.randrange(len(options))]
            self.history.record(fingerprint, team_a, team_b)
            return PartitionResult(team_a, team_b, PartitionStatus.WITHIN_TOLERANCE, diff, fingerprint)

        logger.info(f"No split within {self.max_diff}; falling back to a random split")
        arr = shuffle_participants(participants, self.rng)
        team_a, team_b = Team(arr[:half]), Team(arr[half:])
        return PartitionResult(
            team_a, team_b, PartitionStatus.RANDOM_FALLBACK, score_diff(team_a, team_b), fingerprint
        )

    def _previous_split(
        self,
        fingerprint: str,
        pool: Sequence[Participant],
        last_teams: tuple[Team, Team] | None,
    ) -> tuple[Team, Team] | None:
        """Prefer the displayed teams when they cover exactly this pool."""
        if last_teams is not None:
            last_ids = set(last_teams[0].get_ids()) | set(last_teams[1].get_ids())
            if last_ids and last_ids == {p.id for p in pool}:
                return last_teams
        return self.history.get(fingerprint)

    def shuffle_with_locks(
        self,
        participants: Iterable[Participant],
        locked_ids: Iterable[str],
        last_teams: tuple[Team, Team] | None = None,
    ) -> PartitionResult:
        """
        Shuffle participants while keeping locked ones on their previous side.

        Args:
            participants: Full roster for this generation (duplicates are dropped)
            locked_ids: Ids pinned to the side they had in ``last_teams``
            last_teams: The previous (team_a, team_b) pair, if any

        Returns:
            PartitionResult covering the whole roster

        Raises:
            LockedOverCapacityError: If a side has more locked members than slots
        """
        roster = dedupe_participants(participants)
        locked = set(locked_ids)
        roster_by_id = {p.id: p for p in roster}
        prev_a, prev_b = last_teams if last_teams is not None else (Team(), Team())

        # Locked members come from the current roster so score edits are picked up
        locked_a = [roster_by_id[p.id] for p in prev_a if p.id in locked and p.id in roster_by_id]
        locked_a_ids = {p.id for p in locked_a}
        locked_b = [
            roster_by_id[p.id]
            for p in prev_b
            if p.id in locked and p.id in roster_by_id and p.id not in locked_a_ids
        ]
        locked_ids_all = locked_a_ids | {p.id for p in locked_b}
        remaining = [p for p in roster if p.id not in locked_ids_all]

        total = len(locked_a) + len(locked_b) + len(remaining)
        size_a = math.ceil(total / 2)
        size_b = total - size_a

        if len(locked_a) > size_a:
            logger.warning(f"Locked over capacity on team A: {len(locked_a)} > {size_a}")
            raise LockedOverCapacityError("A", len(locked_a), size_a)
        if len(locked_b) > size_b:
            logger.warning(f"Locked over capacity on team B: {len(locked_b)} > {size_b}")
            raise LockedOverCapacityError("B", len(locked_b), size_b)

        if not locked_a and not locked_b and len(remaining) % 2 == 0:
            fingerprint = roster_fingerprint(remaining)
            previous = self._previous_split(fingerprint, remaining, last_teams)
            return self.partition(remaining, fingerprint, previous=previous)

        needed_a = size_a - len(locked_a)
        needed_b = size_b - len(locked_b)
        logger.info(
            f"Filling around locks: {len(locked_a)}+{needed_a} vs {len(locked_b)}+{needed_b}"
        )

        pool = shuffle_participants(remaining, self.rng)
        team_a_members = locked_a + pool[:needed_a]
        team_b_members = locked_b + pool[needed_a : needed_a + needed_b]
        leftover = pool[needed_a + needed_b :]
        while len(team_a_members) < size_a and leftover:
            team_a_members.append(leftover.pop())
        while len(team_b_members) < size_b and leftover:
            team_b_members.append(leftover.pop())

        team_a, team_b = Team(team_a_members), Team(team_b_members)
        return PartitionResult(
            team_a,
            team_b,
            PartitionStatus.LOCKED_FILL,
            score_diff(team_a, team_b),
            roster_fingerprint(remaining),
        )
