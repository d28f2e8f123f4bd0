"""
Team domain model.
"""

from collections.abc import Iterable, Iterator

from domain.models.participant import Participant


class Team:
    """
    Represents an ordered team of participants.

    This is a pure domain model with no infrastructure dependencies.
    Teams are never mutated in place; reordering returns a new Team.
    """

    def __init__(self, participants: Iterable[Participant] = ()):
        """
        Initialize a team.

        Args:
            participants: Members in display order (captain first, if any)
        """
        self.participants: tuple[Participant, ...] = tuple(participants)

    def get_total_score(self) -> int:
        """Sum of member scores."""
        return sum(p.score for p in self.participants)

    def get_ids(self) -> list[str]:
        """Member ids in team order."""
        return [p.id for p in self.participants]

    def id_key(self) -> tuple[str, ...]:
        """Sorted, deduplicated member ids (order-independent identity)."""
        return tuple(sorted(set(self.get_ids())))

    def is_empty(self) -> bool:
        return not self.participants

    def __len__(self) -> int:
        return len(self.participants)

    def __iter__(self) -> Iterator[Participant]:
        return iter(self.participants)

    def __getitem__(self, index: int) -> Participant:
        return self.participants[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Team):
            return NotImplemented
        return self.participants == other.participants

    def __hash__(self) -> int:
        return hash(self.participants)

    def __repr__(self) -> str:
        return f"Team({[p.name for p in self.participants]!r}, total={self.get_total_score()})"


def score_diff(team_a: Team, team_b: Team) -> int:
    """Absolute difference between the two teams' total scores."""
    return abs(team_a.get_total_score() - team_b.get_total_score())


def same_split(team_a: Team, team_b: Team, other_a: Team, other_b: Team) -> bool:
    """
    Check whether two team pairs describe the same partition.

    Side labels are ignored: (A, B) matches both (A, B) and (B, A).
    Membership is compared by sorted, deduplicated ids, not by order.
    """
    a_key, b_key = team_a.id_key(), team_b.id_key()
    other_a_key, other_b_key = other_a.id_key(), other_b.id_key()
    return (a_key == other_a_key and b_key == other_b_key) or (
        a_key == other_b_key and b_key == other_a_key
    )
