"""
Assignment history for repeat avoidance.

Maps a roster fingerprint to the last split produced for that exact pool so
the shuffler can steer away from handing out the same teams twice in a row.
The history is owned by the caller (usually a TeamGenerationService session)
and passed into each shuffle; there is no module-level state.

Thread-safety: Uses a lock so a session shared between call sites cannot
interleave a read and an overwrite of the same entry.
"""

import threading
from collections.abc import Iterable

from domain.models.participant import Participant
from domain.models.team import Team


def roster_fingerprint(participants: Iterable[Participant]) -> str:
    """
    Canonical key for a pool of participants.

    Two pools with the same ids map to the same fingerprint regardless of order.
    """
    return "-".join(sorted({p.id for p in participants}))


class AssignmentHistory:
    """Fingerprint -> last (team_a, team_b) split produced for that pool."""

    def __init__(self):
        self._lock = threading.Lock()
        self._entries: dict[str, tuple[Team, Team]] = {}

    def get(self, fingerprint: str) -> tuple[Team, Team] | None:
        with self._lock:
            return self._entries.get(fingerprint)

    def record(self, fingerprint: str, team_a: Team, team_b: Team) -> None:
        """Store the split for a fingerprint, replacing any previous entry."""
        with self._lock:
            self._entries[fingerprint] = (team_a, team_b)

    def clear(self) -> None:
        """Forget every recorded split. Useful for testing."""
        with self._lock:
            self._entries.clear()

    def __contains__(self, fingerprint: str) -> bool:
        with self._lock:
            return fingerprint in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
