"""
Participant domain model.
"""

import uuid
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


def generate_participant_id() -> str:
    """Short random id for participants created without one."""
    return "_" + uuid.uuid4().hex[:9]


@dataclass(frozen=True)
class Participant:
    """
    Represents a participant available for team generation.

    This is a pure domain model with no infrastructure dependencies.
    The engine only borrows participants; it never mutates them.
    """

    id: str
    name: str
    score: int = 1
    nickname: str = ""
    photo_url: str | None = None

    def display_name(self) -> str:
        """Nickname when one is set, otherwise the name."""
        return self.nickname or self.name

    def __str__(self) -> str:
        return f"{self.name} (score: {self.score})"


def _coerce_score(raw: Any) -> int:
    try:
        score = int(raw)
    except (TypeError, ValueError):
        return 1
    return max(1, score)


def normalize_participant(raw: Mapping[str, Any] | None) -> Participant:
    """
    Build a Participant from a loosely shaped mapping.

    Accepts the legacy keys ``nombre``, ``puntaje`` and ``foto`` as fallbacks
    for ``name``, ``score`` and ``photo_url``. Scores are clamped to at least 1
    and a fresh id is generated when the record has none.

    Args:
        raw: Mapping with participant fields, or None

    Returns:
        Normalized Participant
    """
    if not raw:
        return Participant(id=generate_participant_id(), name="", score=1)

    name = raw.get("name") or raw.get("nombre") or ""
    score = raw.get("score")
    if score is None:
        score = raw.get("puntaje")
    photo = raw.get("photo_url")
    if photo is None:
        photo = raw.get("foto")

    return Participant(
        id=str(raw.get("id") or generate_participant_id()),
        name=str(name).strip(),
        score=_coerce_score(score),
        nickname=raw.get("nickname") or "",
        photo_url=photo,
    )
