"""
Centralized configuration for the balanced team generator.
"""

from __future__ import annotations

import os
from typing import Any

from dotenv import load_dotenv

load_dotenv()


def _parse_int(env_var: str, default: int) -> int:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _parse_bool(env_var: str, default: bool) -> bool:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def _parse_str_list(env_var: str, default: list[str]) -> list[str]:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    values = [x.strip() for x in raw.split(",") if x.strip()]
    return values or default


BALANCER_SETTINGS: dict[str, Any] = {
    # Largest acceptable score gap between the two teams
    "max_diff": _parse_int("TEAM_MAX_DIFF", 5),
    # Pools up to this size are enumerated exhaustively (C(14, 7) = 3432)
    "exhaustive_max_players": _parse_int("EXHAUSTIVE_MAX_PLAYERS", 14),
    "random_search_attempts": _parse_int("RANDOM_SEARCH_ATTEMPTS", 10000),
}

MIN_ROSTER_SIZE = _parse_int("MIN_ROSTER_SIZE", 2)
REQUIRE_EVEN_ROSTER = _parse_bool("REQUIRE_EVEN_ROSTER", True)
DEFAULT_TEAM_NAMES = _parse_str_list("DEFAULT_TEAM_NAMES", ["Team 1", "Team 2"])
