"""
Generate two balanced teams from a JSON roster file.

The file holds either a list of participant records or an object with
"participants" and, optionally, "previous_teams" (two lists of ids) so that
--lock can keep participants on the side they were on.

    python balance_teams.py roster.json --seed 7
    python balance_teams.py roster.json --lock p1 --lock p4
"""

import argparse
import json
import logging
import random
import sys
from typing import Any

from domain.models.participant import Participant, normalize_participant
from domain.models.team import Team
from services.team_generation_service import generate_teams
from utils.formatting import format_score_summary, format_teams_for_sharing

logger = logging.getLogger("balanced_teams")


def _load_roster(path: str) -> tuple[list[Participant], tuple[Team, Team] | None]:
    with open(path, encoding="utf-8") as f:
        payload: Any = json.load(f)

    if isinstance(payload, list):
        records, previous = payload, None
    elif isinstance(payload, dict):
        records, previous = payload.get("participants", []), payload.get("previous_teams")
    else:
        raise ValueError("roster must be a list of participants or an object with 'participants'")

    if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
        raise ValueError("every participant must be a JSON object")
    participants = [normalize_participant(r) for r in records]

    if not previous:
        return participants, None
    if not isinstance(previous, list) or len(previous) != 2 or not all(isinstance(s, list) for s in previous):
        raise ValueError("previous_teams must hold exactly two lists of ids")

    by_id = {p.id: p for p in participants}
    teams = tuple(Team(by_id[pid] for pid in side if pid in by_id) for side in previous)
    return participants, teams  # type: ignore[return-value]


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(description="Split a roster into two balanced teams.")
    parser.add_argument("roster", help="Path to a JSON roster file")
    parser.add_argument("--lock", action="append", default=[], help="Participant id to keep on its previous side (repeatable)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible teams")
    parser.add_argument("--max-diff", type=int, default=None, help="Acceptable score gap between teams")
    parser.add_argument("--team-name", action="append", default=[], help="Team label (give twice for both teams)")
    parser.add_argument("--verbose", action="store_true", help="Log search details")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        participants, previous = _load_roster(args.roster)
    except (OSError, ValueError) as exc:
        print(f"Could not read roster: {exc}", file=sys.stderr)
        return 1

    result = generate_teams(
        participants,
        args.lock,
        previous,
        rng=random.Random(args.seed),
        max_diff=args.max_diff,
    )
    if not result:
        print(f"Error ({result.error_code}): {result.error}", file=sys.stderr)
        return 2

    generated = result.value
    print(format_teams_for_sharing(generated.teams, args.team_name))
    print()
    print(format_score_summary(generated.team_a, generated.team_b))
    if generated.is_best_effort:
        logger.warning("Score gap is above the configured tolerance")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
