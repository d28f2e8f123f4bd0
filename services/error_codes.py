"""
Standard error codes for service layer.

These error codes allow callers to programmatically handle specific error
conditions without parsing error message text.

Usage:
    from services.error_codes import LOCKED_OVER_CAPACITY
    from services.result import Result

    if len(locked_a) > size_a:
        return Result.fail("Too many locked participants on team A", code=LOCKED_OVER_CAPACITY)
"""

# Selection errors
INSUFFICIENT_PLAYERS = "insufficient_players"
ODD_PLAYER_COUNT = "odd_player_count"

# Generation errors
LOCKED_OVER_CAPACITY = "locked_over_capacity"
NO_CANDIDATE = "no_candidate"
DUPLICATE_ASSIGNMENT = "duplicate_assignment"

# Sharing errors
NO_TEAMS = "no_teams"
