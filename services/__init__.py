"""
Application services layer.

Services orchestrate team generation using the shuffler and domain services.
"""

# Result type for consistent error handling
from services.result import Result
from services.team_generation_service import (
    GeneratedTeams,
    TeamGenerationService,
    generate_teams,
)

__all__ = [
    "GeneratedTeams",
    "Result",
    "TeamGenerationService",
    "generate_teams",
]
