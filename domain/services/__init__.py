"""
Domain services containing pure business logic.
"""

from domain.services.captain_service import CaptainService

__all__ = ["CaptainService"]
