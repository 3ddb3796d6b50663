"""
Repository layer for data access abstraction.

This package contains repository classes that encapsulate database queries
and provide a clean interface for data access operations.
"""

from .base_repository import BaseRepository
from .tutorial_repository import TutorialRepository

__all__ = [
    "BaseRepository",
    "TutorialRepository",
]
