"""
Dependency injection providers for FastAPI.

This module provides factory functions for creating service instances,
following the Dependency Inversion Principle. Tests replace these through
`app.dependency_overrides`.
"""

from sqlalchemy.orm import Session
from fastapi import Depends
from database import get_db
from services.interfaces import ITutorialService
from services.tutorial_service import TutorialService


def get_tutorial_service(db: Session = Depends(get_db)) -> ITutorialService:
    """
    Factory function for creating TutorialService instances.

    Args:
        db: Database session (injected)

    Returns:
        ITutorialService: Tutorial service implementation
    """
    return TutorialService(db)
