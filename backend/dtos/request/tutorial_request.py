"""
Tutorial Request DTOs

DTOs for tutorial-related API requests.
"""

from pydantic import BaseModel, Field
from typing import Optional


class TutorialRequest(BaseModel):
    """
    Request DTO for creating or replacing a tutorial.

    PUT replaces every field, so the same contract serves both operations.
    """

    title: str = Field(description="Tutorial title")
    description: Optional[str] = Field(None, description="Tutorial description")
    published: bool = Field(False, description="Whether the tutorial is published")
