"""
Tutorial Response DTOs

DTOs for tutorial-related API responses.
"""

from pydantic import BaseModel, Field
from typing import Optional


class TutorialResponse(BaseModel):
    """
    Response DTO for a single tutorial.

    Built directly from the ORM model.
    """

    id: int = Field(description="Tutorial ID")
    title: str = Field(description="Tutorial title")
    description: Optional[str] = Field(None, description="Tutorial description")
    published: bool = Field(description="Whether the tutorial is published")

    class Config:
        """Pydantic configuration."""
        from_attributes = True  # Allow creation from ORM models


class HealthResponse(BaseModel):
    """Response DTO for the health check endpoint."""

    status: str
    service: str
    version: str
