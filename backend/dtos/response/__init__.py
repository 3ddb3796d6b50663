"""
Response DTOs

DTOs for outgoing API responses. They control exactly which tutorial
fields are exposed.
"""

from .tutorial_response import TutorialResponse, HealthResponse

__all__ = ["TutorialResponse", "HealthResponse"]
