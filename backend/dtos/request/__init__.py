"""
Request DTOs

DTOs for incoming API requests. FastAPI parses request bodies into these
models, so type errors are reported as 422 before a handler runs.
"""

from .tutorial_request import TutorialRequest

__all__ = ["TutorialRequest"]
