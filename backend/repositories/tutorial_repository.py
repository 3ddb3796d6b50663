"""
Tutorial repository for tutorial-specific data access operations.
"""

from typing import List
from sqlalchemy.orm import Session

from models import Tutorial as TutorialModel
from .base_repository import BaseRepository
from .tutorial_specifications import TutorialTitleContainsSpec, TutorialPublishedSpec


class TutorialRepository(BaseRepository[TutorialModel]):
    """Repository for Tutorial model operations."""

    def __init__(self, db: Session):
        super().__init__(db, TutorialModel)

    def find_by_title_containing(self, title: str) -> List[TutorialModel]:
        """
        Get tutorials whose title contains the given text (case-insensitive).

        Args:
            title: Title fragment

        Returns:
            Matching tutorials ordered by ID
        """
        return self.find_matching(TutorialTitleContainsSpec(title))

    def find_by_published(self, published: bool) -> List[TutorialModel]:
        """
        Get tutorials by published flag.

        Args:
            published: True for published tutorials, False for drafts

        Returns:
            Matching tutorials ordered by ID
        """
        return self.find_matching(TutorialPublishedSpec(published))

    def find_by_title_containing_and_published(
        self,
        title: str,
        published: bool
    ) -> List[TutorialModel]:
        """Get tutorials matching both a title fragment and a published flag."""
        spec = TutorialTitleContainsSpec(title) & TutorialPublishedSpec(published)
        return self.find_matching(spec)
