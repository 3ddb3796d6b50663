"""
Tutorial Service

Handles business logic for tutorial operations: lookups, filtering and
transactional create/update/delete on top of TutorialRepository.
"""

from typing import List
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
import logging

from dtos.request import TutorialRequest
from exceptions import DatabaseError, TutorialNotFoundError, ValidationError
from models import Tutorial
from repositories.tutorial_repository import TutorialRepository
from services.interfaces import ITutorialService

logger = logging.getLogger(__name__)


class TutorialService(ITutorialService):
    """Service for tutorial-related business logic."""

    def __init__(self, db: Session):
        """
        Initialize TutorialService.

        Args:
            db: Database session
        """
        self.db = db
        self.tutorial_repo = TutorialRepository(db)

    def find_all(self) -> List[Tutorial]:
        return self._read("find_all", self.tutorial_repo.get_all)

    def find_by_title_containing(self, title: str) -> List[Tutorial]:
        return self._read(
            "find_by_title_containing",
            lambda: self.tutorial_repo.find_by_title_containing(title)
        )

    def find_by_published(self, published: bool) -> List[Tutorial]:
        return self._read(
            "find_by_published",
            lambda: self.tutorial_repo.find_by_published(published)
        )

    def find_by_title_containing_and_published(self, title: str, published: bool) -> List[Tutorial]:
        return self._read(
            "find_by_title_containing_and_published",
            lambda: self.tutorial_repo.find_by_title_containing_and_published(title, published)
        )

    def find_by_id(self, tutorial_id: int) -> Tutorial:
        tutorial = self._read("find_by_id", lambda: self.tutorial_repo.get_by_id(tutorial_id))
        if tutorial is None:
            raise TutorialNotFoundError(tutorial_id)
        return tutorial

    def create(self, data: TutorialRequest) -> Tutorial:
        """
        Store a new tutorial and commit.

        Args:
            data: Validated request body

        Returns:
            The created tutorial, refreshed so its ID is populated
        """
        self._validate(data)

        tutorial = Tutorial(
            title=data.title,
            description=data.description,
            published=data.published
        )

        def _create():
            self.tutorial_repo.create(tutorial)
            self.db.commit()
            self.db.refresh(tutorial)
            return tutorial

        created = self._write("create", _create)
        logger.info(f"Created tutorial {created.id} ({created.title!r})")
        return created

    def update(self, tutorial_id: int, data: TutorialRequest) -> Tutorial:
        """
        Replace title, description and published flag of a tutorial.

        Raises:
            TutorialNotFoundError: If no tutorial has this ID
        """
        self._validate(data)
        tutorial = self.find_by_id(tutorial_id)

        def _update():
            tutorial.title = data.title
            tutorial.description = data.description
            tutorial.published = data.published
            self.tutorial_repo.update(tutorial)
            self.db.commit()
            self.db.refresh(tutorial)
            return tutorial

        updated = self._write("update", _update)
        logger.info(f"Updated tutorial {tutorial_id}")
        return updated

    def delete(self, tutorial_id: int) -> None:
        tutorial = self.find_by_id(tutorial_id)

        def _delete():
            self.tutorial_repo.delete(tutorial)
            self.db.commit()

        self._write("delete", _delete)
        logger.info(f"Deleted tutorial {tutorial_id}")

    def delete_all(self) -> int:
        def _delete_all():
            deleted = self.tutorial_repo.delete_all()
            self.db.commit()
            return deleted

        deleted = self._write("delete_all", _delete_all)
        logger.info(f"Deleted all tutorials ({deleted} row(s))")
        return deleted

    @staticmethod
    def _validate(data: TutorialRequest) -> None:
        if not data.title or not data.title.strip():
            raise ValidationError("Title must not be blank", invalid_fields={"title": data.title})

    def _read(self, operation: str, query):
        try:
            return query()
        except SQLAlchemyError as e:
            logger.error(f"Tutorial {operation} failed: {e}", exc_info=True)
            raise DatabaseError(operation, f"Failed to read tutorials: {e}") from e

    def _write(self, operation: str, action):
        try:
            return action()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Tutorial {operation} failed, rolled back: {e}", exc_info=True)
            raise DatabaseError(operation, f"Failed to write tutorials: {e}") from e
