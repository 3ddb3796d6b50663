"""
Service Interfaces

Abstract base classes for the service layer following Dependency Inversion Principle.
API handlers depend on these, so tests can swap in a mock implementation.
"""

from abc import ABC, abstractmethod
from typing import Any, List

from dtos.request import TutorialRequest


class ITutorialService(ABC):
    """
    Abstract interface for tutorial management services.
    """

    @abstractmethod
    def find_all(self) -> List[Any]:
        """
        Get every tutorial.

        Returns:
            List of tutorials ordered by ID
        """
        pass

    @abstractmethod
    def find_by_title_containing(self, title: str) -> List[Any]:
        """
        Get tutorials whose title contains the given text.

        Args:
            title: Title fragment (case-insensitive)

        Returns:
            List of matching tutorials ordered by ID
        """
        pass

    @abstractmethod
    def find_by_published(self, published: bool) -> List[Any]:
        """
        Get tutorials with the given published flag.

        Returns:
            List of matching tutorials ordered by ID
        """
        pass

    @abstractmethod
    def find_by_title_containing_and_published(self, title: str, published: bool) -> List[Any]:
        """See find_by_title_containing and find_by_published; both must match."""
        pass

    @abstractmethod
    def find_by_id(self, tutorial_id: int) -> Any:
        """
        Get a single tutorial.

        Raises:
            TutorialNotFoundError: If no tutorial has this ID
        """
        pass

    @abstractmethod
    def create(self, data: TutorialRequest) -> Any:
        """
        Store a new tutorial.

        Returns:
            The created tutorial with its assigned ID

        Raises:
            ValidationError: If the title is blank
        """
        pass

    @abstractmethod
    def update(self, tutorial_id: int, data: TutorialRequest) -> Any:
        """
        Replace the fields of an existing tutorial.

        Raises:
            TutorialNotFoundError: If no tutorial has this ID
            ValidationError: If the title is blank
        """
        pass

    @abstractmethod
    def delete(self, tutorial_id: int) -> None:
        """
        Delete a tutorial.

        Raises:
            TutorialNotFoundError: If no tutorial has this ID
        """
        pass

    @abstractmethod
    def delete_all(self) -> int:
        """
        Delete every tutorial.

        Returns:
            Number of tutorials deleted
        """
        pass
