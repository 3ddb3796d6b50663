"""
Base repository providing common CRUD operations.
"""

from typing import Generic, TypeVar, List, Optional, Type
from sqlalchemy.orm import Session

from .specifications import Specification

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Generic base repository providing common CRUD operations.
    All specific repositories should inherit from this class.

    Repositories only flush; committing is left to the service layer.
    Multi-row reads are ordered by primary key so callers see a stable order.
    """

    def __init__(self, db: Session, model: Type[T]):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    def create(self, obj: T) -> T:
        """
        Add a new record and flush so its primary key is assigned.

        Args:
            obj: Model instance to create

        Returns:
            Created model instance
        """
        self.db.add(obj)
        self.db.flush()
        return obj

    def get_by_id(self, id: int) -> Optional[T]:
        """
        Retrieve a record by its ID.

        Returns:
            Model instance or None if not found
        """
        return self.db.query(self.model).filter(self.model.id == id).first()

    def get_all(self) -> List[T]:
        """Retrieve all records ordered by ID."""
        return self.db.query(self.model).order_by(self.model.id).all()

    def find_matching(self, spec: Specification[T]) -> List[T]:
        """
        Retrieve records satisfying a specification, ordered by ID.

        Args:
            spec: Specification to translate into a SQL filter

        Returns:
            List of matching model instances
        """
        return (
            self.db.query(self.model)
            .filter(spec.to_sql_filter())
            .order_by(self.model.id)
            .all()
        )

    def update(self, obj: T) -> T:
        """
        Flush pending changes on an already-loaded record.

        Args:
            obj: Model instance with updated values

        Returns:
            Updated model instance
        """
        self.db.flush()
        return obj

    def delete(self, obj: T) -> None:
        """
        Delete a record from the database.

        Args:
            obj: Model instance to delete
        """
        self.db.delete(obj)
        self.db.flush()

    def delete_all(self) -> int:
        """
        Delete every record of this model.

        Returns:
            Number of rows deleted
        """
        deleted = self.db.query(self.model).delete(synchronize_session=False)
        self.db.flush()
        return deleted

    def count(self) -> int:
        """Count total records."""
        return self.db.query(self.model).count()

