"""
Base repository with generic CRUD operations.

This module provides a generic BaseRepository class that implements
common database operations for any SQLAlchemy model. All domain-specific
repositories extend this base class.
"""

from typing import Generic, TypeVar, Type, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from event_planner.models.base import Base
from event_planner.core.exceptions import NotFoundException, DatabaseException


# Generic type bound to SQLAlchemy Base
ModelType = TypeVar("ModelType", bound=Base)

# Integer primary keys are signed 64-bit on every supported backend
MAX_PRIMARY_KEY = 2 ** 63 - 1


def fits_primary_key(value: int) -> bool:
    """True if ``value`` can be bound as an integer key without driver overflow."""
    return -MAX_PRIMARY_KEY - 1 <= value <= MAX_PRIMARY_KEY


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository with CRUD operations.

    Type Parameters:
        ModelType: The SQLAlchemy model type this repository manages

    Example:
        class EventRepository(BaseRepository[Event]):
            def __init__(self, db: Session):
                super().__init__(Event, db)
    """

    def __init__(self, model: Type[ModelType], db: Session):
        """
        Initialize the repository.

        Args:
            model: The SQLAlchemy model class
            db: SQLAlchemy database session
        """
        self.model = model
        self.db = db

    def get(self, id: int) -> Optional[ModelType]:
        """
        Get a single record by ID.

        Args:
            id: Primary key value

        Returns:
            Model instance or None if not found
        """
        if not fits_primary_key(id):
            return None
        try:
            return self.db.query(self.model).filter(self.model.id == id).first()
        except SQLAlchemyError as e:
            raise DatabaseException("Database query failed") from e

    def get_or_fail(self, id: int, message: Optional[str] = None) -> ModelType:
        """
        Get a single record by ID or raise exception.

        Raises:
            NotFoundException: If record not found
        """
        obj = self.get(id)
        if obj is None:
            raise NotFoundException(self.model.__name__, id, message)
        return obj

    def create(self, obj: ModelType, error_message: str = "Database query failed") -> ModelType:
        """
        Insert a new record and return it with its ID populated.

        Args:
            obj: Model instance to create
            error_message: Public message used if the insert fails
        """
        try:
            self.db.add(obj)
            self.db.commit()
            self.db.refresh(obj)
            return obj
        except SQLAlchemyError as e:
            self.db.rollback()
            raise DatabaseException(error_message) from e
