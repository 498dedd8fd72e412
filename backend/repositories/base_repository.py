"""
Base repository providing common lookup and insert operations.
"""

from typing import Generic, TypeVar, List, Optional, Type
from sqlalchemy.orm import Session

from exceptions import ValidationError

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Generic base repository providing common operations.
    All specific repositories should inherit from this class.
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
        Insert a new record and let the store assign its ID.

        Args:
            obj: Model instance to create, without an ID

        Returns:
            Created model instance with its generated ID

        Raises:
            ValidationError: If the caller supplied an ID
        """
        if getattr(obj, 'id', None) is not None:
            raise ValidationError(
                f"{self.model.__name__} IDs are assigned by the store",
                invalid_fields={"id": obj.id}
            )
        self.db.add(obj)
        self.db.flush()
        return obj

    def get_by_id(self, id: int) -> Optional[T]:
        """
        Retrieve a record by its ID.

        Args:
            id: Primary key value

        Returns:
            Model instance or None if not found
        """
        return self.db.query(self.model).filter(self.model.id == id).first()

    def get_all(self) -> List[T]:
        """
        Retrieve all records in primary key order.

        Returns:
            List of model instances
        """
        return self.db.query(self.model).order_by(self.model.id).all()

    def count(self) -> int:
        """
        Count total records.

        Returns:
            Total number of records
        """
        return self.db.query(self.model).count()
