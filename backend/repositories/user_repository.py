"""
User repository for user-specific data access operations.
"""

from typing import List
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from constants import DatabaseConfig
from exceptions import DatabaseError, ValidationError
from models import User
from services.interfaces import IUserStore
from .base_repository import BaseRepository
from .outcomes import LookupOutcome

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[User], IUserStore):
    """Repository for User model operations."""

    def __init__(self, db: Session):
        super().__init__(db, User)

    def find_all(self) -> LookupOutcome[List[User]]:
        """
        Fetch every stored user.

        Returns:
            FOUND with users in primary key order, EMPTY when the table
            has no rows, or FAULT when the store could not be read
        """
        try:
            users = self.get_all()
        except SQLAlchemyError as e:
            return LookupOutcome.fault(self._describe_fault("find_all", e))

        if not users:
            return LookupOutcome.empty()
        return LookupOutcome.found(users)

    def find_by_id(self, user_id: int) -> LookupOutcome[User]:
        """
        Fetch a single user by primary key.

        Args:
            user_id: User ID

        Returns:
            FOUND with the user, EMPTY when no such ID exists, or FAULT
            when the store could not be read
        """
        if not DatabaseConfig.MIN_ID <= user_id <= DatabaseConfig.MAX_ID:
            # Outside the INTEGER column range, so no row can carry it
            return LookupOutcome.empty()

        try:
            user = self.get_by_id(user_id)
        except SQLAlchemyError as e:
            return LookupOutcome.fault(self._describe_fault("find_by_id", e))

        if user is None:
            return LookupOutcome.empty()
        return LookupOutcome.found(user)

    def add(self, username: str, password: str, email: str) -> User:
        """
        Insert a user; the store assigns the ID.

        Args:
            username: Login name
            password: Stored password value
            email: Contact address

        Returns:
            The persisted user

        Raises:
            ValidationError: If a required field is missing or blank
            DatabaseError: If the insert fails
        """
        fields = {"username": username, "password": password, "email": email}
        missing = {name: value for name, value in fields.items() if not value or not str(value).strip()}
        if missing:
            raise ValidationError(
                f"Missing required fields: {', '.join(missing)}",
                invalid_fields=missing
            )

        try:
            return self.create(User(username=username, password=password, email=email))
        except SQLAlchemyError as e:
            self.db.rollback()
            raise DatabaseError("add_user", str(e)) from e

    def _describe_fault(self, operation: str, error: SQLAlchemyError) -> str:
        # Leave the session usable for the rest of the request
        self.db.rollback()
        fault = DatabaseError(operation, str(error))
        logger.debug(f"Storage fault in UserRepository.{operation}: {fault.message}", extra=fault.details)
        return fault.message
