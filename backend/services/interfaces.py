"""
Service Interfaces

Abstract base classes for the storage and service layers following Dependency
Inversion Principle. This allows for dependency injection and easier testing/mocking.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from dtos.response.user_response import UserRecord
    from models import User
    from repositories.outcomes import LookupOutcome


class IUserStore(ABC):
    """
    Interface for user lookups against persistent storage.

    Implementations never raise on storage faults; they return a
    LookupOutcome with status FAULT instead.
    """

    @abstractmethod
    def find_all(self) -> "LookupOutcome[List[User]]":
        """
        Fetch all users.

        Returns:
            LookupOutcome wrapping a list of User models
        """
        pass

    @abstractmethod
    def find_by_id(self, user_id: int) -> "LookupOutcome[User]":
        """
        Fetch one user by ID.

        Args:
            user_id: User ID

        Returns:
            LookupOutcome wrapping a User model
        """
        pass


class IUserService(ABC):
    """
    Interface for exposing users as transfer records.
    """

    @abstractmethod
    def get_users(self) -> List["UserRecord"]:
        """
        Get every user as a UserRecord.

        Returns:
            List of UserRecord DTOs, empty when there is nothing to show
        """
        pass

    @abstractmethod
    def get_user_by_id(self, user_id: int) -> Optional["UserRecord"]:
        """
        Get one user as a UserRecord.

        Args:
            user_id: User ID

        Returns:
            UserRecord DTO, or None when there is nothing to show
        """
        pass
