"""
User Service

Projects persisted users into UserRecord DTOs and applies the empty-result
policy: a storage fault is logged and reported as "nothing to show", the same
as an empty table or a missing ID.
"""

from typing import List, Optional
import logging

from dtos.response.user_response import UserRecord
from models import User
from services.interfaces import IUserService, IUserStore

logger = logging.getLogger(__name__)


def to_user_record(user: User) -> UserRecord:
    """Project a persisted user onto its transfer record."""
    return UserRecord(id=user.id, username=user.username, email=user.email)


class UserService(IUserService):
    """Service for user-related business logic."""

    def __init__(self, user_store: IUserStore):
        """
        Initialize UserService.

        Args:
            user_store: Storage access for users
        """
        self.user_store = user_store

    def get_users(self) -> List[UserRecord]:
        """
        Get every stored user as a UserRecord, in storage order.

        Returns:
            List of UserRecord DTOs; empty when there are no users or the
            store could not be read
        """
        outcome = self.user_store.find_all()

        if outcome.is_fault:
            logger.error(f"Failed to load users: {outcome.error}")
            return []

        if not outcome.is_found:
            logger.info("No users found")
            return []

        return [to_user_record(user) for user in outcome.value]

    def get_user_by_id(self, user_id: int) -> Optional[UserRecord]:
        """
        Get one user as a UserRecord.

        Args:
            user_id: User ID

        Returns:
            UserRecord DTO, or None when the user does not exist or the
            store could not be read
        """
        outcome = self.user_store.find_by_id(user_id)

        if outcome.is_fault:
            logger.error(f"Failed to load user {user_id}: {outcome.error}")
            return None

        if not outcome.is_found:
            logger.info(f"User not found: {user_id}")
            return None

        return to_user_record(outcome.value)
