"""
Dependency injection providers for FastAPI.

This module provides factory functions for creating repository and service instances,
following the Dependency Inversion Principle. This allows for easier testing
and better separation of concerns.
"""

from sqlalchemy.orm import Session
from fastapi import Depends
from database import get_db
from repositories.user_repository import UserRepository
from services.interfaces import IUserService, IUserStore
from services.user_service import UserService


def get_user_repository(db: Session = Depends(get_db)) -> IUserStore:
    """
    Factory function for creating UserRepository instances.

    Args:
        db: Database session (injected)

    Returns:
        IUserStore: User storage access bound to this request's session
    """
    return UserRepository(db)


def get_user_service(user_store: IUserStore = Depends(get_user_repository)) -> IUserService:
    """
    Factory function for creating UserService instances.

    Args:
        user_store: User storage access (injected)

    Returns:
        IUserService: User service implementation

    Note: Tests swap this for a stub via app.dependency_overrides.
    """
    return UserService(user_store)
