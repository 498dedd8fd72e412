"""
Repository layer for data access abstraction.

This package contains repository classes that encapsulate database queries
and provide a clean interface for data access operations.
"""

from .base_repository import BaseRepository
from .outcomes import LookupOutcome
from .user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "LookupOutcome",
    "UserRepository",
]
