"""
Lookup outcomes returned by repositories.

Repositories report storage faults as values instead of raising, so callers
match on the status explicitly.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from constants import LookupStatus

T = TypeVar('T')


@dataclass(frozen=True)
class LookupOutcome(Generic[T]):
    status: LookupStatus
    value: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def found(cls, value: T) -> 'LookupOutcome[T]':
        return cls(LookupStatus.FOUND, value=value)

    @classmethod
    def empty(cls) -> 'LookupOutcome[T]':
        return cls(LookupStatus.EMPTY)

    @classmethod
    def fault(cls, error: str) -> 'LookupOutcome[T]':
        return cls(LookupStatus.FAULT, error=error)

    @property
    def is_found(self) -> bool:
        return self.status is LookupStatus.FOUND

    @property
    def is_fault(self) -> bool:
        return self.status is LookupStatus.FAULT
