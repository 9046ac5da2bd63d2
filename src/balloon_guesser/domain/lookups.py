"""Result type for external lookups that may miss."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

T = TypeVar("T")


class LookupStatus(StrEnum):
    """Outcome of a single lookup step."""

    FOUND = "found"
    MISS = "miss"
    ERROR = "error"


@dataclass(frozen=True)
class Lookup(Generic[T]):
    """Value of a lookup step, or the reason it produced nothing.

    A miss means the upstream answered but had nothing usable; an error means
    the call itself failed. Both are skipped by callers the same way.
    """

    status: LookupStatus
    value: T | None = None
    reason: str | None = None

    @classmethod
    def found(cls, value: T) -> "Lookup[T]":
        return cls(status=LookupStatus.FOUND, value=value)

    @classmethod
    def miss(cls, reason: str) -> "Lookup[T]":
        return cls(status=LookupStatus.MISS, reason=reason)

    @classmethod
    def error(cls, reason: str) -> "Lookup[T]":
        return cls(status=LookupStatus.ERROR, reason=reason)

    @property
    def ok(self) -> bool:
        """Return True when the lookup produced a value."""
        return self.status is LookupStatus.FOUND
