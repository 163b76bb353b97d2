"""
Lookup Value Object

Explicit present/absent result for queries that may find nothing.
Callers must branch on the variant instead of checking for None.
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Present(Generic[T]):
    """A lookup that found its value."""

    value: T

    @property
    def is_present(self) -> bool:
        return True

    def map(self, func: Callable[[T], U]) -> "Present[U]":
        """Transform the wrapped value."""
        return Present(func(self.value))


@dataclass(frozen=True)
class Absent:
    """A lookup that found nothing."""

    @property
    def is_present(self) -> bool:
        return False

    def map(self, func: Callable) -> "Absent":
        return self


Lookup = Union[Present[T], Absent]


def lookup_of(value) -> "Lookup":
    """Wrap a nullable value: None becomes Absent, anything else Present."""
    if value is None:
        return Absent()
    return Present(value)
