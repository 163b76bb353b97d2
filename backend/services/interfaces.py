"""
Service Interfaces

Abstract base classes for the Friends resource collaborators following the
Dependency Inversion Principle. The resource handler depends only on these,
so tests can substitute doubles.
"""

from abc import ABC, abstractmethod
from typing import List

from dtos.friends_dto import FriendsDTO
from domain.value_objects import Lookup


class IFriendsService(ABC):
    """
    Abstract interface for friend management services.
    """

    @abstractmethod
    def save(self, friends_dto: FriendsDTO) -> FriendsDTO:
        """
        Save a new friend.

        Args:
            friends_dto: Friend to save (id is assigned by the store)

        Returns:
            The persisted friend, including its new id
        """
        pass

    @abstractmethod
    def update(self, friends_dto: FriendsDTO) -> FriendsDTO:
        """
        Replace every field of an existing friend.

        Returns:
            The persisted friend
        """
        pass

    @abstractmethod
    def partial_update(self, friends_dto: FriendsDTO) -> Lookup[FriendsDTO]:
        """
        Merge the non-null fields of a friend into the stored one.

        Returns:
            Present with the merged friend, or Absent if it no longer exists
        """
        pass

    @abstractmethod
    def find_all(self) -> List[FriendsDTO]:
        """Get all friends."""
        pass

    @abstractmethod
    def find_one(self, friend_id: int) -> Lookup[FriendsDTO]:
        """Get one friend by id."""
        pass

    @abstractmethod
    def delete(self, friend_id: int) -> None:
        """Delete a friend by id. Deleting a missing friend is a no-op."""
        pass


class IFriendsRepository(ABC):
    """
    Existence checks used by the resource before mutating a friend.
    """

    @abstractmethod
    def exists_by_id(self, friend_id: int) -> bool:
        """Check whether a friend with this id is stored."""
        pass
