"""
Friends repository for friend-specific data access operations.
"""

from typing import List
from sqlalchemy.orm import Session

from models import Friend
from services.interfaces import IFriendsRepository
from .base_repository import BaseRepository


class FriendsRepository(BaseRepository[Friend], IFriendsRepository):
    """Repository for Friend model operations."""

    def __init__(self, db: Session):
        super().__init__(db, Friend)

    def exists_by_id(self, friend_id: int) -> bool:
        """
        Check whether a friend with this id is stored.

        Args:
            friend_id: Friend primary key

        Returns:
            True if a row exists
        """
        return self.exists(friend_id)

    def find_all_ordered(self) -> List[Friend]:
        """Get every friend ordered by id (insertion order)."""
        return self.db.query(self.model).order_by(self.model.id).all()
