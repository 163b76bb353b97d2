"""
Friends Service

Persistence-facing operations for the Friends resource. Each mutating
call commits its own transaction.
"""

from typing import List
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import logging

from dtos.friends_dto import FriendsDTO
from domain.value_objects import Absent, Lookup, Present, lookup_of
from exceptions import DatabaseError
from repositories.friends_repository import FriendsRepository
from services import friends_mapper
from services.interfaces import IFriendsService

logger = logging.getLogger(__name__)


class FriendsService(IFriendsService):
    """Service for friend-related operations."""

    def __init__(self, db: Session, friends_repo: FriendsRepository | None = None):
        """
        Initialize FriendsService.

        Args:
            db: Database session
            friends_repo: Repository to use (defaults to one bound to db)
        """
        self.db = db
        self.friends_repo = friends_repo or FriendsRepository(db)

    def save(self, friends_dto: FriendsDTO) -> FriendsDTO:
        logger.debug(f"Request to save Friends : {friends_dto}")
        try:
            friend = self.friends_repo.create(friends_mapper.to_entity(friends_dto))
            self.db.commit()
            self.db.refresh(friend)
            return friends_mapper.to_dto(friend)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise DatabaseError("save", f"Failed to save friend: {e}") from e

    def update(self, friends_dto: FriendsDTO) -> FriendsDTO:
        logger.debug(f"Request to update Friends : {friends_dto}")
        try:
            # merge() upserts: every column of the stored row is replaced
            friend = self.db.merge(friends_mapper.to_entity(friends_dto))
            self.friends_repo.update(friend)
            self.db.commit()
            self.db.refresh(friend)
            return friends_mapper.to_dto(friend)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise DatabaseError("update", f"Failed to update friend {friends_dto.id}: {e}") from e

    def partial_update(self, friends_dto: FriendsDTO) -> Lookup[FriendsDTO]:
        logger.debug(f"Request to partially update Friends : {friends_dto}")
        try:
            friend = self.friends_repo.get_by_id(friends_dto.id)
            if friend is None:
                return Absent()

            friends_mapper.partial_update(friend, friends_dto)
            self.friends_repo.update(friend)
            self.db.commit()
            self.db.refresh(friend)
            return Present(friends_mapper.to_dto(friend))
        except SQLAlchemyError as e:
            self.db.rollback()
            raise DatabaseError("partial_update", f"Failed to update friend {friends_dto.id}: {e}") from e

    def find_all(self) -> List[FriendsDTO]:
        logger.debug("Request to get all Friends")
        try:
            return friends_mapper.to_dto_list(self.friends_repo.find_all_ordered())
        except SQLAlchemyError as e:
            raise DatabaseError("find_all", f"Failed to list friends: {e}") from e

    def find_one(self, friend_id: int) -> Lookup[FriendsDTO]:
        logger.debug(f"Request to get Friends : {friend_id}")
        try:
            friend = self.friends_repo.get_by_id(friend_id)
        except SQLAlchemyError as e:
            raise DatabaseError("find_one", f"Failed to load friend {friend_id}: {e}") from e

        return lookup_of(friend).map(friends_mapper.to_dto)

    def delete(self, friend_id: int) -> None:
        logger.debug(f"Request to delete Friends : {friend_id}")
        try:
            if self.friends_repo.delete_by_id(friend_id):
                self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise DatabaseError("delete", f"Failed to delete friend {friend_id}: {e}") from e
