"""
Dependency injection providers for FastAPI.

This module provides factory functions for creating repository, service and
resource instances, following the Dependency Inversion Principle. Tests
override these (or get_db) to substitute doubles.
"""

from sqlalchemy.orm import Session
from fastapi import Depends
from database import get_db
from config.app_config import settings
from repositories.friends_repository import FriendsRepository
from services.interfaces import IFriendsService
from services.friends_service import FriendsService
from api.friends_resource import FriendsResource


def get_friends_repository(db: Session = Depends(get_db)) -> FriendsRepository:
    """
    Factory function for creating FriendsRepository instances.

    Args:
        db: Database session (injected)

    Returns:
        FriendsRepository instance
    """
    return FriendsRepository(db)


def get_friends_service(
    db: Session = Depends(get_db),
    friends_repo: FriendsRepository = Depends(get_friends_repository)
) -> IFriendsService:
    """
    Factory function for creating FriendsService instances.

    Returns:
        IFriendsService: Friends service implementation
    """
    return FriendsService(db, friends_repo)


def get_friends_resource(
    friends_service: IFriendsService = Depends(get_friends_service),
    friends_repo: FriendsRepository = Depends(get_friends_repository)
) -> FriendsResource:
    """
    Factory function for the request handler of /api/friends.

    The resource is built per request; it holds no state of its own.
    """
    return FriendsResource(
        friends_service=friends_service,
        friends_repository=friends_repo,
        application_name=settings.app_name,
        enable_translation=settings.enable_translation,
    )
