"""
Data Transfer Objects (DTOs) Layer

This package contains DTOs that decouple the API layer from the database models.
DTOs prevent leaking database structure to external APIs and allow independent evolution.

Structure:
- friends_dto: FriendsDTO, the wire form of a friend
- response/: results produced by resource handlers for the HTTP layer
"""

from .friends_dto import FriendsDTO

__all__ = ["FriendsDTO"]
