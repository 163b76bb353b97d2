"""
Friends Mapper

Converts between the Friend database model and FriendsDTO.
"""

from typing import Iterable, List

from models import Friend
from dtos.friends_dto import FriendsDTO

# DTO fields copied onto the model; id is owned by the store
FRIEND_FIELDS = ("name", "relationship", "email", "phone_number", "notes")


def to_dto(friend: Friend) -> FriendsDTO:
    return FriendsDTO.model_validate(friend, from_attributes=True)


def to_dto_list(friends: Iterable[Friend]) -> List[FriendsDTO]:
    return [to_dto(friend) for friend in friends]


def to_entity(friends_dto: FriendsDTO) -> Friend:
    """Build a new, unsaved Friend from a DTO."""
    friend = Friend(id=friends_dto.id)
    return update_entity(friend, friends_dto)


def update_entity(friend: Friend, friends_dto: FriendsDTO) -> Friend:
    """
    Copy every DTO field onto the model, nulls included (full replace).
    """
    for field_name in FRIEND_FIELDS:
        setattr(friend, field_name, getattr(friends_dto, field_name))
    return friend


def partial_update(friend: Friend, friends_dto: FriendsDTO) -> Friend:
    """
    Copy only the non-null DTO fields onto the model.

    Fields left null in the request keep their stored value.
    """
    for field_name in FRIEND_FIELDS:
        value = getattr(friends_dto, field_name)
        if value is not None:
            setattr(friend, field_name, value)
    return friend
