"""
Friends API endpoints

Binds (method, path) pairs to FriendsResource operations and renders their
results as HTTP responses.
"""
from fastapi import APIRouter, Depends, Path, Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from typing import Annotated, List
import logging

from api.friends_resource import FriendsResource
from config.app_config import settings
from constants import MAX_ID, MIN_ID, HTTPStatus
from dependencies import get_friends_resource
from dtos.friends_dto import FriendsDTO
from dtos.response import BadRequestAlert, ResourceResult
from utils.error_handlers import handle_api_errors
from utils.header_util import create_failure_alert

logger = logging.getLogger(__name__)

router = APIRouter()

# Path ids outside the stored integer range fail request validation (400)
FriendId = Annotated[int, Path(ge=MIN_ID, le=MAX_ID, description="Friend ID")]


def render(result: ResourceResult) -> Response:
    """
    Convert a resource result into a framework response.

    Bodies are only sent for 200/201; 204 and 404 carry headers only.
    """
    if isinstance(result, BadRequestAlert):
        return JSONResponse(
            status_code=result.status,
            content=result.to_problem(),
            headers=create_failure_alert(settings.app_name, result.entity_name, result.error_key.value),
        )

    headers = dict(result.headers)
    if result.location:
        headers["Location"] = result.location

    if result.status in (HTTPStatus.NO_CONTENT, HTTPStatus.NOT_FOUND):
        return Response(status_code=result.status, headers=headers)

    return JSONResponse(status_code=result.status, content=jsonable_encoder(result.body), headers=headers)


@handle_api_errors("Create friend")
def create_friends(
    friends_dto: FriendsDTO,
    resource: FriendsResource = Depends(get_friends_resource)
):
    """Create a new friend. The body must not carry an id."""
    return render(resource.create_friends(friends_dto))


@handle_api_errors("Update friend")
def update_friends(
    friend_id: FriendId,
    friends_dto: FriendsDTO,
    resource: FriendsResource = Depends(get_friends_resource)
):
    """Replace an existing friend. Body id must match the path id."""
    return render(resource.update_friends(friend_id, friends_dto))


@handle_api_errors("Partially update friend")
def partial_update_friends(
    friend_id: FriendId,
    friends_dto: FriendsDTO,
    resource: FriendsResource = Depends(get_friends_resource)
):
    """
    Update the given fields of an existing friend.

    Accepts application/json and application/merge-patch+json; null fields
    are left unchanged.
    """
    return render(resource.partial_update_friends(friend_id, friends_dto))


@handle_api_errors("List friends")
def get_all_friends(resource: FriendsResource = Depends(get_friends_resource)):
    """Get all friends."""
    return render(resource.get_all_friends())


@handle_api_errors("Get friend")
def get_friends(friend_id: FriendId, resource: FriendsResource = Depends(get_friends_resource)):
    """Get a friend by id (404 if unknown)."""
    return render(resource.get_friends(friend_id))


@handle_api_errors("Delete friend")
def delete_friends(friend_id: FriendId, resource: FriendsResource = Depends(get_friends_resource)):
    """Delete a friend by id. Always answers 204."""
    return render(resource.delete_friends(friend_id))


# (method, path, endpoint, success status, response model)
FRIENDS_ROUTES = [
    ("POST", "/friends", create_friends, HTTPStatus.CREATED, FriendsDTO),
    ("PUT", "/friends/{friend_id}", update_friends, HTTPStatus.OK, FriendsDTO),
    ("PATCH", "/friends/{friend_id}", partial_update_friends, HTTPStatus.OK, FriendsDTO),
    ("GET", "/friends", get_all_friends, HTTPStatus.OK, List[FriendsDTO]),
    ("GET", "/friends/{friend_id}", get_friends, HTTPStatus.OK, FriendsDTO),
    ("DELETE", "/friends/{friend_id}", delete_friends, HTTPStatus.NO_CONTENT, None),
]

for method, path, endpoint, status_code, response_model in FRIENDS_ROUTES:
    router.add_api_route(
        path,
        endpoint,
        methods=[method],
        status_code=status_code,
        response_model=response_model,
    )
