"""
Friends Resource

Request handling for the Friends resource, independent of the web framework.
Each operation validates identifiers, delegates to the service and returns
either a ResourceResponse or a BadRequestAlert for the HTTP layer to render.
"""

from typing import List, Optional
import logging

from constants import FRIENDS_ENTITY_NAME, FRIENDS_RESOURCE_PATH
from domain.value_objects import ErrorKey
from dtos.friends_dto import FriendsDTO
from dtos.response import BadRequestAlert, ResourceResponse, ResourceResult
from services.interfaces import IFriendsRepository, IFriendsService
from utils import header_util

logger = logging.getLogger(__name__)


class FriendsResource:
    """Stateless handler for /api/friends requests."""

    def __init__(
        self,
        friends_service: IFriendsService,
        friends_repository: IFriendsRepository,
        application_name: str,
        enable_translation: bool = True,
    ):
        self.friends_service = friends_service
        self.friends_repository = friends_repository
        self.application_name = application_name
        self.enable_translation = enable_translation

    def create_friends(self, friends_dto: FriendsDTO) -> ResourceResult:
        """
        POST /friends : create a new friend.

        Returns:
            201 with the saved friend, or a BadRequestAlert (idexists)
            if the request already carries an id
        """
        logger.debug(f"REST request to save Friends : {friends_dto}")
        if friends_dto.id is not None:
            return self._bad_request(ErrorKey.ID_EXISTS)

        result = self.friends_service.save(friends_dto)
        return ResourceResponse.created(
            location=f"{FRIENDS_RESOURCE_PATH}/{result.id}",
            body=result,
            headers=header_util.create_entity_creation_alert(
                self.application_name, self.enable_translation, FRIENDS_ENTITY_NAME, str(result.id)
            ),
        )

    def update_friends(self, friend_id: Optional[int], friends_dto: FriendsDTO) -> ResourceResult:
        """
        PUT /friends/{id} : replace an existing friend.

        Returns:
            200 with the updated friend, or a BadRequestAlert
            (idnull, idinvalid or idnotfound)
        """
        logger.debug(f"REST request to update Friends : {friend_id}, {friends_dto}")
        rejected = self._validate_existing_id(friend_id, friends_dto)
        if rejected is not None:
            return rejected

        result = self.friends_service.update(friends_dto)
        return ResourceResponse.ok(
            body=result,
            headers=header_util.create_entity_update_alert(
                self.application_name, self.enable_translation, FRIENDS_ENTITY_NAME, str(friends_dto.id)
            ),
        )

    def partial_update_friends(self, friend_id: Optional[int], friends_dto: FriendsDTO) -> ResourceResult:
        """
        PATCH /friends/{id} : update the given fields of an existing friend.
        Null fields are ignored.

        Returns:
            200 with the merged friend, 404 if the friend disappeared after the
            existence check, or a BadRequestAlert (idnull, idinvalid or idnotfound)
        """
        logger.debug(f"REST request to partial update Friends partially : {friend_id}, {friends_dto}")
        rejected = self._validate_existing_id(friend_id, friends_dto)
        if rejected is not None:
            return rejected

        result = self.friends_service.partial_update(friends_dto)
        if not result.is_present:
            return ResourceResponse.not_found()
        return ResourceResponse.ok(
            body=result.value,
            headers=header_util.create_entity_update_alert(
                self.application_name, self.enable_translation, FRIENDS_ENTITY_NAME, str(friends_dto.id)
            ),
        )

    def get_all_friends(self) -> ResourceResponse:
        """GET /friends : all friends, possibly an empty list."""
        logger.debug("REST request to get all Friends")
        friends: List[FriendsDTO] = self.friends_service.find_all()
        return ResourceResponse.ok(body=friends)

    def get_friends(self, friend_id: int) -> ResourceResponse:
        """GET /friends/{id} : one friend, or 404."""
        logger.debug(f"REST request to get Friends : {friend_id}")
        result = self.friends_service.find_one(friend_id)
        if not result.is_present:
            return ResourceResponse.not_found()
        return ResourceResponse.ok(body=result.value)

    def delete_friends(self, friend_id: int) -> ResourceResponse:
        """DELETE /friends/{id} : always 204, whether or not the friend existed."""
        logger.debug(f"REST request to delete Friends : {friend_id}")
        self.friends_service.delete(friend_id)
        return ResourceResponse.no_content(
            headers=header_util.create_entity_deletion_alert(
                self.application_name, self.enable_translation, FRIENDS_ENTITY_NAME, str(friend_id)
            ),
        )

    def _validate_existing_id(self, friend_id: Optional[int], friends_dto: FriendsDTO) -> Optional[BadRequestAlert]:
        """Checks shared by PUT and PATCH, in order: idnull, idinvalid, idnotfound."""
        if friends_dto.id is None:
            return self._bad_request(ErrorKey.ID_NULL)
        if friend_id != friends_dto.id:
            return self._bad_request(ErrorKey.ID_INVALID)
        if not self.friends_repository.exists_by_id(friend_id):
            return self._bad_request(ErrorKey.ID_NOT_FOUND)
        return None

    def _bad_request(self, error_key: ErrorKey) -> BadRequestAlert:
        alert = BadRequestAlert.of(FRIENDS_ENTITY_NAME, error_key)
        logger.warning(f"Rejected Friends request: {alert.message} ({error_key.value})")
        return alert
