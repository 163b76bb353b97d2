"""
Unit tests for FriendsResource with mocked collaborators.
"""
from unittest.mock import Mock

import pytest

from api.friends_resource import FriendsResource
from domain.value_objects import Absent, ErrorKey, Present
from dtos.friends_dto import FriendsDTO
from dtos.response import BadRequestAlert, ResourceResponse
from services.interfaces import IFriendsRepository, IFriendsService


@pytest.fixture
def friends_service():
    return Mock(spec=IFriendsService)


@pytest.fixture
def friends_repository():
    repo = Mock(spec=IFriendsRepository)
    repo.exists_by_id.return_value = True
    return repo


@pytest.fixture
def resource(friends_service, friends_repository):
    return FriendsResource(friends_service, friends_repository, application_name="friendsApp")


def assert_bad_request(result, error_key: ErrorKey):
    assert isinstance(result, BadRequestAlert)
    assert result.status == 400
    assert result.entity_name == "friends"
    assert result.error_key is error_key


class TestCreate:
    def test_rejects_existing_id(self, resource, friends_service):
        result = resource.create_friends(FriendsDTO(id=1, name="Alice"))

        assert_bad_request(result, ErrorKey.ID_EXISTS)
        friends_service.save.assert_not_called()

    def test_saves_and_returns_created(self, resource, friends_service):
        saved = FriendsDTO(id=7, name="Alice")
        friends_service.save.return_value = saved

        result = resource.create_friends(FriendsDTO(name="Alice"))

        assert isinstance(result, ResourceResponse)
        assert result.status == 201
        assert result.body is saved
        assert result.location == "/api/friends/7"
        assert result.headers["X-friendsApp-alert"] == "friendsApp.friends.created"
        assert result.headers["X-friendsApp-params"] == "7"


@pytest.mark.parametrize("operation", ["update_friends", "partial_update_friends"])
class TestWriteValidation:
    def test_null_body_id(self, resource, friends_repository, operation):
        result = getattr(resource, operation)(5, FriendsDTO(name="Alice"))

        assert_bad_request(result, ErrorKey.ID_NULL)
        friends_repository.exists_by_id.assert_not_called()

    def test_null_body_id_checked_before_mismatch(self, resource, operation):
        # path id None and body id None: idnull wins over idinvalid
        result = getattr(resource, operation)(None, FriendsDTO())

        assert_bad_request(result, ErrorKey.ID_NULL)

    def test_mismatched_ids(self, resource, friends_repository, operation):
        result = getattr(resource, operation)(5, FriendsDTO(id=7))

        assert_bad_request(result, ErrorKey.ID_INVALID)
        friends_repository.exists_by_id.assert_not_called()

    def test_missing_path_id(self, resource, operation):
        result = getattr(resource, operation)(None, FriendsDTO(id=7))

        assert_bad_request(result, ErrorKey.ID_INVALID)

    def test_unknown_id(self, resource, friends_service, friends_repository, operation):
        friends_repository.exists_by_id.return_value = False

        result = getattr(resource, operation)(999, FriendsDTO(id=999))

        assert_bad_request(result, ErrorKey.ID_NOT_FOUND)
        friends_repository.exists_by_id.assert_called_once_with(999)
        friends_service.update.assert_not_called()
        friends_service.partial_update.assert_not_called()


class TestUpdate:
    def test_updates_existing(self, resource, friends_service):
        updated = FriendsDTO(id=3, name="Bob")
        friends_service.update.return_value = updated

        result = resource.update_friends(3, FriendsDTO(id=3, name="Bob"))

        assert result.status == 200
        assert result.body is updated
        assert result.headers["X-friendsApp-alert"] == "friendsApp.friends.updated"
        assert result.headers["X-friendsApp-params"] == "3"


class TestPartialUpdate:
    def test_returns_merged_friend(self, resource, friends_service):
        merged = FriendsDTO(id=3, name="Bob", relationship="work")
        friends_service.partial_update.return_value = Present(merged)

        result = resource.partial_update_friends(3, FriendsDTO(id=3, name="Bob"))

        assert result.status == 200
        assert result.body is merged
        assert result.headers["X-friendsApp-alert"] == "friendsApp.friends.updated"

    def test_not_found_when_friend_vanishes_after_check(self, resource, friends_service, friends_repository):
        friends_repository.exists_by_id.return_value = True
        friends_service.partial_update.return_value = Absent()

        result = resource.partial_update_friends(3, FriendsDTO(id=3, name="Bob"))

        assert isinstance(result, ResourceResponse)
        assert result.status == 404
        assert result.body is None
        assert result.headers == {}


class TestReads:
    def test_list_empty(self, resource, friends_service):
        friends_service.find_all.return_value = []

        result = resource.get_all_friends()

        assert result.status == 200
        assert result.body == []

    def test_list_returns_service_order(self, resource, friends_service):
        friends = [FriendsDTO(id=2), FriendsDTO(id=1)]
        friends_service.find_all.return_value = friends

        result = resource.get_all_friends()

        assert [f.id for f in result.body] == [2, 1]

    def test_get_found(self, resource, friends_service):
        friend = FriendsDTO(id=4, name="Dana")
        friends_service.find_one.return_value = Present(friend)

        result = resource.get_friends(4)

        assert result.status == 200
        assert result.body is friend
        friends_service.find_one.assert_called_once_with(4)

    def test_get_absent(self, resource, friends_service):
        friends_service.find_one.return_value = Absent()

        result = resource.get_friends(4)

        assert result.status == 404
        assert result.body is None


class TestDelete:
    def test_always_no_content(self, resource, friends_service, friends_repository):
        result = resource.delete_friends(12)

        assert result.status == 204
        assert result.body is None
        assert result.headers["X-friendsApp-alert"] == "friendsApp.friends.deleted"
        assert result.headers["X-friendsApp-params"] == "12"
        friends_service.delete.assert_called_once_with(12)
        friends_repository.exists_by_id.assert_not_called()


def test_service_errors_propagate(resource, friends_service):
    friends_service.save.side_effect = RuntimeError("storage down")

    with pytest.raises(RuntimeError, match="storage down"):
        resource.create_friends(FriendsDTO(name="Alice"))


def test_plain_alert_messages_without_translation(friends_service, friends_repository):
    resource = FriendsResource(friends_service, friends_repository, "friendsApp", enable_translation=False)

    result = resource.delete_friends(3)

    assert result.headers["X-friendsApp-alert"] == "A friends is deleted with identifier 3"
