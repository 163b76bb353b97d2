import pytest
from pydantic import ValidationError

import models
from dtos.friends_dto import FriendsDTO


def test_dto_equals_verifier():
    friends_dto1 = FriendsDTO()
    friends_dto1.id = 1
    friends_dto2 = FriendsDTO()
    assert friends_dto1 != friends_dto2

    friends_dto2.id = friends_dto1.id
    assert friends_dto1 == friends_dto2

    friends_dto2.id = 2
    assert friends_dto1 != friends_dto2

    friends_dto1.id = None
    assert friends_dto1 != friends_dto2


def test_dtos_without_ids_are_never_equal():
    a = FriendsDTO(name="Alice")
    b = FriendsDTO(name="Alice")

    assert a != b
    assert a == a


def test_equality_ignores_domain_fields():
    a = FriendsDTO(id=5, name="Alice")
    b = FriendsDTO(id=5, name="Bob", relationship="work")

    assert a == b


def test_not_equal_to_other_types():
    assert FriendsDTO(id=1) != 1
    assert FriendsDTO(id=1) != {"id": 1}


def test_hash_is_stable_when_id_changes():
    dto = FriendsDTO(name="Alice")
    before = hash(dto)
    dto.id = 42

    assert hash(dto) == before
    assert hash(dto) == hash(FriendsDTO(id=42))


def test_builds_from_orm_attributes():
    friend = models.Friend(id=3, name="Carol", relationship="family", email="carol@example.com")

    dto = FriendsDTO.model_validate(friend, from_attributes=True)

    assert dto.id == 3
    assert dto.name == "Carol"
    assert dto.relationship == "family"
    assert dto.phone_number is None


def test_rejects_email_without_at_sign():
    with pytest.raises(ValidationError):
        FriendsDTO(name="Dave", email="not-an-email")



def test_rejects_id_outside_integer_range():
    with pytest.raises(ValidationError):
        FriendsDTO(id=2 ** 63)

    assert FriendsDTO(id=2 ** 63 - 1).id == 2 ** 63 - 1


def test_str_lists_every_field():
    dto = FriendsDTO(id=1, name="Alice", notes="met at college")

    assert "notes='met at college'" in str(dto)
