from utils import header_util


def test_creation_alert_with_translation():
    headers = header_util.create_entity_creation_alert("friendsApp", True, "friends", "1")

    assert headers == {
        "X-friendsApp-alert": "friendsApp.friends.created",
        "X-friendsApp-params": "1",
    }


def test_creation_alert_without_translation():
    headers = header_util.create_entity_creation_alert("friendsApp", False, "friends", "1")

    assert headers["X-friendsApp-alert"] == "A new friends is created with identifier 1"


def test_update_alert_without_translation():
    headers = header_util.create_entity_update_alert("friendsApp", False, "friends", "9")

    assert headers["X-friendsApp-alert"] == "A friends is updated with identifier 9"


def test_params_are_url_encoded():
    headers = header_util.create_entity_deletion_alert("friendsApp", True, "friends", "a b/c")

    assert headers["X-friendsApp-params"] == "a%20b%2Fc"


def test_failure_alert():
    headers = header_util.create_failure_alert("friendsApp", "friends", "idnull")

    assert headers == {
        "X-friendsApp-error": "error.idnull",
        "X-friendsApp-params": "friends",
    }
