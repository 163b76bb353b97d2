from domain.value_objects import Absent, ErrorKey, Present, lookup_of


def test_lookup_of_wraps_nullable_values():
    assert lookup_of(None) == Absent()
    assert lookup_of(0) == Present(0)


def test_map_only_touches_present_values():
    assert Present(2).map(lambda v: v * 10) == Present(20)
    assert Absent().map(lambda v: v * 10) == Absent()


def test_is_present():
    assert Present("x").is_present
    assert not Absent().is_present


def test_error_key_message_keys():
    assert [key.message_key for key in ErrorKey] == [
        "error.idexists", "error.idnull", "error.idinvalid", "error.idnotfound"
    ]
    assert ErrorKey.ID_NOT_FOUND.default_title() == "Entity not found"
