from delve.websockets.validation import GET_STATE, MOVE, NEW_GAME, validate


def test_game_id_is_trimmed():
    ok, data = validate({"game_id": "  abc  "}, GET_STATE)
    assert ok
    assert data == {"game_id": "abc"}


def test_blank_and_oversized_ids_rejected():
    ok, err = validate({"game_id": "   "}, GET_STATE)
    assert not ok and err["code"] == "empty"
    ok, err = validate({"game_id": "x" * 65}, GET_STATE)
    assert not ok and err["code"] == "max_len"


def test_direction_passes_through_untouched():
    ok, data = validate({"game_id": "g", "direction": {"x": 0, "y": 1}}, MOVE)
    assert ok
    assert data["direction"] == {"x": 0, "y": 1}


def test_optional_fields_and_types():
    assert validate({}, NEW_GAME) == (True, {})
    ok, err = validate({"config": [1]}, NEW_GAME)
    assert not ok
    assert err == {"field": "config", "error": "expected dict", "code": "type"}


def test_int_rule_rejects_bool():
    ok, err = validate({"n": True}, {"n": ("int", True)})
    assert not ok and err["code"] == "type"
    assert validate({"n": 3}, {"n": ("int", True)}) == (True, {"n": 3})


def test_unknown_schema_type():
    ok, err = validate({"n": 1}, {"n": ("float", True)})
    assert not ok and err["field"] == "__schema__"
