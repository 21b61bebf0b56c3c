import pytest
from jsonschema import ValidationError

from wealthchat.agent_io import (
    error_to_string,
    load_schema,
    make_ok_message,
    make_user_message,
    validate_conversation_state,
    validate_projection,
    validate_turn_request,
    validate_turn_response,
)
from wealthchat.model_impl.two_phase_model import calculate_projection


def test_load_schema_reads_packaged_schema():
    schema = load_schema("turn_response.schema.json")
    assert schema.get("title") == "TurnResponse"


def test_load_schema_missing_file():
    with pytest.raises(FileNotFoundError):
        load_schema("nope.schema.json")


def test_projection_dict_matches_schema(profile):
    validate_projection(calculate_projection(profile).to_dict())


def test_turn_request_requires_message_for_turn():
    validate_turn_request({"action": "start"})
    validate_turn_request({"action": "turn", "message": "35", "state": {"stage": "age", "profile": {}}})
    with pytest.raises(ValidationError):
        validate_turn_request({"action": "turn", "state": {}})
    with pytest.raises(ValidationError):
        validate_turn_request({"action": "dance"})


def test_conversation_state_schema_rejects_out_of_range_values():
    validate_conversation_state({"stage": "income", "profile": {"age": 30}})
    with pytest.raises(ValidationError):
        validate_conversation_state({"stage": "income", "profile": {"age": 12}})


def test_turn_response_happy_path():
    validate_turn_response({"status": "ok", "messages": [make_ok_message("Hi")], "state": {}, "intent": None})


def test_make_message_helpers():
    m1 = make_ok_message("hello")
    m2 = make_user_message("hi")
    assert m1 == {"role": "assistant", "content": "hello"}
    assert m2 == {"role": "user", "content": "hi"}


def test_error_to_string_validationerror_path():
    with pytest.raises(ValidationError) as e:
        validate_conversation_state({"stage": "income", "profile": {"age": "old"}})
    assert error_to_string(e.value) == e.value.message + " at $.profile.age"


def test_error_to_string_plain_exception():
    assert error_to_string(KeyError("x")) == "KeyError: 'x'"
