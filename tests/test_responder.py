"""Error envelope formatting."""

import json

import pytest

from session_gate import responder
from session_gate.errors import ParseMessageError
from session_gate.models.response import ResponseMessage
from session_gate.responder import get_response_json_string
from session_gate.validator import parse_header

USER_ID = "683d711e-fe25-443c-8102-43d4245a6884"


def test_get_response_json_string():
    error = ParseMessageError("Placeholder Error Message")
    expected = ResponseMessage(
        status_code=400,
        status="bad_request",
        message="Error parsing message: Placeholder Error Message",
    )
    actual = ResponseMessage.model_validate_json(get_response_json_string(error))
    assert actual == expected


@pytest.mark.parametrize("frame", [
    "{ bad json",
    json.dumps({"action": "create_session", "session_id": "ECTO-1", "user_id": "baduuid"}),
    json.dumps({"action": "delete_session", "session_id": "ECTO-1", "user_id": USER_ID}),
])
def test_envelope_shape_is_the_same_for_every_cause(frame):
    with pytest.raises(ParseMessageError) as exc:
        parse_header(frame)
    envelope = json.loads(get_response_json_string(exc.value))
    assert set(envelope) == {"status_code", "status", "message"}
    assert envelope["status_code"] == 400
    assert envelope["status"] == "bad_request"
    assert envelope["message"] == f"Error parsing message: {exc.value.cause}"


def test_unrecognized_action_literal_in_envelope():
    frame = json.dumps({"action": "delete_session", "session_id": "ECTO-1", "user_id": USER_ID})
    with pytest.raises(ParseMessageError) as exc:
        parse_header(frame)
    assert "delete_session" in json.loads(get_response_json_string(exc.value))["message"]


def test_response_is_byte_identical_across_calls():
    error = ParseMessageError("same input")
    assert get_response_json_string(error) == get_response_json_string(error)


def test_falls_back_to_raw_message(monkeypatch, caplog):
    class BrokenResponse:
        def model_dump_json(self):
            raise ValueError("cannot serialize")

    monkeypatch.setattr(responder, "build_response", lambda error: BrokenResponse())
    error = ParseMessageError("Placeholder Error Message")
    with caplog.at_level("WARNING", logger="session_gate.responder"):
        result = get_response_json_string(error)
    assert result == "Error parsing message: Placeholder Error Message"
    assert "Failed to turn response into JSON" in caplog.text
