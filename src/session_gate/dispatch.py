"""
Action-specific request extraction.

The header only says what the client wants; the rest of the payload is read
here once the header has been accepted.
"""

import logging
from typing import Union

from pydantic import ValidationError

from session_gate.errors import MalformedPayloadError
from session_gate.models.header import MessageAction, MessageHeader
from session_gate.models.requests import (
    CreateSessionFields,
    CreateSessionRequest,
    JoinSessionFields,
    JoinSessionRequest,
)
from session_gate.validator import parse_uuid

logger = logging.getLogger(__name__)

SessionRequest = Union[CreateSessionRequest, JoinSessionRequest]


def _missing_field_cause(field: str) -> str:
    return f"we could not find a valid string for '{field}' in the message."


def build_create_request(header: MessageHeader, payload: str) -> CreateSessionRequest:
    try:
        fields = CreateSessionFields.model_validate_json(payload)
    except ValidationError:
        raise MalformedPayloadError(_missing_field_cause("session_name")) from None
    return CreateSessionRequest(header=header, session_name=fields.session_name)


def build_join_request(header: MessageHeader, payload: str) -> JoinSessionRequest:
    try:
        session_id = parse_uuid(header.session_id)
    except ValueError:
        logger.debug("Invalid session UUID: %s", header.session_id)
        raise MalformedPayloadError(
            "we could not parse string provided for 'session_id' into a valid UUID.",
            {"session_id": header.session_id},
        ) from None
    try:
        fields = JoinSessionFields.model_validate_json(payload)
    except ValidationError:
        raise MalformedPayloadError(_missing_field_cause("user_name")) from None
    return JoinSessionRequest(header=header, session_id=session_id, user_name=fields.user_name)


def build_request(header: MessageHeader, payload: str) -> SessionRequest:
    """Build the request for ``header.action`` from the original frame."""
    if header.action is MessageAction.CREATE_SESSION:
        return build_create_request(header, payload)
    return build_join_request(header, payload)
