"""
Header frame encoding and decoding.

Decoding only checks shape: a JSON object with string action, session_id and
user_id. Extra keys are left for the action-specific handlers.
"""

import json
import logging
import uuid
from typing import Any, Union

from pydantic import ValidationError

from session_gate.errors import MalformedPayloadError
from session_gate.models.header import MessageAction, MessageHeaderJson

logger = logging.getLogger(__name__)

INVALID_JSON_CAUSE = (
    "we could not parse string provided into a valid JSON Object. Check for syntax errors."
)


def decode_header(frame: str) -> MessageHeaderJson:
    """Decode a raw text frame into the unvalidated header record."""
    try:
        return MessageHeaderJson.model_validate_json(frame)
    except ValidationError:
        logger.debug("Invalid JSON Format: %s", frame)
        raise MalformedPayloadError(INVALID_JSON_CAUSE) from None


def encode_header(
    action: Union[MessageAction, str],
    session_id: str,
    user_id: Union[uuid.UUID, str],
    **extra: Any,
) -> str:
    """Build a text frame carrying a header plus any action-specific fields."""
    body: dict[str, Any] = {
        "action": action.value if isinstance(action, MessageAction) else action,
        "session_id": session_id,
        "user_id": str(user_id),
    }
    body.update(extra)
    return json.dumps(body)
