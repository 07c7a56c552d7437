"""
Error responder — serializes parse failures into the 400 envelope.
"""

import logging

from session_gate.errors import ParseMessageError
from session_gate.models.response import ResponseMessage

logger = logging.getLogger(__name__)


def build_response(error: ParseMessageError) -> ResponseMessage:
    return ResponseMessage(message=error.get_message())


def get_response_json_string(error: ParseMessageError) -> str:
    """Return the JSON envelope for ``error``.

    Falls back to the bare message text when the envelope cannot be
    serialized, so callers always have something to send.
    """
    try:
        return build_response(error).model_dump_json()
    except (TypeError, ValueError) as e:
        logger.warning("Failed to turn response into JSON string: %s", e)
        return error.get_message()
