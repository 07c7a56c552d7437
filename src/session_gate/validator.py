"""
Header validation — turns the raw wire record into a typed MessageHeader.

Checks run in a fixed order: user_id first, then action. session_id is
carried through untouched.
"""

import logging
import re
import uuid

from session_gate.codec import decode_header
from session_gate.errors import InvalidIdentityError, UnrecognizedActionError
from session_gate.models.header import MessageAction, MessageHeader, MessageHeaderJson

logger = logging.getLogger(__name__)

INVALID_USER_ID_CAUSE = "we could not parse string provided for 'user_id' into a valid UUID."

_HYPHENATED = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
# simple, hyphenated, braced or urn form; uuid.UUID alone accepts far more
UUID_TEXT = re.compile(rf"[0-9a-fA-F]{{32}}|{_HYPHENATED}|\{{{_HYPHENATED}\}}|urn:uuid:{_HYPHENATED}")

_ACTIONS: dict[str, MessageAction] = {action.value: action for action in MessageAction}


def parse_uuid(raw: str) -> uuid.UUID:
    """Parse one of the RFC-4122 text forms. Raises ValueError otherwise."""
    if not isinstance(raw, str) or UUID_TEXT.fullmatch(raw) is None:
        raise ValueError(f"not a UUID: {raw!r}")
    return uuid.UUID(raw)


def parse_user_id(raw: str) -> uuid.UUID:
    try:
        return parse_uuid(raw)
    except ValueError:
        logger.debug("Invalid UUID: %s", raw)
        raise InvalidIdentityError(INVALID_USER_ID_CAUSE, raw) from None


def parse_action(raw: str) -> MessageAction:
    # exact, case-sensitive match only
    try:
        return _ACTIONS[raw]
    except KeyError:
        logger.debug("Invalid action: %r", raw)
        raise UnrecognizedActionError(raw) from None


def validate_header(header_json: MessageHeaderJson) -> MessageHeader:
    """Validate a decoded header record. Raises a ParseMessageError subclass."""
    user_id = parse_user_id(header_json.user_id)
    action = parse_action(header_json.action)
    return MessageHeader(action=action, session_id=header_json.session_id, user_id=user_id)


def parse_header(frame: str) -> MessageHeader:
    """Decode and validate a raw text frame in one step."""
    return validate_header(decode_header(frame))
