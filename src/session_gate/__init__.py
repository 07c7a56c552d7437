"""
session-gate — handshake layer for real-time collaborative sessions.

Decodes and validates the header of every inbound frame and answers
rejected frames with a fixed-shape JSON error envelope.
"""

__version__ = "0.1.0"

from session_gate.errors import (
    SessionGateError,
    ParseMessageError,
    MalformedPayloadError,
    InvalidIdentityError,
    UnrecognizedActionError,
    ConfigError,
    ConnectionError,
)
from session_gate.models.header import MessageAction, MessageHeader, MessageHeaderJson
from session_gate.models.requests import CreateSessionRequest, JoinSessionRequest
from session_gate.models.response import ResponseMessage
from session_gate.codec import decode_header, encode_header
from session_gate.validator import parse_header, validate_header
from session_gate.responder import get_response_json_string
from session_gate.dispatch import build_request
from session_gate.handler import ConnectionHandler, FrameResult, process_frame

__all__ = [
    "SessionGateError",
    "ParseMessageError",
    "MalformedPayloadError",
    "InvalidIdentityError",
    "UnrecognizedActionError",
    "ConfigError",
    "ConnectionError",
    "MessageAction",
    "MessageHeader",
    "MessageHeaderJson",
    "CreateSessionRequest",
    "JoinSessionRequest",
    "ResponseMessage",
    "decode_header",
    "encode_header",
    "parse_header",
    "validate_header",
    "get_response_json_string",
    "build_request",
    "ConnectionHandler",
    "FrameResult",
    "process_frame",
]
