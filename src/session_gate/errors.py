"""
session-gate error types.

Every header failure is a ParseMessageError; the subclasses only tag the
cause; on the wire they all look the same.
"""

from typing import Any, Optional

MESSAGE_CONTEXT = "Error parsing message"


class SessionGateError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class ParseMessageError(SessionGateError):
    """A frame that could not be turned into a valid header."""

    def __init__(self, cause: str, code: str = "parse_error", details: Optional[dict[str, Any]] = None):
        self.cause = cause
        super().__init__(code, self.get_message(), details)

    def get_message(self) -> str:
        return f"{MESSAGE_CONTEXT}: {self.cause}"


class MalformedPayloadError(ParseMessageError):
    def __init__(self, cause: str, details: Optional[dict[str, Any]] = None):
        super().__init__(cause, "malformed_payload", details)


class InvalidIdentityError(ParseMessageError):
    def __init__(self, cause: str, user_id: str):
        super().__init__(cause, "invalid_identity", {"user_id": user_id})


class UnrecognizedActionError(ParseMessageError):
    def __init__(self, action: str):
        super().__init__(f"Invalid action received: {action}", "unrecognized_action", {"action": action})


class ConfigError(SessionGateError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("config_error", message, details)


class ConnectionError(SessionGateError):
    def __init__(self, message: str):
        super().__init__("connection_error", message)
