"""
Message header models: the raw wire record and the validated header.
"""

import uuid
from enum import Enum

from pydantic import BaseModel, ConfigDict


class MessageAction(str, Enum):
    CREATE_SESSION = "create_session"
    JOIN_SESSION = "join_session"


class MessageHeaderJson(BaseModel):
    """Header fields exactly as they arrive on the wire. Carries no invariants."""
    model_config = ConfigDict(extra="ignore", strict=True)

    action: str
    session_id: str
    user_id: str

    def __str__(self) -> str:
        return f"action={self.action};session_id={self.session_id};user_id={self.user_id};"


class MessageHeader(BaseModel):
    """A header whose action and user_id have both been validated."""
    model_config = ConfigDict(frozen=True)

    action: MessageAction
    session_id: str  # opaque, format belongs to session storage
    user_id: uuid.UUID
