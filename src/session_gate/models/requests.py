"""
Action-specific request models layered on top of a validated header.
"""

import uuid

from pydantic import BaseModel, ConfigDict

from session_gate.models.header import MessageHeader


class CreateSessionRequest(BaseModel):
    header: MessageHeader
    session_name: str


class JoinSessionRequest(BaseModel):
    header: MessageHeader
    session_id: uuid.UUID
    user_name: str


class CreateSessionFields(BaseModel):
    """create_session payload fields beyond the header"""
    model_config = ConfigDict(extra="ignore", strict=True)

    session_name: str


class JoinSessionFields(BaseModel):
    """join_session payload fields beyond the header"""
    model_config = ConfigDict(extra="ignore", strict=True)

    user_name: str
