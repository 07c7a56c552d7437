"""
Connection handling boundary.

Every frame goes through codec -> validator. Failures are answered with the
error envelope and the connection keeps going; accepted headers are handed to
the downstream ``on_header`` callback together with the original frame.
"""

import logging
from typing import Any, Awaitable, Callable, Optional

from session_gate.errors import ParseMessageError
from session_gate.models.header import MessageHeader
from session_gate.responder import get_response_json_string
from session_gate.transport.socket_manager import SocketManager
from session_gate.validator import parse_header

logger = logging.getLogger(__name__)

HeaderCallback = Callable[[MessageHeader, str], Awaitable[Any]]


class FrameResult:
    __slots__ = ("header", "response", "error")

    def __init__(
        self,
        header: Optional[MessageHeader] = None,
        response: Optional[str] = None,
        error: Optional[ParseMessageError] = None,
    ):
        self.header = header
        self.response = response
        self.error = error

    @property
    def ok(self) -> bool:
        return self.header is not None

    def __repr__(self) -> str:
        if self.ok:
            return f"FrameResult(header={self.header!r})"
        return f"FrameResult(response={self.response!r})"


def process_frame(frame: str) -> FrameResult:
    """Validate one frame. Never raises for bad client input."""
    try:
        return FrameResult(header=parse_header(frame))
    except ParseMessageError as e:
        return FrameResult(response=get_response_json_string(e), error=e)


class ConnectionHandler:
    def __init__(self, manager: SocketManager, on_header: HeaderCallback):
        self._manager = manager
        self._on_header = on_header
        self.frames_processed = 0
        self.frames_rejected = 0

    def _reject(self, response: str, error: ParseMessageError) -> None:
        self.frames_rejected += 1
        logger.info("Rejected frame from %s: %s", self._manager.sid, error.code)
        self._manager.send_message(response)

    async def handle(self, frame: str) -> None:
        self.frames_processed += 1
        result = process_frame(frame)
        if not result.ok:
            self._reject(result.response, result.error)
            return
        try:
            await self._on_header(result.header, frame)
        except ParseMessageError as e:
            self._reject(get_response_json_string(e), e)

    async def run(self) -> None:
        """Process frames until the transport reports the connection is gone."""
        while True:
            frame = await self._manager.read_message()
            if frame is None:
                break
            await self.handle(frame)
        logger.debug(
            "Connection %s done: %d frames, %d rejected",
            self._manager.sid, self.frames_processed, self.frames_rejected,
        )
