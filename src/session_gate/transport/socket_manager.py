"""
Per-connection transport adapter over a Socket.IO server.

Inbound frames arrive on the ``message`` event and are queued here; the
connection handler pulls them with read_message(). Replies go back out as
``message`` events to the same sid.
"""

import asyncio
import logging
from typing import Any, Optional

import socketio

logger = logging.getLogger(__name__)

_CLOSED = object()


class SocketManager:
    def __init__(self, sio: socketio.AsyncServer, sid: str):
        self._sio = sio
        self._sid = sid
        self._inbox: asyncio.Queue[Any] = asyncio.Queue()
        self._closed = False
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def sid(self) -> str:
        return self._sid

    @property
    def closed(self) -> bool:
        return self._closed

    def feed(self, data: Any) -> None:
        """Queue an inbound frame. Frames after close() are dropped."""
        if self._closed:
            logger.debug("Dropping frame for closed connection %s", self._sid)
            return
        self._inbox.put_nowait(data)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._inbox.put_nowait(_CLOSED)

    async def read_message(self) -> Optional[str]:
        """Wait for the next text frame. Returns None once the connection is closed."""
        while True:
            if self._closed and self._inbox.empty():
                return None
            data = await self._inbox.get()
            if data is _CLOSED:
                return None
            if isinstance(data, str):
                return data
            logger.warning("Skipping non-text frame from %s: %s", self._sid, type(data).__name__)

    def send_message(self, message: str) -> None:
        """Send a text frame to the client. Fire-and-forget: failures are logged."""
        if self._closed:
            logger.debug("Not sending to closed connection %s", self._sid)
            return

        async def _do_send() -> None:
            try:
                await self._sio.send(message, to=self._sid)
            except Exception as e:
                logger.error("Send failed for %s: %s", self._sid, e)

        task = asyncio.get_running_loop().create_task(_do_send())
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def drain(self) -> None:
        """Wait for any sends still in flight."""
        if self._pending:
            await asyncio.gather(*list(self._pending))
