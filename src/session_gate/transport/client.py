"""
Minimal Socket.IO client for talking to a running gateway.

The gateway only answers rejected frames, so send_frame() returns None when
no reply arrives within the timeout.
"""

import asyncio
from typing import Any, Optional

import socketio
from socketio.exceptions import ConnectionError as SocketIOConnectionError

from session_gate.errors import ConnectionError


class GatewayClient:
    def __init__(
        self,
        url: str,
        socketio_path: str = "socket.io",
        timeout: float = 2.0,
        transports: Optional[list[str]] = None,
    ):
        self._url = url
        self._socketio_path = socketio_path
        self._timeout = timeout
        self._transports = transports or ["websocket"]
        self._sio: Optional[socketio.AsyncClient] = None
        self._replies: asyncio.Queue[Any] = asyncio.Queue()

    @property
    def connected(self) -> bool:
        return self._sio is not None and self._sio.connected

    async def connect(self) -> None:
        if self._sio and self._sio.connected:
            return

        self._sio = socketio.AsyncClient()

        @self._sio.on("message")
        async def on_message(data: Any) -> None:
            self._replies.put_nowait(data)

        try:
            await self._sio.connect(
                self._url,
                transports=self._transports,
                socketio_path=self._socketio_path,
            )
        except SocketIOConnectionError as e:
            self._sio = None
            raise ConnectionError(f"Could not connect to {self._url}: {e}") from e

    async def send_frame(self, frame: str) -> Optional[Any]:
        """Send a raw text frame and wait for a reply, if any."""
        if not self._sio or not self._sio.connected:
            raise ConnectionError("Socket.IO not connected")
        await self._sio.send(frame)
        try:
            return await asyncio.wait_for(self._replies.get(), timeout=self._timeout)
        except asyncio.TimeoutError:
            return None

    async def disconnect(self) -> None:
        if self._sio:
            await self._sio.disconnect()
            self._sio = None

    async def __aenter__(self) -> "GatewayClient":
        await self.connect()
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.disconnect()
