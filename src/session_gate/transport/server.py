"""
Socket.IO gateway server.

One SocketManager and one ConnectionHandler task per connected client.
"""

import asyncio
import logging
from typing import Any, Optional

import socketio

from session_gate.config import GatewayConfig
from session_gate.dispatch import build_request
from session_gate.handler import ConnectionHandler, HeaderCallback
from session_gate.models.header import MessageHeader
from session_gate.transport.socket_manager import SocketManager

logger = logging.getLogger(__name__)


async def log_session_request(header: MessageHeader, payload: str) -> None:
    """Default downstream: extract the action-specific request and log it."""
    request = build_request(header, payload)
    logger.info(
        "Accepted %s for session %r from user %s",
        header.action.value, header.session_id, header.user_id,
    )
    logger.debug("Request: %r", request)


class GatewayServer:
    def __init__(self, config: GatewayConfig, on_header: Optional[HeaderCallback] = None):
        self.config = config
        self._on_header = on_header or log_session_request
        self.sio = socketio.AsyncServer(
            async_mode="asgi",
            cors_allowed_origins=config.cors_allowed_origins,
        )
        self._connections: dict[str, SocketManager] = {}
        self._tasks: dict[str, asyncio.Task[None]] = {}

        self.sio.on("connect", self._on_connect)
        self.sio.on("message", self._on_message)
        self.sio.on("disconnect", self._on_disconnect)

    @property
    def connection_count(self) -> int:
        return len(self._connections)

    def asgi_app(self) -> socketio.ASGIApp:
        return socketio.ASGIApp(self.sio, socketio_path=self.config.socketio_path)

    async def _on_connect(self, sid: str, environ: dict[str, Any], auth: Any = None) -> None:
        manager = SocketManager(self.sio, sid)
        self._connections[sid] = manager
        self._tasks[sid] = asyncio.get_running_loop().create_task(self._run_connection(manager))
        logger.info("Client connected: %s", sid)

    async def _on_message(self, sid: str, data: Any) -> None:
        manager = self._connections.get(sid)
        if manager is None:
            logger.warning("Message for unknown connection %s", sid)
            return
        manager.feed(data)

    async def _on_disconnect(self, sid: str, *args: Any) -> None:
        manager = self._connections.pop(sid, None)
        if manager is not None:
            manager.close()
        logger.info("Client disconnected: %s", sid)

    async def _run_connection(self, manager: SocketManager) -> None:
        handler = ConnectionHandler(manager, self._on_header)
        try:
            await handler.run()
        except Exception:
            logger.exception("Connection handler for %s failed", manager.sid)
            await self.sio.disconnect(manager.sid)
        finally:
            await manager.drain()
            self._tasks.pop(manager.sid, None)

    async def shutdown(self) -> None:
        for manager in list(self._connections.values()):
            manager.close()
        tasks = list(self._tasks.values())
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)


def serve(config: GatewayConfig, on_header: Optional[HeaderCallback] = None) -> None:
    """Run the gateway with uvicorn until interrupted."""
    import uvicorn

    server = GatewayServer(config, on_header)
    logger.info("Serving on %s/%s", config.url, config.socketio_path)
    uvicorn.run(
        server.asgi_app(),
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )
