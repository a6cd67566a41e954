"""
HTTP Server Module

This module runs the FastAPI application under uvicorn on an asyncio
event loop.

The listening socket is bound by RestServer itself, so a bind failure
surfaces as an OSError to the caller instead of uvicorn exiting the
process on its own. Shutdown goes through uvicorn's graceful path:
the listener closes, idle keep-alive connections are dropped at once and
in-flight requests get settings.SHUTDOWN_TIMEOUT seconds to finish.
"""

import asyncio
import logging
import socket
from typing import Optional

import uvicorn

from ..config.settings import settings
from ..store.store import KeyValueStore
from .app import create_app

logger = logging.getLogger(__name__)


class RestServer:
    """
    Asynchronous HTTP server for the key-value service.

    Usage:
        server = RestServer(host='0.0.0.0', port=8000)
        await server.start()  # Runs until stop()

    Attributes:
        host: Server bind address (e.g., '0.0.0.0')
        port: Server port number; updated to the real port after bind()
        store: The KeyValueStore shared by all requests
        app: The FastAPI application serving the routes
    """

    def __init__(
            self,
            host: str = None,
            port: int = None,
            store: KeyValueStore = None,
    ):
        """
        Initialize the server.

        Args:
            host: Bind address (default from settings)
            port: Port number, 0 for any free port (default from settings)
            store: KeyValueStore instance (creates new one if not provided)
        """
        self.host = host if host is not None else settings.HOST
        self.port = port if port is not None else settings.PORT
        self.store = store if store is not None else KeyValueStore()
        self.app = create_app(self.store)

        # Server state
        self._socket: Optional[socket.socket] = None
        self._server: Optional[uvicorn.Server] = None
        self._stopped = asyncio.Event()

    def bind(self) -> None:
        """
        Bind the listening socket.

        Raises:
            OSError: If the address cannot be bound (e.g. port in use)
        """
        if self._socket is not None:
            return

        family = socket.AF_INET6 if ":" in self.host else socket.AF_INET
        sock = socket.socket(family, socket.SOCK_STREAM)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind((self.host, self.port))
        except OSError:
            sock.close()
            raise

        self._socket = sock
        self.port = sock.getsockname()[1]

    async def start(self) -> None:
        """
        Start the server and begin accepting connections.

        Binds first if bind() has not been called. Runs until stop() is
        called, a SIGINT/SIGTERM arrives or the task is cancelled.

        Raises:
            OSError: If the address cannot be bound

        Example:
            server = RestServer(port=8000)
            asyncio.run(server.start())
        """
        if self._server is not None:
            return

        self.bind()
        config = uvicorn.Config(
            self.app,
            log_config=None,
            lifespan="off",
            access_log=settings.DEBUG,
            timeout_keep_alive=settings.CONNECTION_TIMEOUT,
            timeout_graceful_shutdown=settings.SHUTDOWN_TIMEOUT,
        )
        self._server = uvicorn.Server(config)
        self._stopped.clear()

        logger.info(f"Serving on {self.host}:{self.port}")

        try:
            await self._server.serve(sockets=[self._socket])
        except asyncio.CancelledError:
            # Expected during shutdown/fixture cleanup
            logger.debug("Server start cancelled")
        finally:
            self._socket.close()
            self._socket = None
            self._server = None
            self._stopped.set()

    async def stop(self) -> None:
        """
        Stop the server gracefully.

        Asks uvicorn to exit and waits until it has closed the listener
        and every open connection.
        """
        if self._server is None:
            if self._socket is not None:
                self._socket.close()
                self._socket = None
            return

        self._server.should_exit = True
        await self._stopped.wait()

    def is_running(self) -> bool:
        """Check if the server is accepting connections."""
        return self._server is not None and self._server.started

    def get_stats(self) -> dict:
        """
        Get server statistics.

        Returns:
            Dictionary with the bind address, open connection count and
            the number of stored entries.
        """
        connections = len(self._server.server_state.connections) if self._server else 0
        return {
            "running": self.is_running(),
            "host": self.host,
            "port": self.port,
            "open_connections": connections,
            "entries": self.store.size(),
        }
