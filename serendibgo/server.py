from __future__ import annotations

import logging
import socket
from typing import Callable

import uvicorn
from fastapi import APIRouter, FastAPI

from . import handlers
from .config import Config
from .exceptions import ListenError

logger = logging.getLogger(__name__)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 80


def split_address(address: str) -> tuple[str, int]:
    """Split a bind address into ``(host, port)``.

    Accepts ``host:port``, ``:port``, a bare ``port`` and bracketed IPv6
    (``[::1]:8080``). An empty host means all interfaces and an empty
    address means port 80.
    """
    address = address.strip()
    if not address:
        return DEFAULT_HOST, DEFAULT_PORT

    if address.startswith("["):
        host, sep, port_str = address[1:].partition("]:")
        if not sep:
            raise ListenError(f"invalid bind address {address!r}: missing port", address)
    elif address.count(":") > 1:
        raise ListenError(f"invalid bind address {address!r}: IPv6 hosts need brackets", address)
    else:
        host, _, port_str = address.rpartition(":")

    if not (port_str.isascii() and port_str.isdigit()) or int(port_str) > 65535:
        raise ListenError(f"invalid bind address {address!r}: bad port {port_str!r}", address)
    return host or DEFAULT_HOST, int(port_str)


class Server:
    """HTTP listener with its own routing table.

    Paths are matched exactly; anything unregistered gets a 404.
    """

    def __init__(self, config: Config) -> None:
        self.config = config
        self.address = config.port
        self.router = APIRouter()
        self._paths: list[str] = []

    @property
    def routes(self) -> list[str]:
        return list(self._paths)

    def register(self, path: str, handler: Callable) -> None:
        # No method list: the route answers every method, extension methods included.
        self.router.add_route(path, handler, include_in_schema=False, name=handler.__name__)
        self._paths.append(path)

    def create_app(self) -> FastAPI:
        app = FastAPI(
            title="serendibgo",
            version="1.0.0",
            debug=self.config.is_development,
            openapi_url=None,
            docs_url=None,
            redoc_url=None,
            redirect_slashes=False,
        )
        app.include_router(self.router)
        app.add_exception_handler(404, handlers.not_found)
        return app

    # === Listening ===

    def bind(self) -> socket.socket:
        """Create the listening socket, raising ListenError if it can't be bound."""
        host, port = split_address(self.address)
        family = socket.AF_INET6 if ":" in host else socket.AF_INET
        sock = socket.socket(family, socket.SOCK_STREAM)
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind((host, port))
            sock.listen()
        except OSError as e:
            sock.close()
            raise ListenError(
                f"cannot listen on {host}:{port}: {e.strerror or e}", self.address, port
            ) from e
        return sock

    def serve(self) -> None:
        """Bind and serve until the process is stopped.

        Blocks the calling thread. Bind failures surface as ListenError.
        """
        sock = self.bind()
        host, port = sock.getsockname()[:2]
        config = uvicorn.Config(
            self.create_app(),
            lifespan="off",
            log_config=None,
            access_log=self.config.is_development,
        )
        logger.info("Starting server on %s:%s", host, port)
        try:
            uvicorn.Server(config).run(sockets=[sock])
        finally:
            sock.close()


def create_server(config: Config) -> Server:
    server = Server(config)
    server.register("/", handlers.root)
    server.register("/hello", handlers.hello)
    server.register("/health", handlers.health)
    return server
