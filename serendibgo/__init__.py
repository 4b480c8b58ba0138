"""Minimal HTTP service: JSON config, an owned routing table and three static endpoints."""

from .config import Config, load_config
from .server import Server, create_server

__all__ = ["Config", "Server", "create_server", "load_config"]
__version__ = "1.0.0"
