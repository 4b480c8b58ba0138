from __future__ import annotations

from typing import Optional


class ServiceError(Exception):
    """Base error for the service. Every subclass is fatal at startup."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# === Configuration ===


class ConfigError(ServiceError):
    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class ConfigIOError(ConfigError):
    """The configuration file could not be opened or read."""


class ConfigParseError(ConfigError):
    """The configuration file is not JSON of the expected shape."""


# === Listener ===


class ListenError(ServiceError):
    def __init__(self, message: str, address: str, port: Optional[int] = None) -> None:
        super().__init__(message)
        self.address = address
        self.port = port
