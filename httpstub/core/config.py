"""
httpstub Configuration - StubServerConfig
==========================================
Configuration dataclass for one stub server instance. Defaults come
from httpstub.core.constants; nothing is read from files or the
environment.

Import from: httpstub.core.config
"""

from dataclasses import dataclass

from httpstub.core.constants import (
    DEFAULT_HOST, DEFAULT_PORT, POLL_INTERVAL, START_TIMEOUT,
    AUTH_USERNAME, AUTH_PASSWORD, AUTH_REALM,
)


@dataclass
class StubServerConfig:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT       # 0 lets the OS pick a free port
    poll_interval: float = POLL_INTERVAL
    start_timeout: float = START_TIMEOUT

    username: str = AUTH_USERNAME
    password: str = AUTH_PASSWORD
    realm: str = AUTH_REALM

    def __post_init__(self):
        if self.poll_interval <= 0:
            raise ValueError("poll_interval must be positive")
        if not 0 <= self.port <= 65535:
            raise ValueError(f"port out of range: {self.port}")


__all__ = ['StubServerConfig']
