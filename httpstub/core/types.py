"""
httpstub Core Types - Shared enums, dataclasses, and exceptions.

All layers (core, server) import their shared type definitions from here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Tuple


# =============================================================================
# EXCEPTIONS
# =============================================================================

class StubServerError(Exception):
    """Base exception for all httpstub errors."""
    pass


class ServerStateError(StubServerError):
    """Raised when start()/stop() is called in the wrong lifecycle state."""
    pass


class ServerStartError(StubServerError):
    """Raised when the serving thread fails to bind or never starts listening."""
    pass


# =============================================================================
# ENUMS
# =============================================================================

class ServerState(Enum):
    """Lifecycle state of a StubServer."""
    STOPPED = auto()
    STARTING = auto()
    RUNNING = auto()
    STOPPING = auto()


# =============================================================================
# DATACLASSES
# =============================================================================

@dataclass
class CannedResponse:
    """Status, ordered headers and body produced by a route handler."""
    status: int
    headers: List[Tuple[str, str]] = field(default_factory=list)
    body: bytes = b''

    def add_header(self, name: str, value: str) -> None:
        self.headers.append((name, value))

    def get_header(self, name: str) -> Optional[str]:
        """First value for `name`, compared case-insensitively."""
        lowered = name.lower()
        for key, value in self.headers:
            if key.lower() == lowered:
                return value
        return None


__all__ = [
    'StubServerError',
    'ServerStateError',
    'ServerStartError',
    'ServerState',
    'CannedResponse',
]
