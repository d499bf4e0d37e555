"""
httpstub - Embedded HTTP test server

A small canned-response HTTP server for exercising HTTP clients:

- core/  : Transport-independent pieces (codec, types, config, constants)
- server/: Route handlers, auth gate, dispatcher, lifecycle controller

Usage:
    from httpstub import StubServer

    server = StubServer()
    server.start()          # Blocks until the port is listening
    ...                     # Issue requests against server.base_url
    server.stop()           # Blocks until the port is released

Version: 1.0.0
"""

from httpstub.core.version import __version__
from httpstub.core.config import StubServerConfig
from httpstub.core.types import StubServerError, ServerStateError, ServerStartError
from httpstub.server.lifecycle import StubServer

__all__ = [
    '__version__',
    'StubServer',
    'StubServerConfig',
    'StubServerError',
    'ServerStateError',
    'ServerStartError',
]
