"""
httpstub Core - Transport-independent building blocks

Submodules:
- version   : Version constants (single source of truth)
- types     : Shared enums, dataclasses, exceptions
- constants : Network defaults, fixture credentials, header rules
- config    : StubServerConfig dataclass
- codec     : Base64 decoding and case-insensitive comparison

Quick imports:
    from httpstub.core import decode_base64, strncasecmp
    from httpstub.core import StubServerConfig, CannedResponse
"""

from httpstub.core.version import __version__

from httpstub.core.types import (
    # Exceptions
    StubServerError,
    ServerStateError,
    ServerStartError,
    # Enums
    ServerState,
    # Dataclasses
    CannedResponse,
)

from httpstub.core.config import StubServerConfig

from httpstub.core.codec import (
    decode_base64,
    encode_base64,
    strncasecmp,
    basic_auth_header,
)

__all__ = [
    '__version__',
    'StubServerError',
    'ServerStateError',
    'ServerStartError',
    'ServerState',
    'CannedResponse',
    'StubServerConfig',
    'decode_base64',
    'encode_base64',
    'strncasecmp',
    'basic_auth_header',
]
