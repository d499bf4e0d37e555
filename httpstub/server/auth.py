"""
Auth Gate - HTTP Basic credential check for protected routes.

The check is deliberately simple: a hardcoded credential pair taken from
StubServerConfig, compared after a lenient Base64 decode. It exists so
clients can be tested against a 401 challenge, not to protect anything.

Import from: httpstub.server.auth
"""

import logging

from httpstub.core.codec import decode_base64, strncasecmp
from httpstub.core.constants import AUTH_SCHEME
from httpstub.core.types import CannedResponse

__all__ = ['allow_all', 'check_basic_auth', 'split_credentials', 'challenge']

logger = logging.getLogger("httpstub.server.auth")


def allow_all(request, config) -> bool:
    """Auth predicate for unprotected routes."""
    return True


def split_credentials(decoded: bytes):
    """Split "user:password" on the first colon.

    Without a colon both halves are the whole value, which can never
    match a distinct username/password pair.
    """
    colon = decoded.find(b':')
    if colon < 0:
        return decoded, decoded
    return decoded[:colon], decoded[colon + 1:]


def check_basic_auth(request, config) -> bool:
    """Accept only `Authorization: Basic <base64 user:password>` with the configured pair."""
    header = request.headers.get('Authorization')
    if header is None:
        logger.debug("Auth rejected for %s: no Authorization header", request.path)
        return False
    if strncasecmp(header, AUTH_SCHEME, len(AUTH_SCHEME)) != 0:
        logger.debug("Auth rejected for %s: scheme is not Basic", request.path)
        return False

    # Token starts after the first space; with no space it is the whole value
    token = header[header.find(' ') + 1:]
    username, password = split_credentials(decode_base64(token))

    if (username == config.username.encode('utf-8')
            and password == config.password.encode('utf-8')):
        return True

    logger.debug("Auth rejected for %s: bad credentials", request.path)
    return False


def challenge(config) -> CannedResponse:
    """401 response asking the client for Basic credentials."""
    return CannedResponse(
        401,
        [
            ('WWW-Authenticate', f'Basic realm="{config.realm}"'),
            ('content-type', 'text/html'),
        ],
        b'Unauthorized',
    )
