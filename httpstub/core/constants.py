"""
httpstub Constants - Network defaults, credentials, and header rules
=====================================================================
Fixed values shared by the handlers and the lifecycle controller.

Import from: httpstub.core.constants
"""

# =============================================================================
# NETWORK
# =============================================================================

DEFAULT_HOST = '127.0.0.1'
DEFAULT_PORT = 8080
POLL_INTERVAL = 1.0             # Seconds per serving-loop poll; bounds stop() latency
START_TIMEOUT = 10.0            # Seconds start() waits for the "listening" signal
SERVER_THREAD_NAME = 'httpstub-server'

# =============================================================================
# BASIC AUTH (test fixture credentials, not a secret)
# =============================================================================

AUTH_SCHEME = 'Basic'
AUTH_USERNAME = 'user'
AUTH_PASSWORD = 'password'
AUTH_REALM = 'httpstub'

# =============================================================================
# FORM VARIABLES
# =============================================================================

MAX_VAR_LENGTH = 99             # Longest form/query value handlers see

# =============================================================================
# HEADER REFLECTION
# =============================================================================

# Request headers the reflect handler never echoes back
REFLECT_EXCLUDED_HEADERS = frozenset({
    'User-Agent',
    'Host',
    'Accept',
})

# WSGI environ key holding the request headers as received (name, value) pairs
RAW_HEADERS_ENVIRON_KEY = 'httpstub.raw_headers'

# Framing headers owned by the transport
TRANSPORT_HEADERS = frozenset({
    'content-length',
    'connection',
    'keep-alive',
    'transfer-encoding',
})

# =============================================================================
# HTTP METHODS
# =============================================================================

# Routes ignore the request method
ROUTE_METHODS = ['GET', 'HEAD', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS']


__all__ = [
    'DEFAULT_HOST',
    'DEFAULT_PORT',
    'POLL_INTERVAL',
    'START_TIMEOUT',
    'SERVER_THREAD_NAME',
    'AUTH_SCHEME',
    'AUTH_USERNAME',
    'AUTH_PASSWORD',
    'AUTH_REALM',
    'MAX_VAR_LENGTH',
    'REFLECT_EXCLUDED_HEADERS',
    'RAW_HEADERS_ENVIRON_KEY',
    'TRANSPORT_HEADERS',
    'ROUTE_METHODS',
]
