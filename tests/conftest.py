"""
Shared pytest fixtures for the httpstub test suite.

Provides a port-0 config, the Flask app and its test client for
in-process dispatch tests, a request factory for calling handlers
directly, and a live StubServer for tests that go over real sockets.
"""

import sys
from pathlib import Path

import pytest
from werkzeug.test import EnvironBuilder

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

# Import after path fix
from httpstub.core.config import StubServerConfig
from httpstub.server.dispatcher import create_app
from httpstub.server.lifecycle import StubServer


VALID_AUTH = "Basic dXNlcjpwYXNzd29yZA=="   # user:password


# ---------------------------------------------------------------------------
# Config / app fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def config():
    """Config on an OS-assigned port with a short poll interval."""
    return StubServerConfig(port=0, poll_interval=0.1)


@pytest.fixture
def app(config):
    return create_app(config)


@pytest.fixture
def client(app):
    return app.test_client()


# ---------------------------------------------------------------------------
# Request factory
# ---------------------------------------------------------------------------

@pytest.fixture
def make_request():
    """Build a werkzeug Request without going through the app."""
    def _make(path='/', method='GET', headers=None, data=None, query_string=None):
        builder = EnvironBuilder(
            path=path, method=method, headers=headers,
            data=data, query_string=query_string,
        )
        try:
            return builder.get_request()
        finally:
            builder.close()
    return _make


# ---------------------------------------------------------------------------
# Live server
# ---------------------------------------------------------------------------

@pytest.fixture
def live_server(config):
    """A started StubServer; stopped again after the test if still running."""
    server = StubServer(config)
    server.start()
    try:
        yield server
    finally:
        if server.is_running:
            server.stop()
