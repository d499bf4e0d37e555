"""
Tests for httpstub.server.auth - the Basic-auth gate.
"""

import logging

import pytest

from httpstub.core.codec import basic_auth_header
from httpstub.core.config import StubServerConfig
from httpstub.server.auth import allow_all, challenge, check_basic_auth, split_credentials

from conftest import VALID_AUTH


@pytest.fixture
def auth_request(make_request):
    def _make(value=None):
        headers = {} if value is None else {'Authorization': value}
        return make_request('/basic_auth.html', headers=headers)
    return _make


def test_valid_credentials(auth_request, config):
    assert check_basic_auth(auth_request(VALID_AUTH), config)


def test_scheme_is_case_insensitive(auth_request, config):
    assert check_basic_auth(auth_request("basic dXNlcjpwYXNzd29yZA=="), config)
    assert check_basic_auth(auth_request("BASIC dXNlcjpwYXNzd29yZA=="), config)


@pytest.mark.parametrize("value", [
    pytest.param(None, id="missing"),
    pytest.param("", id="empty"),
    pytest.param("Bearer dXNlcjpwYXNzd29yZA==", id="bearer"),
    pytest.param("Basic", id="no-token"),
    pytest.param("Basic " + "dXNlcjp3cm9uZw==", id="wrong-password"),
    pytest.param(basic_auth_header("admin", "password"), id="wrong-user"),
    pytest.param("Basic dXNlcnBhc3N3b3Jk", id="no-colon"),
    pytest.param("Basic !!!!", id="garbage"),
])
def test_rejected(auth_request, config, value):
    assert not check_basic_auth(auth_request(value), config)


def test_trailing_garbage_after_padding_is_ignored(auth_request, config):
    assert check_basic_auth(auth_request(VALID_AUTH + "!!junk"), config)


def test_configured_credentials(auth_request):
    cfg = StubServerConfig(username="alice", password="s3cret:with:colons")
    assert check_basic_auth(auth_request(basic_auth_header("alice", "s3cret:with:colons")), cfg)
    assert not check_basic_auth(auth_request(VALID_AUTH), cfg)


def test_rejection_is_logged(auth_request, config, caplog):
    caplog.set_level(logging.DEBUG, logger="httpstub.server.auth")
    check_basic_auth(auth_request(), config)
    assert "no Authorization header" in caplog.text


def test_split_credentials():
    assert split_credentials(b"user:password") == (b"user", b"password")
    assert split_credentials(b"user:pa:ss") == (b"user", b"pa:ss")
    assert split_credentials(b":") == (b"", b"")
    assert split_credentials(b"nocolon") == (b"nocolon", b"nocolon")


def test_allow_all(make_request, config):
    assert allow_all(make_request(), config)


def test_challenge(config):
    resp = challenge(config)
    assert resp.status == 401
    assert resp.get_header('WWW-Authenticate') == 'Basic realm="httpstub"'
    assert resp.body != b'Header reflect'
