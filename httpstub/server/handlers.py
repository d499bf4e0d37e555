#!/usr/bin/env python3
"""
Route Handlers - one function per canned endpoint.

Every handler takes the incoming request and returns a CannedResponse.
Handlers hold no state; the same request always produces the same
response. Bodies and header values are fixed byte-for-byte because the
client test suites compare them literally.

Import from: httpstub.server.handlers
"""

import re

from httpstub.core.constants import (
    MAX_VAR_LENGTH, RAW_HEADERS_ENVIRON_KEY, REFLECT_EXCLUDED_HEADERS,
    TRANSPORT_HEADERS,
)
from httpstub.core.types import CannedResponse

__all__ = [
    'hello',
    'basic_json',
    'header_reflect',
    'temporary_redirect',
    'permanent_redirect',
    'two_redirects',
    'url_post',
    'get_var',
    'atoi',
]

BASIC_JSON_BODY = (
    b'[\n'
    b'  {\n'
    b'    "first_key": "first_value",\n'
    b'    "second_key": "second_value"\n'
    b'  }\n'
    b']'
)

_LEADING_INT = re.compile(r'\s*([+-]?[0-9]+)')


# =============================================================================
# HELPERS
# =============================================================================

def get_var(request, name: str) -> str:
    """Look up a variable in the query string, then the form body.

    Missing variables read as ''. Values are cut to MAX_VAR_LENGTH.
    """
    value = request.args.get(name)
    if value is None:
        value = request.form.get(name)
    return (value or '')[:MAX_VAR_LENGTH]


def atoi(text: str) -> int:
    """Integer value of the leading digits of `text`, or 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _html(status: int, body: bytes) -> CannedResponse:
    return CannedResponse(status, [('content-type', 'text/html')], body)


def _redirect(status: int, location: str, body: bytes) -> CannedResponse:
    return CannedResponse(status, [('Location', location)], body)


# =============================================================================
# HANDLERS
# =============================================================================

def hello(request) -> CannedResponse:
    return _html(200, b'Hello world!')


def basic_json(request) -> CannedResponse:
    """Fixed JSON array; labelled as JSON only when the client sent JSON."""
    if request.headers.get('Content-type') == 'application/json':
        content_type = 'application/json'
    else:
        content_type = 'application/octet-stream'
    return CannedResponse(200, [('content-type', content_type)], BASIC_JSON_BODY)


def header_reflect(request) -> CannedResponse:
    """Echo the request headers back, in order, as response headers.

    User-Agent, Host and Accept are skipped, as are the framing headers
    the transport writes itself. Names, order and repeats come from the
    raw header list the serving thread stores in the environ; requests
    built without it (test clients) fall back to the parsed headers.
    """
    response = _html(200, b'Header reflect')
    raw_headers = request.environ.get(RAW_HEADERS_ENVIRON_KEY)
    if raw_headers is None:
        raw_headers = request.headers.items()
    for name, value in raw_headers:
        if name in REFLECT_EXCLUDED_HEADERS or name.lower() in TRANSPORT_HEADERS:
            continue
        response.add_header(name, value)
    return response


def temporary_redirect(request) -> CannedResponse:
    return _redirect(302, 'hello.html', b'Found')


def permanent_redirect(request) -> CannedResponse:
    return _redirect(301, 'hello.html', b'Moved Permanently')


def two_redirects(request) -> CannedResponse:
    return _redirect(301, 'permanent_redirect.html', b'Moved Permanently')


def url_post(request) -> CannedResponse:
    """Echo form variables x and y as JSON-shaped text, plus their sum.

    The values are written verbatim, unquoted. Without y the body only
    carries x.
    """
    x = get_var(request, 'x')
    y = get_var(request, 'y')
    if not y:
        body = '{\n' f'  "x": {x}\n' '}'
    else:
        body = (
            '{\n'
            f'  "x": {x},\n'
            f'  "y": {y},\n'
            f'  "sum": {atoi(x) + atoi(y)}\n'
            '}'
        )
    return CannedResponse(
        201, [('content-type', 'application/json')], body.encode('utf-8'),
    )
