"""
httpstub Core Codec - Base64 and case-folding helpers
======================================================
Small text primitives used by the Basic-auth gate:

- decode_base64  : lenient standard-alphabet Base64 decoder
- encode_base64  : standard padded encoder (for building headers)
- strncasecmp    : ASCII case-insensitive prefix comparison
- basic_auth_header : "Basic <token>" value for a credential pair

The decoder never raises. It stops at the first '=' or non-alphabet
character and decodes whatever came before, so "QQ==!!!" and "QQ=="
give the same result. Only trusted test traffic should rely on it.

Import from: httpstub.core.codec
"""

import base64
from typing import Union

__all__ = [
    'BASE64_ALPHABET',
    'decode_base64',
    'encode_base64',
    'strncasecmp',
    'basic_auth_header',
]

BASE64_ALPHABET = (
    'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
    'abcdefghijklmnopqrstuvwxyz'
    '0123456789+/'
)

_SEXTETS = {char: index for index, char in enumerate(BASE64_ALPHABET)}


def _pack(group):
    """Reassemble four 6-bit values into three bytes."""
    n = (group[0] << 18) | (group[1] << 12) | (group[2] << 6) | group[3]
    return bytes(((n >> 16) & 0xFF, (n >> 8) & 0xFF, n & 0xFF))


def decode_base64(text: Union[str, bytes]) -> bytes:
    """Decode standard Base64, truncating at the first padding or invalid char.

    Full 4-character groups yield 3 bytes each. A trailing partial group
    of n characters yields n - 1 bytes, so a lone leftover character
    yields nothing.
    """
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode('latin-1')

    sextets = []
    for char in text:
        value = _SEXTETS.get(char)
        if value is None:
            break
        sextets.append(value)

    decoded = bytearray()
    whole = len(sextets) - len(sextets) % 4
    for i in range(0, whole, 4):
        decoded += _pack(sextets[i:i + 4])

    leftover = sextets[whole:]
    if leftover:
        padded = leftover + [0] * (4 - len(leftover))
        decoded += _pack(padded)[:len(leftover) - 1]

    return bytes(decoded)


def encode_base64(data: Union[str, bytes]) -> str:
    """Standard padded Base64 of `data` (str is UTF-8 encoded first)."""
    if isinstance(data, str):
        data = data.encode('utf-8')
    return base64.b64encode(data).decode('ascii')


def _code_at(s, index: int) -> int:
    # Past the end reads as a NUL terminator
    if index >= len(s):
        return 0
    item = s[index]
    return item if isinstance(item, int) else ord(item)


def _fold(code: int) -> int:
    if 65 <= code <= 90:
        return code + 32
    return code


def strncasecmp(s1: Union[str, bytes], s2: Union[str, bytes], length: int) -> int:
    """Compare at most `length` characters of s1 and s2 ignoring ASCII case.

    Returns 0 when the prefixes match, otherwise the difference between
    the first pair of lower-cased codes that differ. The end of either
    string acts like a C string terminator and stops the comparison.
    """
    diff = 0
    for index in range(max(length, 0)):
        c1 = _code_at(s1, index)
        c2 = _code_at(s2, index)
        diff = _fold(c1) - _fold(c2)
        if diff != 0 or c1 == 0:
            break
    return diff


def basic_auth_header(username: str, password: str) -> str:
    """Authorization header value for HTTP Basic credentials."""
    return 'Basic ' + encode_base64(f'{username}:{password}')
