"""Shared fixtures for textsafe tests."""

from __future__ import annotations

import random

import pytest

from textsafe import BASE64URL_URL, HEX_ALPHANUMERIC, Z85_STRING_LITERAL, Encoding, clear_encoding_cache

# Mixed text and line breaks ending in a partial block
SAMPLE_TEXT = b"hello world!\ngoodbye world!\n123456789012345678901234567890123"


@pytest.fixture(autouse=True)
def _clear_encoding_cache() -> None:
    """Start each test with an empty named-encoding cache."""
    clear_encoding_cache()


@pytest.fixture
def url_encoding() -> Encoding:
    """Extended base64url encoding for URLs."""
    return BASE64URL_URL


@pytest.fixture
def string_encoding() -> Encoding:
    """Extended Z85 encoding for string literals."""
    return Z85_STRING_LITERAL


@pytest.fixture
def hex_encoding() -> Encoding:
    """Extended lowercase hex encoding."""
    return HEX_ALPHANUMERIC


@pytest.fixture
def sample_text() -> bytes:
    return SAMPLE_TEXT


@pytest.fixture
def payloads() -> list[bytes]:
    """Deterministic mix of binary, textual and mixed payloads of many lengths."""
    rng = random.Random(20240601)
    printable = b"abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-_.~ !,;|'\"`\\\n"
    result = [b"", bytes(range(256)), bytes(range(255, -1, -1)), b"\xff" * 17, b"\x00" * 9]
    for length in range(1, 50):
        result.append(bytes(rng.randrange(256) for _ in range(length)))
        result.append(bytes(rng.choice(printable) for _ in range(length)))
        result.append(
            bytes(rng.choice(printable) if rng.random() < 0.8 else rng.randrange(256) for _ in range(length))
        )
    return result
