"""Named encodings built from the alphabet and escape catalog."""

from __future__ import annotations

from functools import lru_cache
import logging
from types import MappingProxyType

from .alphabets import (
    ALPHABETS,
    ALPHANUMERIC,
    BASE64URL,
    HEX_LOWERCASE,
    STRING_LITERAL,
    URL_RFC2396,
    URL_UNRESERVED,
    Z85,
    normalize_name,
)
from .codec import Encoding
from .config import AlphabetSpec, EscapeSpec, OptionsLike
from .exceptions import InvalidOptions

_LOGGER = logging.getLogger(__name__)

# Extended base64url preserving blocks of RFC 3986 unreserved characters
BASE64URL_URL = Encoding(BASE64URL, URL_UNRESERVED, name="BASE64URL_URL")

# Extended base64url preserving blocks of RFC 2396 unreserved characters
BASE64URL_RFC2396 = Encoding(BASE64URL, URL_RFC2396, name="BASE64URL_RFC2396")

# Extended Z85 preserving blocks that are safe in any string literal
Z85_STRING_LITERAL = Encoding(Z85, STRING_LITERAL, name="Z85_STRING_LITERAL")

# Extended lowercase hex preserving blocks of lowercase alphanumerics
HEX_ALPHANUMERIC = Encoding(HEX_LOWERCASE, ALPHANUMERIC, name="HEX_ALPHANUMERIC")

ESCAPED_ENCODINGS: MappingProxyType[str, tuple[AlphabetSpec, EscapeSpec]] = MappingProxyType(
    {
        "BASE64URL_URL": (BASE64URL, URL_UNRESERVED),
        "BASE64URL_RFC2396": (BASE64URL, URL_RFC2396),
        "Z85_STRING_LITERAL": (Z85, STRING_LITERAL),
        "HEX_ALPHANUMERIC": (HEX_LOWERCASE, ALPHANUMERIC),
    }
)


@lru_cache(maxsize=None)
def get_encoding(name: str, strict: bool = False) -> Encoding:
    """Get a named encoding (cached).

    Args:
        name: A bare alphabet name (e.g., "BASE64URL") or an escaped
            encoding name (e.g., "Z85_STRING_LITERAL").
        strict: Whether decoding requires canonical input by default.

    Returns:
        The matching encoding.
    """
    key = normalize_name(name)
    if key in ESCAPED_ENCODINGS:
        alphabet, escaping = ESCAPED_ENCODINGS[key]
        return Encoding(alphabet, escaping, strict=strict, name=key)
    if key in ALPHABETS:
        return Encoding(ALPHABETS[key], strict=strict, name=key)
    _LOGGER.debug("Unknown encoding '%s' (normalized '%s')", name, key)
    raise InvalidOptions(f"Unknown encoding '{name}'")


def clear_encoding_cache() -> None:
    """Clear the named encoding cache."""
    get_encoding.cache_clear()


def encode_for_url(data: bytes, options: OptionsLike = None) -> str:
    """Encode bytes as extended base64url, keeping URL-safe text readable."""
    return BASE64URL_URL.encode(data, options)


def decode_from_url(text: str, options: OptionsLike = None) -> bytes:
    """Decode text produced by `encode_for_url`."""
    return BASE64URL_URL.decode(text, options)


def encode_for_string(data: bytes, options: OptionsLike = None) -> str:
    """Encode bytes as extended Z85, keeping string-literal-safe text readable."""
    return Z85_STRING_LITERAL.encode(data, options)


def decode_from_string(text: str, options: OptionsLike = None) -> bytes:
    """Decode text produced by `encode_for_string`."""
    return Z85_STRING_LITERAL.decode(text, options)
