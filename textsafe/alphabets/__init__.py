"""Catalog of standard alphabets and escape presets.

The catalog is static data. Alphabets feed the block codec; escape presets
feed the literal-run overlay and define which characters count as safe.
"""

from __future__ import annotations

from .escapes import ALPHANUMERIC, STRING_LITERAL, URL_RFC2396, URL_UNRESERVED
from .lookup import ALPHABETS, ESCAPES, get_alphabet, get_escape, normalize_name
from .standards import (
    BASE32,
    BASE32_LOWERCASE,
    BASE64,
    BASE64URL,
    HEX,
    HEX_LOWERCASE,
    Z85,
)

__all__ = [
    "ALPHABETS",
    "ALPHANUMERIC",
    "BASE32",
    "BASE32_LOWERCASE",
    "BASE64",
    "BASE64URL",
    "ESCAPES",
    "HEX",
    "HEX_LOWERCASE",
    "STRING_LITERAL",
    "URL_RFC2396",
    "URL_UNRESERVED",
    "Z85",
    "get_alphabet",
    "get_escape",
    "normalize_name",
]
