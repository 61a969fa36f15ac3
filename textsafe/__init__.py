"""Reversible bytes-to-text encodings that keep safe text readable.

Binary data is encoded with a dense block encoding (base64url, Z85, ...), but
runs of whole blocks whose bytes are already safe text for the target context
are kept as that text, behind a length marker and padding that preserve the
alignment of every following block.

Layers:
-------
1. BlockCodec: fixed-size byte blocks <-> fixed-width digit groups over any
   alphabet, including a shorter trailing block.
2. EscapeOverlay: safe runs of digit groups <-> marked literal text.
3. Canonicalizer: optional strict decoding that only accepts the exact text
   the encoder would produce for the same options.

Example:
    >>> from textsafe import encode_for_url
    >>> encode_for_url(b"hey\\nhello\\nhi")
    '~heyCmhl~lloCmhp'
"""

from __future__ import annotations

from .alphabets import (
    ALPHABETS,
    ALPHANUMERIC,
    BASE32,
    BASE32_LOWERCASE,
    BASE64,
    BASE64URL,
    ESCAPES,
    HEX,
    HEX_LOWERCASE,
    STRING_LITERAL,
    URL_RFC2396,
    URL_UNRESERVED,
    Z85,
    get_alphabet,
    get_escape,
)
from .codec import BlockCodec, Canonicalizer, Encoding, EscapeOverlay
from .config import AlphabetSpec, DecodeOptions, EncodeOptions, EscapeSpec
from .exceptions import (
    DecodeError,
    EncodingLimitExceeded,
    InvalidOptions,
    InvalidSymbol,
    MalformedInput,
    NonCanonicalInput,
    TextSafeError,
)
from .presets import (
    BASE64URL_RFC2396,
    BASE64URL_URL,
    HEX_ALPHANUMERIC,
    Z85_STRING_LITERAL,
    clear_encoding_cache,
    decode_from_string,
    decode_from_url,
    encode_for_string,
    encode_for_url,
    get_encoding,
)

__all__ = [
    "ALPHABETS",
    "ALPHANUMERIC",
    "BASE32",
    "BASE32_LOWERCASE",
    "BASE64",
    "BASE64URL",
    "BASE64URL_RFC2396",
    "BASE64URL_URL",
    "ESCAPES",
    "HEX",
    "HEX_ALPHANUMERIC",
    "HEX_LOWERCASE",
    "STRING_LITERAL",
    "URL_RFC2396",
    "URL_UNRESERVED",
    "Z85",
    "Z85_STRING_LITERAL",
    "AlphabetSpec",
    "BlockCodec",
    "Canonicalizer",
    "DecodeError",
    "DecodeOptions",
    "EncodeOptions",
    "Encoding",
    "EncodingLimitExceeded",
    "EscapeOverlay",
    "EscapeSpec",
    "InvalidOptions",
    "InvalidSymbol",
    "MalformedInput",
    "NonCanonicalInput",
    "TextSafeError",
    "clear_encoding_cache",
    "decode_from_string",
    "decode_from_url",
    "encode_for_string",
    "encode_for_url",
    "get_alphabet",
    "get_encoding",
    "get_escape",
]
