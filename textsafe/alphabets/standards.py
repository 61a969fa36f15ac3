"""Standard alphabets.

Each entry is plain data consumed by the block codec. The digit order of each
alphabet matches the corresponding standard, so bare encodings produce the
same text as the standard codecs (without padding where the standard omits it).
"""

from __future__ import annotations

from ..config import AlphabetSpec

# RFC 4648 section 8
HEX = AlphabetSpec(name="HEX", digits="0123456789ABCDEF", block_size=1)
HEX_LOWERCASE = AlphabetSpec(name="HEX_LOWERCASE", digits="0123456789abcdef", block_size=1)

# RFC 4648 section 6
BASE32 = AlphabetSpec(
    name="BASE32",
    digits="ABCDEFGHIJKLMNOPQRSTUVWXYZ234567",
    block_size=5,
    padding="=",
)
BASE32_LOWERCASE = AlphabetSpec(
    name="BASE32_LOWERCASE",
    digits="abcdefghijklmnopqrstuvwxyz234567",
    block_size=5,
    padding="=",
)

# RFC 4648 section 4
BASE64 = AlphabetSpec(
    name="BASE64",
    digits="ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/",
    block_size=3,
    padding="=",
)

# RFC 4648 section 5, unpadded
BASE64URL = AlphabetSpec(
    name="BASE64URL",
    digits="ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_",
    block_size=3,
)

# ZeroMQ RFC 32, extended to accept partial trailing blocks
Z85 = AlphabetSpec(
    name="Z85",
    digits="0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ.-:+=^!/*?&<>()[]{}@%$#",
    block_size=4,
)
