"""Block codec, literal-run overlay and canonical-form checks."""

from __future__ import annotations

from .block_codec import BlockCodec, digit_width
from .canonical import Canonicalizer
from .encoding import Encoding
from .escape_overlay import EscapeOverlay, build_safe_table, is_safe_block

__all__ = [
    "BlockCodec",
    "Canonicalizer",
    "Encoding",
    "EscapeOverlay",
    "build_safe_table",
    "digit_width",
    "is_safe_block",
]
