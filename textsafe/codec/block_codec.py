"""Variable-radix block codec.

Converts fixed-size byte blocks to fixed-width digit groups over an arbitrary
alphabet and back. The last block of the input may be shorter than the block
size; it is right-padded with zero bytes, encoded as a full block and then
truncated to the width needed for its real length.

Width Tables:
-------------
For an alphabet of `radix` digits and a block of `B` bytes, the encoded width
`W` is the smallest number of digits whose range covers every `B`-byte value.
The same rule gives the width of each partial block length `1..B-1`. Widths are
computed with exact integer arithmetic.

Partial Groups:
---------------
A truncated group is decoded by filling the dropped low-order digits with the
highest digit and keeping only the leading bytes. This recovers the original
bytes whenever the dropped digits cover no more than the dropped bytes, which
is checked for every partial length when the codec is built.
"""

from __future__ import annotations

from collections.abc import Iterator
import logging

from ..config import AlphabetSpec
from ..const import BYTE_VALUES
from ..exceptions import InvalidOptions, InvalidSymbol, MalformedInput

_LOGGER = logging.getLogger(__name__)


def digit_width(radix: int, byte_count: int) -> int:
    """Return the number of digits needed to represent any value of `byte_count` bytes.

    Args:
        radix: Number of digits in the alphabet.
        byte_count: Number of bytes in the value.

    Returns:
        The smallest width `w` with `radix ** w >= 256 ** byte_count`.
    """
    limit = BYTE_VALUES**byte_count
    width = 0
    capacity = 1
    while capacity < limit:
        capacity *= radix
        width += 1
    return width


class BlockCodec:
    """Encode and decode bytes as digit groups of a single alphabet."""

    def __init__(self, alphabet: AlphabetSpec) -> None:
        self._alphabet = alphabet
        self._digits = alphabet.digits
        self._radix = alphabet.radix
        self._block_size = alphabet.block_size
        self._digit_values = {digit: value for value, digit in enumerate(self._digits)}
        self._max_block_value = BYTE_VALUES**self._block_size - 1
        self._encoded_block_size = digit_width(self._radix, self._block_size)

        self._partial_widths: dict[int, int] = {}
        self._partial_lengths: dict[int, int] = {}
        for length in range(1, self._block_size):
            width = digit_width(self._radix, length)
            dropped = self._encoded_block_size - width
            if self._radix**dropped > BYTE_VALUES ** (self._block_size - length):
                raise InvalidOptions(
                    f"Alphabet '{alphabet.name}' cannot decode {length}-byte partial blocks unambiguously"
                )
            self._partial_widths[length] = width
            self._partial_lengths[width] = length

        _LOGGER.debug(
            "Block codec for %s: radix %d, %d bytes -> %d digits, partial widths %s",
            alphabet.name,
            self._radix,
            self._block_size,
            self._encoded_block_size,
            self._partial_widths,
        )

    @property
    def alphabet(self) -> AlphabetSpec:
        """Return the alphabet."""
        return self._alphabet

    @property
    def block_size(self) -> int:
        """Return the number of bytes per block."""
        return self._block_size

    @property
    def encoded_block_size(self) -> int:
        """Return the number of digits per full block."""
        return self._encoded_block_size

    @property
    def partial_widths(self) -> dict[int, int]:
        """Return the digit width of each partial block length."""
        return dict(self._partial_widths)

    def _encode_uint(self, value: int, width: int) -> str:
        digits = [self._digits[0]] * width
        for index in range(width - 1, -1, -1):
            value, remainder = divmod(value, self._radix)
            digits[index] = self._digits[remainder]
        return "".join(digits)

    def encode_block(self, block: bytes) -> str:
        """Encode one block of 1 to `block_size` bytes.

        Args:
            block: Bytes of a full block, or of the final partial block.

        Returns:
            A digit group of the full width, or of the partial width for a
            short block.
        """
        length = len(block)
        if length == self._block_size:
            return self._encode_uint(int.from_bytes(block, "big"), self._encoded_block_size)
        if length not in self._partial_widths:
            raise ValueError(f"Block of {length} bytes does not fit a block size of {self._block_size}")
        padded = bytes(block) + bytes(self._block_size - length)
        return self.encode_block(padded)[: self._partial_widths[length]]

    def decode_block(self, group: str, position: int = 0) -> bytes:
        """Decode one full or partial digit group.

        Args:
            group: Digit group of full width or of one of the partial widths.
            position: Offset of the group in the surrounding text, for errors.

        Returns:
            The decoded bytes.
        """
        width = len(group)
        if width == self._encoded_block_size:
            length = self._block_size
            filled = group
        elif width in self._partial_lengths:
            length = self._partial_lengths[width]
            filled = group + self._digits[-1] * (self._encoded_block_size - width)
        else:
            raise MalformedInput(
                f"Digit group of width {width} at position {position} does not match any block length"
            )

        value = 0
        for offset, symbol in enumerate(filled):
            try:
                digit = self._digit_values[symbol]
            except KeyError:
                raise InvalidSymbol(
                    f"Unexpected symbol {symbol!r} at position {position + offset}",
                    symbol=symbol,
                    position=position + offset,
                ) from None
            value = value * self._radix + digit

        if value > self._max_block_value:
            raise InvalidSymbol(
                f"Digit group {group!r} at position {position} is out of range",
                symbol=group,
                position=position,
            )
        return value.to_bytes(self._block_size, "big")[:length]

    def iter_blocks(self, data: bytes) -> Iterator[bytes]:
        """Yield the blocks of `data`; only the last one may be short."""
        for start in range(0, len(data), self._block_size):
            yield data[start : start + self._block_size]

    def iter_groups(self, text: str) -> Iterator[tuple[int, str]]:
        """Yield `(position, group)` for each digit group of `text`."""
        for start in range(0, len(text), self._encoded_block_size):
            yield start, text[start : start + self._encoded_block_size]

    def encode(self, data: bytes) -> str:
        """Encode bytes as digit text without output padding."""
        return "".join(self.encode_block(block) for block in self.iter_blocks(data))

    def decode(self, text: str) -> bytes:
        """Decode digit text produced by `encode`."""
        return b"".join(self.decode_block(group, position) for position, group in self.iter_groups(text))
