"""Literal-run overlay on top of a block codec.

Runs of consecutive full blocks whose bytes are all safe characters are
written as the characters themselves behind a marker, instead of as digits.

Marker Syntax:
--------------
For a run of `N` blocks of `B` bytes each, encoded width `W`:

- `N == 1`: single marker, then the literal bytes
- `N == 2`: run marker twice, then the literal bytes
- `N >= 3`: run marker, `N` in decimal, run marker, then the literal bytes
- run reaching the end of input, when remainder mode is requested: remainder
  marker, then the literal bytes (no count, no padding)

Every form except the remainder form is right-padded with the padding symbol
to exactly `N * W` characters, so the groups after it stay aligned.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
import logging
import re

from ..config import EscapeSpec
from ..const import BYTE_VALUES, LITERAL_CODEC, MAX_SYMBOL
from ..exceptions import EncodingLimitExceeded, InvalidOptions, InvalidSymbol, MalformedInput
from .block_codec import BlockCodec

_LOGGER = logging.getLogger(__name__)

SafeTable = tuple[bool, ...]


@lru_cache(maxsize=64)
def build_safe_table(characters: str) -> SafeTable:
    """Build a 256-entry lookup table marking each byte value as safe or not.

    Byte 0xFF is never safe.
    """
    table = [False] * BYTE_VALUES
    for char in characters:
        code = ord(char)
        if code <= MAX_SYMBOL:
            table[code] = True
    return tuple(table)


def is_safe_block(block: bytes, table: SafeTable) -> bool:
    """Return True if every byte of `block` is marked safe in `table`."""
    return all(table[byte] for byte in block)


@dataclass
class _LiteralRun:
    """Blocks accumulated for the literal run being scanned."""

    count: int = 0
    data: bytearray = field(default_factory=bytearray)

    def add(self, block: bytes) -> None:
        self.count += 1
        self.data += block

    def clear(self) -> None:
        self.count = 0
        self.data.clear()


class EscapeOverlay:
    """Rewrite safe runs of a digit stream as marked literal text, and back."""

    def __init__(self, codec: BlockCodec, escaping: EscapeSpec) -> None:
        escaping.check_alphabet(codec.alphabet)
        self._codec = codec
        self._escaping = escaping
        self._block_size = codec.block_size
        self._width = codec.encoded_block_size
        self._base_safe = codec.alphabet.digits + escaping.symbols + escaping.extra_safe_characters
        run = re.escape(escaping.run_marker)
        self._count_pattern = re.compile(f"{run}([1-9][0-9]*){run}")

    @property
    def escaping(self) -> EscapeSpec:
        """Return the escape specification."""
        return self._escaping

    def safe_characters(self, extra_safe_characters: str = "") -> str:
        """Return every character treated as safe, including caller extras."""
        return "".join(dict.fromkeys(self._base_safe + extra_safe_characters))

    def safe_table(self, extra_safe_characters: str = "") -> SafeTable:
        """Return the byte lookup table for the safe characters."""
        return build_safe_table(self.safe_characters(extra_safe_characters))

    def _format_run(self, run: _LiteralRun, *, to_end: bool) -> str:
        escaping = self._escaping
        literal = run.data.decode(LITERAL_CODEC)
        count = run.count
        if to_end:
            return f"{escaping.remainder_marker}{literal}"
        if count == 1:
            piece = f"{escaping.single_marker}{literal}"
        elif count == 2:
            piece = f"{escaping.run_marker}{escaping.run_marker}{literal}"
        elif count <= escaping.max_run_blocks:
            piece = f"{escaping.run_marker}{count}{escaping.run_marker}{literal}"
        else:
            raise EncodingLimitExceeded(
                f"Literal run of {count} blocks exceeds the maximum of {escaping.max_run_blocks}"
            )
        return piece.ljust(count * self._width, escaping.padding)

    def encode(self, digits: str, extra_safe_characters: str = "", *, use_remainder: bool = False) -> str:
        """Substitute marked literal text for the safe runs of a digit stream.

        Args:
            digits: Output of `BlockCodec.encode`.
            extra_safe_characters: Additional characters treated as safe.
            use_remainder: Write a run reaching the end of input in remainder form.

        Returns:
            The escaped text.
        """
        if use_remainder and self._escaping.remainder_marker is None:
            raise InvalidOptions("Remainder mode requested but the escape specification has no remainder marker")
        table = self.safe_table(extra_safe_characters)
        pieces: list[str] = []
        run = _LiteralRun()
        runs = 0
        escaped_blocks = 0

        def flush(*, to_end: bool = False) -> None:
            nonlocal runs, escaped_blocks
            if not run.count:
                return
            pieces.append(self._format_run(run, to_end=to_end))
            runs += 1
            escaped_blocks += run.count
            run.clear()

        for position, group in self._codec.iter_groups(digits):
            if len(group) == self._width:
                block = self._codec.decode_block(group, position)
                if is_safe_block(block, table):
                    run.add(block)
                    continue
            flush()
            pieces.append(group)
        flush(to_end=use_remainder)

        if runs:
            _LOGGER.debug("Escaped %d literal run(s) covering %d block(s)", runs, escaped_blocks)
        return "".join(pieces)

    def _literal_digits(self, literal: str, position: int) -> str:
        try:
            raw = literal.encode(LITERAL_CODEC)
        except UnicodeEncodeError as err:
            symbol = literal[err.start]
            raise InvalidSymbol(
                f"Literal symbol {symbol!r} at position {position + err.start} is not a single byte",
                symbol=symbol,
                position=position + err.start,
            ) from None
        return self._codec.encode(raw)

    def decode(self, text: str) -> str:
        """Restore the canonical digit stream from escaped text.

        Args:
            text: Escaped text.

        Returns:
            Digit text ready for `BlockCodec.decode`.
        """
        escaping = self._escaping
        width = self._width
        block_size = self._block_size
        length = len(text)
        pieces: list[str] = []
        position = 0

        while position < length:
            group = text[position : position + width]
            head = group[0]

            if escaping.remainder_marker is not None and head == escaping.remainder_marker:
                start = position + 1
                literal = text[start:]
                if not literal or len(literal) % block_size:
                    raise MalformedInput(
                        f"Remainder literal at position {position} is not a whole number of blocks"
                    )
                pieces.append(self._literal_digits(literal, start))
                break

            if len(group) < width:
                pieces.append(group)
                break

            if head == escaping.single_marker:
                start = position + 1
                pieces.append(self._literal_digits(text[start : start + block_size], start))
                position += width
                continue

            if head == escaping.run_marker:
                if group[1] == escaping.run_marker:
                    count = 2
                    prefix = 2
                else:
                    match = self._count_pattern.match(text, position)
                    if match is None:
                        raise InvalidSymbol(
                            f"Malformed run marker at position {position}",
                            symbol=group[1],
                            position=position + 1,
                        )
                    count_digits = match.group(1)
                    # A count wider than the blocks left in the text cannot fit
                    if len(count_digits) > len(str((length - position) // width)):
                        raise MalformedInput(f"Run count at position {position} exceeds the remaining input")
                    count = int(count_digits)
                    prefix = match.end() - position
                span = count * width
                literal_size = count * block_size
                if prefix + literal_size > span:
                    raise MalformedInput(f"Run of {count} block(s) at position {position} cannot hold its literal")
                if position + span > length:
                    raise MalformedInput(f"Run of {count} block(s) at position {position} is truncated")
                start = position + prefix
                pieces.append(self._literal_digits(text[start : start + literal_size], start))
                position += span
                continue

            pieces.append(group)
            position += width

        return "".join(pieces)

