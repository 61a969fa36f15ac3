"""Encoding facade combining the block codec, the literal overlay and strict checks."""

from __future__ import annotations

from functools import partial
import logging

from ..config import (
    AlphabetSpec,
    DecodeOptions,
    EncodeOptions,
    EscapeSpec,
    OptionsLike,
    coerce_decode_options,
    coerce_encode_options,
)
from ..exceptions import DecodeError, InvalidOptions
from .block_codec import BlockCodec
from .canonical import Canonicalizer
from .escape_overlay import EscapeOverlay

_LOGGER = logging.getLogger(__name__)


class Encoding:
    """A reversible bytes-to-text encoding.

    Instances are immutable and hold no per-call state, so one encoding can be
    shared between threads.
    """

    def __init__(
        self,
        alphabet: AlphabetSpec,
        escaping: EscapeSpec | None = None,
        *,
        strict: bool = False,
        name: str | None = None,
    ) -> None:
        self._alphabet = alphabet
        self._escaping = escaping
        self._strict = bool(strict)
        self._name = name or alphabet.name
        self._codec = BlockCodec(alphabet)
        self._overlay = EscapeOverlay(self._codec, escaping) if escaping is not None else None
        _LOGGER.debug(
            "Created encoding %s (escaping=%s, strict=%s)",
            self._name,
            escaping is not None,
            self._strict,
        )

    def __repr__(self) -> str:
        return f"Encoding(name={self._name!r}, escaping={self._escaping!r}, strict={self._strict})"

    @property
    def name(self) -> str:
        """Return the encoding name."""
        return self._name

    @property
    def alphabet(self) -> AlphabetSpec:
        """Return the alphabet."""
        return self._alphabet

    @property
    def escaping(self) -> EscapeSpec | None:
        """Return the escape specification, if any."""
        return self._escaping

    @property
    def strict(self) -> bool:
        """Return whether decoding requires canonical input by default."""
        return self._strict

    @property
    def block_codec(self) -> BlockCodec:
        """Return the underlying block codec."""
        return self._codec

    @property
    def overlay(self) -> EscapeOverlay | None:
        """Return the literal-run overlay, if escaping is enabled."""
        return self._overlay

    def with_escaping(self, escaping: EscapeSpec | None, *, name: str | None = None) -> Encoding:
        """Return a copy of this encoding with another escape specification."""
        return Encoding(self._alphabet, escaping, strict=self._strict, name=name)

    def with_strict(self, strict: bool = True) -> Encoding:
        """Return a copy of this encoding with another default for strict decoding."""
        return Encoding(self._alphabet, self._escaping, strict=strict, name=self._name)

    def _check_options(self, options: EncodeOptions) -> None:
        if options.use_remainder and (self._escaping is None or self._escaping.remainder_marker is None):
            raise InvalidOptions(f"Encoding {self._name} has no remainder marker for use_remainder")

    def _encode(self, data: bytes, options: EncodeOptions) -> str:
        digits = self._codec.encode(data)
        if self._overlay is not None:
            return self._overlay.encode(
                digits,
                options.extra_safe_characters,
                use_remainder=options.use_remainder,
            )
        padding = self._alphabet.padding
        if padding is not None and digits:
            width = self._codec.encoded_block_size
            return digits + padding * (-len(digits) % width)
        return digits

    def encode(self, data: bytes | bytearray | memoryview, options: OptionsLike = None) -> str:
        """Encode bytes as text.

        Args:
            data: Bytes to encode.
            options: Encode options, as a mapping or EncodeOptions.

        Returns:
            The canonical encoded text.
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"Expected bytes-like data, got {type(data).__name__}")
        encode_options = coerce_encode_options(options)
        self._check_options(encode_options)
        return self._encode(bytes(data), encode_options)

    def decode(self, text: str, options: OptionsLike = None) -> bytes:
        """Decode text produced by `encode`.

        Args:
            text: Encoded text.
            options: Decode options, as a mapping or DecodeOptions.

        Returns:
            The decoded bytes.
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected encoded text as str, got {type(text).__name__}")
        decode_options = coerce_decode_options(options)
        self._check_options(decode_options)

        digits = text
        if self._overlay is not None:
            digits = self._overlay.decode(text)
        elif self._alphabet.padding is not None:
            digits = text.rstrip(self._alphabet.padding)
        decoded = self._codec.decode(digits)

        strict = self._strict if decode_options.strict is None else decode_options.strict
        if strict:
            canonicalizer = Canonicalizer(partial(self._encode, options=decode_options.encode_options()))
            return canonicalizer.verify(text, decoded)
        return decoded

    def is_canonical(self, text: str, options: OptionsLike = None) -> bool:
        """Return True if `text` decodes and is the canonical encoding of its bytes."""
        decode_options = coerce_decode_options(options)
        strict_options = DecodeOptions(
            extra_safe_characters=decode_options.extra_safe_characters,
            use_remainder=decode_options.use_remainder,
            strict=True,
        )
        try:
            self.decode(text, strict_options)
        except DecodeError:
            return False
        return True
