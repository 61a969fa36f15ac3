"""Configuration dataclasses for alphabets, escaping and call options."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from typing import Any

from .const import DEFAULT_MAX_RUN_BLOCKS
from .exceptions import InvalidOptions
from .schemas import (
    ALPHABET_SCHEMA,
    DECODE_OPTIONS_SCHEMA,
    ENCODE_OPTIONS_SCHEMA,
    ESCAPING_SCHEMA,
    validate,
)


@dataclass(frozen=True)
class AlphabetSpec:
    """Digits and block size of a block encoding.

    `padding`, when set, pads encoded output to a multiple of the encoded
    block width, as standard base32 and base64 do.
    """

    name: str
    digits: str
    block_size: int
    padding: str | None = None

    def __post_init__(self) -> None:
        validate(ALPHABET_SCHEMA, asdict(self), f"alphabet '{self.name}'")
        if self.padding is not None and self.padding in self.digits:
            raise InvalidOptions(f"Alphabet '{self.name}' uses digit {self.padding!r} as padding")

    @property
    def radix(self) -> int:
        """Return the number of digits."""
        return len(self.digits)


@dataclass(frozen=True)
class EscapeSpec:
    """Markers and safe characters used to keep literal runs readable."""

    single_marker: str
    run_marker: str
    padding: str
    remainder_marker: str | None = None
    extra_safe_characters: str = ""
    max_run_blocks: int = DEFAULT_MAX_RUN_BLOCKS

    def __post_init__(self) -> None:
        validate(ESCAPING_SCHEMA, asdict(self), "escape specification")

        markers = [self.single_marker, self.run_marker]
        if self.remainder_marker is not None:
            markers.append(self.remainder_marker)
        if len(set(markers)) != len(markers):
            raise InvalidOptions(f"Escape markers must be distinct, got {markers!r}")
        # Padding is only ever skipped, so it may reuse the run marker
        if self.padding in markers and self.padding != self.run_marker:
            raise InvalidOptions(f"Padding {self.padding!r} collides with an escape marker")
        for char in self.extra_safe_characters:
            if char in markers or char == self.padding:
                raise InvalidOptions(f"Extra safe character {char!r} collides with an escape marker")

    @property
    def symbols(self) -> str:
        """Return every marker and padding symbol, without duplicates."""
        symbols = [self.single_marker, self.run_marker, self.padding]
        if self.remainder_marker is not None:
            symbols.append(self.remainder_marker)
        return "".join(dict.fromkeys(symbols))

    def check_alphabet(self, alphabet: AlphabetSpec) -> None:
        """Ensure no marker, padding or extra safe character is one of the digits."""
        for char in self.symbols + self.extra_safe_characters:
            if char in alphabet.digits:
                raise InvalidOptions(f"Escape symbol {char!r} collides with a digit of alphabet '{alphabet.name}'")
        if alphabet.padding is not None:
            raise InvalidOptions(f"Alphabet '{alphabet.name}' pads its output and cannot be combined with escaping")


@dataclass(frozen=True)
class EncodeOptions:
    """Options for a single encode call."""

    extra_safe_characters: str = ""
    use_remainder: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> EncodeOptions:
        """Build validated options from a plain mapping."""
        return cls(**validate(ENCODE_OPTIONS_SCHEMA, data, "encode options"))


@dataclass(frozen=True)
class DecodeOptions(EncodeOptions):
    """Options for a single decode call.

    `strict` of None defers to the configuration of the encoding.
    """

    strict: bool | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> DecodeOptions:
        """Build validated options from a plain mapping."""
        return cls(**validate(DECODE_OPTIONS_SCHEMA, data, "decode options"))

    def encode_options(self) -> EncodeOptions:
        """Return the options needed to reproduce the canonical encoding."""
        return EncodeOptions(
            extra_safe_characters=self.extra_safe_characters,
            use_remainder=self.use_remainder,
        )


# Type alias for anything accepted where options are expected
OptionsLike = EncodeOptions | Mapping[str, Any] | None


def coerce_encode_options(options: OptionsLike) -> EncodeOptions:
    """Validate and normalize encode options.

    Args:
        options: None, a mapping of option keys, or an EncodeOptions instance.

    Returns:
        Validated EncodeOptions.
    """
    if options is None:
        return EncodeOptions()
    if isinstance(options, EncodeOptions):
        return EncodeOptions.from_mapping(
            {field.name: getattr(options, field.name) for field in fields(EncodeOptions)}
        )
    if isinstance(options, Mapping):
        return EncodeOptions.from_mapping(options)
    raise InvalidOptions(f"Expected a mapping of options, got {type(options).__name__}")


def coerce_decode_options(options: OptionsLike) -> DecodeOptions:
    """Validate and normalize decode options.

    Encode options are accepted and decoded without a strict override.
    """
    if options is None:
        return DecodeOptions()
    if isinstance(options, EncodeOptions):
        return DecodeOptions.from_mapping(
            {field.name: getattr(options, field.name) for field in fields(options)}
        )
    if isinstance(options, Mapping):
        return DecodeOptions.from_mapping(options)
    raise InvalidOptions(f"Expected a mapping of options, got {type(options).__name__}")
