"""Validation schemas for alphabets, escape specifications and call options."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import voluptuous as vol

from .const import (
    DECIMAL_DIGITS,
    MAX_BLOCK_SIZE,
    MAX_RADIX,
    MAX_SYMBOL,
    MIN_RADIX,
    MIN_RUN_BLOCKS,
    OPT_EXTRA_SAFE_CHARACTERS,
    OPT_STRICT,
    OPT_USE_REMAINDER,
)
from .exceptions import InvalidOptions


def byte_character(value: Any) -> str:
    """Validate a single character in the range 0x00-0xFE."""
    if not isinstance(value, str) or len(value) != 1:
        raise vol.Invalid(f"expected a single character, got {value!r}")
    if ord(value) > MAX_SYMBOL:
        raise vol.Invalid(f"character {value!r} is outside the range 0x00-0xFE")
    return value


def byte_characters(value: Any) -> str:
    """Validate a string made only of characters in the range 0x00-0xFE."""
    if not isinstance(value, str):
        raise vol.Invalid(f"expected a string, got {type(value).__name__}")
    for index, char in enumerate(value):
        if ord(char) > MAX_SYMBOL:
            raise vol.Invalid(f"character {char!r} at index {index} is outside the range 0x00-0xFE")
    return value


def unique_characters(value: str) -> str:
    """Validate that no character appears twice."""
    seen: set[str] = set()
    for char in value:
        if char in seen:
            raise vol.Invalid(f"duplicate character {char!r}")
        seen.add(char)
    return value


def marker_character(value: Any) -> str:
    """Validate an escape marker: one byte character that is not a decimal digit."""
    value = byte_character(value)
    if value in DECIMAL_DIGITS:
        raise vol.Invalid(f"marker {value!r} must not be a decimal digit")
    return value


ALPHABET_SCHEMA = vol.Schema(
    {
        vol.Required("name"): str,
        vol.Required("digits"): vol.All(
            str,
            vol.Length(min=MIN_RADIX, max=MAX_RADIX),
            byte_characters,
            unique_characters,
        ),
        vol.Required("block_size"): vol.All(int, vol.Range(min=1, max=MAX_BLOCK_SIZE)),
        vol.Optional("padding", default=None): vol.Any(None, byte_character),
    }
)

ESCAPING_SCHEMA = vol.Schema(
    {
        vol.Required("single_marker"): marker_character,
        vol.Required("run_marker"): marker_character,
        vol.Required("padding"): byte_character,
        vol.Optional("remainder_marker", default=None): vol.Any(None, marker_character),
        vol.Optional("extra_safe_characters", default=""): vol.All(str, byte_characters, unique_characters),
        vol.Optional("max_run_blocks"): vol.All(int, vol.Range(min=MIN_RUN_BLOCKS)),
    }
)

ENCODE_OPTIONS_SCHEMA = vol.Schema(
    {
        vol.Optional(OPT_EXTRA_SAFE_CHARACTERS, default=""): vol.All(str, byte_characters),
        vol.Optional(OPT_USE_REMAINDER, default=False): bool,
    }
)

DECODE_OPTIONS_SCHEMA = ENCODE_OPTIONS_SCHEMA.extend(
    {
        vol.Optional(OPT_STRICT, default=None): vol.Any(None, bool),
    }
)


def validate(schema: vol.Schema, data: Mapping[str, Any], what: str) -> dict[str, Any]:
    """Run a schema, translating voluptuous errors into InvalidOptions.

    Args:
        schema: Schema to apply.
        data: Mapping to validate.
        what: Short description of the data, used in the error message.

    Returns:
        The validated (and defaulted) data.
    """
    try:
        return schema(dict(data))
    except vol.Invalid as err:
        raise InvalidOptions(f"Invalid {what}: {err}") from err
