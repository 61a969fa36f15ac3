"""Name lookup for the standard alphabets and escape presets."""

from __future__ import annotations

from types import MappingProxyType

from ..config import AlphabetSpec, EscapeSpec
from ..exceptions import InvalidOptions
from . import escapes, standards

ALPHABETS: MappingProxyType[str, AlphabetSpec] = MappingProxyType(
    {
        "HEX": standards.HEX,
        "HEX_LOWERCASE": standards.HEX_LOWERCASE,
        "BASE32": standards.BASE32,
        "BASE32_LOWERCASE": standards.BASE32_LOWERCASE,
        "BASE64": standards.BASE64,
        "BASE64URL": standards.BASE64URL,
        "Z85": standards.Z85,
    }
)

ESCAPES: MappingProxyType[str, EscapeSpec] = MappingProxyType(
    {
        "URL_UNRESERVED": escapes.URL_UNRESERVED,
        "URL_RFC2396": escapes.URL_RFC2396,
        "STRING_LITERAL": escapes.STRING_LITERAL,
        "ALPHANUMERIC": escapes.ALPHANUMERIC,
    }
)


def normalize_name(name: str) -> str:
    """Normalize a catalog name ("base64-url", "Base 32") to its table key."""
    normalized = name.strip().upper().replace("-", "_").replace(" ", "")
    # Accept the common spellings "BASE_64_URL" and "BASE64_URL"
    return normalized.replace("BASE_", "BASE").replace("BASE64_URL", "BASE64URL")


def get_alphabet(name: str) -> AlphabetSpec:
    """Get a standard alphabet by name.

    Args:
        name: Alphabet name (e.g., "BASE64URL", "base64-url", "z85").

    Returns:
        The matching alphabet.
    """
    key = normalize_name(name)
    if key not in ALPHABETS:
        raise InvalidOptions(f"Unknown alphabet '{name}'")
    return ALPHABETS[key]


def get_escape(name: str) -> EscapeSpec:
    """Get an escape preset by name."""
    key = normalize_name(name)
    if key not in ESCAPES:
        raise InvalidOptions(f"Unknown escape preset '{name}'")
    return ESCAPES[key]
