"""Exceptions raised by the textsafe codecs."""

from __future__ import annotations


class TextSafeError(Exception):
    """Base class for all textsafe errors."""


class InvalidOptions(TextSafeError, ValueError):
    """Raised for malformed options, alphabets or escape specifications."""


class EncodingLimitExceeded(TextSafeError, ValueError):
    """Raised when a literal run is longer than its count syntax can express."""


class DecodeError(TextSafeError, ValueError):
    """Raised when encoded text cannot be decoded."""


class InvalidSymbol(DecodeError):
    """Raised when a digit or marker was expected but another symbol was found."""

    def __init__(self, message: str, symbol: str | None = None, position: int | None = None) -> None:
        super().__init__(message)
        self.symbol = symbol
        self.position = position


class MalformedInput(DecodeError):
    """Raised when the encoded text has an impossible structure."""


class NonCanonicalInput(DecodeError):
    """Raised by strict decoding when the input is not the canonical encoding."""
