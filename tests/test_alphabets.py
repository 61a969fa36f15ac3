"""Tests for the alphabet and escape catalog."""

from __future__ import annotations

import pytest

from textsafe import (
    ALPHABETS,
    ESCAPES,
    STRING_LITERAL,
    URL_UNRESERVED,
    Z85,
    InvalidOptions,
    get_alphabet,
    get_escape,
)
from textsafe.alphabets import normalize_name


class TestNormalizeName:
    """Tests for catalog name normalization."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("base64url", "BASE64URL"),
            ("base64-url", "BASE64URL"),
            ("base_64_url", "BASE64URL"),
            ("Base 32", "BASE32"),
            (" z85 ", "Z85"),
            ("hex-lowercase", "HEX_LOWERCASE"),
            ("base64url_url", "BASE64URL_URL"),
            ("z85-string-literal", "Z85_STRING_LITERAL"),
        ],
    )
    def test_normalize(self, name: str, expected: str) -> None:
        assert normalize_name(name) == expected


class TestLookup:
    """Tests for get_alphabet and get_escape."""

    def test_get_alphabet(self) -> None:
        assert get_alphabet("z85") is Z85
        assert get_alphabet("Base-64") is ALPHABETS["BASE64"]

    def test_get_escape(self) -> None:
        assert get_escape("url-unreserved") is URL_UNRESERVED
        assert get_escape("String-Literal") is STRING_LITERAL

    def test_unknown_names(self) -> None:
        with pytest.raises(InvalidOptions):
            get_alphabet("base58")
        with pytest.raises(InvalidOptions):
            get_escape("html")

    def test_tables_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            ALPHABETS["BASE58"] = Z85  # type: ignore[index]
        with pytest.raises(TypeError):
            ESCAPES["HTML"] = URL_UNRESERVED  # type: ignore[index]


class TestCatalog:
    """Sanity checks over every catalog entry."""

    @pytest.mark.parametrize(
        ("name", "radix", "block_size"),
        [
            ("HEX", 16, 1),
            ("HEX_LOWERCASE", 16, 1),
            ("BASE32", 32, 5),
            ("BASE32_LOWERCASE", 32, 5),
            ("BASE64", 64, 3),
            ("BASE64URL", 64, 3),
            ("Z85", 85, 4),
        ],
    )
    def test_alphabet_shape(self, name: str, radix: int, block_size: int) -> None:
        alphabet = ALPHABETS[name]
        assert alphabet.name == name
        assert alphabet.radix == radix
        assert alphabet.block_size == block_size

    def test_only_rfc4648_padded_alphabets_pad(self) -> None:
        padded = {name for name, alphabet in ALPHABETS.items() if alphabet.padding is not None}
        assert padded == {"BASE32", "BASE32_LOWERCASE", "BASE64"}

    def test_run_limits(self) -> None:
        assert ESCAPES["URL_UNRESERVED"].max_run_blocks == 99
        assert ESCAPES["STRING_LITERAL"].max_run_blocks == 999

    def test_only_string_literal_has_remainder_marker(self) -> None:
        with_remainder = {name for name, spec in ESCAPES.items() if spec.remainder_marker is not None}
        assert with_remainder == {"STRING_LITERAL"}
