"""Tests for named encodings and the convenience functions."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
import logging

import pytest

from textsafe import (
    BASE64URL_RFC2396,
    BASE64URL_URL,
    Z85_STRING_LITERAL,
    InvalidOptions,
    NonCanonicalInput,
    decode_from_string,
    decode_from_url,
    encode_for_string,
    encode_for_url,
    get_encoding,
)
from textsafe.presets import ESCAPED_ENCODINGS, clear_encoding_cache

ENCODING_NAMES = [
    "HEX",
    "HEX_LOWERCASE",
    "BASE32",
    "BASE32_LOWERCASE",
    "BASE64",
    "BASE64URL",
    "Z85",
    *ESCAPED_ENCODINGS,
]


class TestGetEncoding:
    """Tests for get_encoding."""

    def test_cached(self) -> None:
        first = get_encoding("base64url-url")
        assert get_encoding("base64url-url") is first
        clear_encoding_cache()
        assert get_encoding("base64url-url") is not first

    def test_escaped_name(self, sample_text: bytes) -> None:
        encoding = get_encoding("z85-string-literal")
        assert encoding.name == "Z85_STRING_LITERAL"
        assert encoding.encode(sample_text) == Z85_STRING_LITERAL.encode(sample_text)

    def test_bare_name(self) -> None:
        encoding = get_encoding("base64")
        assert encoding.escaping is None
        assert encoding.encode(b"a") == "YQ=="

    def test_strict(self) -> None:
        encoding = get_encoding("BASE64URL_URL", strict=True)
        assert encoding.strict
        with pytest.raises(NonCanonicalInput):
            encoding.decode("aGVsbG8")

    def test_unknown(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="textsafe.presets"):
            with pytest.raises(InvalidOptions):
                get_encoding("base58")
        assert "Unknown encoding 'base58'" in caplog.text

    @pytest.mark.parametrize("name", ENCODING_NAMES)
    def test_round_trip(self, name: str, payloads: list[bytes]) -> None:
        encoding = get_encoding(name, strict=True)
        for data in payloads:
            assert encoding.decode(encoding.encode(data)) == data


class TestConvenienceFunctions:
    """Tests for the URL and string literal shortcuts."""

    def test_url(self, sample_text: bytes) -> None:
        encoded = encode_for_url(sample_text)
        assert encoded == BASE64URL_URL.encode(sample_text)
        assert decode_from_url(encoded) == sample_text

    def test_url_strict(self) -> None:
        with pytest.raises(NonCanonicalInput):
            decode_from_url("aGVsbG8", {"strict": True})

    def test_string(self) -> None:
        options = {"use_remainder": True}
        encoded = encode_for_string(b"say \"hi\", then go", options)
        assert '"' not in encoded
        assert decode_from_string(encoded, {"use_remainder": True, "strict": True}) == b'say "hi", then go'

    def test_rfc2396_marks(self) -> None:
        assert BASE64URL_RFC2396.encode(b"f(x)'s") == "..f(x)'s"
        assert BASE64URL_URL.encode(b"f(x)'s") != "..f(x)'s"

    def test_with_escaping(self) -> None:
        derived = BASE64URL_URL.with_escaping(BASE64URL_RFC2396.escaping, name="DERIVED")
        assert derived.name == "DERIVED"
        assert derived.encode(b"f(x)'s") == "..f(x)'s"
        assert BASE64URL_URL.with_escaping(None).encode(b"hello") == "aGVsbG8"


class TestThreadSafety:
    """Encodings are shared between threads without coordination."""

    def test_concurrent_use(self, payloads: list[bytes]) -> None:
        encodings = [get_encoding(name) for name in ESCAPED_ENCODINGS]

        def round_trip(index: int) -> bool:
            encoding = encodings[index % len(encodings)]
            data = payloads[index % len(payloads)]
            return encoding.decode(encoding.encode(data)) == data

        with ThreadPoolExecutor(max_workers=8) as executor:
            assert all(executor.map(round_trip, range(400)))
