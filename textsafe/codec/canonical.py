"""Strict-mode check that encoded text is the canonical encoding of its bytes."""

from __future__ import annotations

from collections.abc import Callable
import logging

from ..exceptions import EncodingLimitExceeded, NonCanonicalInput

_LOGGER = logging.getLogger(__name__)


class Canonicalizer:
    """Re-encode decoded bytes and compare against the original text.

    Decoding only interprets markers structurally, so this is the only check
    that catches literals which are not safe under the decoder's options,
    padding other than the padding symbol, or non-zero trailing digits.
    """

    def __init__(self, encode: Callable[[bytes], str]) -> None:
        self._encode = encode

    def verify(self, encoded: str, decoded: bytes) -> bytes:
        """Return `decoded` if `encoded` is its canonical form.

        Args:
            encoded: Text that was decoded.
            decoded: Bytes it decoded to.

        Returns:
            The decoded bytes, unchanged.
        """
        try:
            canonical = self._encode(decoded)
        except EncodingLimitExceeded as err:
            raise NonCanonicalInput(f"Decoded data has no canonical representation: {err}") from err
        if canonical != encoded:
            mismatch = next(
                (index for index, (left, right) in enumerate(zip(encoded, canonical)) if left != right),
                min(len(encoded), len(canonical)),
            )
            _LOGGER.debug(
                "Rejected non-canonical input of %d chars (canonical has %d), first difference at %d",
                len(encoded),
                len(canonical),
                mismatch,
            )
            raise NonCanonicalInput(f"Encoded data has a non-canonical representation at position {mismatch}")
        return decoded
