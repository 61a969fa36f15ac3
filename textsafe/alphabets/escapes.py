"""Escape presets describing which characters are safe for a textual context.

Literal runs made only of these characters (plus the digits of the alphabet
they are paired with) are preserved as readable text.
"""

from __future__ import annotations

from ..config import EscapeSpec

# RFC 3986 unreserved characters: letters, digits, "-", ".", "_" and "~".
# "~" and "." are the only two that base64url does not already use, so the
# padding reuses the run marker.
URL_UNRESERVED = EscapeSpec(
    single_marker="~",
    run_marker=".",
    padding=".",
    max_run_blocks=99,
)

# RFC 2396 additionally leaves the marks "!", "*", "'", "(" and ")" unreserved
URL_RFC2396 = EscapeSpec(
    single_marker="~",
    run_marker=".",
    padding=".",
    extra_safe_characters="!*'()",
    max_run_blocks=99,
)

# Printable ASCII and space, minus the quote characters and backslash, so the
# text can sit in any kind of JavaScript-style string literal as-is.
STRING_LITERAL = EscapeSpec(
    single_marker="~",
    run_marker="|",
    padding="_",
    remainder_marker=";",
    extra_safe_characters=", ",
    max_run_blocks=999,
)

# Lowercase alphanumerics, for pairing with lowercase hex
ALPHANUMERIC = EscapeSpec(
    single_marker="y",
    run_marker="z",
    padding="z",
    extra_safe_characters="ghijklmnopqrstuvwx",
    max_run_blocks=99,
)
