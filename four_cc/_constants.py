"""FourCC constants: width, integer bounds, and the octet escape table."""

from __future__ import annotations

from typing import Tuple

# A FourCC is always exactly four octets.  Octet 0 is the most significant
# byte of the integer form.
FOURCC_LEN: int = 4

# ── Unsigned 32-bit integer range ────────────────────────────
# Python ints are arbitrary-precision, so from_u32() range-checks explicitly.
U32_MIN: int = 0
U32_MAX: int = 0xFFFFFFFF

# struct format for the canonical integer form.  Big-endian only; there is
# no little-endian variant.
U32_BE_FORMAT: str = ">I"

# Text encoding used by the textual constructor.  The octet count of the
# encoded text, not the character count, must equal FOURCC_LEN.
TEXT_ENCODING: str = "utf-8"

# ── Display escaping ─────────────────────────────────────────
# Printable ASCII renders as itself except backslash and double quote.
# Tab, newline and carriage return get their C escapes; every other octet
# becomes \xHH with lowercase hex digits.

PRINTABLE_MIN: int = 0x20
PRINTABLE_MAX: int = 0x7E

_NAMED_ESCAPES = {
    0x09: "\\t",
    0x0A: "\\n",
    0x0D: "\\r",
    0x22: '\\"',
    0x5C: "\\\\",
}


def _escape_octet(octet: int) -> str:
    if octet in _NAMED_ESCAPES:
        return _NAMED_ESCAPES[octet]
    if PRINTABLE_MIN <= octet <= PRINTABLE_MAX:
        return chr(octet)
    return "\\x{:02x}".format(octet)


# Index by octet value.  No entry is a proper prefix of another, so
# comparing joined renderings is the same as comparing entry by entry.
ESCAPES: Tuple[str, ...] = tuple(_escape_octet(b) for b in range(256))

# Octets that render as a single character of themselves.
VERBATIM: frozenset = frozenset(
    b for b in range(256) if len(ESCAPES[b]) == 1
)
