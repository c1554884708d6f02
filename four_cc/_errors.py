"""FourCC error codes and exception classes.

Every failure happens at the construction boundary, when an external
representation (text, a byte buffer, an integer) is turned into a FourCC.
Nothing else in the package raises.

Each exception carries a stable ``.code`` string so callers and tests can
branch on the kind of failure without matching messages.  The concrete
classes also derive from ``ValueError``, which is what serialization
frameworks (``json``, pydantic) expect from a rejected value.
"""

from __future__ import annotations

# ── Error codes ──────────────────────────────────────────────

ERR_WRONG_LENGTH: str = "ERR_WRONG_LENGTH"                # text is not 4 octets
ERR_INSUFFICIENT_LENGTH: str = "ERR_INSUFFICIENT_LENGTH"  # buffer shorter than 4
ERR_OUT_OF_RANGE: str = "ERR_OUT_OF_RANGE"                # int outside u32


class FourCCError(Exception):
    """Base exception for FourCC construction errors.

    The `.code` attribute is one of the ERR_* strings above.
    """

    def __init__(self, code: str, msg: str = "") -> None:
        super().__init__(msg or code)
        self.code = code


class WrongLength(FourCCError, ValueError):
    """The source had a length other than exactly four octets.

    `.length` is the observed octet count.
    """

    def __init__(self, length: int, msg: str = "") -> None:
        super().__init__(
            ERR_WRONG_LENGTH,
            msg or "expected exactly 4 octets, got {}".format(length),
        )
        self.length = length


class InsufficientLength(FourCCError, ValueError):
    """A byte buffer held fewer than four octets."""

    def __init__(self, length: int, msg: str = "") -> None:
        super().__init__(
            ERR_INSUFFICIENT_LENGTH,
            msg or "need at least 4 octets, got {}".format(length),
        )
        self.length = length


class OutOfRange(FourCCError, ValueError):
    """An integer outside 0..0xFFFFFFFF was given to from_u32()."""

    def __init__(self, value: int) -> None:
        super().__init__(
            ERR_OUT_OF_RANGE,
            "integer {} outside unsigned 32-bit range".format(value),
        )
        self.value = value
