"""The FourCC value type.

A FourCC wraps exactly four octets.  It can be built from:

    FourCC(b"moov")                  4-octet array (bytes-like or 4 ints)
    FourCC.from_bytes(buf)           first four octets of a longer buffer
    FourCC.from_buffer(buf, offset)  four octets at an offset
    FourCC.from_u32(0x6D6F6F76)      big-endian unsigned 32-bit integer
    FourCC.from_str("moov")          UTF-8 text of exactly four octets

and converted back with to_u32() / int(), bytes(), str() and repr().

The class is deliberately nominal: it never compares equal to, or stands
in for, a plain int or bytes object.  There is no __index__, and equality
and ordering against anything but another FourCC return NotImplemented.
"""

from __future__ import annotations

import struct
from typing import Any, Sequence, Union

from ._constants import (
    ESCAPES,
    FOURCC_LEN,
    TEXT_ENCODING,
    U32_BE_FORMAT,
    U32_MAX,
    U32_MIN,
    VERBATIM,
)
from ._errors import InsufficientLength, OutOfRange, WrongLength

OctetsLike = Union[bytes, bytearray, memoryview, Sequence[int]]


def render(octets: bytes) -> str:
    """Escape each octet independently and join.  Never fails."""
    return "".join(ESCAPES[b] for b in octets)


def _octet_view(buf: Any) -> memoryview:
    # Flatten to unsigned bytes so len() counts octets, whatever the
    # exporter's item format is.
    view = memoryview(buf)
    if view.format == "B" and view.ndim == 1:
        return view
    try:
        return view.cast("B")
    except TypeError:
        # ctypes structures and strided views can't be cast in place.
        return memoryview(view.tobytes())


class FourCC:
    """A four-character code: an immutable value of exactly four octets."""

    __slots__ = ("_octets", "_display")
    __match_args__ = ("octets",)

    def __init__(self, octets: OctetsLike) -> None:
        if isinstance(octets, FourCC):
            raw = octets._octets
        else:
            # str and int have their own named constructors.  bytes(4) would
            # otherwise quietly build b"\x00\x00\x00\x00".
            if isinstance(octets, str):
                raise TypeError(
                    "FourCC() does not accept str; use FourCC.from_str()")
            if isinstance(octets, int):
                raise TypeError(
                    "FourCC() does not accept int; use FourCC.from_u32()")
            raw = bytes(octets)
            if len(raw) != FOURCC_LEN:
                raise WrongLength(len(raw))
        object.__setattr__(self, "_octets", raw)
        object.__setattr__(self, "_display", render(raw))

    # ── Alternate constructors ────────────────────────────────

    @classmethod
    def from_buffer(cls, buf: Any, offset: int = 0) -> FourCC:
        """Copy four octets starting at `offset` out of any bytes-like object.

        Raises InsufficientLength (carrying the number of octets that were
        available) when the buffer ends before offset + 4.
        """
        if offset < 0:
            raise ValueError("offset must be non-negative, got {}".format(offset))
        with _octet_view(buf) as view:
            available = max(len(view) - offset, 0)
            if available < FOURCC_LEN:
                raise InsufficientLength(available)
            raw = view[offset:offset + FOURCC_LEN].tobytes()
        return cls(raw)

    @classmethod
    def from_bytes(cls, buf: Any) -> FourCC:
        """Take the first four octets of `buf`; extra octets are ignored."""
        return cls.from_buffer(buf, 0)

    @classmethod
    def from_u32(cls, value: int) -> FourCC:
        """Build from a big-endian unsigned 32-bit integer.

            >>> FourCC.from_u32(0x6D6F6F66)
            FourCC(moof)
        """
        # bool before int: True is an int, but not a FourCC.
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(
                "from_u32() expects int, got {}".format(type(value).__name__))
        if value < U32_MIN or value > U32_MAX:
            raise OutOfRange(value)
        return cls(struct.pack(U32_BE_FORMAT, value))

    @classmethod
    def from_str(cls, text: str) -> FourCC:
        """Parse text whose UTF-8 encoding is exactly four octets.

        The length rule counts octets, not characters, so "é12" (two octets
        for the accent, one each for the digits) is accepted.  Callers that
        want ASCII-only tags should check is_printable() afterwards.
        """
        if not isinstance(text, str):
            raise TypeError(
                "from_str() expects str, got {}".format(type(text).__name__))
        raw = text.encode(TEXT_ENCODING)
        if len(raw) != FOURCC_LEN:
            raise WrongLength(len(raw))
        return cls(raw)

    # ── Conversions out ───────────────────────────────────────

    @property
    def octets(self) -> bytes:
        return self._octets

    def to_u32(self) -> int:
        """Big-endian integer form: octet 0 is the most significant byte."""
        return struct.unpack(U32_BE_FORMAT, self._octets)[0]

    def __int__(self) -> int:
        return self.to_u32()

    def __bytes__(self) -> bytes:
        return self._octets

    def __getitem__(self, index: int) -> int:
        if not isinstance(index, int):
            raise TypeError("FourCC indices must be integers")
        return self._octets[index]

    # ── Rendering ─────────────────────────────────────────────

    def display(self) -> str:
        return self._display

    def is_printable(self) -> bool:
        """True when no octet needs escaping.

        Only printable values survive a display -> from_str round trip.
        """
        return all(b in VERBATIM for b in self._octets)

    def __str__(self) -> str:
        return self._display

    def __format__(self, spec: str) -> str:
        return format(self._display, spec)

    def __repr__(self) -> str:
        return "FourCC({})".format(self._display)

    # ── Equality, hashing, ordering ───────────────────────────
    # Ordering follows the display rendering, not the raw octets or the
    # integer form.  The two disagree for escaped octets: b"\x80..." sorts
    # before b"a...", and b'"...' sorts after b"#...".

    def sort_key(self) -> str:
        return self._display

    def __eq__(self, other: object) -> Any:
        if not isinstance(other, FourCC):
            return NotImplemented
        return self._octets == other._octets

    def __hash__(self) -> int:
        return hash((FourCC, self._octets))

    def __lt__(self, other: object) -> Any:
        if not isinstance(other, FourCC):
            return NotImplemented
        return self._display < other._display

    def __le__(self, other: object) -> Any:
        if not isinstance(other, FourCC):
            return NotImplemented
        return self._display <= other._display

    def __gt__(self, other: object) -> Any:
        if not isinstance(other, FourCC):
            return NotImplemented
        return self._display > other._display

    def __ge__(self, other: object) -> Any:
        if not isinstance(other, FourCC):
            return NotImplemented
        return self._display >= other._display

    # ── Immutability ──────────────────────────────────────────

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("FourCC is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("FourCC is immutable")

    def __reduce__(self):
        return (self.__class__, (self._octets,))

    def __copy__(self) -> FourCC:
        return self

    def __deepcopy__(self, memo: dict) -> FourCC:
        return self

    # ── pydantic hooks ────────────────────────────────────────
    # Imported lazily so the core never needs pydantic installed.

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> Any:
        from ._pydantic import fourcc_core_schema
        return fourcc_core_schema(cls, source_type, handler)

    @classmethod
    def __get_pydantic_json_schema__(cls, core_schema: Any, handler: Any) -> Any:
        from ._pydantic import fourcc_json_schema
        return fourcc_json_schema(core_schema, handler)
